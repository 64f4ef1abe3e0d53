"""Süreç ömrü boyunca yaşayan bellek içi envanter deposu."""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from datetime import date
from typing import Iterator, Optional

from data_layer.generators.seed import PRODUCTS, WAREHOUSES, generate_all_kpi_series
from src.models.inventory import KPIPoint, KPIRange, Product, Warehouse

logger = logging.getLogger(__name__)


class InventoryStore:
    """Ürün listesini, depo referans verisini ve KPI serilerini tutar.

    Ürün kayıtları değiştirilemez; mutasyonlar listedeki kaydı yenisiyle
    değiştirir, böylece daha önce alınmış snapshot'lar etkilenmez.
    Tüm okuma-değiştirme-yazma işlemleri ``locked()`` altında yapılmalı.
    """

    def __init__(
        self,
        warehouses: list[Warehouse],
        products: list[Product],
        kpi_series: dict[KPIRange, list[KPIPoint]],
    ) -> None:
        self._warehouses: list[Warehouse] = list(warehouses)
        self._products: list[Product] = list(products)
        self._kpi_series: dict[KPIRange, list[KPIPoint]] = {
            r: list(points) for r, points in kpi_series.items()
        }
        self._lock = threading.RLock()

        logger.info(
            "Depo başlatıldı: %d depo, %d ürün, %d KPI serisi",
            len(self._warehouses),
            len(self._products),
            len(self._kpi_series),
        )

    @classmethod
    def from_seed(cls, seed: Optional[int] = None, today: Optional[date] = None) -> "InventoryStore":
        """Sabit başlangıç verisi ve sentetik KPI serileriyle depo oluşturur."""
        return cls(WAREHOUSES, PRODUCTS, generate_all_kpi_series(seed=seed, today=today))

    @contextmanager
    def locked(self) -> Iterator["InventoryStore"]:
        with self._lock:
            yield self

    # --- Okuma ---

    def warehouses(self) -> list[Warehouse]:
        with self._lock:
            return list(self._warehouses)

    def products(self) -> list[Product]:
        with self._lock:
            return list(self._products)

    def index_of(self, product_id: str) -> Optional[int]:
        """Ürünün listedeki konumunu döndürür, yoksa None."""
        with self._lock:
            for i, product in enumerate(self._products):
                if product.id == product_id:
                    return i
            return None

    def product_at(self, index: int) -> Product:
        with self._lock:
            return self._products[index]

    def kpi_series(self, kpi_range: KPIRange) -> list[KPIPoint]:
        with self._lock:
            return list(self._kpi_series.get(kpi_range, []))

    # --- Yazma ---

    def replace_product(self, index: int, product: Product) -> Product:
        with self._lock:
            self._products[index] = product
            return product
