"""Mutasyon motoru - talep güncelleme ve stok transferi.

İş kuralı hataları:
- ProductNotFoundError: bilinmeyen ürün ID'si
- WrongSourceWarehouseError: ürün kaynak depoda değil
- InsufficientStockError: transfer miktarı mevcut stoku aşıyor

Sayısal girdinin biçim doğrulaması çağıran tarafa aittir; burada yalnızca
yukarıdaki üç kural kontrol edilir. Başarısız bir mutasyon depoyu değiştirmez.
"""

from __future__ import annotations

import dataclasses
import logging

from src.dashboard.store import InventoryStore
from src.models.inventory import Product

logger = logging.getLogger(__name__)


class DashboardError(Exception):
    """Çağırana aynen iletilen iş kuralı hatası."""
    pass


class ProductNotFoundError(DashboardError):
    """Bilinmeyen ürün hatası."""

    def __init__(self, product_id: str):
        super().__init__(f"Product with ID {product_id} not found")
        self.product_id = product_id


class WrongSourceWarehouseError(DashboardError):
    """Ürün belirtilen kaynak depoda değil."""

    def __init__(self, product_id: str, source: str, actual: str):
        super().__init__(f"Product is not in warehouse {source}")
        self.product_id = product_id
        self.source = source
        self.actual = actual


class InsufficientStockError(DashboardError):
    """Yetersiz stok hatası."""

    def __init__(self, product_id: str, available: int, requested: int):
        super().__init__(f"Insufficient stock. Available: {available}, Requested: {requested}")
        self.product_id = product_id
        self.available = available
        self.requested = requested


class MutationEngine:
    """Ürün kayıtları üzerinde durum değiştiren işlemleri uygular."""

    def __init__(self, store: InventoryStore) -> None:
        self.store = store

    def _require_index(self, product_id: str) -> int:
        index = self.store.index_of(product_id)
        if index is None:
            logger.warning("Ürün bulunamadı: %s", product_id)
            raise ProductNotFoundError(product_id)
        return index

    def update_demand(self, product_id: str, demand: int) -> Product:
        """Ürünün yalnızca talep alanını değiştirir, stok korunur."""
        with self.store.locked():
            index = self._require_index(product_id)
            current = self.store.product_at(index)
            updated = self.store.replace_product(index, dataclasses.replace(current, demand=demand))

        logger.info("Talep güncellendi: %s %d -> %d", product_id, current.demand, demand)
        return updated

    def transfer_stock(self, product_id: str, source: str, target: str, quantity: int) -> Product:
        """Kaynak depodaki stoku düşer ve güncel kaydı döndürür.

        Hedef depo tarafında kayıt oluşturulmaz veya güncellenmez; ``target``
        ve ``quantity`` hiçbir yerde saklanmaz. Bu bilinen bir eksiklik,
        çift taraflı transfer modellenmiyor.
        """
        with self.store.locked():
            index = self._require_index(product_id)
            current = self.store.product_at(index)

            if current.warehouse != source:
                logger.warning(
                    "Yanlış kaynak depo: %s mevcut=%s, istenen=%s",
                    product_id, current.warehouse, source,
                )
                raise WrongSourceWarehouseError(product_id, source, current.warehouse)

            if current.stock < quantity:
                logger.warning(
                    "Yetersiz stok: %s mevcut=%d, istenen=%d",
                    product_id, current.stock, quantity,
                )
                raise InsufficientStockError(product_id, current.stock, quantity)

            updated = self.store.replace_product(
                index, dataclasses.replace(current, stock=current.stock - quantity)
            )

        logger.info(
            "Transfer uygulandı: %s %s -> %s, miktar=%d, kalan stok=%d",
            product_id, source, target, quantity, updated.stock,
        )
        return updated
