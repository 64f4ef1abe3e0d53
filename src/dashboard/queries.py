"""Sorgu motoru - depo, ürün ve KPI okuma işlemleri.

Filtreler birlikte (VE) uygulanır, sırası:
1. Depo eşitliği ("all" değilse)
2. Ad, SKU veya ID üzerinde büyük/küçük harf duyarsız alt dizi araması
3. Durum eşitliği (durum her ürün için anlık hesaplanır)

Sonuç sırası depodaki sıradır, yeniden sıralanmaz.
"""

from __future__ import annotations

import logging
from typing import Optional

from src.dashboard.mutations import ProductNotFoundError
from src.dashboard.status import product_status
from src.dashboard.store import InventoryStore
from src.models.inventory import ALL, KPIPoint, KPIRange, Product, ProductFilter, ProductStatus, Warehouse

logger = logging.getLogger(__name__)


def _is_unset(value: Optional[str]) -> bool:
    return not value or value == ALL


def _matches_search(product: Product, needle: str) -> bool:
    return (
        needle in product.name.lower()
        or needle in product.sku.lower()
        or needle in product.id.lower()
    )


class QueryEngine:
    """Depo üzerinde salt okunur sorguları yanıtlar."""

    def __init__(self, store: InventoryStore) -> None:
        self.store = store

    def list_warehouses(self) -> list[Warehouse]:
        """Tüm depoları ekleme sırasıyla döndürür."""
        return self.store.warehouses()

    def list_products(self, product_filter: Optional[ProductFilter] = None) -> list[Product]:
        """Filtreye uyan ürünleri döndürür; sayfalama yapılmaz."""
        product_filter = product_filter or ProductFilter()
        products = self.store.products()

        if not _is_unset(product_filter.warehouse):
            products = [p for p in products if p.warehouse == product_filter.warehouse]

        if product_filter.search:
            needle = product_filter.search.lower()
            products = [p for p in products if _matches_search(p, needle)]

        if not _is_unset(product_filter.status):
            wanted = ProductStatus.parse(product_filter.status)
            # Tanınmayan durum hiçbir ürünle eşleşmez
            products = [p for p in products if wanted is not None and product_status(p) == wanted]

        return products

    def get_product(self, product_id: str) -> Product:
        with self.store.locked():
            index = self.store.index_of(product_id)
            if index is None:
                raise ProductNotFoundError(product_id)
            return self.store.product_at(index)

    def list_transfer_targets(self, product_id: str) -> list[Warehouse]:
        """Ürünün bulunduğu depo dışındaki depoları döndürür."""
        product = self.get_product(product_id)
        return [w for w in self.store.warehouses() if w.code != product.warehouse]

    def get_kpi_series(self, kpi_range: str) -> list[KPIPoint]:
        """Aralığa ait seriyi döndürür; tanınmayan aralık 7 günlük seriye düşer."""
        try:
            resolved = KPIRange(kpi_range)
        except ValueError:
            logger.debug("Bilinmeyen KPI aralığı '%s', 7d kullanılıyor", kpi_range)
            resolved = KPIRange.DAYS_7
        return self.store.kpi_series(resolved)
