"""Panel servisi - tek bir depoyu sorgu, mutasyon ve toplama katmanlarına bağlar."""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from src.dashboard import aggregation
from src.dashboard.config import DashboardSettings
from src.dashboard.mutations import MutationEngine
from src.dashboard.queries import QueryEngine
from src.dashboard.store import InventoryStore
from src.models.inventory import (
    DashboardSummary,
    DashboardView,
    KPIPoint,
    KPIRange,
    Product,
    ProductFilter,
    ProductPage,
    Warehouse,
)

logger = logging.getLogger(__name__)


class DashboardService:
    """Taşıma katmanının tuttuğu tek nesne; beş temel işlem ve panel görünümü."""

    def __init__(self, store: InventoryStore) -> None:
        self.store = store
        self.queries = QueryEngine(store)
        self.mutations = MutationEngine(store)

    @classmethod
    def from_settings(cls, settings: DashboardSettings, today: Optional[date] = None) -> "DashboardService":
        return cls(InventoryStore.from_seed(seed=settings.kpi_seed, today=today))

    # --- Okuma ---

    def warehouses(self) -> list[Warehouse]:
        return self.queries.list_warehouses()

    def products(self, search: Optional[str] = None, status: Optional[str] = None,
                 warehouse: Optional[str] = None) -> list[Product]:
        return self.queries.list_products(ProductFilter(search=search, status=status, warehouse=warehouse))

    def product(self, product_id: str) -> Product:
        return self.queries.get_product(product_id)

    def transfer_targets(self, product_id: str) -> list[Warehouse]:
        return self.queries.list_transfer_targets(product_id)

    def kpis(self, kpi_range: str = KPIRange.DAYS_7.value) -> list[KPIPoint]:
        return self.queries.get_kpi_series(kpi_range)

    # --- Yazma ---

    def update_demand(self, product_id: str, demand: int) -> Product:
        return self.mutations.update_demand(product_id, demand)

    def transfer_stock(self, product_id: str, source: str, target: str, quantity: int) -> Product:
        return self.mutations.transfer_stock(product_id, source, target, quantity)

    # --- Panel ---

    def summary(self, product_filter: Optional[ProductFilter] = None) -> DashboardSummary:
        """Arama ve depo filtresi uygulanmış, durum filtresi uygulanmamış küme üzerinden toplamlar."""
        product_filter = product_filter or ProductFilter()
        return aggregation.summarize(self.queries.list_products(product_filter.without_status()))

    def product_page(self, product_filter: Optional[ProductFilter] = None, page: int = 1) -> ProductPage:
        """Tüm filtreler uygulandıktan sonra istenen sayfayı döndürür."""
        return aggregation.paginate(self.queries.list_products(product_filter), page)

    def dashboard(self, product_filter: Optional[ProductFilter] = None, page: int = 1,
                  kpi_range: str = KPIRange.DAYS_7.value) -> DashboardView:
        """Kartlar, grafik ve tablo için tek seferde panel görünümü üretir."""
        product_filter = product_filter or ProductFilter()
        with self.store.locked():
            summary = self.summary(product_filter)
            products = self.product_page(product_filter, page)
        kpis = self.kpis(kpi_range)
        resolved_range = kpi_range if kpi_range in {r.value for r in KPIRange} else KPIRange.DAYS_7.value
        return DashboardView(summary=summary, products=products, kpis=kpis, range=resolved_range)
