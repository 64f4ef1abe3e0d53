"""
Envanter Paneli Demo Script'i - servis katmanini sunucu olmadan calistirir.

Kullanım:
    python demo.py
    KPI_SEED=42 python demo.py
"""

import sys

import env_loader

from src.dashboard.config import DashboardSettings
from src.dashboard.mutations import DashboardError
from src.dashboard.service import DashboardService
from src.dashboard.status import product_status
from src.models.inventory import ProductFilter


def print_dashboard(service: DashboardService, product_filter: ProductFilter, page: int = 1) -> None:
    view = service.dashboard(product_filter, page=page, kpi_range="7d")
    s = view.summary
    print(f"   Toplam stok: {s.total_stock}  Toplam talep: {s.total_demand}  Doluluk: %{s.fill_rate}")
    print(f"   Sayfa {view.products.page}/{view.products.total_pages} ({view.products.total_count} ürün)")
    for p in view.products.items:
        print(f"   {p.id:<7} {p.name:<20} {p.warehouse:<6} stok={p.stock:<4} talep={p.demand:<4} {product_status(p).value}")


def demo_queries(service: DashboardService) -> None:
    print("\n--- Depolar ---")
    for w in service.warehouses():
        print(f"   {w.code}: {w.name} ({w.city}, {w.country})")

    print("\n--- Tüm ürünler ---")
    print_dashboard(service, ProductFilter())

    print("\n--- Kritik ürünler (BLR-A) ---")
    print_dashboard(service, ProductFilter(status="critical", warehouse="BLR-A"))

    print("\n--- 7 günlük KPI serisi ---")
    for point in service.kpis("7d"):
        print(f"   {point.date}: stok={point.stock} talep={point.demand}")


def demo_mutations(service: DashboardService) -> None:
    print("\n--- Mutasyonlar ---")
    attempts = [
        ("Talep güncelle P-1003 -> 60", lambda: service.update_demand("P-1003", 60)),
        ("Transfer P-1004 25 adet", lambda: service.transfer_stock("P-1004", "DEL-B", "MUM-D", 25)),
        ("Transfer P-1004 yanlış kaynak", lambda: service.transfer_stock("P-1004", "BLR-A", "MUM-D", 10)),
        ("Transfer P-1004 10 adet", lambda: service.transfer_stock("P-1004", "DEL-B", "MUM-D", 10)),
        ("Talep güncelle P-9999", lambda: service.update_demand("P-9999", 10)),
    ]
    for label, action in attempts:
        try:
            product = action()
            print(f"✅ {label}: stok={product.stock} talep={product.demand}")
        except DashboardError as e:
            print(f"❌ {label}: {e}")


def main() -> int:
    settings = DashboardSettings.from_env()
    service = DashboardService.from_settings(settings)
    demo_queries(service)
    demo_mutations(service)
    return 0


if __name__ == "__main__":
    sys.exit(main())
