from src.dashboard.mutations import (
    DashboardError,
    InsufficientStockError,
    ProductNotFoundError,
    WrongSourceWarehouseError,
)
from src.dashboard.service import DashboardService
from src.dashboard.store import InventoryStore

__all__ = [
    "DashboardError",
    "DashboardService",
    "InsufficientStockError",
    "InventoryStore",
    "ProductNotFoundError",
    "WrongSourceWarehouseError",
]
