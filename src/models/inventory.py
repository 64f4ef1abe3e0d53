"""Envanter görünürlük paneli veri modelleri."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Optional

ALL = "all"
PAGE_SIZE = 10


class ProductStatus(str, Enum):
    HEALTHY = "Healthy"
    LOW = "Low"
    CRITICAL = "Critical"

    @classmethod
    def parse(cls, value: str) -> Optional["ProductStatus"]:
        """Büyük/küçük harf duyarsız eşleme yapar, tanınmayan değerde None döner."""
        lowered = value.lower()
        for status in cls:
            if status.value.lower() == lowered:
                return status
        return None


class KPIRange(str, Enum):
    DAYS_7 = "7d"
    DAYS_14 = "14d"
    DAYS_30 = "30d"

    @property
    def days(self) -> int:
        return int(self.value[:-1])


@dataclass(frozen=True)
class Warehouse:
    code: str
    name: str
    city: str
    country: str

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class Product:
    id: str
    name: str
    sku: str
    warehouse: str
    stock: int
    demand: int

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class KPIPoint:
    date: str  # YYYY-MM-DD
    stock: int
    demand: int

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class ProductFilter:
    search: Optional[str] = None
    status: Optional[str] = None
    warehouse: Optional[str] = None

    def without_status(self) -> "ProductFilter":
        return ProductFilter(search=self.search, status=None, warehouse=self.warehouse)


@dataclass
class DashboardSummary:
    total_stock: int
    total_demand: int
    total_fulfilled: int
    fill_rate: float

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class ProductPage:
    items: list[Product]
    page: int
    total_pages: int
    total_count: int
    page_size: int = PAGE_SIZE

    def to_dict(self) -> dict:
        return {
            "items": [p.to_dict() for p in self.items],
            "page": self.page,
            "total_pages": self.total_pages,
            "total_count": self.total_count,
            "page_size": self.page_size,
        }


@dataclass
class DashboardView:
    summary: DashboardSummary
    products: ProductPage
    kpis: list[KPIPoint] = field(default_factory=list)
    range: str = KPIRange.DAYS_7.value

    def to_dict(self) -> dict:
        return {
            "summary": self.summary.to_dict(),
            "products": self.products.to_dict(),
            "kpis": [k.to_dict() for k in self.kpis],
            "range": self.range,
        }
