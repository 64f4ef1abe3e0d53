"""Ürün durum sınıflandırıcı."""

from __future__ import annotations

from src.models.inventory import Product, ProductStatus


def classify_status(stock: int, demand: int) -> ProductStatus:
    """Stok/talep çiftini durum sınıfına eşler.

    Eşitlik durumu Low sayılır, Healthy değil.
    """
    if stock > demand:
        return ProductStatus.HEALTHY
    if stock == demand:
        return ProductStatus.LOW
    return ProductStatus.CRITICAL


def product_status(product: Product) -> ProductStatus:
    return classify_status(product.stock, product.demand)
