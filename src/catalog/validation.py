from __future__ import annotations

import math
from typing import Union

from catalog.models import ALL, CATEGORIES, NewProduct, Product


class ValidationError(ValueError):
    """Raised when a write would put a malformed entry into the store."""


def validate_fields(product: Union[NewProduct, Product]) -> None:
    """Check the mutable product fields. Raises ValidationError on the first problem."""
    if not isinstance(product.name, str) or not product.name.strip():
        raise ValidationError("Product name must not be empty.")

    if product.category not in CATEGORIES:
        raise ValidationError(f"Unknown product category: {product.category!r}")

    price = product.price
    if isinstance(price, bool) or not isinstance(price, (int, float)):
        raise ValidationError(f"Product price must be a number, got {price!r}")
    try:
        value = float(price)
    except OverflowError:
        raise ValidationError("Product price is too large.") from None
    if math.isnan(value) or math.isinf(value) or value < 0:
        raise ValidationError(f"Product price must be a non-negative amount: {price}")


def validate_category(category: str) -> None:
    if category != ALL and category not in CATEGORIES:
        raise ValidationError(f"Unknown category filter: {category!r}")


def validate_id(product_id) -> None:
    if isinstance(product_id, bool) or not isinstance(product_id, int):
        raise ValidationError(f"Product id must be an integer, got {product_id!r}")
