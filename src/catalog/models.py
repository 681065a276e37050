# provide dataclass models for the catalog/cart store

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

ALL = "all"

CATEGORIES: Tuple[str, ...] = (
    "panels",
    "batteries",
    "inverters",
    "generators",
    "streetlights",
    "charge-controllers",
)


@dataclass(frozen=True)
class NewProduct:
    """Product fields as submitted by the admin form, before an id is assigned."""

    name: str
    category: str
    description: str
    price: float
    image_url: str = ""


@dataclass(frozen=True)
class Product:
    id: int
    name: str
    category: str
    description: str
    price: float
    image_url: str = ""


@dataclass(frozen=True)
class CartItem:
    """
    A cart line. Product fields are copied at add time and never follow later
    catalog edits or deletions.
    """

    id: int
    name: str
    category: str
    description: str
    price: float  # unit price at time of first add
    image_url: str
    quantity: int = 1

    @classmethod
    def from_product(cls, product: Product) -> CartItem:
        # only id and price are required, anything else shaped like a Product is accepted
        return cls(
            id=product.id,
            name=getattr(product, "name", ""),
            category=getattr(product, "category", ""),
            description=getattr(product, "description", ""),
            price=product.price,
            image_url=getattr(product, "image_url", ""),
            quantity=1,
        )

    @property
    def line_total(self) -> float:
        return self.price * self.quantity


@dataclass(frozen=True)
class StoreState:
    """
    Complete observable state of the store.

    Fields:
      - products: catalog in display (insertion) order
      - cart_items: cart lines in add order
      - selected_category: "all" or one of CATEGORIES
    """

    products: Tuple[Product, ...] = field(default_factory=tuple)
    cart_items: Tuple[CartItem, ...] = field(default_factory=tuple)
    selected_category: str = ALL
