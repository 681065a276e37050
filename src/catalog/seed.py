# seed catalog the store starts from, built in or loaded from a JSON file
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import List, Optional, Union

from catalog.models import Product
from catalog.validation import ValidationError, validate_fields, validate_id
from utils.logger import get_logger

_logger = get_logger(__name__)

SEED_PATH_ENV = "CATALOG_SEED_PATH"

DEFAULT_SEED: List[Product] = [
    Product(
        id=1,
        name="High-Efficiency Monocrystalline Panel",
        category="panels",
        description="A durable and highly efficient solar panel with excellent low-light performance.",
        price=250.0,
        image_url="https://placehold.co/400x300/a3e635/000000.png?text=Solar+Panel",
    ),
    Product(
        id=2,
        name="Lithium-Ion Solar Battery (5 kWh)",
        category="batteries",
        description="Long-lasting and reliable battery for residential energy storage.",
        price=1800.0,
        image_url="https://placehold.co/400x300/fde047/000000.png?text=Solar+Battery",
    ),
    Product(
        id=3,
        name="Pure Sine Wave Inverter (3 kW)",
        category="inverters",
        description="Converts DC power from panels to AC power for household use with high efficiency.",
        price=550.0,
        image_url="https://placehold.co/400x300/f87171/000000.png?text=Inverter",
    ),
    Product(
        id=4,
        name="Deep Cycle AGM Battery (100 Ah)",
        category="batteries",
        description="Robust and maintenance-free battery for off-grid systems and backups.",
        price=320.0,
        image_url="https://placehold.co/400x300/fde047/000000.png?text=AGM+Battery",
    ),
    Product(
        id=5,
        name="Polycrystalline Solar Panel (300W)",
        category="panels",
        description="An economical option for solar power generation with good performance.",
        price=180.0,
        image_url="https://placehold.co/400x300/a3e635/000000.png?text=Poly+Panel",
    ),
    Product(
        id=6,
        name="Hybrid Solar Inverter (5 kW)",
        category="inverters",
        description="Combines a charge controller and an inverter for simplified system setup.",
        price=900.0,
        image_url="https://placehold.co/400x300/f87171/000000.png?text=Hybrid+Inverter",
    ),
]


def _to_int(val) -> Optional[int]:
    """Exact integers only; 2.0 and "2" are accepted, 2.9 is not."""
    if isinstance(val, bool):
        return None
    if isinstance(val, float) and not val.is_integer():
        return None
    try:
        return int(val)
    except (TypeError, ValueError):
        return None


def check_seed(products: List[Product]) -> None:
    """Reject seeds with invalid entries or repeated ids."""
    seen = set()
    for product in products:
        validate_id(product.id)
        validate_fields(product)
        if product.id in seen:
            raise ValidationError(f"Duplicate product id in seed catalog: {product.id}")
        seen.add(product.id)


def _product_from_entry(entry: dict) -> Product:
    if not isinstance(entry, dict):
        raise ValidationError(f"Seed entry must be an object, got {entry!r}")
    pid = _to_int(entry.get("id"))
    if pid is None:
        raise ValidationError(f"Seed entry has no usable id: {entry!r}")
    price = entry.get("price")
    if isinstance(price, int) and not isinstance(price, bool):
        try:
            price = float(price)
        except OverflowError:
            raise ValidationError(f"Seed entry price is too large: {entry.get('id')!r}") from None
    return Product(
        id=pid,
        name=entry.get("name") or "",
        category=entry.get("category") or "",
        description=entry.get("description") or "",
        price=price,
        image_url=entry.get("imageUrl") or entry.get("image_url") or "",
    )


def load_seed_catalog(path: Union[str, Path]) -> List[Product]:
    """
    Read a seed catalog from a JSON file holding a list of product objects.

    Keys per object: id, name, category, description, price, imageUrl
    (image_url is accepted too). I/O and JSON errors propagate unchanged.
    """
    _logger.info(f"Loading seed catalog from {path}...")
    with open(path, "r", encoding="utf-8") as f:
        raw = json.load(f)
    if not isinstance(raw, list):
        raise ValidationError("Seed catalog file must contain a list of products.")

    products = [_product_from_entry(entry) for entry in raw]
    check_seed(products)
    _logger.debug(f"Loaded {len(products)} seed products.")
    return products


def configured_seed() -> List[Product]:
    """Seed from CATALOG_SEED_PATH if set, otherwise the built-in catalog."""
    path = os.getenv(SEED_PATH_ENV)
    if path:
        return load_seed_catalog(path)
    return list(DEFAULT_SEED)
