from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from catalog.models import CartItem
from catalog.store import CatalogCartStore
from utils.logger import get_logger
from utils.pure import format_price, generate_markdown_table

_logger = get_logger(__name__)

THANK_YOU = "Thank you for your purchase! Your order has been placed."


@dataclass(frozen=True)
class OrderAcknowledgement:
    """What the shopper is shown after checkout. No payment is taken."""

    items: Tuple[CartItem, ...]
    total: float
    message: str = THANK_YOU

    def as_markdown(self) -> str:
        headers = ["Product Name", "Unit Price", "Quantity", "Total Price"]
        rows = [
            [
                item.name,
                format_price(item.price),
                item.quantity,
                format_price(item.line_total),
            ]
            for item in self.items
        ]
        md = "### Order Summary\n\n"
        md += generate_markdown_table(headers, rows, ["l", "r", "c", "r"])
        md += f"\n\n**Subtotal:** {format_price(self.total)}"
        return md


def checkout(store: CatalogCartStore) -> Optional[OrderAcknowledgement]:
    """
    Acknowledge the current cart and empty it.
    Returns None, without touching the store, if the cart is empty.
    """
    items = store.cart_items
    if not items:
        _logger.info("Checkout requested with an empty cart.")
        return None

    ack = OrderAcknowledgement(items=items, total=store.cart_total())
    store.clear_cart()
    _logger.info(f"Order placed: {len(items)} lines, total {format_price(ack.total)}")
    return ack
