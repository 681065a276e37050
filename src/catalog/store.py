from __future__ import annotations

from collections import deque
from dataclasses import replace
from typing import Callable, Deque, Iterable, List, Optional, Tuple

from catalog.models import ALL, CATEGORIES, CartItem, NewProduct, Product, StoreState
from catalog.seed import DEFAULT_SEED, check_seed, configured_seed
from catalog.validation import ValidationError, validate_category, validate_fields
from utils.logger import get_logger

_logger = get_logger(__name__)

# listener(state, previous)
Listener = Callable[[StoreState, StoreState], None]


class CatalogCartStore:
    """
    In-memory catalog, cart and category filter shared by the storefront views.

    All writes go through the seven mutation methods below. Every mutation runs
    to completion before listeners are called, and listeners only ever see
    immutable StoreState snapshots. Not-found ids are silent no-ops; malformed
    product fields raise ValidationError.

    The store is meant to be owned by a single UI thread and is not locked.
    """

    def __init__(self, seed: Optional[Iterable[Product]] = None) -> None:
        products: Tuple[Product, ...] = tuple(DEFAULT_SEED if seed is None else seed)
        check_seed(list(products))

        self._state = StoreState(products=products)
        # ids are never handed out twice, even after the highest one is deleted
        self._next_id = max((p.id for p in products), default=0) + 1
        self._listeners: List[Listener] = []
        self._pending: Deque[Tuple[StoreState, StoreState]] = deque()
        self._notifying = False
        _logger.debug(f"Store created with {len(products)} products.")

    @classmethod
    def from_config(cls) -> CatalogCartStore:
        """Build a store seeded from CATALOG_SEED_PATH, or the built-in catalog."""
        return cls(configured_seed())

    # ---------------------------
    # Read access
    # ---------------------------

    @property
    def state(self) -> StoreState:
        return self._state

    @property
    def products(self) -> Tuple[Product, ...]:
        return self._state.products

    @property
    def cart_items(self) -> Tuple[CartItem, ...]:
        return self._state.cart_items

    @property
    def selected_category(self) -> str:
        return self._state.selected_category

    def get_product(self, product_id: int) -> Optional[Product]:
        """Return the catalog entry with the given id, or None."""
        for product in self._state.products:
            if product.id == product_id:
                return product
        return None

    def filtered_products(self) -> Tuple[Product, ...]:
        """Catalog entries matching the selected category, in catalog order."""
        category = self._state.selected_category
        if category == ALL:
            return self._state.products
        return tuple(p for p in self._state.products if p.category == category)

    def cart_total(self) -> float:
        """Sum of price * quantity over the cart, rounded to cents."""
        return round(sum(item.line_total for item in self._state.cart_items), 2)

    def cart_count(self) -> int:
        """Number of distinct lines in the cart."""
        return len(self._state.cart_items)

    @staticmethod
    def category_options() -> Tuple[str, ...]:
        return (ALL, *CATEGORIES)

    # ---------------------------
    # Observers
    # ---------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register listener(state, previous), called after every mutation that
        changes the state. Mutations made by a listener are delivered once
        the current round of listeners has finished, in commit order, so every
        listener sees the snapshots in sequence. Returns a callable that
        unregisters it.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _commit(self, new_state: StoreState, action: str) -> None:
        previous = self._state
        if new_state == previous:
            _logger.debug(f"{action}: no change")
            return

        self._state = new_state
        _logger.debug(
            f"{action}: {len(new_state.products)} products, "
            f"{len(new_state.cart_items)} cart lines, "
            f"category={new_state.selected_category}"
        )
        self._pending.append((new_state, previous))
        if self._notifying:
            # a listener mutated the store, the outer loop delivers this in order
            return

        self._notifying = True
        try:
            while self._pending:
                state, prev = self._pending.popleft()
                # copy so listeners may unsubscribe while being notified
                for listener in list(self._listeners):
                    listener(state, prev)
        finally:
            self._pending.clear()
            self._notifying = False

    # ---------------------------
    # Cart
    # ---------------------------

    def add_to_cart(self, product: Product) -> None:
        """
        Add one unit of product. An existing line for the same id keeps its
        captured fields and only has its quantity bumped.
        """
        cart = self._state.cart_items
        if any(item.id == product.id for item in cart):
            cart = tuple(
                replace(item, quantity=item.quantity + 1)
                if item.id == product.id
                else item
                for item in cart
            )
        else:
            cart = cart + (CartItem.from_product(product),)
        self._commit(replace(self._state, cart_items=cart), f"add_to_cart({product.id})")

    def remove_from_cart(self, product_id: int) -> None:
        """Drop the whole line for product_id, whatever its quantity."""
        cart = tuple(item for item in self._state.cart_items if item.id != product_id)
        self._commit(replace(self._state, cart_items=cart), f"remove_from_cart({product_id})")

    def clear_cart(self) -> None:
        self._commit(replace(self._state, cart_items=()), "clear_cart")

    # ---------------------------
    # Catalog (admin)
    # ---------------------------

    def add_product(self, new_product: NewProduct) -> Product:
        """Validate, assign the next id and append to the end of the catalog."""
        try:
            validate_fields(new_product)
        except ValidationError as e:
            _logger.warning(f"add_product rejected: {e}")
            raise

        product = Product(
            id=self._next_id,
            name=new_product.name,
            category=new_product.category,
            description=new_product.description,
            price=new_product.price,
            image_url=new_product.image_url,
        )
        self._next_id += 1
        self._commit(
            replace(self._state, products=self._state.products + (product,)),
            f"add_product({product.id})",
        )
        return product

    def update_product(self, product: Product) -> None:
        """
        Replace the catalog entry with the same id, keeping its position.
        Cart lines are snapshots and are left alone.

        Unknown ids are ignored before any validation, so a malformed update
        for an absent id is a silent no-op too. Raises ValidationError only
        for malformed fields on an existing entry.
        """
        if self.get_product(product.id) is None:
            _logger.debug(f"update_product({product.id}): not in catalog")
            return

        try:
            validate_fields(product)
        except ValidationError as e:
            _logger.warning(f"update_product({product.id}) rejected: {e}")
            raise

        products = tuple(
            product if p.id == product.id else p for p in self._state.products
        )
        self._commit(replace(self._state, products=products), f"update_product({product.id})")

    def delete_product(self, product_id: int) -> None:
        """Remove from the catalog only. Cart lines for the id stay purchasable."""
        products = tuple(p for p in self._state.products if p.id != product_id)
        self._commit(replace(self._state, products=products), f"delete_product({product_id})")

    # ---------------------------
    # Filter
    # ---------------------------

    def set_selected_category(self, category: str) -> None:
        try:
            validate_category(category)
        except ValidationError as e:
            _logger.warning(f"set_selected_category rejected: {e}")
            raise
        self._commit(
            replace(self._state, selected_category=category),
            f"set_selected_category({category})",
        )
