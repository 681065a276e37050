from __future__ import annotations

from typing import Callable, Protocol

from textual.message import Message

from catalog.models import StoreState
from catalog.store import CatalogCartStore


class StoreChangedMessage(Message):
    """
    Base for store notifications. Carries the new snapshot;
    handlers must treat it as read-only.
    """

    bubble = True

    def __init__(self, state: StoreState) -> None:
        super().__init__()
        self.state = state


class CatalogChangedMessage(StoreChangedMessage):
    """
    Fired when a product is added, updated or deleted.
    Listened to by the catalog grid and the admin list.
    """


class CartChangedMessage(StoreChangedMessage):
    """
    Fired when cart lines change (add, remove, clear, checkout).
    Will trigger a refresh of the cart screen and the cart badge.
    """


class CategoryChangedMessage(StoreChangedMessage):
    """
    Fired when the category filter changes, so the catalog grid re-filters.
    """

    def __init__(self, state: StoreState, old_category: str) -> None:
        super().__init__(state)
        self.old_category = old_category
        self.new_category = state.selected_category


class MessageTarget(Protocol):
    def post_message(self, message: Message) -> bool: ...


def store_listener(target: MessageTarget) -> Callable[[StoreState, StoreState], None]:
    """
    Build a store listener that posts one message per changed slice of state.
    Post it at App level so every screen gets it.
    """

    def listener(state: StoreState, previous: StoreState) -> None:
        if state.products != previous.products:
            target.post_message(CatalogChangedMessage(state))
        if state.cart_items != previous.cart_items:
            target.post_message(CartChangedMessage(state))
        if state.selected_category != previous.selected_category:
            target.post_message(
                CategoryChangedMessage(state, previous.selected_category)
            )

    return listener


def bind_app(store: CatalogCartStore, app: MessageTarget) -> Callable[[], None]:
    """Forward store changes to a Textual app. Returns the unsubscribe callable."""
    return store.subscribe(store_listener(app))
