import os
import sys
import unittest

# Ensure project src/ is on sys.path for imports
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
src_path = os.path.join(ROOT, "src")
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from catalog.models import ALL, NewProduct  # noqa: E402
from catalog.store import CatalogCartStore  # noqa: E402
from utils.messages import (  # noqa: E402
    CartChangedMessage,
    CatalogChangedMessage,
    CategoryChangedMessage,
    StoreChangedMessage,
    bind_app,
)


class FakeApp:
    """Stands in for a Textual App; records posted messages."""

    def __init__(self):
        self.messages = []

    def post_message(self, message):
        self.messages.append(message)
        return True


class MessageBridgeTestCase(unittest.TestCase):
    def setUp(self):
        self.store = CatalogCartStore()
        self.app = FakeApp()
        self.unbind = bind_app(self.store, self.app)

    def test_cart_change_posts_cart_message(self):
        self.store.add_to_cart(self.store.get_product(1))
        self.assertEqual(len(self.app.messages), 1)
        msg = self.app.messages[0]
        self.assertIsInstance(msg, CartChangedMessage)
        self.assertIsInstance(msg, StoreChangedMessage)
        self.assertIs(msg.state, self.store.state)

    def test_catalog_change_posts_catalog_message(self):
        self.store.add_product(NewProduct("Light", "streetlights", "", 45.0))
        self.store.delete_product(1)
        self.assertEqual(
            [type(m) for m in self.app.messages],
            [CatalogChangedMessage, CatalogChangedMessage],
        )

    def test_category_change_carries_old_and_new(self):
        self.store.set_selected_category("inverters")
        msg = self.app.messages[0]
        self.assertIsInstance(msg, CategoryChangedMessage)
        self.assertEqual(msg.old_category, ALL)
        self.assertEqual(msg.new_category, "inverters")

    def test_no_message_without_change(self):
        self.store.remove_from_cart(1)
        self.store.set_selected_category(ALL)
        self.assertEqual(self.app.messages, [])

    def test_unbind(self):
        self.unbind()
        self.store.clear_cart()
        self.store.add_to_cart(self.store.get_product(1))
        self.assertEqual(self.app.messages, [])


if __name__ == "__main__":
    unittest.main()
