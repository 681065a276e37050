import json
import os
import sys
import tempfile
import unittest
from unittest import mock

# Ensure project src/ is on sys.path for imports
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
src_path = os.path.join(ROOT, "src")
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from catalog import seed  # noqa: E402
from catalog.store import CatalogCartStore  # noqa: E402
from catalog.validation import ValidationError  # noqa: E402


class SeedTestCase(unittest.TestCase):
    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.temp_dir.name, "seed.json")

    def tearDown(self):
        self.temp_dir.cleanup()

    def write_seed(self, data):
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f)

    def test_default_seed_has_sequential_ids(self):
        self.assertEqual([p.id for p in seed.DEFAULT_SEED], [1, 2, 3, 4, 5, 6])
        seed.check_seed(seed.DEFAULT_SEED)

    def test_load_seed_catalog(self):
        self.write_seed(
            [
                {
                    "id": 1,
                    "name": "Solar Street Light",
                    "category": "streetlights",
                    "description": "All-in-one LED street light.",
                    "price": 120,
                    "imageUrl": "https://example.com/light.png",
                },
                {
                    "id": "2",
                    "name": "MPPT Charge Controller",
                    "category": "charge-controllers",
                    "description": "",
                    "price": 89.99,
                    "image_url": "https://example.com/mppt.png",
                },
            ]
        )
        products = seed.load_seed_catalog(self.path)
        self.assertEqual([p.id for p in products], [1, 2])
        self.assertEqual(products[0].price, 120.0)
        self.assertIsInstance(products[0].price, float)
        self.assertEqual(products[0].image_url, "https://example.com/light.png")
        self.assertEqual(products[1].image_url, "https://example.com/mppt.png")

    def test_load_seed_accepts_whole_float_ids(self):
        self.write_seed([{"id": 3.0, "name": "Panel", "category": "panels", "price": 1}])
        products = seed.load_seed_catalog(self.path)
        self.assertEqual(products[0].id, 3)
        self.assertIsInstance(products[0].id, int)

    def test_load_seed_rejects_bad_entries(self):
        cases = [
            {"not": "a list"},
            [{"name": "No id", "category": "panels", "price": 1}],
            [{"id": 1, "name": "", "category": "panels", "price": 1}],
            [{"id": 1, "name": "Bad", "category": "toasters", "price": 1}],
            [{"id": 1, "name": "Neg", "category": "panels", "price": -5}],
            [{"id": 2.9, "name": "Frac", "category": "panels", "price": 1}],
            [{"id": 1, "name": "Huge", "category": "panels", "price": 10**400}],
            [
                {"id": 1, "name": "A", "category": "panels", "price": 1},
                {"id": 1, "name": "B", "category": "panels", "price": 2},
            ],
        ]
        for data in cases:
            with self.subTest(data=data):
                self.write_seed(data)
                with self.assertRaises(ValidationError):
                    seed.load_seed_catalog(self.path)

    def test_missing_file_propagates(self):
        with self.assertRaises(OSError):
            seed.load_seed_catalog(os.path.join(self.temp_dir.name, "missing.json"))

    def test_store_from_config(self):
        self.write_seed(
            [{"id": 5, "name": "Inverter", "category": "inverters", "price": 300}]
        )
        with mock.patch.dict(os.environ, {seed.SEED_PATH_ENV: self.path}):
            store = CatalogCartStore.from_config()
        self.assertEqual([p.id for p in store.products], [5])

        with mock.patch.dict(os.environ, {}, clear=True):
            store = CatalogCartStore.from_config()
        self.assertEqual(len(store.products), len(seed.DEFAULT_SEED))


if __name__ == "__main__":
    unittest.main()
