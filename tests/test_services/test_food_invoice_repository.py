import unittest
from decimal import Decimal

from sqlalchemy import create_engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker

import models_bootstrap
from core.database import Base, enable_sqlite_foreign_keys
from food.models import Food
from invoice.models import Invoice
from food_invoice.models import FoodInvoice
from food_invoice.repository import FoodInvoiceRepository


class FoodInvoiceRepositoryTests(unittest.TestCase):
    def setUp(self):
        self.engine = create_engine("sqlite:///:memory:", future=True)
        enable_sqlite_foreign_keys(self.engine)
        Base.metadata.create_all(self.engine)
        TestingSession = sessionmaker(bind=self.engine, future=True)
        self.db: Session = TestingSession()

        self.db.add_all([
            Food(food_id=1, name="Popcorn", category="Snacks", price=Decimal("50000")),
            Food(food_id=2, name="Coke", category="Beverages", price=Decimal("30000")),
            Invoice(invoice_id="INV001"),
            Invoice(invoice_id="INV002"),
        ])
        self.db.add_all([
            FoodInvoice(invoice_id="INV001", food_id=1, quantity=2, price=Decimal("50000")),
            FoodInvoice(invoice_id="INV002", food_id=2, quantity=1, price=Decimal("30000")),
        ])
        self.db.commit()

        self.repo = FoodInvoiceRepository(self.db)

    def tearDown(self):
        self.db.close()
        self.engine.dispose()

    def test_get_by_invoice_id_loads_food(self):
        rows = self.repo.get_by_invoice_id("INV001")
        self.assertEqual(len(rows), 1)
        self.assertEqual(rows[0].food.name, "Popcorn")

    def test_get_by_invoice_id_unknown(self):
        self.assertEqual(self.repo.get_by_invoice_id("INV404"), [])

    def test_create_multiple_replaces_invoice_lines(self):
        self.repo.create_multiple([
            FoodInvoice(invoice_id="INV001", food_id=2, quantity=3, price=Decimal("25000")),
            FoodInvoice(invoice_id="INV001", food_id=1, quantity=1, price=Decimal("45000")),
        ])

        rows = self.repo.get_by_invoice_id("INV001")
        self.assertEqual([(r.food_id, r.quantity) for r in rows], [(2, 3), (1, 1)])
        # other invoices untouched
        self.assertEqual(len(self.repo.get_by_invoice_id("INV002")), 1)

    def test_create_multiple_rejects_zero_quantity_and_keeps_old_lines(self):
        with self.assertRaises(IntegrityError):
            self.repo.create_multiple([
                FoodInvoice(invoice_id="INV001", food_id=1, quantity=0, price=Decimal("50000")),
            ])
        rows = self.repo.get_by_invoice_id("INV001")
        self.assertEqual([(r.food_id, r.quantity) for r in rows], [(1, 2)])

    def test_create_multiple_rejects_negative_price(self):
        with self.assertRaises(IntegrityError):
            self.repo.create_multiple([
                FoodInvoice(invoice_id="INV001", food_id=1, quantity=1, price=Decimal("-1")),
            ])

    def test_create_multiple_rejects_unknown_food_and_keeps_old_lines(self):
        with self.assertRaises(IntegrityError):
            self.repo.create_multiple([
                FoodInvoice(invoice_id="INV001", food_id=999, quantity=1, price=Decimal("1")),
            ])
        rows = self.repo.get_by_invoice_id("INV001")
        self.assertEqual([(r.food_id, r.food.name) for r in rows], [(1, "Popcorn")])

    def test_create_multiple_rejects_unknown_invoice(self):
        with self.assertRaises(IntegrityError):
            self.repo.create_multiple([
                FoodInvoice(invoice_id="INV404", food_id=1, quantity=1, price=Decimal("1")),
            ])
        self.assertEqual(self.repo.get_by_invoice_id("INV404"), [])

    def test_delete_by_invoice_id(self):
        self.assertTrue(self.repo.delete_by_invoice_id("INV001"))
        self.assertEqual(self.repo.get_by_invoice_id("INV001"), [])
        self.assertFalse(self.repo.delete_by_invoice_id("INV001"))


if __name__ == "__main__":
    unittest.main()
