from __future__ import annotations
from typing import Iterable, List
from sqlalchemy import select, delete
from sqlalchemy.orm import joinedload

from core.repository import Repository
from .models import FoodInvoice


class FoodInvoiceRepository(Repository[FoodInvoice]):
    model = FoodInvoice

    def get_by_invoice_id(self, invoice_id: str) -> List[FoodInvoice]:
        statement = (
            select(FoodInvoice)
            .options(joinedload(FoodInvoice.food))
            .where(FoodInvoice.invoice_id == invoice_id)
            .order_by(FoodInvoice.food_invoice_id)
        )
        return list(self._db.scalars(statement).unique())

    def create_multiple(self, food_invoices: Iterable[FoodInvoice]) -> List[FoodInvoice]:
        """Replace the lines of every invoice in the batch with the batch, in one commit."""
        rows = list(food_invoices)
        invoice_ids = {row.invoice_id for row in rows}
        try:
            if invoice_ids:
                self._db.execute(delete(FoodInvoice).where(FoodInvoice.invoice_id.in_(invoice_ids)))
            self._db.add_all(rows)
            self._db.commit()
        except Exception:
            self._db.rollback()
            raise
        return rows

    def delete_by_invoice_id(self, invoice_id: str) -> bool:
        result = self._db.execute(delete(FoodInvoice).where(FoodInvoice.invoice_id == invoice_id))
        if not result.rowcount:
            return False
        self._db.commit()
        return True
