from __future__ import annotations
from decimal import Decimal
from typing import List, Optional, Sequence

from core.logging import get_logger
from .models import FoodInvoice
from .repository import FoodInvoiceRepository
from .schema import FoodOrderItem, FoodOrderLine

logger = get_logger(__name__)


class FoodOrderService:
    def __init__(self, repository: FoodInvoiceRepository):
        self._repository = repository

    def get_foods_by_invoice_id(self, invoice_id: str) -> List[FoodOrderItem]:
        rows = self._repository.get_by_invoice_id(invoice_id)
        return [
            FoodOrderItem(
                food_id=row.food.food_id,
                name=row.food.name,
                category=row.food.category,
                price=row.price,
                original_price=row.food.price,
                quantity=row.quantity,
                image=row.food.image,
                description=row.food.description,
                status=row.food.status,
            )
            for row in rows
        ]

    def save_food_order(self, invoice_id: str, ordered_foods: Optional[Sequence[FoodOrderLine]]) -> bool:
        if not ordered_foods:
            return True

        rows = [
            FoodInvoice(
                invoice_id=invoice_id,
                food_id=line.food_id,
                quantity=line.quantity,
                price=line.price,
            )
            for line in ordered_foods
        ]
        self._repository.create_multiple(rows)
        logger.info("saved %d food lines for invoice %s", len(rows), invoice_id)
        return True

    def get_total_food_price_by_invoice_id(self, invoice_id: str) -> Decimal:
        rows = self._repository.get_by_invoice_id(invoice_id)
        return sum((row.price * row.quantity for row in rows), Decimal("0"))

    def clear_food_order(self, invoice_id: str) -> bool:
        removed = self._repository.delete_by_invoice_id(invoice_id)
        if removed:
            logger.info("cleared food lines of invoice %s", invoice_id)
        return removed
