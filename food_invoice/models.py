from __future__ import annotations
from decimal import Decimal
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, Numeric, ForeignKey, CheckConstraint
from core.database import Base

class FoodInvoice(Base):
    __tablename__ = "food_invoices"

    food_invoice_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    invoice_id: Mapped[str] = mapped_column(ForeignKey("invoices.invoice_id", ondelete="CASCADE"), index=True, nullable=False)
    food_id: Mapped[int] = mapped_column(ForeignKey("foods.food_id"), index=True, nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)

    # unit price at order time, not linked to foods.price
    price: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False)

    __table_args__ = (
        CheckConstraint("quantity >= 1", name="ck_food_invoice_quantity_positive"),
        CheckConstraint("price >= 0", name="ck_food_invoice_price_non_negative"),
    )

    # relationships
    invoice = relationship("Invoice", back_populates="food_invoices")
    food = relationship("Food", back_populates="food_invoices")
