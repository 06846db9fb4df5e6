from __future__ import annotations
from datetime import datetime
from decimal import Decimal
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, String, DateTime, Numeric, ForeignKey
from core.database import Base

class Invoice(Base):
    __tablename__ = "invoices"

    invoice_id: Mapped[str] = mapped_column(String(20), primary_key=True)
    account_id: Mapped[str | None] = mapped_column(ForeignKey("accounts.account_id"), index=True, nullable=True)
    booking_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    status: Mapped[int | None] = mapped_column(Integer, nullable=True)
    total_money: Mapped[Decimal | None] = mapped_column(Numeric(18, 2), nullable=True)

    food_invoices = relationship("FoodInvoice", back_populates="invoice", cascade="all, delete-orphan")
