from __future__ import annotations
from datetime import datetime
from decimal import Decimal
from sqlalchemy.sql import func
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, String, Boolean, DateTime, Numeric, text
from core.database import Base

class Food(Base):
    __tablename__ = "foods"

    food_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    category: Mapped[str] = mapped_column(String(50), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # current catalog price, order lines keep their own copy
    price: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False)
    description: Mapped[str | None] = mapped_column(String(500), nullable=True)
    image: Mapped[str | None] = mapped_column(String(255), nullable=True)

    # active flag shown on the menu
    status: Mapped[bool] = mapped_column(Boolean, server_default=text("true"), nullable=False)

    created_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    food_invoices = relationship("FoodInvoice", back_populates="food")
