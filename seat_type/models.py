from __future__ import annotations
from decimal import Decimal
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import Integer, String, Numeric
from core.database import Base

class SeatType(Base):
    __tablename__ = "seat_types"

    seat_type_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    type_name: Mapped[str | None] = mapped_column(String(50), nullable=True)
    # multiplier applied to the base ticket price
    price_percent: Mapped[Decimal | None] = mapped_column(Numeric(5, 2), nullable=True)
    color_hex: Mapped[str] = mapped_column(String(7), nullable=False)
