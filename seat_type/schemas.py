from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

class SeatTypeSchema(BaseModel):
    seat_type_id: int
    type_name: Optional[str] = None
    price_percent: Optional[Decimal] = None
    color_hex: str
    model_config = ConfigDict(from_attributes=True)


class SeatTypeUpdate(BaseModel):
    type_name: Optional[str] = None
    price_percent: Optional[Decimal] = Field(default=None, ge=0)
    color_hex: Optional[str] = Field(default=None, pattern=r"^#[0-9A-Fa-f]{6}$")
    model_config = ConfigDict(extra="forbid")
