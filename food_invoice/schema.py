from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


# one ordered food as the caller confirmed it, price included
class FoodOrderLine(BaseModel):
    food_id: int
    quantity: int = Field(ge=1)
    price: Decimal = Field(ge=0)
    model_config = ConfigDict(extra="forbid")


# display view of a saved order line joined with its food
class FoodOrderItem(BaseModel):
    food_id: int
    name: str
    category: str
    price: Decimal
    original_price: Decimal
    quantity: int
    image: Optional[str] = None
    description: Optional[str] = None
    status: bool = True


class FoodTotal(BaseModel):
    invoice_id: str
    total: Decimal
