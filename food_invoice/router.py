from typing import List
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from core.database import get_db
from .repository import FoodInvoiceRepository
from .schema import FoodOrderItem, FoodOrderLine, FoodTotal
from .service import FoodOrderService

food_invoice_router = APIRouter(prefix="/invoices/{invoice_id}/foods", tags=["Food orders"])


def get_food_order_service(db: Session = Depends(get_db)) -> FoodOrderService:
    return FoodOrderService(FoodInvoiceRepository(db))

# List the food lines of an invoice
@food_invoice_router.get("", response_model=list[FoodOrderItem])
def list_invoice_foods(invoice_id: str, service: FoodOrderService = Depends(get_food_order_service)):
    return service.get_foods_by_invoice_id(invoice_id)

# Replace the food lines of an invoice
@food_invoice_router.put("")
def put_invoice_foods(invoice_id: str, payload: List[FoodOrderLine], service: FoodOrderService = Depends(get_food_order_service)):
    try:
        service.save_food_order(invoice_id, payload)
    except IntegrityError:
        raise HTTPException(status_code=409, detail="invoice or food does not exist")
    return {"message": "food order saved"}

# Food subtotal of an invoice
@food_invoice_router.get("/total", response_model=FoodTotal)
def invoice_food_total(invoice_id: str, service: FoodOrderService = Depends(get_food_order_service)):
    return FoodTotal(invoice_id=invoice_id, total=service.get_total_food_price_by_invoice_id(invoice_id))

# Remove every food line of an invoice
@food_invoice_router.delete("")
def delete_invoice_foods(invoice_id: str, service: FoodOrderService = Depends(get_food_order_service)):
    if not service.clear_food_order(invoice_id):
        raise HTTPException(status_code=404, detail="no food lines for this invoice")
    return {"message": "food order cleared"}
