from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from core.database import get_db
from .schemas import SeatTypeSchema, SeatTypeUpdate
from .service import SeatTypeRepository, SeatTypeService

seat_type_router = APIRouter(prefix="/seat-types", tags=["Seat types"])


def get_seat_type_service(db: Session = Depends(get_db)) -> SeatTypeService:
    return SeatTypeService(SeatTypeRepository(db))

# List all seat types
@seat_type_router.get("", response_model=list[SeatTypeSchema])
def list_seat_types(service: SeatTypeService = Depends(get_seat_type_service)):
    return service.get_all()

# Get seat type by id
@seat_type_router.get("/{seat_type_id}", response_model=SeatTypeSchema)
def seat_type_detail(seat_type_id: int, service: SeatTypeService = Depends(get_seat_type_service)):
    obj = service.get_by_id(seat_type_id)
    if not obj:
        raise HTTPException(status_code=404, detail="seat type not found")
    return obj

# Update seat type
@seat_type_router.patch("/{seat_type_id}", response_model=SeatTypeSchema)
def seat_type_patch(seat_type_id: int, payload: SeatTypeUpdate, service: SeatTypeService = Depends(get_seat_type_service)):
    obj = service.update(seat_type_id, payload)
    if not obj:
        raise HTTPException(status_code=404, detail="seat type not found")
    return obj
