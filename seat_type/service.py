from __future__ import annotations
from typing import Optional, Sequence

from core.repository import Repository
from .models import SeatType
from .schemas import SeatTypeUpdate


class SeatTypeRepository(Repository[SeatType]):
    model = SeatType


class SeatTypeService:
    def __init__(self, repository: SeatTypeRepository):
        self._repository = repository

    def get_all(self) -> Sequence[SeatType]:
        return self._repository.get_all()

    def get_by_id(self, seat_type_id: int) -> Optional[SeatType]:
        return self._repository.get_by_id(seat_type_id)

    def update(self, seat_type_id: int, patch: SeatTypeUpdate) -> Optional[SeatType]:
        seat_type = self._repository.get_by_id(seat_type_id)
        if not seat_type:
            return None
        for k, v in patch.model_dump(exclude_unset=True).items():
            setattr(seat_type, k, v)
        self._repository.update(seat_type)
        self.save()
        return seat_type

    def save(self) -> None:
        self._repository.save()
