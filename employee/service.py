from __future__ import annotations
from typing import Optional, Sequence

from account.models import RoleId
from account.schemas import AccountRegister, AccountUpdate
from account.service import AccountService
from core.logging import get_logger
from .models import Employee
from .repository import EmployeeRepository

logger = get_logger(__name__)


class EmployeeService:
    def __init__(self, repository: EmployeeRepository, account_service: AccountService):
        self._repository = repository
        self._account_service = account_service

    def get_all(self) -> Sequence[Employee]:
        return self._repository.get_all()

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        return self._repository.get_by_id(employee_id)

    def register(self, registration: AccountRegister) -> bool:
        # staff accounts always get the employee role, whatever the caller sent
        registration.role_id = RoleId.employee
        return self._account_service.register(registration)

    def update(self, employee_id: str, edit: AccountUpdate) -> bool:
        employee = self._repository.get_by_id(employee_id)
        if employee is None:
            logger.warning("update skipped, employee %s not found", employee_id)
            return False
        return self._account_service.update(employee.account_id, edit)

    def delete(self, employee_id: str) -> bool:
        employee = self._repository.get_by_id(employee_id)
        if employee is None:
            logger.warning("delete skipped, employee %s not found", employee_id)
            return False
        account_id = employee.account_id
        self._repository.delete(employee_id)
        self._repository.save()
        logger.info("deleted employee %s and account %s", employee_id, account_id)
        return True
