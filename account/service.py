from __future__ import annotations
from datetime import date
from typing import Optional

from fastapi import HTTPException

from core.logging import get_logger
from core.security import get_password_hash
from employee.models import Employee
from employee.repository import EmployeeRepository
from .models import Account, RoleId
from .repository import AccountRepository
from .schemas import AccountRegister, AccountUpdate

logger = get_logger(__name__)

DEFAULT_AVATAR = "/image/profile.jpg"


class AccountService:
    def __init__(self, repository: AccountRepository, employee_repository: EmployeeRepository):
        self._repository = repository
        self._employee_repository = employee_repository

    def get_by_id(self, account_id: str) -> Optional[Account]:
        return self._repository.get_by_id(account_id)

    def register(self, registration: AccountRegister) -> bool:
        if self._repository.get_by_username(registration.username) is not None:
            logger.info("registration refused, username %r is taken", registration.username)
            return False

        account = Account(
            username=registration.username,
            password=get_password_hash(registration.password),
            full_name=registration.full_name,
            date_of_birth=registration.date_of_birth,
            gender=registration.gender,
            identity_card=registration.identity_card,
            email=registration.email,
            address=registration.address,
            phone_number=registration.phone_number,
            register_date=date.today(),
            status=1,
            role_id=registration.role_id or RoleId.member,
            image=registration.image or DEFAULT_AVATAR,
        )
        self._repository.add(account)
        # staff account and its employee row are committed together
        if account.role_id == RoleId.employee:
            self._employee_repository.add(Employee(account_id=account.account_id))
        self._repository.save()

        logger.info("registered account %s with role %s", account.account_id, account.role_id)
        return True

    def update(self, account_id: str, edit: AccountUpdate) -> bool:
        account = self._repository.get_by_id(account_id)
        if account is None:
            return False

        if edit.username != account.username and self._repository.get_by_username(edit.username) is not None:
            raise HTTPException(status_code=409, detail="username already exists")

        account.username = edit.username
        if edit.password:
            account.password = get_password_hash(edit.password)
        account.full_name = edit.full_name
        account.date_of_birth = edit.date_of_birth
        account.gender = edit.gender
        account.identity_card = edit.identity_card
        account.email = edit.email
        account.address = edit.address
        account.phone_number = edit.phone_number
        if edit.image:
            account.image = edit.image
        if edit.status is not None:
            account.status = edit.status

        self._repository.save()
        logger.info("updated account %s", account_id)
        return True
