from __future__ import annotations
from sqlalchemy import select, Select
from sqlalchemy.orm import selectinload

from core.repository import Repository, next_sequential_id
from account.models import Account
from .models import Employee


class EmployeeRepository(Repository[Employee]):
    model = Employee

    def _base_query(self) -> Select:
        return select(Employee).options(selectinload(Employee.account)).order_by(Employee.employee_id)

    def generate_employee_id(self) -> str:
        return next_sequential_id(self._db, Employee.employee_id, "EM")

    def add(self, employee: Employee) -> None:
        if not employee.employee_id:
            employee.employee_id = self.generate_employee_id()
        self._db.add(employee)

    def delete(self, employee_id: str) -> None:
        # the backing account goes with the employee
        employee = self._db.get(Employee, employee_id)
        if employee:
            account = self._db.get(Account, employee.account_id)
            self._db.delete(employee)
            if account:
                self._db.delete(account)
