from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from core.database import get_db
from account.repository import AccountRepository
from account.schemas import AccountRegister, AccountUpdate
from account.service import AccountService
from .repository import EmployeeRepository
from .schema import EmployeeSchema
from .service import EmployeeService

employee_router = APIRouter(prefix="/employees", tags=["Employees"])


def get_employee_service(db: Session = Depends(get_db)) -> EmployeeService:
    employees = EmployeeRepository(db)
    return EmployeeService(employees, AccountService(AccountRepository(db), employees))

# List all employees
@employee_router.get("", response_model=list[EmployeeSchema])
def list_employees(service: EmployeeService = Depends(get_employee_service)):
    return service.get_all()

# Get employee by id
@employee_router.get("/{employee_id}", response_model=EmployeeSchema)
def employee_detail(employee_id: str, service: EmployeeService = Depends(get_employee_service)):
    obj = service.get_by_id(employee_id)
    if not obj:
        raise HTTPException(status_code=404, detail="employee not found")
    return obj

# Register employee together with its account
@employee_router.post("", status_code=status.HTTP_201_CREATED)
def employee_post(payload: AccountRegister, db: Session = Depends(get_db), service: EmployeeService = Depends(get_employee_service)):
    try:
        created = service.register(payload)
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail="employee account conflicts with an existing account")
    if not created:
        raise HTTPException(status_code=409, detail="username already exists")
    return {"message": "employee registered"}

# Update the account behind an employee
@employee_router.put("/{employee_id}")
def employee_put(employee_id: str, payload: AccountUpdate, service: EmployeeService = Depends(get_employee_service)):
    if not service.update(employee_id, payload):
        raise HTTPException(status_code=404, detail="employee not found")
    return {"message": "employee updated"}

# Delete employee and its account
@employee_router.delete("/{employee_id}")
def employee_delete(employee_id: str, service: EmployeeService = Depends(get_employee_service)):
    if not service.delete(employee_id):
        raise HTTPException(status_code=404, detail="employee not found")
    return {"message": "employee deleted"}
