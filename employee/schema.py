from pydantic import BaseModel, ConfigDict
from typing import Optional

from account.schemas import AccountSchema


class EmployeeSchema(BaseModel):
    employee_id: str
    account_id: str
    account: Optional[AccountSchema] = None
    model_config = ConfigDict(from_attributes=True)
