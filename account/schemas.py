from datetime import date
from typing import Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field


class AccountSchema(BaseModel):
    account_id: str
    username: str
    full_name: Optional[str] = None
    date_of_birth: Optional[date] = None
    gender: Optional[str] = None
    identity_card: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    phone_number: Optional[str] = None
    image: Optional[str] = None
    register_date: Optional[date] = None
    status: Optional[int] = None
    role_id: Optional[int] = None
    model_config = ConfigDict(from_attributes=True)


# PUBLIC payload, what clients send to register an account.
# role_id is decided by the registering service, callers may leave it out
class AccountRegister(BaseModel):
    username: str = Field(min_length=1, max_length=50)
    password: str = Field(min_length=1)
    full_name: Optional[str] = None
    date_of_birth: Optional[date] = None
    gender: Optional[str] = None
    identity_card: Optional[str] = None
    email: Optional[EmailStr] = None
    address: Optional[str] = None
    phone_number: Optional[str] = None
    image: Optional[str] = None
    role_id: Optional[int] = None
    model_config = ConfigDict(extra="forbid")


# empty password keeps the stored hash
class AccountUpdate(BaseModel):
    username: str = Field(min_length=1, max_length=50)
    password: Optional[str] = None
    full_name: Optional[str] = None
    date_of_birth: Optional[date] = None
    gender: Optional[str] = None
    identity_card: Optional[str] = None
    email: Optional[EmailStr] = None
    address: Optional[str] = None
    phone_number: Optional[str] = None
    image: Optional[str] = None
    status: Optional[int] = None
    model_config = ConfigDict(extra="forbid")
