from __future__ import annotations
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import String, ForeignKey
from core.database import Base

class Employee(Base):
    __tablename__ = "employees"

    employee_id: Mapped[str] = mapped_column(String(10), primary_key=True)

    # login account backing this employee, one per employee
    account_id: Mapped[str] = mapped_column(ForeignKey("accounts.account_id"), unique=True, index=True, nullable=False)

    account = relationship("Account", back_populates="employee")
