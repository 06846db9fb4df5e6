from __future__ import annotations
from datetime import date
from enum import IntEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, String, Date, ForeignKey
from core.database import Base


class RoleId(IntEnum):
    admin = 1
    employee = 2
    member = 3


class Role(Base):
    __tablename__ = "roles"

    role_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    role_name: Mapped[str | None] = mapped_column(String(50), nullable=True)

    accounts = relationship("Account", back_populates="role")


class Account(Base):
    __tablename__ = "accounts"

    account_id: Mapped[str] = mapped_column(String(10), primary_key=True)
    username: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    password: Mapped[str] = mapped_column(String(255), nullable=False)

    full_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    date_of_birth: Mapped[date | None] = mapped_column(Date(), nullable=True)
    gender: Mapped[str | None] = mapped_column(String(10), nullable=True)
    identity_card: Mapped[str | None] = mapped_column(String(20), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    address: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone_number: Mapped[str | None] = mapped_column(String(20), nullable=True)
    image: Mapped[str | None] = mapped_column(String(255), nullable=True)

    register_date: Mapped[date | None] = mapped_column(Date(), nullable=True)
    status: Mapped[int | None] = mapped_column(Integer, nullable=True)
    role_id: Mapped[int | None] = mapped_column(ForeignKey("roles.role_id"), index=True, nullable=True)

    # relationships
    role = relationship("Role", back_populates="accounts")
    employee = relationship("Employee", back_populates="account", uselist=False)
