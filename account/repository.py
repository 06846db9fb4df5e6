from __future__ import annotations
from typing import Optional
from sqlalchemy import select

from core.repository import Repository, next_sequential_id
from .models import Account


class AccountRepository(Repository[Account]):
    model = Account

    def get_by_username(self, username: str) -> Optional[Account]:
        return self._db.scalars(select(Account).where(Account.username == username)).first()

    def generate_account_id(self) -> str:
        return next_sequential_id(self._db, Account.account_id, "AC")

    def add(self, account: Account) -> None:
        if not account.account_id:
            account.account_id = self.generate_account_id()
        self._db.add(account)
