"""
Account store: keyed access to account rows.

Balance changes go through debit() and credit(), which run a
single guarded UPDATE in the database instead of writing back
a value computed in Python. Two concurrent debits can then
never both succeed against the same funds, and a credit can
never push a balance past MAX_MONEY.
"""

from decimal import Decimal

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from bank_app.models.account import Account
from bank_app.models.types import MAX_MONEY
from bank_app.stores.base import storage_errors


class AccountStore:

    def __init__(self, db: Session):
        self.db = db

    def find_by_username(self, username: str) -> Account | None:
        with storage_errors("find_by_username"):
            return self.db.execute(
                select(Account).where(Account.username == username)
            ).scalar_one_or_none()

    def find_by_id(self, account_id: int) -> Account | None:
        with storage_errors("find_by_id"):
            return self.db.get(Account, account_id)

    def save(self, account: Account) -> Account:
        """Insert a new account or flush changes to an existing one."""
        with storage_errors("save_account"):
            self.db.add(account)
            self.db.flush()
        return account

    def lock(self, *account_ids: int) -> list[Account]:
        """
        Lock account rows for the rest of the transaction.

        Rows are locked in ascending id order so two transfers
        running in opposite directions cannot deadlock. Loaded
        objects are refreshed with the locked row's values.
        """
        with storage_errors("lock_accounts"):
            return list(self.db.execute(
                select(Account)
                .where(Account.id.in_(account_ids))
                .order_by(Account.id)
                .with_for_update()
                .execution_options(populate_existing=True)
            ).scalars().all())

    def debit(self, account: Account, amount: Decimal) -> bool:
        """
        Subtract amount from the balance if the funds are there.

        Returns False, changing nothing, when the balance is
        lower than amount.
        """
        with storage_errors("debit"):
            result = self.db.execute(
                update(Account)
                .where(Account.id == account.id, Account.balance >= amount)
                .values(balance=Account.balance - amount)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount != 1:
                return False
            self.db.refresh(account, attribute_names=["balance"])
        return True

    def credit(self, account: Account, amount: Decimal) -> bool:
        """
        Add amount to the balance if the result fits a Money column.

        Returns False, changing nothing, when the new balance
        would exceed MAX_MONEY.
        """
        with storage_errors("credit"):
            result = self.db.execute(
                update(Account)
                .where(
                    Account.id == account.id,
                    Account.balance <= MAX_MONEY - amount,
                )
                .values(balance=Account.balance + amount)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount != 1:
                return False
            self.db.refresh(account, attribute_names=["balance"])
        return True
