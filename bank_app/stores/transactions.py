"""
Transaction store — append-only access to transaction rows.

Records are never updated or deleted, so neither has a method here.
"""

from sqlalchemy import select
from sqlalchemy.orm import Session

from bank_app.models.transaction import Transaction
from bank_app.stores.base import storage_errors


class TransactionStore:

    def __init__(self, db: Session):
        self.db = db

    def find_by_account_id(self, account_id: int) -> list[Transaction]:
        """Return every transaction on an account, oldest first."""
        with storage_errors("find_transactions"):
            transactions = self.db.execute(
                select(Transaction)
                .where(Transaction.account_id == account_id)
                .order_by(Transaction.timestamp.asc(), Transaction.id.asc())
            ).scalars().all()
        return list(transactions)

    def save(self, transaction: Transaction) -> Transaction:
        if transaction.id is not None:
            raise ValueError("Transactions are append-only")
        with storage_errors("save_transaction"):
            self.db.add(transaction)
            self.db.flush()
        return transaction
