"""
Account model.

One account per registered user. The account holds the
username used to log in, the password hash and the current
balance. The balance is only changed by ledger operations,
each of which also appends a Transaction.
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import String, DateTime, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bank_app.models.base import Base, utcnow
from bank_app.models.types import Money


class Account(Base):
    __tablename__ = "accounts"
    __table_args__ = (
        CheckConstraint("balance >= 0", name="ck_accounts_balance_non_negative"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    username: Mapped[str] = mapped_column(
        String(50), unique=True, nullable=False, index=True
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    balance: Mapped[Decimal] = mapped_column(
        Money, nullable=False, default=Decimal("0")
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=utcnow
    )

    # Transactions are append-only, so nothing cascades from here
    transactions: Mapped[list["Transaction"]] = relationship(
        back_populates="account",
        order_by="Transaction.id",
    )

    def __repr__(self) -> str:
        return f"<Account {self.username} balance={self.balance}>"
