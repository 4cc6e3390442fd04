"""
Transaction model.

A transaction records one balance change on one account.
Deposits and withdrawals produce one record; a transfer
produces two, a TRANSFER_OUT on the sender and a TRANSFER_IN
on the recipient, each naming the other side in counterparty.

Transactions are immutable: once written they are never
updated or deleted.
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import (
    String, DateTime, ForeignKey, CheckConstraint,
    Enum as SAEnum,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bank_app.models.base import Base, utcnow
from bank_app.models.enums import TransactionKind
from bank_app.models.types import Money


class Transaction(Base):
    __tablename__ = "transactions"
    __table_args__ = (
        CheckConstraint("amount > 0", name="ck_transactions_amount_positive"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    account_id: Mapped[int] = mapped_column(
        ForeignKey("accounts.id"), nullable=False, index=True
    )
    kind: Mapped[TransactionKind] = mapped_column(
        SAEnum(
            TransactionKind,
            name="transaction_kind_enum",
            create_constraint=True,
        ),
        nullable=False,
    )
    amount: Mapped[Decimal] = mapped_column(
        Money, nullable=False
    )
    # Username on the other side of a transfer; NULL otherwise
    counterparty: Mapped[str | None] = mapped_column(
        String(50), nullable=True
    )
    timestamp: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=utcnow
    )

    account: Mapped["Account"] = relationship(back_populates="transactions")

    @property
    def description(self) -> str:
        """Human-readable label shown in the history."""
        if self.kind == TransactionKind.DEPOSIT:
            return "Deposit"
        if self.kind == TransactionKind.WITHDRAW:
            return "Withdraw"
        if self.kind == TransactionKind.TRANSFER_OUT:
            return f"Transfer Out to {self.counterparty}"
        return f"Received from {self.counterparty}"

    def __repr__(self) -> str:
        return f"<Transaction {self.kind.value} {self.amount}>"
