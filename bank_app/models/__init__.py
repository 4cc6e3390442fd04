"""
Database models package.

All models must be imported here so that Alembic can discover
them through Base.metadata when generating migrations.
"""

from bank_app.models.base import Base
from bank_app.models.enums import TransactionKind, Role
from bank_app.models.account import Account
from bank_app.models.transaction import Transaction

__all__ = [
    "Base",
    "TransactionKind",
    "Role",
    "Account",
    "Transaction",
]
