"""Persistence stores for accounts and transactions."""

from bank_app.stores.accounts import AccountStore
from bank_app.stores.transactions import TransactionStore

__all__ = ["AccountStore", "TransactionStore"]
