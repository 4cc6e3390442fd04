"""
Ledger service — the core of the banking app.

This service enforces the fundamental rules:
1. A balance never goes below zero
2. Every balance change appends exactly one transaction per
   affected account, and transactions are never modified
3. A transfer debits, credits and records both sides together
4. Amounts are positive and fit the stored precision

No other code changes a balance. All money movement goes
through this service.
"""

import logging
from datetime import datetime
from decimal import Decimal

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from bank_app.errors import (
    AccountNotFound,
    DuplicateAccount,
    InsufficientFunds,
    InvalidAmount,
    InvalidCredentials,
    RecipientNotFound,
    SelfTransfer,
)
from bank_app.models.account import Account
from bank_app.models.base import utcnow
from bank_app.models.enums import Role, TransactionKind
from bank_app.models.transaction import Transaction
from bank_app.models.types import MAX_MONEY, MONEY_DECIMAL_PLACES
from bank_app.schemas.auth import Credentials
from bank_app.security import PasswordHasher, get_password_hasher
from bank_app.stores.accounts import AccountStore
from bank_app.stores.transactions import TransactionStore

logger = logging.getLogger(__name__)

# Every account is granted the same single authority.
DEFAULT_ROLES = frozenset({Role.USER})


def validate_amount(amount) -> Decimal:
    """
    Return amount as a Decimal, or raise InvalidAmount.

    Accepts Decimal, int or a numeric string. Floats are refused,
    as is anything larger than a balance can hold (MAX_MONEY).
    """
    if isinstance(amount, (float, bool)):
        raise InvalidAmount(f"Amount must be a decimal, got {type(amount).__name__}")
    try:
        value = Decimal(amount)
    except (ArithmeticError, TypeError, ValueError):
        raise InvalidAmount(f"Amount {amount!r} is not a number")

    if not value.is_finite():
        raise InvalidAmount(f"Amount {amount!r} is not finite")
    if value <= 0:
        raise InvalidAmount(f"Amount must be positive, got {value}")
    if -value.normalize().as_tuple().exponent > MONEY_DECIMAL_PLACES:
        raise InvalidAmount(
            f"Amount {value} has more than {MONEY_DECIMAL_PLACES} decimal places"
        )
    if value > MAX_MONEY:
        raise InvalidAmount(f"Amount {value} exceeds the maximum of {MAX_MONEY}")
    return value


class LedgerService:
    """
    Account lifecycle and every balance-affecting operation.

    The service takes a database session as a constructor
    argument and only ever flushes. The caller controls the
    transaction boundary: commit once the method returns,
    rollback if it raises. All checks run before the first
    write, so a rejected operation leaves nothing to undo.
    """

    def __init__(self, db: Session, hasher: PasswordHasher | None = None):
        self.db = db
        self.accounts = AccountStore(db)
        self.transactions = TransactionStore(db)
        self.hasher = hasher or get_password_hasher()

    # --- Accounts ---

    def register_account(self, username: str, raw_password: str) -> Account:
        """
        Create an account with a zero balance.

        Raises DuplicateAccount if the username is taken. The
        existing account is left untouched.
        """
        if self.accounts.find_by_username(username) is not None:
            logger.warning("registration rejected username=%s reason=duplicate", username)
            raise DuplicateAccount(f"Account '{username}' already exists")

        account = Account(
            username=username,
            password_hash=self.hasher.hash(raw_password),
            balance=Decimal("0"),
        )
        try:
            self.accounts.save(account)
        except IntegrityError as e:
            # A concurrent registration took the username first
            raise DuplicateAccount(f"Account '{username}' already exists") from e

        logger.info("account registered account_id=%s username=%s", account.id, username)
        return account

    def find_account_by_username(self, username: str) -> Account:
        account = self.accounts.find_by_username(username)
        if account is None:
            raise AccountNotFound(f"Account '{username}' not found")
        return account

    def get_account(self, account_id: int) -> Account:
        account = self.accounts.find_by_id(account_id)
        if account is None:
            raise AccountNotFound(f"Account {account_id} not found")
        return account

    def load_credentials(self, username: str) -> Credentials:
        """Credential lookup used by the access layer to start a session."""
        account = self.find_account_by_username(username)
        return Credentials(
            account_id=account.id,
            username=account.username,
            password_hash=account.password_hash,
            roles=DEFAULT_ROLES,
        )

    def authenticate(self, username: str, raw_password: str) -> Account:
        """
        Resolve an account by username and check its password.

        Raises AccountNotFound for an unknown username and
        InvalidCredentials for a wrong password.
        """
        account = self.find_account_by_username(username)
        if not self.hasher.verify(raw_password, account.password_hash):
            logger.warning("authentication failed account_id=%s", account.id)
            raise InvalidCredentials("Invalid username or password")
        return account

    # --- Ledger operations ---

    def deposit(self, account: Account, amount) -> Transaction:
        """
        Add amount to the balance and record a DEPOSIT.

        Raises InvalidAmount if the new balance would exceed
        MAX_MONEY; nothing is written in that case.
        """
        amount = validate_amount(amount)
        self.accounts.lock(account.id)

        if not self.accounts.credit(account, amount):
            logger.warning(
                "deposit rejected account_id=%s amount=%s reason=balance_limit",
                account.id, amount,
            )
            raise InvalidAmount(
                f"Deposit would take the balance past the maximum of {MAX_MONEY}"
            )
        txn = self._record(account, TransactionKind.DEPOSIT, amount)

        logger.info(
            "deposit account_id=%s amount=%s balance=%s",
            account.id, amount, account.balance,
        )
        return txn

    def withdraw(self, account: Account, amount) -> Transaction:
        """
        Subtract amount from the balance and record a WITHDRAW.

        Raises InsufficientFunds if the balance is lower than
        amount; nothing is written in that case.
        """
        amount = validate_amount(amount)
        self.accounts.lock(account.id)

        if not self.accounts.debit(account, amount):
            logger.warning(
                "withdrawal rejected account_id=%s amount=%s reason=insufficient_funds",
                account.id, amount,
            )
            raise InsufficientFunds(
                f"Insufficient balance: available={account.balance}, "
                f"requested={amount}"
            )
        txn = self._record(account, TransactionKind.WITHDRAW, amount)

        logger.info(
            "withdraw account_id=%s amount=%s balance=%s",
            account.id, amount, account.balance,
        )
        return txn

    def transfer(
        self, from_account: Account, to_username: str, amount
    ) -> tuple[Transaction, Transaction]:
        """
        Move amount from one account to another by username.

        Both balance changes and both records (TRANSFER_OUT on
        the sender, TRANSFER_IN on the recipient) are written in
        the caller's transaction with one shared timestamp.

        Returns (outgoing, incoming).
        """
        amount = validate_amount(amount)

        to_account = self.accounts.find_by_username(to_username)
        if to_account is None:
            logger.warning(
                "transfer rejected account_id=%s reason=recipient_not_found",
                from_account.id,
            )
            raise RecipientNotFound(f"Recipient account '{to_username}' not found")
        if to_account.id == from_account.id:
            raise SelfTransfer("Cannot transfer to the same account")

        self.accounts.lock(from_account.id, to_account.id)

        if to_account.balance > MAX_MONEY - amount:
            logger.warning(
                "transfer rejected account_id=%s amount=%s reason=balance_limit",
                from_account.id, amount,
            )
            raise InvalidAmount(
                f"Transfer would take the recipient past the maximum of {MAX_MONEY}"
            )
        if not self.accounts.debit(from_account, amount):
            logger.warning(
                "transfer rejected account_id=%s amount=%s reason=insufficient_funds",
                from_account.id, amount,
            )
            raise InsufficientFunds(
                f"Insufficient balance: available={from_account.balance}, "
                f"requested={amount}"
            )
        if not self.accounts.credit(to_account, amount):
            # Only reachable if the row changed after lock(); the
            # caller's rollback undoes the debit above.
            raise InvalidAmount(
                f"Transfer would take the recipient past the maximum of {MAX_MONEY}"
            )

        now = utcnow()
        outgoing = self._record(
            from_account, TransactionKind.TRANSFER_OUT, amount,
            counterparty=to_account.username, timestamp=now,
        )
        incoming = self._record(
            to_account, TransactionKind.TRANSFER_IN, amount,
            counterparty=from_account.username, timestamp=now,
        )

        logger.info(
            "transfer from_account_id=%s to_account_id=%s amount=%s",
            from_account.id, to_account.id, amount,
        )
        return outgoing, incoming

    def get_transaction_history(self, account: Account) -> list[Transaction]:
        """Return all transactions on an account, oldest first."""
        return self.transactions.find_by_account_id(account.id)

    def _record(
        self,
        account: Account,
        kind: TransactionKind,
        amount: Decimal,
        counterparty: str | None = None,
        timestamp: datetime | None = None,
    ) -> Transaction:
        return self.transactions.save(Transaction(
            account_id=account.id,
            kind=kind,
            amount=amount,
            counterparty=counterparty,
            timestamp=timestamp or utcnow(),
        ))
