"""
Domain errors for banking operations.

Services raise these instead of generic exceptions so callers
can tell a business-rule rejection from a storage outage. Each
error carries the HTTP status the API layer answers with.
"""


class BankingError(Exception):
    """Base class for every error a ledger operation can raise."""

    status_code: int = 400


class DuplicateAccount(BankingError):
    """Raised when registering a username that is already taken."""

    status_code = 409


class AccountNotFound(BankingError):
    """Raised when a username or id does not resolve to an account."""

    status_code = 404


class InvalidCredentials(BankingError):
    """Raised when a presented password does not match the stored hash."""

    status_code = 401


class InsufficientFunds(BankingError):
    """
    Raised when a withdrawal or transfer would drive the
    balance below zero.
    """

    status_code = 400


class RecipientNotFound(BankingError):
    """Raised when the transfer recipient's username does not exist."""

    status_code = 404


class InvalidAmount(BankingError):
    """Raised for zero, negative, non-finite or over-precise amounts."""

    status_code = 400


class SelfTransfer(BankingError):
    """Raised when the sender and recipient of a transfer are the same."""

    status_code = 400


class StorageUnavailable(BankingError):
    """Raised when the database cannot be reached."""

    status_code = 503
