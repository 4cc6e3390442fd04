"""
Shared enumerations for database models.

Using Python enums mapped to database enums ensures that
only valid values can be stored.
"""

import enum


class TransactionKind(str, enum.Enum):
    """What a transaction did to its owning account."""
    DEPOSIT = "DEPOSIT"
    WITHDRAW = "WITHDRAW"
    TRANSFER_OUT = "TRANSFER_OUT"
    TRANSFER_IN = "TRANSFER_IN"


class Role(str, enum.Enum):
    """Authorities granted to an authenticated account."""
    USER = "USER"
