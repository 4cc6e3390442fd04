"""
Custom column types.

Money is stored as a whole number of ten-thousandths in a
BIGINT column and handed to Python as a Decimal. Balance
arithmetic done in SQL (balance = balance - :amount) is then
integer arithmetic on every backend, including SQLite, which
has no exact decimal type.
"""

from decimal import Decimal

from sqlalchemy import BigInteger
from sqlalchemy.types import TypeDecorator

MONEY_DECIMAL_PLACES = 4

# Largest value a Money column holds: 10**18 - 1 units, inside
# the signed 64-bit range of BIGINT.
MAX_MONEY = Decimal("99999999999999.9999")


class Money(TypeDecorator):
    """Decimal in Python, integer ten-thousandths in the database."""

    impl = BigInteger
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        units = Decimal(value).scaleb(MONEY_DECIMAL_PLACES)
        if units != units.to_integral_value():
            raise ValueError(
                f"{value} has more than {MONEY_DECIMAL_PLACES} decimal places"
            )
        return int(units)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return Decimal(int(value)).scaleb(-MONEY_DECIMAL_PLACES)
