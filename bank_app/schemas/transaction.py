"""
Pydantic schemas for ledger operations.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from bank_app.models.enums import TransactionKind
from bank_app.models.types import MAX_MONEY


class DepositRequest(BaseModel):
    amount: Decimal = Field(gt=0, le=MAX_MONEY, max_digits=18, decimal_places=4)


class WithdrawalRequest(BaseModel):
    amount: Decimal = Field(gt=0, le=MAX_MONEY, max_digits=18, decimal_places=4)


class TransferRequest(BaseModel):
    to_username: str = Field(min_length=1, max_length=50)
    amount: Decimal = Field(gt=0, le=MAX_MONEY, max_digits=18, decimal_places=4)


class TransactionResponse(BaseModel):
    id: int
    account_id: int
    kind: TransactionKind
    amount: Decimal
    counterparty: str | None
    description: str
    timestamp: datetime

    model_config = {"from_attributes": True}


class OperationResponse(BaseModel):
    """Result of a deposit, withdrawal or transfer for the caller."""
    transaction: TransactionResponse
    balance: Decimal
