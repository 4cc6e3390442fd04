"""
Pydantic schemas for account responses.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel


class AccountResponse(BaseModel):
    id: int
    username: str
    balance: Decimal
    created_at: datetime

    model_config = {"from_attributes": True}
