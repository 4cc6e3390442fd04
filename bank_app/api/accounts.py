"""
Account and ledger operation endpoints.

Every route here acts on the logged-in account. The API layer
is thin: it resolves the account from the session, delegates
to LedgerService and owns the commit.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from bank_app.api.deps import get_current_account
from bank_app.errors import BankingError
from bank_app.models.account import Account
from bank_app.models.base import get_db
from bank_app.services.ledger_service import LedgerService
from bank_app.schemas.account import AccountResponse
from bank_app.schemas.transaction import (
    DepositRequest,
    WithdrawalRequest,
    TransferRequest,
    TransactionResponse,
    OperationResponse,
)

router = APIRouter(tags=["Accounts"])


@router.get("/dashboard", response_model=AccountResponse)
def dashboard(account: Account = Depends(get_current_account)):
    """Current account details and balance."""
    return account


@router.post("/deposit", response_model=OperationResponse, status_code=201)
def deposit(
    request: DepositRequest,
    account: Account = Depends(get_current_account),
    db: Session = Depends(get_db),
):
    """Deposit money into the current account."""
    service = LedgerService(db)
    try:
        txn = service.deposit(account, request.amount)
        db.commit()
    except BankingError as e:
        db.rollback()
        raise HTTPException(status_code=e.status_code, detail=str(e))

    return OperationResponse(
        transaction=TransactionResponse.model_validate(txn),
        balance=account.balance,
    )


@router.post("/withdraw", response_model=OperationResponse, status_code=201)
def withdraw(
    request: WithdrawalRequest,
    account: Account = Depends(get_current_account),
    db: Session = Depends(get_db),
):
    """Withdraw money from the current account."""
    service = LedgerService(db)
    try:
        txn = service.withdraw(account, request.amount)
        db.commit()
    except BankingError as e:
        db.rollback()
        raise HTTPException(status_code=e.status_code, detail=str(e))

    return OperationResponse(
        transaction=TransactionResponse.model_validate(txn),
        balance=account.balance,
    )


@router.post("/transfer", response_model=OperationResponse, status_code=201)
def transfer(
    request: TransferRequest,
    account: Account = Depends(get_current_account),
    db: Session = Depends(get_db),
):
    """
    Transfer money to another account by username.

    Only the sender's side of the transfer is returned.
    """
    service = LedgerService(db)
    try:
        outgoing, _ = service.transfer(account, request.to_username, request.amount)
        db.commit()
    except BankingError as e:
        db.rollback()
        raise HTTPException(status_code=e.status_code, detail=str(e))

    return OperationResponse(
        transaction=TransactionResponse.model_validate(outgoing),
        balance=account.balance,
    )


@router.get("/transactions", response_model=list[TransactionResponse])
def transaction_history(
    account: Account = Depends(get_current_account),
    db: Session = Depends(get_db),
):
    """All transactions on the current account, oldest first."""
    service = LedgerService(db)
    try:
        return service.get_transaction_history(account)
    except BankingError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))
