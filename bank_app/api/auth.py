"""
Registration, login and logout endpoints.

Registration and login are the only routes reachable without
a session. Login stores the account id and roles in the
signed session cookie; logout clears it.
"""

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from bank_app.api.deps import SESSION_ACCOUNT_KEY, SESSION_ROLES_KEY
from bank_app.errors import AccountNotFound, BankingError, InvalidCredentials
from bank_app.models.base import get_db
from bank_app.services.ledger_service import LedgerService
from bank_app.schemas.account import AccountResponse
from bank_app.schemas.auth import LoginRequest, RegisterRequest, SessionResponse

router = APIRouter(tags=["Auth"])


@router.post("/register", response_model=AccountResponse, status_code=201)
def register(
    request: RegisterRequest,
    db: Session = Depends(get_db),
):
    """Register a new account with a zero balance."""
    service = LedgerService(db)
    try:
        account = service.register_account(request.username, request.password)
        db.commit()
        return account
    except BankingError as e:
        db.rollback()
        raise HTTPException(status_code=e.status_code, detail=str(e))


@router.post("/login", response_model=SessionResponse)
def login(
    body: LoginRequest,
    request: Request,
    db: Session = Depends(get_db),
):
    """
    Authenticate and start a session.

    Unknown usernames and wrong passwords get the same answer
    so the endpoint cannot be used to discover accounts.
    """
    service = LedgerService(db)
    try:
        account = service.authenticate(body.username, body.password)
        credentials = service.load_credentials(account.username)
    except (AccountNotFound, InvalidCredentials):
        raise HTTPException(status_code=401, detail="Invalid username or password")
    except BankingError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))

    roles = sorted(role.value for role in credentials.roles)
    request.session.clear()
    request.session[SESSION_ACCOUNT_KEY] = credentials.account_id
    request.session[SESSION_ROLES_KEY] = roles

    return SessionResponse(
        account_id=credentials.account_id,
        username=credentials.username,
        roles=roles,
    )


@router.post("/logout")
def logout(request: Request):
    """End the session. Calling it without a session is harmless."""
    request.session.clear()
    return {"detail": "Logged out"}
