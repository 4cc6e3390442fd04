"""
Request dependencies shared by the routers.

The session cookie holds the account id and granted roles
written at login. Every protected endpoint depends on
get_current_account, which turns a missing or stale session
into a 401.
"""

from fastapi import Depends, HTTPException, Request
from sqlalchemy.orm import Session

from bank_app.errors import AccountNotFound, BankingError
from bank_app.models.account import Account
from bank_app.models.base import get_db
from bank_app.models.enums import Role
from bank_app.services.ledger_service import LedgerService

SESSION_ACCOUNT_KEY = "account_id"
SESSION_ROLES_KEY = "roles"


def get_current_account(
    request: Request,
    db: Session = Depends(get_db),
) -> Account:
    account_id = request.session.get(SESSION_ACCOUNT_KEY)
    roles = request.session.get(SESSION_ROLES_KEY, [])
    if account_id is None or Role.USER.value not in roles:
        raise HTTPException(status_code=401, detail="Not authenticated")

    try:
        return LedgerService(db).get_account(account_id)
    except AccountNotFound:
        request.session.clear()
        raise HTTPException(status_code=401, detail="Not authenticated")
    except BankingError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))
