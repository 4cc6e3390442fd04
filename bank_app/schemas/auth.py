"""
Pydantic schemas for registration, login and credential lookup.
"""

from pydantic import BaseModel, Field

from bank_app.models.enums import Role


class RegisterRequest(BaseModel):
    username: str = Field(
        min_length=3, max_length=50, pattern=r"^[A-Za-z0-9_.-]+$"
    )
    password: str = Field(min_length=8, max_length=72)


class LoginRequest(BaseModel):
    username: str = Field(min_length=1, max_length=50)
    password: str = Field(min_length=1, max_length=72)


class Credentials(BaseModel):
    """
    What the access layer needs to authenticate a session.

    Returned by the credential lookup; the password hash never
    leaves the server.
    """
    account_id: int
    username: str
    password_hash: str
    roles: frozenset[Role]

    model_config = {"frozen": True}


class SessionResponse(BaseModel):
    account_id: int
    username: str
    roles: list[Role]
