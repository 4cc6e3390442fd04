"""
Bank App — FastAPI Application.

This is the entry point for the application. Logging, the
session middleware and all routers are set up here.
"""

from fastapi import FastAPI, Request
from starlette.middleware.sessions import SessionMiddleware

from bank_app.config import get_settings
from bank_app.logging_config import setup_logging
from bank_app.api.health import router as health_router
from bank_app.api.auth import router as auth_router
from bank_app.api.accounts import router as accounts_router

settings = get_settings()

setup_logging(settings.LOG_LEVEL)

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Registration, deposits, withdrawals, transfers and history",
)

app.add_middleware(
    SessionMiddleware,
    secret_key=settings.SECRET_KEY,
    session_cookie=settings.SESSION_COOKIE,
    max_age=settings.SESSION_MAX_AGE,
    same_site="lax",
    https_only=settings.ENVIRONMENT == "production",
)


@app.middleware("http")
async def frame_options(request: Request, call_next):
    """Only allow the app to be framed by its own origin."""
    response = await call_next(request)
    response.headers["X-Frame-Options"] = "SAMEORIGIN"
    return response


# Register routers
app.include_router(health_router)
app.include_router(auth_router)
app.include_router(accounts_router)
