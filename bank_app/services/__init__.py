"""Business logic services."""

from bank_app.services.ledger_service import LedgerService

__all__ = ["LedgerService"]
