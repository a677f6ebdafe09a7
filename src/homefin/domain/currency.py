"""Currency domain service."""

import logging
from typing import Mapping

from homefin.database.base import Database
from homefin.domain.currency_catalog import CURRENCY_CATALOG, CurrencyInfo, currency_info
from homefin.domain.entities import Currency
from homefin.domain.errors import ValidationError

logger = logging.getLogger(__name__)


class CurrencyService:
    """Service for looking up and creating currencies."""

    def __init__(self, db: Database, catalog: Mapping[str, CurrencyInfo] = CURRENCY_CATALOG):
        """Initialize currency service.

        Args:
            db: Database instance
            catalog: Code to display metadata table used for new currencies
        """
        self.db = db
        self.catalog = catalog

    def list_active(self) -> list[Currency]:
        """List active currencies ordered by code."""
        return self.db.list_currencies(active_only=True)

    def get_or_create(self, code: str) -> Currency:
        """Return the currency for a code, creating it from the catalogue if missing.

        Args:
            code: Currency code, any case

        Returns:
            Currency entity

        Raises:
            ValidationError: If code is empty
        """
        normalized = code.strip().upper() if code else ""
        if not normalized:
            raise ValidationError("Currency code cannot be empty")

        existing = self.db.get_currency_by_code(normalized)
        if existing is not None:
            return existing

        info = currency_info(normalized, self.catalog)
        currency_id = self.db.create_currency(code=normalized, name=info.name, symbol=info.symbol)
        logger.info(f"Created currency {normalized} ({info.name})")
        return self.db.get_currency(currency_id)
