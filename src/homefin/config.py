"""Runtime settings for homefin.

Values come from environment variables, with CLI options layered on top
by the command group.
"""

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

DEFAULT_RATES_URL = "https://api.exchangerate-api.com/v4"


@dataclass(frozen=True)
class Settings:
    """Application settings.

    Attributes:
        database_path: SQLite database file path
        reference_currency: Currency all aggregates are converted into
        pivot_currency: Base currency requested from the rate API
        rates_url: Rate API base URL
        rates_ttl_seconds: How long a fetched rate set stays fresh
        rates_timeout_seconds: HTTP timeout for rate API calls
    """

    database_path: Optional[str] = None
    reference_currency: str = "RUB"
    pivot_currency: str = "USD"
    rates_url: str = DEFAULT_RATES_URL
    rates_ttl_seconds: int = 60 * 60
    rates_timeout_seconds: float = 10.0

    @classmethod
    def from_env(cls, environ: Optional[dict[str, str]] = None) -> "Settings":
        """Build settings from ``HOMEFIN_*`` environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``

        Returns:
            Settings instance

        Raises:
            ValueError: If a numeric variable cannot be parsed
        """
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            database_path=env.get("HOMEFIN_DB_PATH"),
            reference_currency=env.get(
                "HOMEFIN_REFERENCE_CURRENCY", defaults.reference_currency
            ).upper(),
            pivot_currency=env.get("HOMEFIN_PIVOT_CURRENCY", defaults.pivot_currency).upper(),
            rates_url=env.get("HOMEFIN_RATES_URL", defaults.rates_url).rstrip("/"),
            rates_ttl_seconds=int(env.get("HOMEFIN_RATES_TTL", defaults.rates_ttl_seconds)),
            rates_timeout_seconds=float(
                env.get("HOMEFIN_RATES_TIMEOUT", defaults.rates_timeout_seconds)
            ),
        )

    def with_overrides(self, **overrides) -> "Settings":
        """Return a copy with non-None overrides applied."""
        values = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **values)

    def resolve_database_path(self) -> str:
        """Return the configured database path, defaulting to ~/.homefin/homefin.db."""
        if self.database_path is not None:
            return self.database_path
        db_dir = Path.home() / ".homefin"
        db_dir.mkdir(exist_ok=True)
        return str(db_dir / "homefin.db")
