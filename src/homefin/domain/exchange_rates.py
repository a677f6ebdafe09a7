"""Exchange rates and currency conversion into the reference currency."""

import logging
import time
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Callable, Mapping, Optional

import requests

from homefin.config import Settings
from homefin.database.base import Database
from homefin.domain.entities import ExchangeRate

logger = logging.getLogger(__name__)

# Units of RUB per one unit of each currency, used when the API is unreachable
# and nothing has been cached yet. Rebased onto other reference currencies.
FALLBACK_RATES: dict[str, Decimal] = {
    "RUB": Decimal("1"),
    "USD": Decimal("95"),
    "EUR": Decimal("102"),
    "GBP": Decimal("118"),
    "GEL": Decimal("35"),
    "THB": Decimal("2.7"),
    "KRW": Decimal("0.073"),
    "CNY": Decimal("13.2"),
    "MYR": Decimal("20.2"),
    "RSD": Decimal("0.88"),
}

# After a failed fetch the served set is held this long before the API is tried again.
RETRY_AFTER_SECONDS = 60


class RateFetchError(RuntimeError):
    """Raised when the rate API cannot produce a usable rate set."""


class RateCache:
    """Holds the last fetched rate set together with its age."""

    KEY = "exchange_rates"

    def __init__(self, ttl_seconds: int = 60 * 60, clock: Callable[[], float] = time.monotonic):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[str, tuple[list[ExchangeRate], float, int]] = {}

    def get(self) -> Optional[list[ExchangeRate]]:
        """Return the cached rates regardless of age."""
        entry = self._entries.get(self.KEY)
        return list(entry[0]) if entry else None

    def is_fresh(self) -> bool:
        entry = self._entries.get(self.KEY)
        if entry is None:
            return False
        return self._clock() - entry[1] < entry[2]

    def get_fresh(self) -> Optional[list[ExchangeRate]]:
        """Return the cached rates only while they are younger than the TTL."""
        return self.get() if self.is_fresh() else None

    def set(self, rates: list[ExchangeRate], ttl_seconds: Optional[int] = None) -> None:
        """Store a rate set, fresh for ``ttl_seconds`` (the cache TTL by default)."""
        ttl = self.ttl_seconds if ttl_seconds is None else ttl_seconds
        self._entries[self.KEY] = (list(rates), self._clock(), ttl)

    def clear(self) -> None:
        self._entries.clear()


def fallback_rates(reference: str = "RUB") -> list[ExchangeRate]:
    """Return the fallback table expressed in ``reference`` units.

    A reference currency missing from the table only gets its identity rate.
    """
    base = FALLBACK_RATES.get(reference)
    if base is None:
        return [ExchangeRate(currency_code=reference, rate=Decimal("1"))]
    return [
        ExchangeRate(currency_code=code, rate=rate / base)
        for code, rate in FALLBACK_RATES.items()
    ]


class ExchangeRateService:
    """Service that fetches, caches and applies exchange rates.

    Rates are expressed as units of the reference currency per one unit of
    the given currency. Rate trouble never propagates to callers: a failed
    fetch falls back to the cached set, then to ``FALLBACK_RATES``, and the
    served set is held for ``RETRY_AFTER_SECONDS`` before the API is retried.
    """

    def __init__(
        self,
        db: Database,
        cache: Optional[RateCache] = None,
        settings: Optional[Settings] = None,
        session: Optional[requests.Session] = None,
    ):
        """Initialize exchange rate service.

        Args:
            db: Database instance, used to read the active currencies
            cache: Rate cache; a private one is created when omitted
            settings: Application settings
            session: HTTP session used for the rate API
        """
        self.db = db
        self.settings = settings or Settings()
        self.cache = cache or RateCache(ttl_seconds=self.settings.rates_ttl_seconds)
        self.session = session or requests.Session()

    @property
    def reference_currency(self) -> str:
        return self.settings.reference_currency

    def get_exchange_rates(self) -> list[ExchangeRate]:
        """Return the current rate set.

        Returns:
            List of exchange rates, always containing the reference currency
        """
        cached = self.cache.get_fresh()
        if cached is not None:
            return cached

        reference = self.reference_currency
        try:
            codes = self._active_codes()
            if not codes:
                return [ExchangeRate(currency_code=reference, rate=Decimal("1"))]
            rates = self._fetch_rates(codes)
        except RateFetchError as e:
            logger.error(f"Error fetching exchange rates: {e}")
            served = self.cache.get()
            if served is not None:
                logger.info("Using cached exchange rates")
            else:
                logger.warning("Using fallback exchange rates")
                served = fallback_rates(reference)
            self.cache.set(served, ttl_seconds=RETRY_AFTER_SECONDS)
            return served

        self.cache.set(rates)
        return rates

    def _active_codes(self) -> list[str]:
        try:
            currencies = self.db.list_currencies(active_only=True)
        except Exception as e:
            raise RateFetchError(f"Could not read active currencies: {e}") from e
        return [c.code for c in currencies if c.code != self.reference_currency]

    def _get_json(self, symbols: list[str]) -> Mapping[str, Decimal]:
        url = f"{self.settings.rates_url}/latest/{self.settings.pivot_currency}"
        try:
            response = self.session.get(
                url,
                params={"symbols": ",".join(symbols)},
                timeout=self.settings.rates_timeout_seconds,
            )
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as e:
            raise RateFetchError(f"Rate API request failed: {e}") from e
        except ValueError as e:
            raise RateFetchError(f"Rate API returned malformed JSON: {e}") from e

        rates = payload.get("rates") if isinstance(payload, dict) else None
        if not isinstance(rates, dict):
            raise RateFetchError("Rate API response missing rates")

        try:
            return {str(code).upper(): Decimal(str(value)) for code, value in rates.items()}
        except InvalidOperation as e:
            raise RateFetchError(f"Rate API returned a non-numeric rate: {e}") from e

    def _fetch_rates(self, codes: list[str]) -> list[ExchangeRate]:
        reference = self.reference_currency
        pivot_rates = self._get_json(codes)
        reference_rates = self._get_json([reference])

        reference_per_pivot = reference_rates.get(reference)
        if reference_per_pivot is None or reference_per_pivot <= 0:
            raise RateFetchError(f"Rate API response missing {reference}")

        fetched_at = datetime.now(timezone.utc).replace(tzinfo=None)
        rates = []
        for code in codes:
            pivot_rate = pivot_rates.get(code)
            if pivot_rate is None or pivot_rate <= 0:
                logger.debug(f"No rate returned for {code}")
                continue
            rates.append(
                ExchangeRate(
                    currency_code=code,
                    rate=reference_per_pivot / pivot_rate,
                    fetched_at=fetched_at,
                )
            )
        rates.append(ExchangeRate(currency_code=reference, rate=Decimal("1"), fetched_at=fetched_at))
        logger.debug(f"Fetched {len(rates)} exchange rates")
        return rates

    def get_rate(self, code: str) -> Optional[Decimal]:
        """Return the rate for a currency, or None if unknown."""
        code = code.upper()
        if code == self.reference_currency:
            return Decimal("1")
        for rate in self.get_exchange_rates():
            if rate.currency_code == code:
                return rate.rate
        return None

    def convert(self, amount: Decimal, from_code: str) -> Decimal:
        """Convert an amount into the reference currency.

        Args:
            amount: Amount in ``from_code``
            from_code: Currency code of the amount

        Returns:
            Amount in the reference currency; unchanged when no rate is known
        """
        amount = Decimal(amount)
        if from_code.upper() == self.reference_currency:
            return amount
        rate = self.get_rate(from_code)
        if rate is None:
            logger.warning(f"Exchange rate not found for {from_code}")
            return amount
        return amount * rate
