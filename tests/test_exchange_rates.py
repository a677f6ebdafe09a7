"""Tests for exchange rate fetching, caching and conversion."""

import logging
import pytest
from decimal import Decimal

import requests

from homefin.config import Settings
from homefin.domain.currency import CurrencyService
from homefin.domain.exchange_rates import (
    FALLBACK_RATES,
    RETRY_AFTER_SECONDS,
    ExchangeRateService,
    RateCache,
)
from homefin.utils.amount_parser import to_money


@pytest.fixture
def active_currencies(temp_db):
    """Create RUB, USD and EUR currencies."""
    service = CurrencyService(temp_db)
    for code in ("RUB", "USD", "EUR"):
        service.get_or_create(code)


def as_dict(rates):
    return {r.currency_code: r.rate for r in rates}


class TestRateCache:
    def test_empty_cache(self, fake_clock):
        cache = RateCache(ttl_seconds=60, clock=fake_clock)

        assert cache.get() is None
        assert cache.get_fresh() is None
        assert cache.is_fresh() is False

    def test_entry_expires_after_ttl(self, fake_clock):
        cache = RateCache(ttl_seconds=60, clock=fake_clock)
        cache.set([])

        fake_clock.advance(59)
        assert cache.get_fresh() == []

        fake_clock.advance(1)
        assert cache.get_fresh() is None
        assert cache.get() == []

    def test_entry_with_own_ttl(self, fake_clock):
        cache = RateCache(ttl_seconds=3600, clock=fake_clock)
        cache.set([], ttl_seconds=60)

        fake_clock.advance(60)
        assert cache.get_fresh() is None
        assert cache.get() == []


class TestGetExchangeRates:
    """Tests for ExchangeRateService.get_exchange_rates."""

    def test_only_reference_currency_needs_no_request(self, rate_service, fake_session, temp_db):
        CurrencyService(temp_db).get_or_create("RUB")

        rates = rate_service.get_exchange_rates()

        assert as_dict(rates) == {"RUB": Decimal("1")}
        assert fake_session.calls == []

    def test_rates_derived_through_pivot(self, rate_service, fake_session, active_currencies):
        rates = as_dict(rate_service.get_exchange_rates())

        assert rates["RUB"] == Decimal("1")
        assert rates["USD"] == Decimal("95")
        assert rates["EUR"].quantize(Decimal("0.0001")) == Decimal("105.5556")

        assert len(fake_session.calls) == 2
        url, params, timeout = fake_session.calls[0]
        assert url == "https://api.exchangerate-api.com/v4/latest/USD"
        assert params == {"symbols": "EUR,USD"}
        assert timeout == 10.0
        assert fake_session.calls[1][1] == {"symbols": "RUB"}

    def test_fresh_cache_is_reused(self, rate_service, fake_session, fake_clock, active_currencies):
        first = rate_service.get_exchange_rates()
        fake_clock.advance(3599)
        second = rate_service.get_exchange_rates()

        assert first == second
        assert len(fake_session.calls) == 2

    def test_stale_cache_is_refreshed(self, rate_service, fake_session, fake_clock, active_currencies):
        rate_service.get_exchange_rates()
        fake_clock.advance(3600)
        rate_service.get_exchange_rates()

        assert len(fake_session.calls) == 4

    def test_unreachable_api_without_cache_uses_fallback(self, make_rate_service, active_currencies):
        service = make_rate_service(error=requests.ConnectionError("unreachable"))

        rates = as_dict(service.get_exchange_rates())

        assert rates == FALLBACK_RATES
        assert rates["USD"] == Decimal("95")

    def test_unreachable_api_returns_stale_cache(
        self, make_rate_service, fake_clock, active_currencies
    ):
        cache = RateCache(ttl_seconds=3600, clock=fake_clock)
        healthy = make_rate_service(cache=cache, usd_rates={"RUB": 90, "USD": 1, "EUR": 0.9})
        fetched = healthy.get_exchange_rates()

        fake_clock.advance(7200)
        broken = make_rate_service(cache=cache, error=requests.Timeout("slow"))

        assert broken.get_exchange_rates() == fetched
        assert as_dict(fetched)["USD"] == Decimal("90")

    def test_http_error_uses_fallback(self, make_rate_service, active_currencies):
        service = make_rate_service(usd_rates={"RUB": 95}, status_code=503)

        assert as_dict(service.get_exchange_rates()) == FALLBACK_RATES

    def test_malformed_json_uses_fallback(self, make_rate_service, active_currencies):
        service = make_rate_service(usd_rates={"RUB": 95}, malformed=True)

        assert as_dict(service.get_exchange_rates()) == FALLBACK_RATES

    def test_missing_rates_map_uses_fallback(self, temp_db, active_currencies):
        class NoRatesResponse:
            def raise_for_status(self):
                pass

            def json(self):
                return {"result": "error"}

        class NoRatesSession:
            def get(self, url, params=None, timeout=None):
                return NoRatesResponse()

        service = ExchangeRateService(temp_db, session=NoRatesSession())

        assert as_dict(service.get_exchange_rates()) == FALLBACK_RATES

    def test_failure_is_logged(self, make_rate_service, active_currencies, caplog):
        service = make_rate_service(error=requests.ConnectionError("unreachable"))

        with caplog.at_level(logging.WARNING, logger="homefin.domain.exchange_rates"):
            service.get_exchange_rates()

        assert "Error fetching exchange rates" in caplog.text
        assert "Using fallback exchange rates" in caplog.text

    def test_reference_currency_from_settings(self, make_rate_service, temp_db):
        CurrencyService(temp_db).get_or_create("EUR")
        service = make_rate_service(
            settings=Settings(reference_currency="EUR"),
            usd_rates={"RUB": 95, "EUR": 0.9},
        )

        assert as_dict(service.get_exchange_rates()) == {"EUR": Decimal("1")}


class TestConvert:
    """Tests for ExchangeRateService.convert."""

    def test_reference_currency_is_identity(self, rate_service, fake_session, active_currencies):
        assert rate_service.convert(Decimal("123.45"), "RUB") == Decimal("123.45")
        assert rate_service.convert(Decimal("123.45"), "rub") == Decimal("123.45")
        assert fake_session.calls == []

    def test_converts_with_rate(self, rate_service, active_currencies):
        assert rate_service.convert(Decimal("100"), "USD") == Decimal("9500")

    def test_missing_rate_returns_amount_and_warns(self, rate_service, active_currencies, caplog):
        with caplog.at_level(logging.WARNING, logger="homefin.domain.exchange_rates"):
            result = rate_service.convert(Decimal("10"), "XYZ")

        assert result == Decimal("10")
        assert "Exchange rate not found for XYZ" in caplog.text

    def test_never_raises_when_api_is_down(self, make_rate_service, active_currencies):
        service = make_rate_service(error=requests.ConnectionError("unreachable"))

        assert service.convert(Decimal("2"), "EUR") == Decimal("204")
        assert service.get_rate("USD") == Decimal("95")


class TestRateOutage:
    """Behaviour while the rate API or the database is failing."""

    def test_failed_fetch_is_not_retried_within_window(
        self, make_rate_service, fake_clock, active_currencies
    ):
        service = make_rate_service(error=requests.ConnectionError("unreachable"))

        for _ in range(5):
            service.convert(Decimal("1"), "USD")
        assert len(service.session.calls) == 1

        fake_clock.advance(RETRY_AFTER_SECONDS)
        service.convert(Decimal("1"), "USD")
        assert len(service.session.calls) == 2

    def test_stale_cache_is_held_after_failure(
        self, make_rate_service, fake_clock, active_currencies
    ):
        cache = RateCache(ttl_seconds=3600, clock=fake_clock)
        make_rate_service(cache=cache, usd_rates={"RUB": 90, "USD": 1, "EUR": 0.9}).get_exchange_rates()
        fake_clock.advance(7200)
        broken = make_rate_service(cache=cache, error=requests.Timeout("slow"))

        broken.get_exchange_rates()
        broken.get_exchange_rates()

        assert len(broken.session.calls) == 1
        assert broken.get_rate("USD") == Decimal("90")

    def test_recovers_after_window(self, temp_db, make_rate_service, fake_clock, active_currencies):
        cache = RateCache(ttl_seconds=3600, clock=fake_clock)
        make_rate_service(cache=cache, error=requests.ConnectionError("down")).get_exchange_rates()
        fake_clock.advance(RETRY_AFTER_SECONDS)
        healthy = make_rate_service(cache=cache, usd_rates={"RUB": 90, "USD": 1, "EUR": 0.9})

        assert healthy.get_rate("USD") == Decimal("90")
        assert len(healthy.session.calls) == 2

    def test_fallback_rebased_to_reference_currency(self, make_rate_service, active_currencies):
        service = make_rate_service(
            settings=Settings(reference_currency="EUR"),
            error=requests.ConnectionError("unreachable"),
        )

        rates = as_dict(service.get_exchange_rates())

        assert rates["EUR"] == Decimal("1")
        assert rates["USD"] == Decimal("95") / Decimal("102")
        assert to_money(service.convert(Decimal("1"), "USD")) == Decimal("0.93")
        assert to_money(service.convert(Decimal("102"), "RUB")) == Decimal("1.00")

    def test_fallback_for_reference_outside_table(self, make_rate_service, active_currencies):
        service = make_rate_service(
            settings=Settings(reference_currency="CHF"),
            error=requests.ConnectionError("unreachable"),
        )

        assert as_dict(service.get_exchange_rates()) == {"CHF": Decimal("1")}
        assert service.convert(Decimal("5"), "USD") == Decimal("5")

    def test_database_failure_uses_fallback(self, fake_session, caplog):
        class BrokenDatabase:
            def list_currencies(self, active_only=True):
                raise RuntimeError("database is locked")

        service = ExchangeRateService(BrokenDatabase(), session=fake_session)

        with caplog.at_level(logging.WARNING, logger="homefin.domain.exchange_rates"):
            rates = as_dict(service.get_exchange_rates())

        assert rates == FALLBACK_RATES
        assert fake_session.calls == []
        assert "Could not read active currencies: database is locked" in caplog.text
