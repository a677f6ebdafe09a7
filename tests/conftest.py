"""Shared pytest fixtures for homefin tests."""

import tempfile
import os
from decimal import Decimal
from pathlib import Path
import pytest
import requests

from homefin.config import Settings
from homefin.database.factories import create_sqlite_database
from homefin.domain.account import AccountService
from homefin.domain.csv_import import CSVImportService
from homefin.domain.entities import AccountType
from homefin.domain.exchange_rates import ExchangeRateService, RateCache
from homefin.domain.group import GroupService
from homefin.domain.operations import OperationService
from homefin.domain.transaction import TransactionService
from homefin.domain.transfer import TransferService
from homefin.domain.user import UserService


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, payload=None, status_code=200, malformed=False):
        self.payload = payload
        self.status_code = status_code
        self.malformed = malformed

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        if self.malformed:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self.payload


class FakeSession:
    """HTTP session answering rate requests from a fixed per-USD table."""

    def __init__(self, usd_rates=None, error=None, status_code=200, malformed=False):
        self.usd_rates = usd_rates or {}
        self.error = error
        self.status_code = status_code
        self.malformed = malformed
        self.calls = []

    def get(self, url, params=None, timeout=None):
        self.calls.append((url, dict(params or {}), timeout))
        if self.error is not None:
            raise self.error
        symbols = (params or {}).get("symbols", "").split(",")
        rates = {code: self.usd_rates[code] for code in symbols if code in self.usd_rates}
        return FakeResponse({"base": "USD", "rates": rates}, self.status_code, self.malformed)


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start=1000.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def user_service(temp_db):
    """Create a UserService with a temporary database."""
    return UserService(temp_db)


@pytest.fixture
def group_service(temp_db):
    """Create a GroupService with a temporary database."""
    return GroupService(temp_db)


@pytest.fixture
def account_service(temp_db):
    """Create an AccountService with a temporary database."""
    return AccountService(temp_db)


@pytest.fixture
def transaction_service(temp_db):
    """Create a TransactionService with a temporary database."""
    return TransactionService(temp_db)


@pytest.fixture
def transfer_service(temp_db):
    """Create a TransferService with a temporary database."""
    return TransferService(temp_db)


@pytest.fixture
def operation_service(temp_db):
    """Create an OperationService with a temporary database."""
    return OperationService(temp_db)


@pytest.fixture
def csv_import_service(temp_db):
    """Create a CSVImportService with a temporary database."""
    return CSVImportService(temp_db)


@pytest.fixture
def sample_user(user_service):
    """Create a sample user with a default group."""
    user_id = user_service.create_user(email="anna@example.com", name="Anna")
    return user_service.get_user(user_id)


@pytest.fixture
def other_user(user_service):
    """Create a second user."""
    user_id = user_service.create_user(email="boris@example.com", name="Boris")
    return user_service.get_user(user_id)


@pytest.fixture
def sample_group(group_service, sample_user):
    """Return the sample user's default group ID."""
    return group_service.get_default_group(sample_user.id).id


@pytest.fixture
def sample_accounts(account_service, sample_user, sample_group):
    """Create RUB cash, RUB bank and USD bank accounts."""
    wallet_id = account_service.create_account(
        sample_user.id, sample_group, "Wallet", AccountType.CASH, "RUB", Decimal("100")
    )
    savings_id = account_service.create_account(
        sample_user.id, sample_group, "Savings", AccountType.BANK, "RUB", Decimal("0")
    )
    usd_id = account_service.create_account(
        sample_user.id, sample_group, "USD card", AccountType.BANK, "USD", Decimal("0")
    )
    return {
        "wallet": account_service.get_account(wallet_id),
        "savings": account_service.get_account(savings_id),
        "usd": account_service.get_account(usd_id),
    }


@pytest.fixture
def fake_session():
    """HTTP session with 95 RUB and 0.9 EUR per USD."""
    return FakeSession(
        usd_rates={"RUB": 95, "USD": 1, "EUR": 0.9, "GEL": 2.7}
    )


@pytest.fixture
def fake_clock():
    """Controllable clock for rate cache tests."""
    return FakeClock()


@pytest.fixture
def rate_service(temp_db, fake_session, fake_clock):
    """Create an ExchangeRateService backed by the fake HTTP session."""
    settings = Settings()
    cache = RateCache(ttl_seconds=settings.rates_ttl_seconds, clock=fake_clock)
    return ExchangeRateService(temp_db, cache=cache, settings=settings, session=fake_session)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def make_rate_service(temp_db, fake_clock):
    """Build ExchangeRateService instances around custom fake sessions.

    Call with FakeSession keyword arguments, e.g. ``error=...`` or
    ``status_code=500``; pass ``cache=`` to share a cache between services.
    """

    def _make(cache=None, settings=None, **session_kwargs):
        settings = settings or Settings()
        cache = cache or RateCache(ttl_seconds=settings.rates_ttl_seconds, clock=fake_clock)
        session = FakeSession(**session_kwargs)
        return ExchangeRateService(temp_db, cache=cache, settings=settings, session=session)

    return _make
