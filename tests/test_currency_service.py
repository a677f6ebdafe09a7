"""Tests for CurrencyService."""

import pytest

from homefin.domain.currency import CurrencyService
from homefin.domain.currency_catalog import CurrencyInfo
from homefin.domain.errors import ValidationError


def test_get_or_create_uses_catalog(temp_db):
    service = CurrencyService(temp_db)

    currency = service.get_or_create(" thb ")

    assert currency.code == "THB"
    assert currency.is_active is True
    assert service.get_or_create("THB").id == currency.id


def test_get_or_create_unknown_code(temp_db):
    currency = CurrencyService(temp_db).get_or_create("XYZ")

    assert currency.name == "XYZ Currency"
    assert currency.symbol == "XYZ"


def test_injected_catalog(temp_db):
    service = CurrencyService(temp_db, catalog={"RUB": CurrencyInfo("Rouble", "р.")})

    assert service.get_or_create("RUB").name == "Rouble"


def test_get_or_create_empty_code(temp_db):
    with pytest.raises(ValidationError):
        CurrencyService(temp_db).get_or_create("  ")


def test_list_active(temp_db):
    service = CurrencyService(temp_db)
    service.get_or_create("USD")
    service.get_or_create("EUR")
    temp_db.create_currency(code="OLD", name="Old", symbol="o", is_active=False)

    assert [c.code for c in service.list_active()] == ["EUR", "USD"]
