"""Tests for LedgerService enquire, list, modify and close operations."""

import logging
import sqlite3
import pytest

from src.models.account import Account, AccountType
from src.models.exceptions import AccountNotFoundError, InvalidAmountError, ValidationError
from src.repositories.account_store import AccountStore
from src.repositories.storage_repo import StorageRepository
from src.services.ledger_service import LedgerService


@pytest.fixture
def in_memory_db():
    """Create an in-memory SQLite database for testing."""
    conn = sqlite3.connect(":memory:")
    yield conn
    conn.close()


@pytest.fixture
def store(in_memory_db):
    """Create an AccountStore over a fresh database."""
    storage = StorageRepository(in_memory_db)
    storage.create_table()
    return AccountStore(storage)


@pytest.fixture
def ledger(store):
    """Create a LedgerService with three accounts."""
    service = LedgerService(store)
    service.create(101, "Asha", AccountType.SAVINGS, 500)
    service.create(202, "Ravi", AccountType.CURRENT, 3000)
    service.create(303, "Mira", AccountType.SAVINGS, 1200)
    return service


# ============================================================================
# Enquire / list
# ============================================================================


def test_enquire_returns_account(ledger):
    assert ledger.enquire(202) == Account(202, "Ravi", AccountType.CURRENT, 3000)


def test_enquire_not_found(ledger):
    with pytest.raises(AccountNotFoundError) as exc_info:
        ledger.enquire(404)

    assert "Account Not Found." in str(exc_info.value)


def test_enquire_does_not_write(ledger, store):
    """Read-only operations never save."""
    saves = []
    store.subscribe(saves.append)

    ledger.enquire(101)
    ledger.list_all()

    assert saves == []


def test_list_all(ledger):
    assert [a.account_no for a in ledger.list_all()] == [101, 202, 303]


def test_list_all_empty(store):
    assert LedgerService(store).list_all() == []


# ============================================================================
# Modify
# ============================================================================


def test_modify_replaces_fields(ledger):
    """Name, type and balance are replaced wholesale."""
    account = ledger.modify(101, "Asha Rao", AccountType.CURRENT, 8000)

    assert account == Account(101, "Asha Rao", AccountType.CURRENT, 8000)
    assert ledger.enquire(101) == account


def test_modify_keeps_position(ledger):
    ledger.modify(202, "Ravi K", AccountType.CURRENT, 3000)
    assert [a.account_no for a in ledger.list_all()] == [101, 202, 303]


def test_modify_below_floor_with_override(ledger, caplog):
    """The default administrative override accepts any balance and logs it."""
    with caplog.at_level(logging.WARNING):
        account = ledger.modify(101, "Asha", AccountType.SAVINGS, 0)

    assert account.balance == 0
    assert ledger.enquire(101).balance == 0
    assert "Administrative override" in caplog.text


def test_modify_below_floor_without_override(ledger):
    """Without the override the floor for the new type applies."""
    with pytest.raises(ValidationError):
        ledger.modify(303, "Mira", AccountType.CURRENT, 999, admin_override=False)

    assert ledger.enquire(303) == Account(303, "Mira", AccountType.SAVINGS, 1200)


def test_modify_at_floor_without_override(ledger):
    account = ledger.modify(303, "Mira", AccountType.CURRENT, 1000, admin_override=False)
    assert account.balance == 1000


def test_modify_not_found(ledger, store):
    before = store.load()

    with pytest.raises(AccountNotFoundError):
        ledger.modify(404, "Nobody", AccountType.SAVINGS, 500)

    assert store.load() == before


def test_modify_blank_name(ledger):
    with pytest.raises(ValidationError):
        ledger.modify(101, " ", AccountType.SAVINGS, 500)


# ============================================================================
# Close
# ============================================================================


def test_close_removes_exactly_one(ledger):
    closed = ledger.close(202)

    assert closed.account_no == 202
    assert [a.account_no for a in ledger.list_all()] == [101, 303]


def test_close_not_found_changes_nothing(ledger, store):
    """Closing an absent account fails and leaves the collection intact."""
    before = store.load()

    with pytest.raises(AccountNotFoundError):
        ledger.close(404)

    assert store.load() == before


def test_close_twice(ledger):
    ledger.close(101)
    with pytest.raises(AccountNotFoundError):
        ledger.close(101)


def test_closed_number_can_be_reused(ledger):
    ledger.close(101)
    account = ledger.create(101, "New Holder", AccountType.CURRENT, 1000)
    assert ledger.enquire(101) == account


@pytest.mark.parametrize("balance", [750.25, "750", None])
def test_modify_non_integer_balance(ledger, store, balance):
    """A rejected balance leaves every account readable and unchanged."""
    before = store.load()

    with pytest.raises(InvalidAmountError):
        ledger.modify(202, "Ravi", AccountType.CURRENT, balance)

    assert store.load() == before
    assert len(ledger.list_all()) == 3


def test_modify_non_integer_account_no(ledger, store):
    before = store.load()

    with pytest.raises(ValidationError):
        ledger.modify("202", "Ravi", AccountType.CURRENT, 3000)

    assert store.load() == before
