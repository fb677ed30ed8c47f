"""Shared pytest fixtures for ledgerkit tests."""

from datetime import date
from decimal import Decimal

import pytest

from ledgerkit.domain.entities import AccountType
from ledgerkit.domain.factories import create_ledger_engine


@pytest.fixture
def engine():
    """Create an empty ledger over the reference chart of accounts."""
    return create_ledger_engine()


@pytest.fixture
def small_engine():
    """Create a ledger with one account of each type."""
    return create_ledger_engine(
        [
            ("Cash", AccountType.ASSET),
            ("Loan", AccountType.LIABILITY),
            ("Capital", AccountType.EQUITY),
            ("Sales", AccountType.INCOME),
            ("Rent", AccountType.EXPENSE),
        ]
    )


@pytest.fixture
def populated_engine(engine):
    """Ledger holding the owner investment and rent payment."""
    engine.record_transaction(
        date(2024, 1, 1), "Owner investment", "Cash", "Owner's Capital", Decimal("10000.00")
    )
    engine.record_transaction(
        date(2024, 1, 2), "Pay rent", "Rent Expense", "Cash", Decimal("2000.00")
    )
    return engine


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
