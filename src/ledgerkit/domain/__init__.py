"""Domain layer for ledgerkit application."""

from ledgerkit.domain.chart import DEFAULT_CHART, ChartOfAccounts
from ledgerkit.domain.entities import (
    Account,
    AccountType,
    BalanceSheet,
    JournalEntry,
    LedgerLine,
    Transaction,
)
from ledgerkit.domain.factories import create_ledger_engine
from ledgerkit.domain.ledger import LedgerEngine

__all__ = [
    "Account",
    "AccountType",
    "BalanceSheet",
    "ChartOfAccounts",
    "DEFAULT_CHART",
    "JournalEntry",
    "LedgerEngine",
    "LedgerLine",
    "Transaction",
    "create_ledger_engine",
]
