"""Factory functions for creating ledger engines."""

from collections.abc import Iterable
from typing import Optional

from ledgerkit.domain.chart import DEFAULT_CHART, ChartOfAccounts
from ledgerkit.domain.entities import AccountType
from ledgerkit.domain.ledger import LedgerEngine


def create_ledger_engine(
    accounts: Optional[Iterable[tuple[str, AccountType]]] = None,
) -> LedgerEngine:
    """Create an empty ledger engine.

    Args:
        accounts: (name, type) pairs for the chart of accounts. If None, the
            reference chart is used.

    Returns:
        LedgerEngine with every account at a zero balance

    Raises:
        DuplicateAccountError: If an account name is repeated
    """
    if accounts is None:
        accounts = DEFAULT_CHART
    return LedgerEngine(ChartOfAccounts(accounts))
