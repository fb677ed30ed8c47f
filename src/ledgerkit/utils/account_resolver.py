"""Utility for resolving user-typed account names."""

from ledgerkit.domain import errors
from ledgerkit.domain.entities import Account
from ledgerkit.domain.ledger import LedgerEngine


def resolve_account(engine: LedgerEngine, account: str) -> Account:
    """Resolve an account name to a chart account.

    An exact match wins; otherwise the name is matched case-insensitively.

    Args:
        engine: LedgerEngine instance
        account: Account name as typed by the user

    Returns:
        Snapshot of the matching account

    Raises:
        UnknownAccountError: If no account matches
    """
    name = account.strip()
    accounts = engine.get_chart_of_accounts()

    for acc in accounts:
        if acc.name == name:
            return acc

    folded = name.casefold()
    for acc in accounts:
        if acc.name.casefold() == folded:
            return acc

    raise errors.UnknownAccountError(errors.account_not_found(name))
