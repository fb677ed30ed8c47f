"""Chart of accounts."""

import logging
from collections.abc import Iterable, Iterator
from typing import Optional

from ledgerkit.domain import errors
from ledgerkit.domain.entities import Account, AccountType

logger = logging.getLogger(__name__)

# Reference chart: (account name, account type), in report order
DEFAULT_CHART = [
    ("Cash", AccountType.ASSET),
    ("Equipment", AccountType.ASSET),
    ("Accounts Receivable", AccountType.ASSET),
    ("Prepaid Expenses", AccountType.ASSET),
    ("Inventory", AccountType.ASSET),
    ("Accounts Payable", AccountType.LIABILITY),
    ("Notes Payable", AccountType.LIABILITY),
    ("Owner's Capital", AccountType.EQUITY),
    ("Sales Revenue", AccountType.INCOME),
    ("Service Revenue", AccountType.INCOME),
    ("Cost of Goods Sold", AccountType.EXPENSE),
    ("Rent Expense", AccountType.EXPENSE),
    ("Salaries Expense", AccountType.EXPENSE),
    ("Utilities Expense", AccountType.EXPENSE),
]


class ChartOfAccounts:
    """Ordered collection of accounts keyed by name.

    The chart owns its Account objects. Insertion order is kept for report
    layout; names must be unique.
    """

    def __init__(self, accounts: Iterable[tuple[str, AccountType]] = ()):
        """Initialize chart.

        Args:
            accounts: (name, type) pairs in display order

        Raises:
            DuplicateAccountError: If a name appears twice
        """
        self._accounts: dict[str, Account] = {}
        for name, account_type in accounts:
            self.add_account(name, account_type)

    def add_account(self, name: str, account_type: AccountType) -> Account:
        """Add a zero-balance account to the end of the chart.

        Raises:
            DuplicateAccountError: If an account with this name exists
        """
        if name in self._accounts:
            raise errors.DuplicateAccountError(errors.duplicate_account(name))
        account = Account(name=name, type=account_type)
        self._accounts[name] = account
        logger.debug("Added account %s", account)
        return account

    def get(self, name: str) -> Optional[Account]:
        return self._accounts.get(name)

    def require(self, account: Account | str) -> Account:
        """Return the chart's own account for a name or account object.

        An Account argument must match a chart account on both name and type.

        Raises:
            UnknownAccountError: If the account is not in the chart
        """
        name = account.name if isinstance(account, Account) else account
        found = self._accounts.get(name)
        if found is None:
            raise errors.UnknownAccountError(errors.account_not_found(name))
        if isinstance(account, Account) and account.type is not found.type:
            raise errors.UnknownAccountError(
                errors.account_type_mismatch(
                    name, account.type.label, found.type.label
                )
            )
        return found

    def of_type(self, account_type: AccountType) -> list[Account]:
        return [acc for acc in self._accounts.values() if acc.type is account_type]

    def __contains__(self, name: object) -> bool:
        return name in self._accounts

    def __iter__(self) -> Iterator[Account]:
        return iter(self._accounts.values())

    def __len__(self) -> int:
        return len(self._accounts)


def create_default_chart() -> ChartOfAccounts:
    """Create a chart holding the reference accounts, all at zero."""
    return ChartOfAccounts(DEFAULT_CHART)
