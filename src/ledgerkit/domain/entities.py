"""Domain model entities for ledgerkit.

These are plain data classes representing bookkeeping concepts. Everything
except Account is immutable; an Account's balance only changes through
update_balance while the engine holds its lock.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import (
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    Context,
    Decimal,
    DivisionByZero,
    Inexact,
    InvalidOperation,
    Overflow,
    localcontext,
)
from enum import Enum
from typing import Optional

# Ledger arithmetic never rounds; a result that cannot be held exactly raises
EXACT_CONTEXT = Context(
    prec=MAX_PREC,
    Emax=MAX_EMAX,
    Emin=MIN_EMIN,
    traps=[Inexact, InvalidOperation, Overflow, DivisionByZero],
)


class AccountType(Enum):
    """The five basic kinds of account."""

    ASSET = "Asset"
    LIABILITY = "Liability"
    EQUITY = "Equity"
    INCOME = "Income"
    EXPENSE = "Expense"

    @property
    def is_debit_normal(self) -> bool:
        """True when a debit increases accounts of this type."""
        return self in (AccountType.ASSET, AccountType.EXPENSE)

    @property
    def label(self) -> str:
        return self.value


def apply_posting(
    account_type: AccountType, balance: Decimal, amount: Decimal, is_debit: bool
) -> Decimal:
    """Apply one side of a posting to a balance.

    Debits increase Asset and Expense balances and decrease Liability, Equity
    and Income balances; credits do the opposite.

    Args:
        account_type: Type of the account being posted to
        balance: Balance before the posting
        amount: Posted amount
        is_debit: True for the debit side, False for the credit side

    Returns:
        Balance after the posting
    """
    with localcontext(EXACT_CONTEXT):
        if account_type.is_debit_normal == is_debit:
            return balance + amount
        return balance - amount


@dataclass(eq=False)
class Account:
    """Ledger account with a running balance.

    Identity is (name, type); the balance is not part of it.
    """

    name: str
    type: AccountType
    balance: Decimal = field(default_factory=lambda: Decimal("0"))

    def update_balance(self, amount: Decimal, is_debit: bool) -> None:
        """Post an amount to this account.

        Args:
            amount: Amount of the transaction (validated by the caller)
            is_debit: True if this account is debited, False if credited
        """
        self.balance = apply_posting(self.type, self.balance, amount, is_debit)

    @property
    def key(self) -> tuple[str, AccountType]:
        return (self.name, self.type)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Account):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __str__(self) -> str:
        return f"{self.name} [{self.type.name}]"


@dataclass(frozen=True)
class Transaction:
    """A balanced movement of one amount between two accounts.

    Accounts are referenced by name; balances live in the chart.
    """

    date: date
    description: str
    debit_account: str
    credit_account: str
    amount: Decimal

    def involves(self, account_name: str) -> bool:
        return account_name in (self.debit_account, self.credit_account)

    def is_debit_for(self, account_name: str) -> bool:
        return self.debit_account == account_name


@dataclass(frozen=True)
class JournalEntry:
    """One line of the general journal.

    A transaction yields a debit line carrying the date and description,
    followed by a credit line carrying only the account and amount.
    """

    date: Optional[date]
    description: Optional[str]
    account_name: str
    debit_amount: Optional[Decimal]
    credit_amount: Optional[Decimal]

    @property
    def is_debit(self) -> bool:
        return self.debit_amount is not None


@dataclass(frozen=True)
class LedgerLine:
    """One row of a single account's ledger view."""

    date: date
    description: str
    debit: Optional[Decimal]
    credit: Optional[Decimal]
    balance: Decimal


@dataclass(frozen=True)
class BalanceSheet:
    """Point-in-time balance sheet.

    Line tuples hold (account name, balance) pairs in chart order.
    """

    assets: tuple[tuple[str, Decimal], ...]
    liabilities: tuple[tuple[str, Decimal], ...]
    equity: tuple[tuple[str, Decimal], ...]
    total_assets: Decimal
    total_liabilities: Decimal
    total_equity: Decimal
    net_income: Decimal

    @property
    def total_liabilities_and_equity(self) -> Decimal:
        with localcontext(EXACT_CONTEXT):
            return self.total_liabilities + self.total_equity

    @property
    def is_balanced(self) -> bool:
        return self.total_assets == self.total_liabilities_and_equity
