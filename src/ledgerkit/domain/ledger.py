"""Ledger engine: chart of accounts, transaction log and general journal."""

import logging
import threading
from collections.abc import Iterable
from dataclasses import replace
from datetime import date
from decimal import Decimal, InvalidOperation, localcontext
from typing import Optional

from ledgerkit.domain import errors
from ledgerkit.domain.chart import ChartOfAccounts, create_default_chart
from ledgerkit.domain.entities import (
    Account,
    AccountType,
    BalanceSheet,
    EXACT_CONTEXT,
    JournalEntry,
    LedgerLine,
    Transaction,
    apply_posting,
)
from ledgerkit.domain.journal import derive_journal_entries

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


def coerce_amount(amount: Decimal | int | str) -> Decimal:
    """Convert an amount to a positive, finite Decimal.

    Floats are refused because they cannot represent most cent values
    exactly.

    Raises:
        InvalidAmountError: If the amount is inexact, not a number, or <= 0
    """
    if isinstance(amount, float):
        raise errors.InvalidAmountError(errors.inexact_amount(amount))
    if isinstance(amount, bool) or not isinstance(amount, (Decimal, int, str)):
        raise errors.InvalidAmountError(errors.invalid_amount(amount))

    if isinstance(amount, str):
        amount = amount.strip()
    try:
        value = Decimal(amount)
    except InvalidOperation:
        raise errors.InvalidAmountError(errors.invalid_amount(amount)) from None

    # NaN must be caught before comparing, ordering NaN raises
    if not value.is_finite() or value <= ZERO:
        raise errors.InvalidAmountError(errors.invalid_amount(amount))
    return value


class LedgerEngine:
    """Double-entry ledger held in process memory.

    record_transaction is the only mutator. It and every reader run under a
    single re-entrant lock, so a reader sees either none or all of a
    recording's effects.
    """

    def __init__(self, chart: Optional[ChartOfAccounts] = None):
        """Initialize ledger engine.

        Args:
            chart: Chart of accounts to post against. Defaults to the
                reference chart.
        """
        self._chart = chart if chart is not None else create_default_chart()
        self._transactions: list[Transaction] = []
        self._journal: list[JournalEntry] = []
        self._lock = threading.RLock()
        logger.debug("Ledger engine created with %d accounts", len(self._chart))

    def record_transaction(
        self,
        date: date,
        description: str,
        debit_account: Account | str,
        credit_account: Account | str,
        amount: Decimal | int | str,
    ) -> Transaction:
        """Record a balanced transaction.

        Validation happens before anything is changed: the amount first, then
        that the two sides differ, then chart membership.

        Args:
            date: Transaction date
            description: Free text description
            debit_account: Account (or account name) to debit
            credit_account: Account (or account name) to credit
            amount: Positive exact amount

        Returns:
            The recorded transaction

        Raises:
            InvalidAmountError: If amount is not a positive exact decimal
            SameAccountError: If both sides are the same account (name and type)
            UnknownAccountError: If either account is not in the chart
        """
        value = coerce_amount(amount)

        with self._lock:
            if self._identity_key(debit_account) == self._identity_key(credit_account):
                raise errors.SameAccountError(
                    errors.same_account(_account_name(debit_account))
                )

            debit = self._chart.require(debit_account)
            credit = self._chart.require(credit_account)

            transaction = Transaction(
                date=date,
                description=description,
                debit_account=debit.name,
                credit_account=credit.name,
                amount=value,
            )
            debit.update_balance(value, True)
            credit.update_balance(value, False)
            self._transactions.append(transaction)
            self._journal.extend(derive_journal_entries(transaction))

        logger.debug(
            "Recorded %s: Dr %s / Cr %s %s",
            description,
            debit.name,
            credit.name,
            value,
        )
        return transaction

    def _identity_key(
        self, account: Account | str
    ) -> tuple[str, Optional[AccountType]]:
        """Return (name, type) for an account argument.

        A bare name takes its type from the chart; names the chart does not
        know have no type.
        """
        if isinstance(account, Account):
            return account.key
        found = self._chart.get(account)
        return (account, found.type if found is not None else None)

    @property
    def is_empty(self) -> bool:
        with self._lock:
            return not self._transactions

    def get_chart_of_accounts(self) -> tuple[Account, ...]:
        """Return snapshots of all accounts in chart order.

        The returned objects are copies; changing them does not affect the
        ledger.
        """
        with self._lock:
            return tuple(replace(account) for account in self._chart)

    def get_account(self, account: Account | str) -> Account:
        """Return a snapshot of one account.

        Raises:
            UnknownAccountError: If the account is not in the chart
        """
        with self._lock:
            return replace(self._chart.require(account))

    def get_transactions(self) -> tuple[Transaction, ...]:
        with self._lock:
            return tuple(self._transactions)

    def get_general_journal(self) -> tuple[JournalEntry, ...]:
        with self._lock:
            return tuple(self._journal)

    def get_transactions_for_account(
        self, account: Account | str
    ) -> tuple[Transaction, ...]:
        """Return every transaction that debits or credits an account.

        Args:
            account: Account or account name

        Returns:
            Matching transactions in recording order

        Raises:
            UnknownAccountError: If the account is not in the chart
        """
        with self._lock:
            name = self._chart.require(account).name
            return tuple(t for t in self._transactions if t.involves(name))

    def compute_running_balance(
        self, account: Account | str, transactions: Iterable[Transaction]
    ) -> tuple[Decimal, ...]:
        """Replay the posting rule for one account from a zero balance.

        Only the given transactions are replayed, in the given order; the
        account's live balance is not consulted.

        Args:
            account: Account or account name
            transactions: Transactions touching the account, in order

        Returns:
            Balance after each transaction, parallel to the input

        Raises:
            UnknownAccountError: If the account is not in the chart
            ValidationError: If a transaction does not touch the account
        """
        with self._lock:
            target = self._chart.require(account)

        balances = []
        balance = ZERO
        for transaction in transactions:
            if not transaction.involves(target.name):
                raise errors.ValidationError(
                    f"Transaction '{transaction.description}' does not post to "
                    f"'{target.name}'"
                )
            balance = apply_posting(
                target.type,
                balance,
                transaction.amount,
                transaction.is_debit_for(target.name),
            )
            balances.append(balance)
        return tuple(balances)

    def get_account_ledger(self, account: Account | str) -> tuple[LedgerLine, ...]:
        """Build the ledger view of one account.

        Returns:
            One line per transaction touching the account, with the running
            balance after it
        """
        with self._lock:
            target = self._chart.require(account)
            transactions = self.get_transactions_for_account(target.name)
            balances = self.compute_running_balance(target.name, transactions)

        lines = []
        for transaction, balance in zip(transactions, balances):
            is_debit = transaction.is_debit_for(target.name)
            lines.append(
                LedgerLine(
                    date=transaction.date,
                    description=transaction.description,
                    debit=transaction.amount if is_debit else None,
                    credit=None if is_debit else transaction.amount,
                    balance=balance,
                )
            )
        return tuple(lines)

    def _sum_balances(self, account_type: AccountType) -> Decimal:
        with localcontext(EXACT_CONTEXT):
            return sum(
                (acc.balance for acc in self._chart.of_type(account_type)), ZERO
            )

    def total_assets(self) -> Decimal:
        with self._lock:
            return self._sum_balances(AccountType.ASSET)

    def total_liabilities(self) -> Decimal:
        with self._lock:
            return self._sum_balances(AccountType.LIABILITY)

    def total_equity(self) -> Decimal:
        """Return owner's equity including the current period's result.

        Income and expense balances are rolled in on every call; no closing
        entries are posted.
        """
        with self._lock, localcontext(EXACT_CONTEXT):
            return self._sum_balances(AccountType.EQUITY) + self.net_income()

    def net_income(self) -> Decimal:
        with self._lock, localcontext(EXACT_CONTEXT):
            return self._sum_balances(AccountType.INCOME) - self._sum_balances(
                AccountType.EXPENSE
            )

    def balance_sheet(self) -> BalanceSheet:
        """Take a consistent balance sheet snapshot."""
        with self._lock:
            return BalanceSheet(
                assets=self._lines(AccountType.ASSET),
                liabilities=self._lines(AccountType.LIABILITY),
                equity=self._lines(AccountType.EQUITY),
                total_assets=self.total_assets(),
                total_liabilities=self.total_liabilities(),
                total_equity=self.total_equity(),
                net_income=self.net_income(),
            )

    def _lines(self, account_type: AccountType) -> tuple[tuple[str, Decimal], ...]:
        return tuple(
            (acc.name, acc.balance) for acc in self._chart.of_type(account_type)
        )


def _account_name(account: Account | str) -> str:
    return account.name if isinstance(account, Account) else account
