"""Tests for domain entities and the posting rule."""

import pytest
from dataclasses import FrozenInstanceError
from datetime import date
from decimal import Decimal

from ledgerkit.domain.entities import (
    Account,
    AccountType,
    BalanceSheet,
    JournalEntry,
    Transaction,
    apply_posting,
)


class TestAccountType:
    """Tests for AccountType normal balances."""

    @pytest.mark.parametrize("account_type", [AccountType.ASSET, AccountType.EXPENSE])
    def test_debit_normal_types(self, account_type):
        assert account_type.is_debit_normal

    @pytest.mark.parametrize(
        "account_type", [AccountType.LIABILITY, AccountType.EQUITY, AccountType.INCOME]
    )
    def test_credit_normal_types(self, account_type):
        assert not account_type.is_debit_normal


class TestAccount:
    """Tests for Account entity."""

    def test_new_account_has_zero_balance(self):
        account = Account(name="Cash", type=AccountType.ASSET)
        assert account.balance == Decimal("0")

    @pytest.mark.parametrize("account_type", [AccountType.ASSET, AccountType.EXPENSE])
    def test_debit_increases_debit_normal_account(self, account_type):
        """Debits increase and credits decrease Asset and Expense balances."""
        account = Account(name="A", type=account_type)
        account.update_balance(Decimal("100.00"), True)
        assert account.balance == Decimal("100.00")
        account.update_balance(Decimal("30.50"), False)
        assert account.balance == Decimal("69.50")

    @pytest.mark.parametrize(
        "account_type", [AccountType.LIABILITY, AccountType.EQUITY, AccountType.INCOME]
    )
    def test_credit_increases_credit_normal_account(self, account_type):
        """Credits increase and debits decrease Liability, Equity and Income."""
        account = Account(name="L", type=account_type)
        account.update_balance(Decimal("100.00"), False)
        assert account.balance == Decimal("100.00")
        account.update_balance(Decimal("30.50"), True)
        assert account.balance == Decimal("69.50")

    def test_balance_may_go_negative(self):
        account = Account(name="Cash", type=AccountType.ASSET)
        account.update_balance(Decimal("5"), False)
        assert account.balance == Decimal("-5")

    def test_equality_ignores_balance(self):
        """Accounts are equal when name and type match."""
        a = Account(name="Cash", type=AccountType.ASSET)
        b = Account(name="Cash", type=AccountType.ASSET, balance=Decimal("9"))
        c = Account(name="Cash", type=AccountType.EQUITY)

        assert a == b
        assert hash(a) == hash(b)
        assert a != c

    def test_str(self):
        account = Account(name="Owner's Capital", type=AccountType.EQUITY)
        assert str(account) == "Owner's Capital [EQUITY]"

    def test_apply_posting_is_pure(self):
        balance = Decimal("10")
        assert apply_posting(AccountType.INCOME, balance, Decimal("4"), True) == Decimal("6")
        assert balance == Decimal("10")


class TestTransaction:
    """Tests for Transaction entity."""

    def test_transaction_immutability(self):
        txn = Transaction(
            date=date(2024, 1, 1),
            description="Owner investment",
            debit_account="Cash",
            credit_account="Owner's Capital",
            amount=Decimal("10000.00"),
        )
        with pytest.raises(FrozenInstanceError):
            txn.amount = Decimal("1")

    def test_involves(self):
        txn = Transaction(date(2024, 1, 1), "x", "Cash", "Sales", Decimal("1"))
        assert txn.involves("Cash")
        assert txn.involves("Sales")
        assert not txn.involves("Rent")
        assert txn.is_debit_for("Cash")
        assert not txn.is_debit_for("Sales")


class TestJournalEntry:
    """Tests for JournalEntry entity."""

    def test_is_debit(self):
        debit = JournalEntry(date(2024, 1, 1), "x", "Cash", Decimal("1"), None)
        credit = JournalEntry(None, None, "Sales", None, Decimal("1"))
        assert debit.is_debit
        assert not credit.is_debit


class TestBalanceSheet:
    """Tests for BalanceSheet derived totals."""

    def test_totals(self):
        sheet = BalanceSheet(
            assets=(("Cash", Decimal("8000.00")),),
            liabilities=(),
            equity=(("Owner's Capital", Decimal("10000.00")),),
            total_assets=Decimal("8000.00"),
            total_liabilities=Decimal("0"),
            total_equity=Decimal("8000.00"),
            net_income=Decimal("-2000.00"),
        )
        assert sheet.total_liabilities_and_equity == Decimal("8000.00")
        assert sheet.is_balanced
