"""General journal derivation."""

from ledgerkit.domain.entities import JournalEntry, Transaction


def derive_journal_entries(
    transaction: Transaction,
) -> tuple[JournalEntry, JournalEntry]:
    """Split a transaction into its two journal lines.

    The date and description are written once, against the debit line.

    Args:
        transaction: Recorded transaction

    Returns:
        (debit line, credit line)
    """
    debit_entry = JournalEntry(
        date=transaction.date,
        description=transaction.description,
        account_name=transaction.debit_account,
        debit_amount=transaction.amount,
        credit_amount=None,
    )
    credit_entry = JournalEntry(
        date=None,
        description=None,
        account_name=transaction.credit_account,
        debit_amount=None,
        credit_amount=transaction.amount,
    )
    return debit_entry, credit_entry
