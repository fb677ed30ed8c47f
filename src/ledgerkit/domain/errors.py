"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class InvalidAmountError(ValidationError):
    """Transaction amount is not a positive exact decimal."""


class SameAccountError(ValidationError):
    """Debit and credit side of a transaction name the same account."""


class UnknownAccountError(NotFoundError):
    """Account is not a member of the chart of accounts."""


class DuplicateAccountError(ConflictError):
    """Two accounts in one chart share a name."""


def invalid_amount(amount: object) -> str:
    """Return message for a non-positive or inexact amount."""
    return f"Amount must be a positive decimal, got {amount!r}"


def inexact_amount(amount: float) -> str:
    """Return message for a binary floating point amount."""
    return f"Amount {amount!r} is a float; pass a Decimal, int or numeric string"


def same_account(name: str) -> str:
    """Return message when debit and credit accounts are identical."""
    return f"Debit and credit accounts cannot be the same ('{name}')"


def account_not_found(name: str) -> str:
    """Return message for an account missing from the chart."""
    return f"Account '{name}' not found in chart of accounts"


def account_type_mismatch(name: str, expected: str, actual: str) -> str:
    """Return message when an account object disagrees with the chart."""
    return f"Account '{name}' is {actual} in the chart, not {expected}"


def duplicate_account(name: str) -> str:
    """Return message for a repeated account name."""
    return f"Account with name '{name}' already exists"
