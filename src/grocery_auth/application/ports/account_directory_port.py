"""Port for account lookup and persistence used by authentication services."""

from __future__ import annotations

from typing import Protocol

from grocery_auth.domain.auth.account import Account


class AccountStorageError(RuntimeError):
    """Raised when the account store is unavailable or rejects an operation."""


class DuplicateAccountEmailError(AccountStorageError):
    """Raised when the store refuses an insert because the email already exists."""

    def __init__(self, *, email: str) -> None:
        super().__init__("account email already registered")
        self.email = email


class AccountDirectoryPort(Protocol):
    """Account directory contract."""

    def find_by_email(self, *, email: str) -> Account | None:
        """Return account by exact email or None when absent."""

    def insert(self, account: Account) -> Account:
        """Persist one new account and return it with its assigned id."""
