"""Account identity record."""

from __future__ import annotations

from dataclasses import dataclass, replace

UNASSIGNED_ACCOUNT_ID = 0


@dataclass(frozen=True)
class Account:
    """Registered account keyed by email and authenticated by password digest."""

    id: int
    name: str
    email: str
    password_digest: str

    @property
    def is_persisted(self) -> bool:
        """Return whether storage has assigned an identifier."""

        return self.id != UNASSIGNED_ACCOUNT_ID

    def with_id(self, account_id: int) -> Account:
        """Return a copy carrying the storage-assigned identifier."""

        return replace(self, id=account_id)
