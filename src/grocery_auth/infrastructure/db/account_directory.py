"""SQLAlchemy adapter for account lookup and insertion."""

from __future__ import annotations

import logging
from typing import cast

import sqlalchemy as sa
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from grocery_auth.application.ports.account_directory_port import (
    AccountDirectoryPort,
    AccountStorageError,
    DuplicateAccountEmailError,
)
from grocery_auth.domain.auth.account import Account
from grocery_auth.infrastructure.db.metadata import accounts

logger = logging.getLogger(__name__)


class SqlAlchemyAccountDirectory(AccountDirectoryPort):
    """Account directory backed by SQLAlchemy sessions.

    Email uniqueness is enforced by the ``uq_accounts_email`` constraint, so
    concurrent registrations for one email cannot both be stored.
    """

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def find_by_email(self, *, email: str) -> Account | None:
        """Return account by exact email or None when absent."""

        statement = sa.select(
            accounts.c.id,
            accounts.c.name,
            accounts.c.email,
            accounts.c.password_digest,
        ).where(accounts.c.email == email).limit(1)

        try:
            with self._session_factory() as session:
                result = session.execute(statement)
                row = result.mappings().first()
        except SQLAlchemyError as exc:
            raise AccountStorageError("account lookup failed") from exc

        if row is None:
            return None
        return _to_account(row)

    def insert(self, account: Account) -> Account:
        """Persist one new account and return it with its assigned id."""

        statement = sa.insert(accounts).values(
            name=account.name,
            email=account.email,
            password_digest=account.password_digest,
        )

        with self._session_factory() as session:
            try:
                result = session.execute(statement)
                account_id = int(result.inserted_primary_key[0])
                session.commit()
            except IntegrityError as exc:
                session.rollback()
                raise DuplicateAccountEmailError(email=account.email) from exc
            except SQLAlchemyError as exc:
                session.rollback()
                logger.warning("account_insert_failed error=%s", type(exc).__name__)
                raise AccountStorageError("account insert failed") from exc

        return account.with_id(account_id)


def _to_account(row: sa.RowMapping) -> Account:
    return Account(
        id=int(row["id"]),
        name=cast(str, row["name"]),
        email=cast(str, row["email"]),
        password_digest=cast(str, row["password_digest"]),
    )
