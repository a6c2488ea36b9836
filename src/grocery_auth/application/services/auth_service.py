"""Application authentication service for account registration and login."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum

from grocery_auth.application.ports.account_directory_port import (
    AccountDirectoryPort,
    DuplicateAccountEmailError,
)
from grocery_auth.application.ports.password_hasher_port import PasswordHasherPort
from grocery_auth.domain.auth.account import UNASSIGNED_ACCOUNT_ID, Account
from grocery_auth.domain.auth.credentials import ValidationReason, validate_registration

logger = logging.getLogger(__name__)


class RegistrationOutcome(StrEnum):
    """Supported registration outcomes."""

    CREATED = "created"
    INVALID_INPUT = "invalid_input"
    DUPLICATE_EMAIL = "duplicate_email"


@dataclass(frozen=True)
class RegistrationResult:
    """Registration result model."""

    outcome: RegistrationOutcome
    account: Account | None = None
    reason: ValidationReason | None = None

    @property
    def succeeded(self) -> bool:
        return self.outcome is RegistrationOutcome.CREATED


class AuthenticationService:
    """Register accounts and authenticate login attempts.

    The service holds no per-call state. The duplicate-email check and the
    insert are two separate directory calls; directories that enforce email
    uniqueness themselves signal a lost race with ``DuplicateAccountEmailError``.
    """

    def __init__(
        self,
        *,
        accounts: AccountDirectoryPort,
        password_hasher: PasswordHasherPort,
    ) -> None:
        self._accounts = accounts
        self._password_hasher = password_hasher

    def register(
        self,
        name: str,
        email: str,
        password: str,
        confirm_password: str,
    ) -> bool:
        """Register one account and return whether it was created."""

        return self.register_account(
            name=name,
            email=email,
            password=password,
            confirm_password=confirm_password,
        ).succeeded

    def register_account(
        self,
        *,
        name: str,
        email: str,
        password: str,
        confirm_password: str,
    ) -> RegistrationResult:
        """Register one account and report the typed outcome.

        Storage failures other than a duplicate email propagate to the caller.
        """

        validation = validate_registration(
            name=name,
            email=email,
            password=password,
            confirm_password=confirm_password,
        )
        if not validation.is_valid:
            logger.info("registration_rejected_invalid_input reason=%s", validation.reason)
            return RegistrationResult(
                outcome=RegistrationOutcome.INVALID_INPUT,
                reason=validation.reason,
            )

        if self._accounts.find_by_email(email=email) is not None:
            logger.info("registration_rejected_duplicate_email email=%s", email)
            return RegistrationResult(outcome=RegistrationOutcome.DUPLICATE_EMAIL)

        account = Account(
            id=UNASSIGNED_ACCOUNT_ID,
            name=name,
            email=email,
            password_digest=self._password_hasher.hash_password(password),
        )
        try:
            created = self._accounts.insert(account)
        except DuplicateAccountEmailError:
            logger.info("registration_rejected_duplicate_email email=%s source=storage", email)
            return RegistrationResult(outcome=RegistrationOutcome.DUPLICATE_EMAIL)

        logger.info("registration_completed account_id=%s email=%s", created.id, email)
        return RegistrationResult(outcome=RegistrationOutcome.CREATED, account=created)

    def login(self, email: str, password: str) -> Account | None:
        """Return the account for valid credentials, otherwise None.

        Unknown email and wrong password are indistinguishable to the caller.
        """

        account = self._accounts.find_by_email(email=email)
        if account is None:
            logger.info("login_failed email=%s reason=unknown_email", email)
            return None

        is_valid = self._password_hasher.verify_password(
            password=password,
            password_hash=account.password_digest,
        )
        if not is_valid:
            logger.info("login_failed email=%s reason=invalid_password", email)
            return None

        logger.info("login_succeeded account_id=%s", account.id)
        return account
