"""Wiring helpers that assemble the authentication service from settings."""

from __future__ import annotations

from grocery_auth.application.services.auth_service import AuthenticationService
from grocery_auth.config.settings import Settings, load_settings
from grocery_auth.infrastructure.db.account_directory import SqlAlchemyAccountDirectory
from grocery_auth.infrastructure.db.session import create_session_factory
from grocery_auth.infrastructure.logging import configure_logging
from grocery_auth.infrastructure.security.password_hasher import BcryptPasswordHasher


def build_authentication_service(*, settings: Settings | None = None) -> AuthenticationService:
    """Build an authentication service backed by the configured database.

    Process logging is configured from ``log_level``. Without explicit
    settings, the cached environment settings are used.
    """

    resolved = settings or load_settings()
    configure_logging(level=resolved.log_level)

    session_factory = create_session_factory(resolved.database_url)
    return AuthenticationService(
        accounts=SqlAlchemyAccountDirectory(session_factory),
        password_hasher=BcryptPasswordHasher(rounds=resolved.password_hash_rounds),
    )
