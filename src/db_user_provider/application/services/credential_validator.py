"""Application service validating credentials against database-resident hashes."""

from __future__ import annotations

import logging
from typing import NoReturn

from db_user_provider.application.ports.hash_verifier_port import HashVerifierPort
from db_user_provider.application.ports.user_repository_port import UserRepositoryPort
from db_user_provider.domain.errors import (
    PasswordUpdateNotSupportedError,
    StoredCredentialFormatError,
)
from db_user_provider.domain.password_encoding import SaltLocation, combine_salt, encode_password
from db_user_provider.domain.query_config import QueryConfig

logger = logging.getLogger(__name__)


class CredentialValidator:
    """Check username/password pairs against the configured hash scheme."""

    def __init__(
        self,
        *,
        users: UserRepositoryPort,
        query_config: QueryConfig,
        hash_verifier: HashVerifierPort,
    ) -> None:
        self._users = users
        self._config = query_config
        self._hash_verifier = hash_verifier

    def validate_credentials(self, *, username: str, password: str) -> bool:
        """Return whether password matches the stored hash for username.

        Failed queries and unknown users yield False. Stored material that cannot be
        interpreted raises ``StoredCredentialFormatError`` instead of returning False.
        """

        hash_result = self._users.find_password_hash(username=username)
        if not hash_result.ok:
            logger.warning("credential_check_hash_query_failed username=%s", username)
            return False
        stored_hash = hash_result.value or ""
        if not stored_hash:
            logger.info("credential_check_no_stored_hash username=%s", username)
            return False

        password_bytes = encode_password(password, self._config.password_encoding)

        if self._config.salt_location is not SaltLocation.NONE:
            salt_result = self._users.find_password_salt(username=username)
            if not salt_result.ok:
                logger.warning("credential_check_salt_query_failed username=%s", username)
                return False
            if salt_result.value is None:
                raise StoredCredentialFormatError(f"no stored password salt for user {username!r}")
            password_bytes = combine_salt(
                password_bytes,
                salt_result.value,
                self._config.salt_location,
            )

        is_valid = self._hash_verifier.verify(
            password_bytes=password_bytes,
            stored_hash=stored_hash,
            scheme=self._config.hash_scheme,
        )
        logger.info("credential_check_result username=%s valid=%s", username, is_valid)
        return is_valid

    def update_credentials(self, *, username: str, password: str) -> NoReturn:
        """Reject password updates; the user database is read-only here."""

        _ = (username, password)
        raise PasswordUpdateNotSupportedError()

    def remove_user(self) -> bool:
        """Return whether the identity host may delete its copy of a user."""

        return self._config.allow_delete

    def allows_overwrite(self) -> bool:
        """Return whether database values may overwrite identity host user data."""

        return self._config.allow_overwrite
