"""Port for verifying password bytes against stored hashes."""

from __future__ import annotations

from typing import Protocol

from db_user_provider.domain.hash_scheme import HashScheme


class HashVerifierPort(Protocol):
    """Stored-hash verification contract."""

    def verify(self, *, password_bytes: bytes, stored_hash: str, scheme: HashScheme) -> bool:
        """Return whether password bytes reproduce the stored hash under scheme."""
