"""Hash verifier adapter covering digest, bcrypt and PBKDF2 stored hashes."""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
import logging

import bcrypt

from db_user_provider.application.ports.hash_verifier_port import HashVerifierPort
from db_user_provider.domain.errors import StoredCredentialFormatError
from db_user_provider.domain.hash_scheme import (
    BlowfishScheme,
    HashScheme,
    Pbkdf2Sha256Scheme,
    PlainDigestScheme,
)

logger = logging.getLogger(__name__)

_BCRYPT_MAX_PASSWORD_BYTES = 72
_PBKDF2_KEY_LENGTH = 32
_PBKDF2_FIELD_COUNT = 4


class HashVerifier(HashVerifierPort):
    """Verify password bytes against a stored hash for one hash scheme."""

    def verify(self, *, password_bytes: bytes, stored_hash: str, scheme: HashScheme) -> bool:
        if isinstance(scheme, BlowfishScheme):
            return self._verify_bcrypt(password_bytes, stored_hash)
        if isinstance(scheme, Pbkdf2Sha256Scheme):
            return self._verify_pbkdf2_sha256(password_bytes, stored_hash)
        if isinstance(scheme, PlainDigestScheme):
            return self._verify_digest(password_bytes, stored_hash, scheme)
        raise TypeError(f"unsupported hash scheme: {scheme!r}")

    def _verify_digest(
        self,
        password_bytes: bytes,
        stored_hash: str,
        scheme: PlainDigestScheme,
    ) -> bool:
        expected = normalize_base64_hash(stored_hash) if scheme.hash_is_base64 else stored_hash
        computed = hashlib.new(scheme.algorithm, password_bytes).hexdigest()
        logger.debug("digest_hash_compare algorithm=%s", scheme.algorithm)
        return hmac.compare_digest(computed.encode("utf-8"), expected.encode("utf-8"))

    def _verify_bcrypt(self, password_bytes: bytes, stored_hash: str) -> bool:
        if not stored_hash:
            return False
        try:
            # bcrypt only consumes the first 72 bytes of a password.
            return bcrypt.checkpw(
                password_bytes[:_BCRYPT_MAX_PASSWORD_BYTES],
                stored_hash.encode("utf-8"),
            )
        except ValueError as error:
            raise StoredCredentialFormatError("stored bcrypt hash is malformed") from error

    def _verify_pbkdf2_sha256(self, password_bytes: bytes, stored_hash: str) -> bool:
        components = stored_hash.split("$")
        if len(components) < _PBKDF2_FIELD_COUNT:
            raise StoredCredentialFormatError(
                f"PBKDF2 hash needs {_PBKDF2_FIELD_COUNT} '$'-separated fields, "
                f"got {len(components)}"
            )
        _, raw_iterations, salt, derived_key = components[:_PBKDF2_FIELD_COUNT]
        try:
            iterations = int(raw_iterations)
        except ValueError as error:
            raise StoredCredentialFormatError("PBKDF2 iteration count is not an integer") from error
        if iterations <= 0:
            raise StoredCredentialFormatError("PBKDF2 iteration count must be positive")

        derived = hashlib.pbkdf2_hmac(
            "sha256",
            password_bytes,
            salt.encode("utf-8"),
            iterations,
            dklen=_PBKDF2_KEY_LENGTH,
        )
        candidate = base64.b64encode(derived)
        return hmac.compare_digest(candidate, derived_key.encode("utf-8"))


def normalize_base64_hash(stored_hash: str) -> str:
    """Return a Base64 stored digest as lowercase hex."""

    try:
        return base64.b64decode(stored_hash.strip(), validate=True).hex()
    except (binascii.Error, ValueError) as error:
        raise StoredCredentialFormatError("stored password hash is not valid Base64") from error
