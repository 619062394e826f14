"""Password text encoding and stored-salt combination helpers."""

from __future__ import annotations

import base64
import binascii
import logging
from enum import StrEnum

from db_user_provider.domain.errors import StoredCredentialFormatError

logger = logging.getLogger(__name__)

_UTF16_BIG_ENDIAN_BOM = b"\xfe\xff"


class PasswordEncoding(StrEnum):
    """Text encodings accepted for turning cleartext passwords into bytes."""

    UTF_8 = "UTF-8"
    UTF_16 = "UTF-16"
    UTF_16BE = "UTF-16BE"
    UTF_16LE = "UTF-16LE"

    @classmethod
    def parse(cls, name: str) -> PasswordEncoding:
        """Resolve one configured encoding name, falling back to UTF-8.

        Existing deployments rely on unknown names being treated as UTF-8, so this
        never raises.
        """

        normalized = name.strip().upper()
        for member in cls:
            if member.value == normalized:
                return member
        logger.warning("password_encoding_unknown name=%r fallback=%s", name, cls.UTF_8.value)
        return cls.UTF_8


class SaltLocation(StrEnum):
    """Where the decoded salt goes relative to the password bytes."""

    NONE = "None"
    PREPEND = "Prepend"
    APPEND = "Append"


def encode_password(password: str, encoding: PasswordEncoding) -> bytes:
    """Return password bytes under the configured text encoding."""

    if encoding is PasswordEncoding.UTF_16:
        if not password:
            return b""
        # JVM-style UTF-16: big-endian units behind a byte order mark.
        return _UTF16_BIG_ENDIAN_BOM + password.encode("utf-16-be")
    if encoding is PasswordEncoding.UTF_16BE:
        return password.encode("utf-16-be")
    if encoding is PasswordEncoding.UTF_16LE:
        return password.encode("utf-16-le")
    return password.encode("utf-8")


def decode_salt(encoded_salt: str) -> bytes:
    """Decode one stored Base64 salt value."""

    try:
        return base64.b64decode(encoded_salt.strip(), validate=True)
    except (binascii.Error, ValueError) as error:
        raise StoredCredentialFormatError("stored password salt is not valid Base64") from error


def combine_salt(password_bytes: bytes, encoded_salt: str, location: SaltLocation) -> bytes:
    """Decode the stored salt and join it with password bytes per salt location."""

    if location is SaltLocation.NONE:
        raise ValueError("salt location None does not combine a salt")

    salt = decode_salt(encoded_salt)
    if location is SaltLocation.PREPEND:
        return salt + password_bytes
    return password_bytes + salt
