"""Hash scheme variants resolved once from the configured hash function name."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass

from db_user_provider.domain.errors import UserProviderConfigError

PBKDF2_SHA256_MARKER = "PBKDF2-SHA256"
_BLOWFISH_MARKER = "blowfish"


@dataclass(frozen=True)
class PlainDigestScheme:
    """Unsalted-by-scheme message digest compared as lowercase hex."""

    name: str
    algorithm: str
    hash_is_base64: bool = False


@dataclass(frozen=True)
class BlowfishScheme:
    """bcrypt hashes carrying their own salt and cost factor."""


@dataclass(frozen=True)
class Pbkdf2Sha256Scheme:
    """PBKDF2-HMAC-SHA256 hashes stored as ``algorithm$iterations$salt$key``."""


HashScheme = PlainDigestScheme | BlowfishScheme | Pbkdf2Sha256Scheme


def resolve_hash_scheme(hash_function: str, *, hash_is_base64: bool = False) -> HashScheme:
    """Map one configured hash function name to exactly one hash scheme."""

    normalized = hash_function.strip()
    if _BLOWFISH_MARKER in normalized.lower():
        return BlowfishScheme()
    if normalized.upper() == PBKDF2_SHA256_MARKER:
        return Pbkdf2Sha256Scheme()
    return PlainDigestScheme(
        name=normalized,
        algorithm=digest_algorithm_name(normalized),
        hash_is_base64=hash_is_base64,
    )


def digest_algorithm_name(name: str) -> str:
    """Translate a digest name such as ``SHA-256`` into its hashlib name.

    Raises ``UserProviderConfigError`` when the running interpreter cannot compute it.
    """

    candidate = name.strip().lower().replace("/", "_")
    if candidate.startswith("sha3-"):
        candidate = candidate.replace("-", "_")
    else:
        candidate = candidate.replace("-", "")

    if not candidate:
        raise UserProviderConfigError("hash function name cannot be blank")
    try:
        hashlib.new(candidate)
    except ValueError as error:
        raise UserProviderConfigError(f"unsupported hash function: {name}") from error
    return candidate
