from __future__ import annotations

import pytest

from db_user_provider.domain.errors import UserProviderConfigError
from db_user_provider.domain.hash_scheme import (
    BlowfishScheme,
    Pbkdf2Sha256Scheme,
    PlainDigestScheme,
    digest_algorithm_name,
    resolve_hash_scheme,
)


@pytest.mark.parametrize("name", ["Blowfish (bcrypt)", "BLOWFISH", "bcrypt-blowfish"])
def test_names_containing_blowfish_select_bcrypt(name: str) -> None:
    assert resolve_hash_scheme(name) == BlowfishScheme()


@pytest.mark.parametrize("name", ["PBKDF2-SHA256", "pbkdf2-sha256"])
def test_pbkdf2_marker_selects_pbkdf2(name: str) -> None:
    assert resolve_hash_scheme(name) == Pbkdf2Sha256Scheme()


def test_digest_name_selects_plain_digest_with_base64_flag() -> None:
    scheme = resolve_hash_scheme("SHA-256", hash_is_base64=True)

    assert scheme == PlainDigestScheme(name="SHA-256", algorithm="sha256", hash_is_base64=True)


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("MD5", "md5"),
        ("SHA-1", "sha1"),
        ("SHA-256", "sha256"),
        ("SHA-512", "sha512"),
        ("SHA3-256", "sha3_256"),
    ],
)
def test_digest_algorithm_name_maps_jvm_names(name: str, expected: str) -> None:
    assert digest_algorithm_name(name) == expected


def test_unknown_digest_name_is_a_configuration_error() -> None:
    with pytest.raises(UserProviderConfigError):
        resolve_hash_scheme("ROT-13")
