"""Immutable provider configuration shared by the executor and validator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from db_user_provider.domain.hash_scheme import BlowfishScheme, HashScheme, resolve_hash_scheme
from db_user_provider.domain.paging import Rdbms
from db_user_provider.domain.password_encoding import PasswordEncoding, SaltLocation

if TYPE_CHECKING:
    from db_user_provider.config.settings import Settings


@dataclass(frozen=True)
class QueryConfig:
    """SQL text and credential policy resolved once at startup."""

    count: str
    list_all: str
    find_by_id: str
    find_by_username: str
    find_by_search_term: str
    find_password_hash: str
    find_password_salt: str
    password_encoding: PasswordEncoding
    salt_location: SaltLocation
    hash_scheme: HashScheme
    rdbms: Rdbms
    allow_delete: bool = False
    allow_overwrite: bool = False

    @property
    def is_blowfish(self) -> bool:
        return isinstance(self.hash_scheme, BlowfishScheme)

    @classmethod
    def from_settings(cls, settings: Settings) -> QueryConfig:
        """Build configuration from loaded settings, raising on unusable values."""

        return cls(
            count=settings.count_query,
            list_all=settings.list_all_query,
            find_by_id=settings.find_by_id_query,
            find_by_username=settings.find_by_username_query,
            find_by_search_term=settings.find_by_search_term_query,
            find_password_hash=settings.find_password_hash_query,
            find_password_salt=settings.find_password_salt_query,
            password_encoding=PasswordEncoding.parse(settings.password_encoding),
            salt_location=SaltLocation(settings.salt_location),
            hash_scheme=resolve_hash_scheme(
                settings.hash_function,
                hash_is_base64=settings.hash_is_base64,
            ),
            rdbms=Rdbms.parse(settings.rdbms_dialect),
            allow_delete=settings.allow_keycloak_delete,
            allow_overwrite=settings.allow_database_to_overwrite_keycloak,
        )
