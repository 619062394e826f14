"""Runtime settings loaded from environment variables."""

from functools import lru_cache
from typing import Annotated, Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

NonEmptyStr = Annotated[str, Field(min_length=1)]


class Settings(BaseSettings):
    """Environment-driven provider settings.

    Every option also accepts the camelCase name used by existing provider
    configurations (``findPasswordHash``, ``hashFunction`` and so on).
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    database_url: NonEmptyStr = Field(validation_alias="DATABASE_URL")
    count_query: NonEmptyStr = Field(validation_alias=AliasChoices("COUNT", "count"))
    list_all_query: NonEmptyStr = Field(validation_alias=AliasChoices("LIST_ALL", "listAll"))
    find_by_id_query: NonEmptyStr = Field(
        validation_alias=AliasChoices("FIND_BY_ID", "findById"),
    )
    find_by_username_query: NonEmptyStr = Field(
        validation_alias=AliasChoices("FIND_BY_USERNAME", "findByUsername"),
    )
    find_by_search_term_query: NonEmptyStr = Field(
        validation_alias=AliasChoices("FIND_BY_SEARCH_TERM", "findBySearchTerm"),
    )
    find_password_hash_query: NonEmptyStr = Field(
        validation_alias=AliasChoices("FIND_PASSWORD_HASH", "findPasswordHash"),
    )
    find_password_salt_query: str = Field(
        default="",
        validation_alias=AliasChoices("FIND_PASSWORD_SALT", "findPasswordSalt"),
    )
    password_encoding: str = Field(
        default="UTF-8",
        validation_alias=AliasChoices("PASSWORD_ENCODING", "passwordEncoding"),
    )
    hash_is_base64: bool = Field(
        default=False,
        validation_alias=AliasChoices("HASH_IS_BASE64", "hashIsBase64"),
    )
    salt_location: Literal["None", "Prepend", "Append"] = Field(
        default="None",
        validation_alias=AliasChoices("SALT_LOCATION", "saltLocation"),
    )
    hash_function: NonEmptyStr = Field(
        default="SHA-1",
        validation_alias=AliasChoices("HASH_FUNCTION", "hashFunction"),
    )
    rdbms_dialect: NonEmptyStr = Field(
        default="PostgreSQL",
        validation_alias=AliasChoices("RDBMS_DIALECT", "rdbmsDialect", "rdbms"),
    )
    allow_keycloak_delete: bool = Field(
        default=False,
        validation_alias=AliasChoices("ALLOW_KEYCLOAK_DELETE", "allowKeycloakDelete"),
    )
    allow_database_to_overwrite_keycloak: bool = Field(
        default=False,
        validation_alias=AliasChoices(
            "ALLOW_DATABASE_TO_OVERWRITE_KEYCLOAK",
            "allowDatabaseToOverwriteKeycloak",
        ),
    )
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_sql: bool = Field(default=False, validation_alias="LOG_SQL")


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Load and cache provider settings."""

    return Settings()  # type: ignore[call-arg]
