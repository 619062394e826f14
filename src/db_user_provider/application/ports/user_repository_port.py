"""Port for user lookup and credential material queries."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Generic, Protocol, TypeVar

from db_user_provider.domain.paging import PageDescriptor

T = TypeVar("T")

UserRecord = dict[str, str | None]


class QueryStatus(StrEnum):
    """Outcome of one executed query."""

    OK = "ok"
    FAILED = "failed"


@dataclass(frozen=True)
class QueryResult(Generic[T]):
    """Query value plus whether the database actually answered."""

    status: QueryStatus
    value: T | None = None

    @property
    def ok(self) -> bool:
        return self.status is QueryStatus.OK

    @classmethod
    def success(cls, value: T | None) -> QueryResult[T]:
        return cls(status=QueryStatus.OK, value=value)

    @classmethod
    def failed(cls) -> QueryResult[T]:
        return cls(status=QueryStatus.FAILED, value=None)


class UserRepositoryPort(Protocol):
    """User lookup contract backed by configured SQL."""

    def find_password_hash(self, *, username: str) -> QueryResult[str]:
        """Return the stored password hash for one username."""

    def find_password_salt(self, *, username: str) -> QueryResult[str]:
        """Return the stored Base64 salt for one username."""

    def list_all_users(self) -> list[UserRecord]:
        """Return every user row."""

    def count_users(self, *, search: str | None = None) -> int:
        """Return total users, or users matching one search term."""

    def find_user_by_id(self, *, user_id: str) -> UserRecord | None:
        """Return one user row by id or None."""

    def find_user_by_username(self, *, username: str) -> UserRecord | None:
        """Return one user row by username or None."""

    def find_users(
        self,
        *,
        search: str | None = None,
        page: PageDescriptor | None = None,
    ) -> list[UserRecord]:
        """Return one page of all users or of users matching a search term."""
