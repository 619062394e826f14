"""SQL adapter for user lookups driven by configured query text."""

from __future__ import annotations

from db_user_provider.application.ports.user_repository_port import (
    QueryResult,
    UserRecord,
    UserRepositoryPort,
)
from db_user_provider.domain.paging import PageDescriptor
from db_user_provider.domain.query_config import QueryConfig
from db_user_provider.domain.sql_text import open_statement_end
from db_user_provider.infrastructure.db.query_executor import (
    SqlQueryExecutor,
    read_int,
    read_rows,
    read_string,
)


class SqlUserRepository(UserRepositoryPort):
    """User repository running the configured SQL through one query executor."""

    def __init__(self, executor: SqlQueryExecutor, query_config: QueryConfig) -> None:
        self._executor = executor
        self._config = query_config

    def find_password_hash(self, *, username: str) -> QueryResult[str]:
        return self._executor.execute(
            self._config.find_password_hash,
            transform=read_string,
            params=(username,),
        )

    def find_password_salt(self, *, username: str) -> QueryResult[str]:
        return self._executor.execute(
            self._config.find_password_salt,
            transform=read_string,
            params=(username,),
        )

    def list_all_users(self) -> list[UserRecord]:
        result = self._executor.execute(self._config.list_all, transform=read_rows)
        return result.value or []

    def count_users(self, *, search: str | None = None) -> int:
        """Return total users, or the size of the search result when searching."""

        if not search:
            result = self._executor.execute(self._config.count, transform=read_int)
        else:
            search_query = open_statement_end(self._config.find_by_search_term)
            query = f"select count(*) from ({search_query}) count"
            result = self._executor.execute(query, transform=read_int, params=(search,))
        return result.value or 0

    def find_user_by_id(self, *, user_id: str) -> UserRecord | None:
        result = self._executor.execute(
            self._config.find_by_id,
            transform=read_rows,
            params=(user_id,),
        )
        return _first(result)

    def find_user_by_username(self, *, username: str) -> UserRecord | None:
        result = self._executor.execute(
            self._config.find_by_username,
            transform=read_rows,
            params=(username,),
        )
        return _first(result)

    def find_users(
        self,
        *,
        search: str | None = None,
        page: PageDescriptor | None = None,
    ) -> list[UserRecord]:
        """Return one page of all users, or of search matches when searching."""

        if not search:
            result = self._executor.execute(self._config.list_all, transform=read_rows, page=page)
        else:
            result = self._executor.execute(
                self._config.find_by_search_term,
                transform=read_rows,
                params=(search,),
                page=page,
            )
        return result.value or []


def _first(result: QueryResult[list[UserRecord]]) -> UserRecord | None:
    rows = result.value or []
    return rows[0] if rows else None
