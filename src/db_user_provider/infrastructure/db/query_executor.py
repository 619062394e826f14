"""SQLAlchemy executor for configured SQL with positional placeholders."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TypeVar

import sqlalchemy as sa
from sqlalchemy.exc import SQLAlchemyError

from db_user_provider.application.ports.user_repository_port import QueryResult, UserRecord
from db_user_provider.domain.errors import UserProviderConfigError
from db_user_provider.domain.paging import PageDescriptor, Rdbms, render_paged_query
from db_user_provider.domain.sql_text import SqlSegment, scan_sql

T = TypeVar("T")

logger = logging.getLogger(__name__)

RowTransform = Callable[[sa.CursorResult], T]


class SqlQueryExecutor:
    """Run one read query per call on a fresh pooled connection."""

    def __init__(self, engine: sa.Engine, *, dialect: Rdbms) -> None:
        self._engine = engine
        self._dialect = dialect

    def execute(
        self,
        query: str,
        *,
        transform: RowTransform[T],
        params: Sequence[object] = (),
        page: PageDescriptor | None = None,
    ) -> QueryResult[T]:
        """Execute ``query`` and hand its live cursor to ``transform``.

        Database failures are logged and reported as a failed result. Errors raised
        by ``transform`` itself propagate once the connection has been released.
        """

        if page is not None:
            query = render_paged_query(query, page, self._dialect)
        statement = bind_positional_parameters(query, params)
        logger.info("query_execute query=%s param_count=%s", query, len(params))

        try:
            with self._engine.connect() as connection:
                result = connection.execute(statement)
                return QueryResult.success(transform(result))
        except SQLAlchemyError:
            logger.error("query_failed query=%s", query, exc_info=True)
            return QueryResult.failed()


def bind_positional_parameters(query: str, params: Sequence[object]) -> sa.TextClause:
    """Turn ``?`` placeholders outside literals and comments into ordered bind parameters."""

    parts: list[str] = []
    index = 0
    for kind, text in scan_sql(query):
        for char in text:
            if char == "?" and kind is SqlSegment.CODE:
                index += 1
                parts.append(f":p{index}")
                continue
            # Literal colons must not be read as named binds.
            parts.append("\\:" if char == ":" else char)

    if index != len(params):
        raise UserProviderConfigError(
            f"query has {index} positional placeholders but {len(params)} parameters were given"
        )
    values = {f"p{position}": value for position, value in enumerate(params, start=1)}
    return sa.text("".join(parts)).bindparams(**values)


def read_rows(result: sa.CursorResult) -> list[UserRecord]:
    """Read every row as a column-label to string mapping."""

    return [
        {str(column): _as_text(value) for column, value in row.items()}
        for row in result.mappings()
    ]


def read_int(result: sa.CursorResult) -> int | None:
    """Read the first column of the first row as an integer."""

    row = result.first()
    if row is None or row[0] is None:
        return None
    return int(row[0])


def read_string(result: sa.CursorResult) -> str | None:
    """Read the first column of the first row as text."""

    row = result.first()
    if row is None:
        return None
    return _as_text(row[0])


def _as_text(value: object) -> str | None:
    if value is None:
        return None
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return str(value)
