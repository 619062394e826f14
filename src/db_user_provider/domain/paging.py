"""Dialect-aware rendering of paged SQL queries."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum

from db_user_provider.domain.errors import UserProviderConfigError
from db_user_provider.domain.sql_text import open_statement_end, top_level_code

_ORDER_BY_PATTERN = re.compile(r"\border\s+by\b", re.IGNORECASE)


class Rdbms(StrEnum):
    """Relational database products with distinct pagination syntax."""

    POSTGRESQL = "PostgreSQL"
    MYSQL = "MySQL"
    ORACLE = "Oracle"
    ORACLE_11G = "Oracle 11g"
    SQL_SERVER = "SQL Server"
    DB2 = "DB2"
    H2 = "H2"
    SQLITE = "SQLite"

    @classmethod
    def parse(cls, name: str) -> Rdbms:
        """Resolve a configured dialect name or alias, failing on unknown names."""

        key = re.sub(r"[^a-z0-9]", "", name.lower())
        resolved = _RDBMS_ALIASES.get(key)
        if resolved is None:
            raise UserProviderConfigError(f"unsupported RDBMS dialect: {name!r}")
        return resolved


_RDBMS_ALIASES: dict[str, Rdbms] = {
    "postgresql": Rdbms.POSTGRESQL,
    "postgres": Rdbms.POSTGRESQL,
    "pg": Rdbms.POSTGRESQL,
    "mysql": Rdbms.MYSQL,
    "mariadb": Rdbms.MYSQL,
    "oracle": Rdbms.ORACLE,
    "oracle12c": Rdbms.ORACLE,
    "oracle11g": Rdbms.ORACLE_11G,
    "sqlserver": Rdbms.SQL_SERVER,
    "sqlserver2012": Rdbms.SQL_SERVER,
    "mssql": Rdbms.SQL_SERVER,
    "db2": Rdbms.DB2,
    "h2": Rdbms.H2,
    "sqlite": Rdbms.SQLITE,
}


@dataclass(frozen=True)
class PageDescriptor:
    """One page of a result set expressed as row offset and page size."""

    offset: int
    size: int

    def __post_init__(self) -> None:
        if self.offset < 0:
            raise ValueError("page offset must be non-negative")
        if self.size <= 0:
            raise ValueError("page size must be positive")


def render_paged_query(query: str, page: PageDescriptor, dialect: Rdbms) -> str:
    """Return ``query`` restricted to ``page`` using the dialect's limiting syntax."""

    base = open_statement_end(query)
    offset = int(page.offset)
    size = int(page.size)

    if dialect in (Rdbms.POSTGRESQL, Rdbms.H2, Rdbms.SQLITE):
        return f"{base} LIMIT {size} OFFSET {offset}"
    if dialect is Rdbms.MYSQL:
        return f"{base} LIMIT {offset}, {size}"
    if dialect in (Rdbms.ORACLE, Rdbms.DB2):
        return f"{base} OFFSET {offset} ROWS FETCH NEXT {size} ROWS ONLY"
    if dialect is Rdbms.SQL_SERVER:
        # OFFSET/FETCH is only valid after a top-level ORDER BY on SQL Server.
        if _ORDER_BY_PATTERN.search(top_level_code(base)) is None:
            base = f"{base} ORDER BY (SELECT NULL)"
        return f"{base} OFFSET {offset} ROWS FETCH NEXT {size} ROWS ONLY"
    if dialect is Rdbms.ORACLE_11G:
        return (
            "SELECT * FROM (SELECT paged_.*, ROWNUM rownum_ FROM ("
            f"{base}) paged_ WHERE ROWNUM <= {offset + size}) WHERE rownum_ > {offset}"
        )
    raise UserProviderConfigError(f"no pagination strategy for dialect: {dialect!r}")
