from __future__ import annotations

import pytest

from db_user_provider.domain.errors import UserProviderConfigError
from db_user_provider.domain.paging import PageDescriptor, Rdbms, render_paged_query

BASE_QUERY = "select id, username from users where username like ? order by username"


def test_postgresql_appends_limit_offset() -> None:
    rendered = render_paged_query(BASE_QUERY, PageDescriptor(offset=40, size=20), Rdbms.POSTGRESQL)

    assert rendered == f"{BASE_QUERY} LIMIT 20 OFFSET 40"


def test_mysql_appends_offset_comma_limit() -> None:
    rendered = render_paged_query(BASE_QUERY, PageDescriptor(offset=40, size=20), Rdbms.MYSQL)

    assert rendered == f"{BASE_QUERY} LIMIT 40, 20"


def test_oracle_and_db2_use_offset_fetch() -> None:
    page = PageDescriptor(offset=5, size=10)
    expected = f"{BASE_QUERY} OFFSET 5 ROWS FETCH NEXT 10 ROWS ONLY"

    assert render_paged_query(BASE_QUERY, page, Rdbms.ORACLE) == expected
    assert render_paged_query(BASE_QUERY, page, Rdbms.DB2) == expected


def test_sql_server_adds_order_by_only_when_missing() -> None:
    page = PageDescriptor(offset=0, size=10)

    ordered = render_paged_query(BASE_QUERY, page, Rdbms.SQL_SERVER)
    unordered = render_paged_query("select id from users", page, Rdbms.SQL_SERVER)

    assert ordered == f"{BASE_QUERY} OFFSET 0 ROWS FETCH NEXT 10 ROWS ONLY"
    assert unordered == (
        "select id from users ORDER BY (SELECT NULL) OFFSET 0 ROWS FETCH NEXT 10 ROWS ONLY"
    )


@pytest.mark.parametrize(
    "query",
    [
        "select id, row_number() over (order by id) rn from users",
        "select id from (select top 10 id from users order by id) recent",
        "select id from users where note = 'order by id'",
        "select id from users -- order by id\n",
        "select id from users /* order by id */",
    ],
)
def test_sql_server_ignores_nested_or_quoted_order_by(query: str) -> None:
    rendered = render_paged_query(query, PageDescriptor(offset=0, size=5), Rdbms.SQL_SERVER)

    assert rendered.endswith(" ORDER BY (SELECT NULL) OFFSET 0 ROWS FETCH NEXT 5 ROWS ONLY")


def test_sql_server_keeps_top_level_order_by_after_window_function() -> None:
    query = "select id, row_number() over (order by id) rn from users ORDER BY rn"

    rendered = render_paged_query(query, PageDescriptor(offset=5, size=5), Rdbms.SQL_SERVER)

    assert rendered == f"{query} OFFSET 5 ROWS FETCH NEXT 5 ROWS ONLY"


def test_trailing_line_comment_is_closed_before_paging_clause() -> None:
    rendered = render_paged_query(
        "select id from users -- newest first;",
        PageDescriptor(offset=0, size=3),
        Rdbms.POSTGRESQL,
    )

    assert rendered == "select id from users -- newest first\n LIMIT 3 OFFSET 0"


def test_oracle_11g_wraps_query_with_rownum_bounds() -> None:
    rendered = render_paged_query(BASE_QUERY, PageDescriptor(offset=20, size=20), Rdbms.ORACLE_11G)

    assert rendered == (
        "SELECT * FROM (SELECT paged_.*, ROWNUM rownum_ FROM ("
        f"{BASE_QUERY}) paged_ WHERE ROWNUM <= 40) WHERE rownum_ > 20"
    )


def test_dialects_differ_only_in_appended_clause() -> None:
    page = PageDescriptor(offset=0, size=20)

    postgres = render_paged_query(BASE_QUERY, page, Rdbms.POSTGRESQL)
    mysql = render_paged_query(BASE_QUERY, page, Rdbms.MYSQL)

    assert postgres != mysql
    assert postgres.startswith(BASE_QUERY)
    assert mysql.startswith(BASE_QUERY)
    assert postgres[len(BASE_QUERY) :] == " LIMIT 20 OFFSET 0"
    assert mysql[len(BASE_QUERY) :] == " LIMIT 0, 20"


def test_trailing_semicolon_and_whitespace_are_dropped() -> None:
    rendered = render_paged_query(
        "select id from users order by id;  \n",
        PageDescriptor(offset=0, size=5),
        Rdbms.POSTGRESQL,
    )

    assert rendered == "select id from users order by id LIMIT 5 OFFSET 0"


@pytest.mark.parametrize(
    ("offset", "size"),
    [(-1, 10), (0, 0), (0, -5)],
)
def test_page_descriptor_rejects_invalid_bounds(offset: int, size: int) -> None:
    with pytest.raises(ValueError):
        PageDescriptor(offset=offset, size=size)


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("PostgreSQL", Rdbms.POSTGRESQL),
        ("postgres", Rdbms.POSTGRESQL),
        ("MariaDB", Rdbms.MYSQL),
        ("MSSQL", Rdbms.SQL_SERVER),
        ("SQL Server 2012", Rdbms.SQL_SERVER),
        ("oracle_11g", Rdbms.ORACLE_11G),
        ("SQLite", Rdbms.SQLITE),
    ],
)
def test_rdbms_parse_accepts_aliases(name: str, expected: Rdbms) -> None:
    assert Rdbms.parse(name) is expected


def test_rdbms_parse_unknown_dialect_fails_fast() -> None:
    with pytest.raises(UserProviderConfigError):
        Rdbms.parse("Informix")
