from __future__ import annotations

import logging

import pytest

from db_user_provider.infrastructure.logging import configure_logging, resolve_log_level


@pytest.mark.parametrize(
    ("level", "expected"),
    [
        ("debug", logging.DEBUG),
        (" WARNING ", logging.WARNING),
        ("", logging.INFO),
        ("loud", logging.INFO),
    ],
)
def test_resolve_log_level_defaults_to_info(level: str, expected: int) -> None:
    assert resolve_log_level(level) == expected


def test_sql_engine_logging_is_opt_in() -> None:
    configure_logging(level="INFO")
    assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING

    configure_logging(level="INFO", log_sql=True)
    assert logging.getLogger("sqlalchemy.engine").level == logging.INFO
