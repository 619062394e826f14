"""Process logging setup for the user provider runtime."""

from __future__ import annotations

import logging

_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_SQLALCHEMY_ENGINE_LOGGER = "sqlalchemy.engine"


def resolve_log_level(level: str) -> int:
    """Return the numeric level for a level name, defaulting to INFO."""

    normalized_level = level.strip().upper() or "INFO"
    resolved = logging.getLevelName(normalized_level)
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(*, level: str, log_sql: bool = False) -> None:
    """Configure root logging and SQLAlchemy statement logging."""

    logging.basicConfig(level=resolve_log_level(level), format=_LOG_FORMAT)
    logging.getLogger(_SQLALCHEMY_ENGINE_LOGGER).setLevel(
        logging.INFO if log_sql else logging.WARNING
    )
