"""user-provider-api entrypoint and HTTP route wiring."""

from __future__ import annotations

import logging

import sqlalchemy as sa
import uvicorn
from fastapi import FastAPI

from db_user_provider.application.services.credential_validator import CredentialValidator
from db_user_provider.config.settings import Settings, load_settings
from db_user_provider.domain.query_config import QueryConfig
from db_user_provider.infrastructure.db.query_executor import SqlQueryExecutor
from db_user_provider.infrastructure.db.session import create_db_engine
from db_user_provider.infrastructure.db.user_repository import SqlUserRepository
from db_user_provider.infrastructure.http.user_router import build_user_router
from db_user_provider.infrastructure.logging import configure_logging
from db_user_provider.infrastructure.security.hash_verifier import HashVerifier

USER_PROVIDER_API_HOST = "0.0.0.0"
USER_PROVIDER_API_PORT = 8000
logger = logging.getLogger(__name__)


def build_user_repository(engine: sa.Engine, query_config: QueryConfig) -> SqlUserRepository:
    """Build SQL user repository over one engine and query configuration."""

    executor = SqlQueryExecutor(engine, dialect=query_config.rdbms)
    return SqlUserRepository(executor, query_config)


def create_app(
    *,
    settings: Settings | None = None,
    query_config: QueryConfig | None = None,
    engine: sa.Engine | None = None,
) -> FastAPI:
    """Create FastAPI app exposing the database user provider endpoints."""

    if settings is None and (query_config is None or engine is None):
        settings = load_settings()
    if settings is not None:
        configure_logging(level=settings.log_level, log_sql=settings.log_sql)
        if query_config is None:
            query_config = QueryConfig.from_settings(settings)
        if engine is None:
            engine = create_db_engine(settings.database_url)

    assert query_config is not None
    assert engine is not None

    users = build_user_repository(engine, query_config)
    credential_validator = CredentialValidator(
        users=users,
        query_config=query_config,
        hash_verifier=HashVerifier(),
    )
    logger.info(
        "user_provider_configured rdbms=%s hash_scheme=%s salt_location=%s",
        query_config.rdbms.value,
        type(query_config.hash_scheme).__name__,
        query_config.salt_location.value,
    )

    app = FastAPI()
    app.include_router(build_user_router(users=users, credential_validator=credential_validator))
    return app


def run_asgi_server(
    *,
    host: str = USER_PROVIDER_API_HOST,
    port: int = USER_PROVIDER_API_PORT,
) -> None:
    """Run user-provider-api as a long-lived ASGI process using application factory mode."""

    uvicorn.run(
        "apps.user_provider_api.main:create_app",
        host=host,
        port=port,
        factory=True,
    )


def main() -> None:
    """Run user-provider-api runtime process."""

    run_asgi_server()


if __name__ == "__main__":
    main()
