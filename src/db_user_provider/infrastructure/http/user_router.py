"""FastAPI router exposing user lookups and credential validation."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Query

from db_user_provider.application.dto.user_provider_models import (
    CredentialValidationRequest,
    CredentialValidationResponse,
    PasswordUpdateRequest,
    ProviderPolicyResponse,
    UserCountResponse,
    UserListResponse,
    UserRemovalResponse,
    UserResponse,
)
from db_user_provider.application.ports.user_repository_port import UserRepositoryPort
from db_user_provider.application.services.credential_validator import CredentialValidator
from db_user_provider.domain.errors import (
    PasswordUpdateNotSupportedError,
    StoredCredentialFormatError,
)
from db_user_provider.domain.paging import PageDescriptor

logger = logging.getLogger(__name__)


def build_user_router(
    *,
    users: UserRepositoryPort,
    credential_validator: CredentialValidator,
) -> APIRouter:
    """Build router exposing provider endpoints for the identity host."""

    router = APIRouter(tags=["users"])

    @router.post("/credentials/validate", response_model=CredentialValidationResponse)
    def validate_credentials(payload: CredentialValidationRequest) -> CredentialValidationResponse:
        try:
            valid = credential_validator.validate_credentials(
                username=payload.username,
                password=payload.password,
            )
        except StoredCredentialFormatError as exc:
            logger.error(
                "credential_validation_format_error username=%s error=%s",
                payload.username,
                exc,
            )
            raise HTTPException(status_code=500, detail="credential validation failed") from exc
        return CredentialValidationResponse(valid=valid)

    @router.put(
        "/users/{username}/credentials",
        status_code=501,
        response_description="Password update not supported",
    )
    def update_credentials(username: str, payload: PasswordUpdateRequest) -> None:
        try:
            credential_validator.update_credentials(
                username=username,
                password=payload.password,
            )
        except PasswordUpdateNotSupportedError as exc:
            raise HTTPException(status_code=501, detail=str(exc)) from exc

    @router.get("/provider/policy", response_model=ProviderPolicyResponse)
    def provider_policy() -> ProviderPolicyResponse:
        return ProviderPolicyResponse(
            allow_delete=credential_validator.remove_user(),
            allow_overwrite=credential_validator.allows_overwrite(),
        )

    @router.get("/users", response_model=UserListResponse)
    def list_users(
        search: str | None = None,
        first: int = Query(default=0, ge=0),
        max_results: int | None = Query(default=None, ge=1, alias="max"),
    ) -> UserListResponse:
        page = None if max_results is None else PageDescriptor(offset=first, size=max_results)
        return UserListResponse(users=users.find_users(search=search, page=page))

    @router.get("/users/count", response_model=UserCountResponse)
    def count_users(search: str | None = None) -> UserCountResponse:
        return UserCountResponse(count=users.count_users(search=search))

    @router.get("/users/by-username/{username}", response_model=UserResponse)
    def get_user_by_username(username: str) -> UserResponse:
        user = users.find_user_by_username(username=username)
        if user is None:
            raise HTTPException(status_code=404, detail="user not found")
        return UserResponse(user=user)

    @router.get("/users/{user_id}", response_model=UserResponse)
    def get_user(user_id: str) -> UserResponse:
        user = users.find_user_by_id(user_id=user_id)
        if user is None:
            raise HTTPException(status_code=404, detail="user not found")
        return UserResponse(user=user)

    @router.delete("/users/{user_id}", response_model=UserRemovalResponse)
    def remove_user(user_id: str) -> UserRemovalResponse:
        allowed = credential_validator.remove_user()
        logger.info("user_removal_requested user_id=%s allowed=%s", user_id, allowed)
        return UserRemovalResponse(allowed=allowed)

    return router
