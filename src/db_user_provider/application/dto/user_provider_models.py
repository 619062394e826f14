"""Pydantic models for user provider HTTP endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class StrictModel(BaseModel):
    """Base model with strict unknown-field rejection."""

    model_config = ConfigDict(extra="forbid")


class CredentialValidationRequest(StrictModel):
    """Username/password pair submitted by the identity host."""

    username: str = Field(min_length=1)
    password: str


class CredentialValidationResponse(StrictModel):
    valid: bool


class PasswordUpdateRequest(StrictModel):
    password: str


class UserResponse(StrictModel):
    """One user row keyed by the configured query's column labels."""

    user: dict[str, str | None]


class UserListResponse(StrictModel):
    users: list[dict[str, str | None]]


class UserCountResponse(StrictModel):
    count: int = Field(ge=0)


class UserRemovalResponse(StrictModel):
    """Whether the identity host may delete its copy of the user."""

    allowed: bool


class ProviderPolicyResponse(StrictModel):
    allow_delete: bool
    allow_overwrite: bool
