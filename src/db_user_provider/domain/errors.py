"""Error types shared by credential verification and query execution."""

from __future__ import annotations


class UserProviderConfigError(ValueError):
    """Raised when provider configuration cannot be turned into a usable setup."""


class StoredCredentialFormatError(ValueError):
    """Raised when stored credential material cannot be interpreted."""


class PasswordUpdateNotSupportedError(NotImplementedError):
    """Raised for every password update request."""

    def __init__(self) -> None:
        super().__init__("Password update not supported")
