"""This module contains all exception classes from `spotify_authentication`."""

from __future__ import annotations

from typing import Any


class InvalidArgument(ValueError):
    """Base class for errors raised when building an `AuthorizationRequest` with invalid arguments."""


class MissingClientId(InvalidArgument):
    """Raised when no `client_id` is provided."""

    def __init__(self) -> None:
        super().__init__("Client ID can't be None.")


class MissingResponseType(InvalidArgument):
    """Raised when no `response_type` is provided."""

    def __init__(self) -> None:
        super().__init__("Response type can't be None.")


class UnsupportedResponseType(InvalidArgument):
    """Raised when the `response_type` is neither `token` nor `code`."""

    def __init__(self, response_type: Any) -> None:
        super().__init__(f"Unsupported response type '{response_type}'. Supported types are 'token' and 'code'.")
        self.response_type = response_type


class MissingRedirectUri(InvalidArgument):
    """Raised when the `redirect_uri` is `None` or empty."""

    def __init__(self, redirect_uri: str | None) -> None:
        super().__init__("Redirect URI can't be None or empty.")
        self.redirect_uri = redirect_uri


class InvalidCustomParamKey(InvalidArgument):
    """Raised when a custom parameter key is `None` or empty."""

    def __init__(self, key: str | None) -> None:
        super().__init__("Custom parameter key can't be None or empty.")
        self.key = key


class InvalidCustomParamValue(InvalidArgument):
    """Raised when a custom parameter value is `None` or empty."""

    def __init__(self, key: str, value: str | None) -> None:
        super().__init__(f"Value for custom parameter '{key}' can't be None or empty.")
        self.key = key
        self.value = value


class ReservedCustomParam(InvalidArgument):
    """Raised when a custom parameter uses a key that the request manages itself.

    Such a parameter would otherwise be duplicated in the Authorization Request URI.

    """

    def __init__(self, key: str) -> None:
        super().__init__(
            f"'{key}' is a reserved parameter and can't be used as a custom parameter."
            " Use the dedicated builder method instead."
        )
        self.key = key
