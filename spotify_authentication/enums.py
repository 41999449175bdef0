"""Contains enumerations of the parameters and values used in Spotify Authorization Requests."""

from __future__ import annotations

from enum import Enum


class ResponseTypes(str, Enum):
    """The `response_type` values supported by the Spotify Accounts service.

    Use `CODE` for the Authorization Code grant, or `TOKEN` for the Implicit grant.

    """

    TOKEN = "token"
    CODE = "code"


class QueryParams(str, Enum):
    """The query parameters that an `AuthorizationRequest` manages itself.

    Those keys cannot be used as custom parameters.

    """

    CLIENT_ID = "client_id"
    RESPONSE_TYPE = "response_type"
    REDIRECT_URI = "redirect_uri"
    STATE = "state"
    SCOPE = "scope"
    SHOW_DIALOG = "show_dialog"
