"""Classes and utilities related to Spotify Authorization Requests."""

from __future__ import annotations

import warnings
from types import MappingProxyType
from typing import Any, ClassVar, Iterable, Mapping
from urllib.parse import quote, urlencode

from attrs import field, frozen
from furl import furl  # type: ignore[import-untyped]

from .enums import QueryParams, ResponseTypes
from .exceptions import (
    InvalidCustomParamKey,
    InvalidCustomParamValue,
    MissingClientId,
    MissingRedirectUri,
    MissingResponseType,
    ReservedCustomParam,
    UnsupportedResponseType,
)

RESERVED_PARAMS = frozenset(param.value for param in QueryParams)
"""Query parameter names that can't be used as custom parameters."""


def _to_scopes(scopes: Iterable[str] | None) -> tuple[str, ...] | None:
    if scopes is None:
        return None
    return tuple(scopes)


def _to_custom_params(custom_params: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(custom_params))


@frozen(repr=False)
class AuthorizationRequest:
    """Represent an Authorization Request to the Spotify Accounts service.

    Instances are immutable. Use an
    [`AuthorizationRequestBuilder`][spotify_authentication.authorization_request.AuthorizationRequestBuilder]
    (or `AuthorizationRequest.builder()`) to create a validated request.
    Initializing this class directly skips all validation: this is how serialized requests
    are restored, and it must only be fed with values that were produced by a builder.

    Args:
        client_id: the client_id of the application.
        response_type: the response type, either `token` or `code`.
        redirect_uri: the uri that the Accounts service redirects to once authorization is done.
        state: an opaque value that will be returned unchanged in the Authorization Response.
        scopes: the requested scopes. `None` and an empty sequence both mean that no scope is requested.
        custom_params: extra parameters to include in the request.

    Example:
        ```python
        from spotify_authentication import AuthorizationRequest, ResponseTypes

        azr = (
            AuthorizationRequest.builder("my_client_id", ResponseTypes.CODE, "myapp://callback")
            .set_scopes(["user-read-email", "playlist-modify"])
            .set_state("xyz")
            .build()
        )
        print(azr.to_uri())
        ```

    """

    ACCOUNTS_SCHEME: ClassVar[str] = "https"
    ACCOUNTS_AUTHORITY: ClassVar[str] = "accounts.spotify.com"
    ACCOUNTS_PATH: ClassVar[str] = "/authorize"
    SCOPES_SEPARATOR: ClassVar[str] = " "
    QUERY_SAFE_CHARS: ClassVar[str] = "!'()*"
    """Characters, on top of the RFC3986 unreserved ones, that are not percent-encoded in query values."""

    client_id: str
    response_type: ResponseTypes = field(converter=ResponseTypes)
    redirect_uri: str
    state: str | None = None
    scopes: tuple[str, ...] | None = field(default=None, converter=_to_scopes)
    custom_params: Mapping[str, str] = field(factory=dict, converter=_to_custom_params)

    @classmethod
    def builder(
        cls, client_id: str, response_type: ResponseTypes | str, redirect_uri: str
    ) -> AuthorizationRequestBuilder:
        """Return a new builder for an `AuthorizationRequest`.

        This is a shortcut for `AuthorizationRequestBuilder(client_id, response_type, redirect_uri)`.

        """
        return AuthorizationRequestBuilder(client_id, response_type, redirect_uri, request_class=cls)

    def get_custom_param(self, key: str) -> str | None:
        """Return the value of a custom parameter, or `None` if it is not part of this request."""
        return self.custom_params.get(key)

    def as_dict(self) -> dict[str, Any]:
        """Return the full argument dict, with plain data types only.

        This can be used to serialize this request and/or to initialize a similar request.

        """
        return {
            "client_id": self.client_id,
            "response_type": self.response_type.value,
            "redirect_uri": self.redirect_uri,
            "state": self.state,
            "scopes": list(self.scopes) if self.scopes is not None else None,
            "custom_params": dict(self.custom_params),
        }

    @property
    def args(self) -> list[tuple[str, str]]:
        """Return the query parameters from this request, in the order they appear in the URI.

        Returns:
            a list of `(key, value)` tuples

        """
        args = [
            (QueryParams.CLIENT_ID.value, self.client_id),
            (QueryParams.RESPONSE_TYPE.value, self.response_type.value),
            (QueryParams.REDIRECT_URI.value, self.redirect_uri),
            (QueryParams.SHOW_DIALOG.value, "true"),
        ]
        if self.scopes:
            args.append((QueryParams.SCOPE.value, self.SCOPES_SEPARATOR.join(self.scopes)))
        if self.state is not None:
            args.append((QueryParams.STATE.value, self.state))
        args.extend(self.custom_params.items())
        return args

    @property
    def endpoint(self) -> str:
        """Return the Authorization Endpoint uri, without any query parameter."""
        return str(
            furl(scheme=self.ACCOUNTS_SCHEME, host=self.ACCOUNTS_AUTHORITY, path=self.ACCOUNTS_PATH).url
        )

    def to_uri(self) -> str:
        """Render this request as an Authorization Request URI.

        All keys and values are percent-encoded, including spaces (as `%20`).

        """
        query = urlencode(self.args, quote_via=quote, safe=self.QUERY_SAFE_CHARS)
        return f"{self.endpoint}?{query}"

    @property
    def uri(self) -> str:
        """Return the Authorization Request URI, as a `str`."""
        return self.to_uri()

    @property
    def furl(self) -> furl:
        """Return the Authorization Request URI, as a `furl`."""
        return furl(self.to_uri())

    def __repr__(self) -> str:
        """Return the Authorization Request URI, as a `str`."""
        return self.uri


class AuthorizationRequestBuilder:
    """A builder for [AuthorizationRequest][spotify_authentication.authorization_request.AuthorizationRequest].

    All setters return the builder itself, so calls can be chained.
    `build()` does not reset the builder: it can be called several times, and each call returns
    a new, independent request.

    Args:
        client_id: the client_id of the application. Must not be `None`.
        response_type: a `ResponseTypes`, or its value as `str`.
        redirect_uri: the redirect uri. Must not be `None` or empty.
        request_class: the class to build.

    Raises:
        MissingClientId: if `client_id` is `None`
        MissingResponseType: if `response_type` is `None`
        UnsupportedResponseType: if `response_type` is neither `token` nor `code`
        MissingRedirectUri: if `redirect_uri` is `None` or empty

    """

    def __init__(
        self,
        client_id: str,
        response_type: ResponseTypes | str,
        redirect_uri: str,
        *,
        request_class: type[AuthorizationRequest] = AuthorizationRequest,
    ) -> None:
        if client_id is None:
            raise MissingClientId
        if response_type is None:
            raise MissingResponseType
        try:
            response_type = ResponseTypes(response_type)
        except ValueError:
            raise UnsupportedResponseType(response_type) from None
        if not redirect_uri:
            raise MissingRedirectUri(redirect_uri)

        self.client_id = client_id
        self.response_type = response_type
        self.redirect_uri = redirect_uri
        self.request_class = request_class

        self.state: str | None = None
        self.scopes: tuple[str, ...] | None = None
        self.custom_params: dict[str, str] = {}

    def set_state(self, state: str | None) -> AuthorizationRequestBuilder:
        """Set the `state`, which will be returned as-is in the Authorization Response."""
        self.state = state
        return self

    def set_scopes(self, scopes: str | Iterable[str] | None) -> AuthorizationRequestBuilder:
        """Set the requested scopes.

        Args:
            scopes: the scopes, as an iterable of `str`, or a single space-separated `str`.
                `None` removes the previously set scopes.

        Returns:
            this builder

        """
        separator = self.request_class.SCOPES_SEPARATOR
        if scopes is None:
            self.scopes = None
        elif isinstance(scopes, str):
            self.scopes = tuple(scopes.split(separator)) if scopes else ()
        else:
            self.scopes = tuple(scopes)
            ambiguous = [scope for scope in self.scopes if separator in scope]
            if ambiguous:
                warnings.warn(
                    f"Scopes {ambiguous} contain the scope separator."
                    " They will be seen as multiple scopes by the Accounts service.",
                    stacklevel=2,
                )
        return self

    def set_custom_param(self, key: str, value: str) -> AuthorizationRequestBuilder:
        """Set a custom parameter to include in the request.

        Setting the same `key` again overwrites the previous value.

        Raises:
            InvalidCustomParamKey: if `key` is `None` or empty
            InvalidCustomParamValue: if `value` is `None` or empty
            ReservedCustomParam: if `key` is a parameter that the request already manages

        """
        if not key:
            raise InvalidCustomParamKey(key)
        if not value:
            raise InvalidCustomParamValue(key, value)
        if key in RESERVED_PARAMS:
            raise ReservedCustomParam(key)
        self.custom_params[key] = value
        return self

    def build(self) -> AuthorizationRequest:
        """Build a new `AuthorizationRequest` from the current state of this builder."""
        return self.request_class(
            client_id=self.client_id,
            response_type=self.response_type,
            redirect_uri=self.redirect_uri,
            state=self.state,
            scopes=self.scopes,
            custom_params=self.custom_params,
        )
