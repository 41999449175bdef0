"""Main module for `spotify_authentication`.

You can import any class from any submodule directly from this main module.
"""

from .authorization_request import AuthorizationRequest, AuthorizationRequestBuilder
from .enums import QueryParams, ResponseTypes
from .exceptions import (
    InvalidArgument,
    InvalidCustomParamKey,
    InvalidCustomParamValue,
    MissingClientId,
    MissingRedirectUri,
    MissingResponseType,
    ReservedCustomParam,
    UnsupportedResponseType,
)
from .serializers import AuthorizationRequestSerializer, Serializer, marshal, unmarshal

__all__ = [
    "AuthorizationRequest",
    "AuthorizationRequestBuilder",
    "AuthorizationRequestSerializer",
    "InvalidArgument",
    "InvalidCustomParamKey",
    "InvalidCustomParamValue",
    "MissingClientId",
    "MissingRedirectUri",
    "MissingResponseType",
    "QueryParams",
    "ReservedCustomParam",
    "ResponseTypes",
    "Serializer",
    "UnsupportedResponseType",
    "marshal",
    "unmarshal",
]
