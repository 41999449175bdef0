"""Contain utility classes for serializing/deserializing `AuthorizationRequest` instances.

A pending `AuthorizationRequest` often needs to cross a process or component boundary, for example
to be stored in a session or handed over to the component that opens the authorization UI, then
restored once the Authorization Response comes back. Those classes turn requests into compact
`bytes` and back.

While those classes provide default implementation that should work well for most cases, you might have to customize,
subclass or replace those classes to support custom features from your application.

"""

from __future__ import annotations

from abc import ABC
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar

from attrs import field, frozen
from binapy import BinaPy

from .authorization_request import AuthorizationRequest

if TYPE_CHECKING:
    from collections.abc import Mapping


T = TypeVar("T")


@frozen
class Serializer(ABC, Generic[T]):
    """Abstract class for (de)serializers."""

    dumper: Callable[[T], bytes] = field(repr=False)
    loader: Callable[[bytes], dict[str, Any]] = field(repr=False)
    make_instance: Callable[[Mapping[str, Any]], T] = field(repr=False)

    def dumps(self, instance: T) -> bytes:
        """Serialize and compress a given instance for easier transport.

        Args:
            instance: the object to serialize

        Returns:
            the serialized object, as bytes

        """
        return self.dumper(instance)

    def loads(self, serialized: bytes) -> T:
        """Deserialize a serialized object.

        Args:
            serialized: the serialized object

        Returns:
            the deserialized object

        """
        data = self.loader(serialized)
        return self.make_instance(data)


@frozen
class AuthorizationRequestSerializer(Serializer[AuthorizationRequest]):
    """(De)Serializer for `AuthorizationRequest` instances.

    Default implementation serializes the request fields as JSON, then compresses with deflate,
    then encodes as base64url.

    Deserialization does not validate the restored values: it must only be used on data produced by
    `dumps()` from a request that was created with a builder.

    """

    dumper: Callable[[AuthorizationRequest], bytes] = field(
        repr=False, factory=lambda: AuthorizationRequestSerializer.default_dumper
    )
    loader: Callable[[bytes], dict[str, Any]] = field(
        repr=False, factory=lambda: AuthorizationRequestSerializer.default_loader
    )
    make_instance: Callable[[Mapping[str, Any]], AuthorizationRequest] = field(
        repr=False, factory=lambda: AuthorizationRequestSerializer.default_make_instance
    )

    @classmethod
    def default_make_instance(cls, args: Mapping[str, Any]) -> AuthorizationRequest:
        """Instantiate an `AuthorizationRequest` from deserialized `args`, without validation."""
        return AuthorizationRequest(**args)

    @classmethod
    def default_dumper(cls, azr: AuthorizationRequest) -> bytes:
        """Provide a default dumper implementation.

        The JSON object holds `client_id`, `response_type`, `redirect_uri`, `state`, `scopes` and
        `custom_params`. `scopes` is `null` when absent, and a list (possibly empty)
        otherwise. `custom_params` is a JSON object, so its order is not significant.

        Args:
            azr: the `AuthorizationRequest` to serialize

        Returns:
            the serialized value

        """
        return BinaPy.serialize_to("json", azr.as_dict()).to("deflate").to("b64u")

    @classmethod
    def default_loader(cls, serialized: bytes) -> dict[str, Any]:
        """Provide a default deserializer implementation.

        This does the opposite operations than `default_dumper`.

        Args:
            serialized: the serialized AuthorizationRequest

        Returns:
            the `AuthorizationRequest` arguments, as a dict

        """
        args: dict[str, Any] = BinaPy(serialized).decode_from("b64u").decode_from("deflate").parse_from("json")
        return args


default_serializer = AuthorizationRequestSerializer()


def marshal(azr: AuthorizationRequest) -> bytes:
    """Serialize an `AuthorizationRequest` with the default serializer."""
    return default_serializer.dumps(azr)


def unmarshal(serialized: bytes) -> AuthorizationRequest:
    """Restore an `AuthorizationRequest` that was serialized with `marshal()`."""
    return default_serializer.loads(serialized)
