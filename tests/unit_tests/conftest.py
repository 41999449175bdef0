from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from spotify_authentication import AuthorizationRequest, AuthorizationRequestBuilder, ResponseTypes

if TYPE_CHECKING:
    from tests.conftest import FixtureRequest


@pytest.fixture(scope="session")
def client_id() -> str:
    return "myclientid"


@pytest.fixture(scope="session")
def redirect_uri() -> str:
    return "myapp://callback"


@pytest.fixture(scope="session", params=[ResponseTypes.CODE, ResponseTypes.TOKEN])
def response_type(request: FixtureRequest) -> ResponseTypes:
    return request.param


@pytest.fixture(scope="session", params=[None, "xyz", "a state with spaces & symbols"])
def state(request: FixtureRequest) -> str | None:
    return request.param


@pytest.fixture(
    scope="session",
    params=[None, (), ("user-read-email",), ("user-read-email", "playlist-modify")],
    ids=["no_scopes", "empty_scopes", "one_scope", "two_scopes"],
)
def scopes(request: FixtureRequest) -> tuple[str, ...] | None:
    return request.param


@pytest.fixture(
    scope="session",
    params=[{}, {"foo": "bar"}, {"foo": "bar", "utm_source": "my app/1.0"}],
    ids=["no_custom_params", "one_custom_param", "two_custom_params"],
)
def custom_params(request: FixtureRequest) -> dict[str, str]:
    return request.param


@pytest.fixture
def builder(
    client_id: str,
    response_type: ResponseTypes,
    redirect_uri: str,
    state: str | None,
    scopes: tuple[str, ...] | None,
    custom_params: dict[str, str],
) -> AuthorizationRequestBuilder:
    builder = AuthorizationRequest.builder(client_id, response_type, redirect_uri).set_state(state).set_scopes(scopes)
    for key, value in custom_params.items():
        builder.set_custom_param(key, value)
    return builder


@pytest.fixture
def authorization_request(builder: AuthorizationRequestBuilder) -> AuthorizationRequest:
    return builder.build()
