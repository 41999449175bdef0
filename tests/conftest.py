from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pytest import FixtureRequest as __FixtureRequest

    class FixtureRequest(__FixtureRequest):
        param: Any

else:
    from pytest import FixtureRequest  # noqa: F401
