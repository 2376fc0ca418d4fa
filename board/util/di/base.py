"""Provider base class shared by every DI provider of the board."""

from typing import ClassVar, Literal

from dishka import Provider

# Infrastructure pieces that tests may swap for in-memory fakes
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Dishka provider carrying mock-selection metadata.

    A provider that stands for a swappable component sets
    ``__mock_component__`` and is never instantiated itself; its subclasses
    are the implementations, told apart by ``__is_mock__``. Providers that
    leave ``__mock_component__`` unset are used as they are.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
