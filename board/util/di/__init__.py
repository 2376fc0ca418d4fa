"""Dependency injection wiring for the board.

Every provider class is listed in ``PROVIDERS``. Swappable components
(see ``ProviderBase``) are listed by their base class and resolved to an
implementation with ``get_provider``.
"""

from typing import Type

from board.util.di.application import ProdApplicationProvider
from board.util.di.base import Component, ProviderBase
from board.util.di.core import ProdConfigProvider
from board.util.di.domain import ProdDomainProvider
from board.util.di.infrastructure import PersistenceProvider, ProdPersistenceProvider

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the provider class to instantiate for an entry of ``PROVIDERS``.

    Args:
        base: Entry of ``PROVIDERS``
        use_mock: Whether a swappable component should use its mock

    Returns:
        ``base`` itself when nothing subclasses it, otherwise the subclass
        whose ``__is_mock__`` matches ``use_mock``

    Raises:
        ValueError: If the component has no matching implementation
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for implementation in implementations:
        if implementation.__is_mock__ is use_mock:
            return implementation

    flavour = "mock" if use_mock else "production"
    raise ValueError(
        f"Component {base.__mock_component__ or base.__name__!r} "
        f"has no {flavour} provider"
    )


__all__ = [
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
]
