"""Marker base for domain services."""


class Service:
    """Stateless business logic over one or more repositories.

    Subclasses receive their repositories and settings through the
    constructor and are provided per request.
    """
