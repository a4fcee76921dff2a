"""Base class for domain services."""


class Service:
    """Marker base for domain services.

    Services are built per request. The acting user is always an
    argument, never an attribute.
    """
