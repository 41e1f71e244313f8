"""Base class for domain services."""


class Service:
    """Marker base for the comment service's domain services.

    Services own the rules (visibility, moderation, counters) and talk to
    storage only through repository interfaces.
    """
