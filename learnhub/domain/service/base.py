"""Base class for domain services."""


class Service:
    """Marker base for domain services.

    Services receive their repositories through the constructor and hold
    no state beyond them, so one instance serves exactly one request.
    """
