"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Services wrap repository calls with tracing and hold rules that span
    posts and tags.
    """

    pass
