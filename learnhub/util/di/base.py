"""Provider base with mocking metadata."""

from typing import ClassVar, Literal

from dishka import Provider

# Components with an in-memory stand-in for tests
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Base for every provider in ``PROVIDERS``.

    A base that names a ``__mock_component__`` is abstract: its subclasses
    are the production and mock implementations, told apart by
    ``__is_mock__``. Bases without subclasses are used as they are.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
