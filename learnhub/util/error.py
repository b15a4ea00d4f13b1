"""Errors raised while wiring the application together."""


class UtilError(Exception):
    """Base utility error."""


class DependencyInjectionError(UtilError):
    """No provider implementation matches the requested component."""

    def __init__(self, component: str, mock: bool):
        self.component = component
        self.mock = mock
        kind = "mock" if mock else "production"
        super().__init__(f"No {kind} implementation for {component}")
