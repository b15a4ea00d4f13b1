"""Persistence layer errors."""


class StoreError(Exception):
    """Failure reported by the backing store."""

    pass


class IntegrityViolationError(StoreError):
    """A write violated a key or foreign-key constraint."""

    pass
