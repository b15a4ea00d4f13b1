"""Immutable value object base."""

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Compared by value; never mutated after construction.

    Query descriptors, page requests and pages all build on this.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)
