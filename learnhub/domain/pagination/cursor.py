"""Cursor codecs.

A cursor identifies the last row of a page. Single-key cursors travel as
the raw key value (an integer id or a UUID string); compound cursors are
an ordered mapping of every composite-key field to its value.
"""

import re
from abc import ABC, abstractmethod
from typing import Any, Mapping, Union
from uuid import UUID

from learnhub.domain.error import ValidationError

CursorScalar = Union[int, str]
CursorValue = Union[int, str, dict[str, CursorScalar]]

_DIGITS = re.compile(r"^\d+$")


class CursorCodec(ABC):
    """Converts between key values and their opaque cursor form."""

    @abstractmethod
    def encode(self, value: Any) -> CursorValue:
        """Turn a key value into the cursor handed to clients."""
        pass

    @abstractmethod
    def decode(self, opaque: Any) -> Any:
        """Turn a client cursor back into a key value.

        Raises:
            ValidationError: If the cursor is malformed
        """
        pass


class IntCursorCodec(CursorCodec):
    """Cursor over integer identifiers (comment and report ids)."""

    def encode(self, value: Any) -> int:
        return int(value)

    def decode(self, opaque: Any) -> int:
        if isinstance(opaque, bool):
            raise ValidationError("cursor must be a number")
        if isinstance(opaque, int):
            return opaque
        if isinstance(opaque, str) and _DIGITS.match(opaque.strip()):
            return int(opaque.strip())
        raise ValidationError("cursor must be a number")


class UUIDCursorCodec(CursorCodec):
    """Cursor over UUID identifiers (posts)."""

    def encode(self, value: Any) -> str:
        return str(value)

    def decode(self, opaque: Any) -> UUID:
        if isinstance(opaque, UUID):
            return opaque
        if isinstance(opaque, str):
            try:
                return UUID(opaque.strip())
            except ValueError:
                pass
        raise ValidationError("cursor must be a valid UUID")


class CompoundCursorCodec(CursorCodec):
    """Cursor over a composite key, e.g. ``(user_id, post_id)``.

    Every field of the key must be present; a partial tuple cannot
    position a keyset query and is rejected.
    """

    def __init__(self, fields: Mapping[str, CursorCodec]) -> None:
        """Initialize compound codec.

        Args:
            fields: Composite-key fields in key order, each with its own codec
        """
        self.fields = dict(fields)

    def encode(self, value: Mapping[str, Any]) -> dict[str, CursorScalar]:
        return {
            field: codec.encode(value[field]) for field, codec in self.fields.items()
        }

    def decode(self, opaque: Any) -> dict[str, Any]:
        if not isinstance(opaque, Mapping):
            raise ValidationError("compound cursor must map key fields to values")

        unknown = sorted(set(opaque) - set(self.fields))
        if unknown:
            raise ValidationError(f"compound cursor has unknown fields: {unknown}")

        missing = [f for f in self.fields if opaque.get(f) in (None, "")]
        if missing:
            raise ValidationError(f"compound cursor is missing fields: {missing}")

        return {field: codec.decode(opaque[field]) for field, codec in self.fields.items()}
