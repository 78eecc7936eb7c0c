"""OutcomeData Value Object.

The immutable (kind, type, value) triple carried by every outcome.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


def normalize_type(type_: Any) -> str:
    """Return a type tag as a plain str (str enums collapse to their value)."""
    if not isinstance(type_, str):
        raise TypeError(f"type must be a str, got {type_!r}")
    return str.__str__(type_)


class Kind(str, Enum):
    """Outcome classification."""

    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True, slots=True)
class OutcomeData:
    """Value Object for the tagged payload of an outcome.

    Attributes:
        kind: Success or failure
        type: Symbolic discriminator, meaningful within the declaring subject
        value: Opaque payload

    Example:
        >>> data = OutcomeData(Kind.SUCCESS, "ok", 5)
        >>> data.to_dict()
        {'success': {'ok': 5}}
    """

    kind: Kind
    type: str
    value: Any = None

    def __post_init__(self) -> None:
        """Validate and normalize the type tag."""
        object.__setattr__(self, "type", normalize_type(self.type))

    def to_tuple(self) -> tuple[str, Any]:
        """Return (type, value)."""
        return (self.type, self.value)

    def to_dict(self) -> dict[str, dict[str, Any]]:
        """Return {kind: {type: value}}."""
        return {self.kind.value: {self.type: self.value}}
