"""ExpectationSet Value Object.

Declares which (type, value) pairs a subject may produce, per kind.
"""
from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Union

from result_flow.domain.value_objects.outcome_data import Kind, normalize_type

Predicate = Callable[[Any], Any]
Declaration = Union[str, Iterable[str], Mapping[str, Predicate], None]


@dataclass(frozen=True, slots=True)
class KindExpectation:
    """Admissible types for one kind, optionally with value predicates.

    Attributes:
        kind: Kind the declaration applies to
        types: Declared type tags, in declaration order
        predicates: type -> predicate mapping, or None for a plain type set
    """

    kind: Kind
    types: tuple[str, ...]
    predicates: Mapping[str, Predicate] | None = None

    def __post_init__(self) -> None:
        """Validate declared types."""
        if not self.types:
            raise ValueError(f"{self.kind.value} expectations must declare at least one type")

    @classmethod
    def declare(cls, kind: Kind, declaration: Declaration) -> KindExpectation | None:
        """Build from a str, an iterable of str, or a type -> predicate mapping.

        Args:
            kind: Kind being declared
            declaration: The raw declaration (None means "not declared")

        Returns:
            KindExpectation instance, or None when nothing was declared
        """
        if declaration is None:
            return None

        if isinstance(declaration, str):
            return cls(kind=kind, types=(normalize_type(declaration),))

        if isinstance(declaration, Mapping):
            predicates: dict[str, Predicate] = {}
            for type_, predicate in declaration.items():
                if not callable(predicate):
                    raise TypeError(f"predicate for {type_!r} must be callable, got {predicate!r}")
                predicates[normalize_type(type_)] = predicate
            return cls(
                kind=kind,
                types=tuple(predicates),
                predicates=MappingProxyType(predicates),
            )

        types = tuple(dict.fromkeys(normalize_type(t) for t in declaration))
        return cls(kind=kind, types=types)

    @property
    def checks_values(self) -> bool:
        """Whether values are validated in addition to types."""
        return self.predicates is not None

    def allows(self, type_: str) -> bool:
        return type_ in self.types


@dataclass(frozen=True, slots=True)
class ExpectationSet:
    """Value Object for a subject's declared outcome contract.

    Example:
        >>> contract = ExpectationSet.declare(
        ...     success={"ok": lambda value: isinstance(value, int)},
        ...     failure=["invalid_arg", "division_by_zero"],
        ... )
        >>> contract.all_types
        ('ok', 'invalid_arg', 'division_by_zero')
    """

    success: KindExpectation | None = None
    failure: KindExpectation | None = None

    @classmethod
    def declare(cls, success: Declaration = None, failure: Declaration = None) -> ExpectationSet:
        """Create an ExpectationSet from raw per-kind declarations."""
        if success is None and failure is None:
            raise ValueError("expectations must declare success and/or failure types")
        return cls(
            success=KindExpectation.declare(Kind.SUCCESS, success),
            failure=KindExpectation.declare(Kind.FAILURE, failure),
        )

    def for_kind(self, kind: Kind) -> KindExpectation | None:
        return self.success if kind is Kind.SUCCESS else self.failure

    @property
    def declarations(self) -> tuple[KindExpectation, ...]:
        return tuple(d for d in (self.success, self.failure) if d is not None)

    @property
    def all_types(self) -> tuple[str, ...]:
        """Every declared type, success first."""
        return tuple(dict.fromkeys(t for d in self.declarations for t in d.types))
