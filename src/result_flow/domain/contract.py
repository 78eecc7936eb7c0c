"""Contract validation.

Gates outcome construction against a declared ExpectationSet and checks the
type filters used by dispatch against the same declaration.
"""
from __future__ import annotations

import inspect
from collections.abc import Iterable

from result_flow.domain.exceptions import UnexpectedTypeError, UnexpectedValueError
from result_flow.domain.value_objects import (
    ExpectationSet,
    Kind,
    KindExpectation,
    OutcomeData,
    Predicate,
    normalize_type,
)
from result_flow.shared.config import Settings, get_settings

# Reserved success type used to carry partial state forward.
CONTINUED_TYPE = "continued"


def _describe(predicate: Predicate) -> str | None:
    doc = getattr(predicate, "__doc__", None)
    if not isinstance(doc, str) or not doc.strip():
        return None
    return inspect.cleandoc(doc).splitlines()[0]


class ContractValidator:
    """Validates outcome data against an optional ExpectationSet.

    Validation is opt-in: without an expectation set, or with the
    ``feature.expectations`` toggle off, every check is a no-op.
    """

    __slots__ = ("expectations", "config")

    def __init__(self, expectations: ExpectationSet | None = None, config: Settings | None = None) -> None:
        self.expectations = expectations
        self.config = config or get_settings()

    @property
    def enabled(self) -> bool:
        return self.expectations is not None and self.config.feature.expectations

    def allowed_types(self, declaration: KindExpectation) -> tuple[str, ...]:
        if declaration.kind is Kind.SUCCESS and self.config.addon.continuation:
            return tuple(dict.fromkeys((*declaration.types, CONTINUED_TYPE)))
        return declaration.types

    def validate(self, data: OutcomeData) -> None:
        """Raise if the data breaks the declared contract.

        Args:
            data: Outcome payload about to be wrapped

        Raises:
            UnexpectedTypeError: type is not declared for the kind
            UnexpectedValueError: the type's predicate rejects the value
        """
        if not self.enabled:
            return

        declaration = self.expectations.for_kind(data.kind)
        if declaration is None:
            return

        if data.kind is Kind.SUCCESS and data.type == CONTINUED_TYPE and self.config.addon.continuation:
            return

        if not declaration.allows(data.type):
            raise UnexpectedTypeError(data.type, self.allowed_types(declaration))

        if declaration.checks_values:
            self._check_value(declaration.predicates[data.type], data)

    def _check_value(self, predicate: Predicate, data: OutcomeData) -> None:
        if data.value is None and self.config.pattern_matching.nil_as_valid_value_checking:
            return

        # A falsy return, including the None a match statement falls through
        # to when no case matches, is a rejection, as is any raised Exception.
        try:
            accepted = predicate(data.value)
        except Exception as exc:
            raise UnexpectedValueError(data.type, data.value, str(exc) or type(exc).__name__) from exc

        if not accepted:
            raise UnexpectedValueError(data.type, data.value, _describe(predicate))

    def type_checker(self, data: OutcomeData) -> TypeChecker:
        return TypeChecker(data, self)


class TypeChecker:
    """Answers dispatch questions for one outcome.

    Every type passed to a dispatch method must be declared for the relevant
    kind when an expectation set is active.
    """

    __slots__ = ("data", "validator")

    def __init__(self, data: OutcomeData, validator: ContractValidator) -> None:
        self.data = data
        self.validator = validator

    def allow(self, types: Iterable[str]) -> bool:
        types = self.check(types)
        return self.data.type in types

    def allow_success(self, types: Iterable[str]) -> bool:
        types = self.check(types, Kind.SUCCESS)
        return not types or self.data.type in types

    def allow_failure(self, types: Iterable[str]) -> bool:
        types = self.check(types, Kind.FAILURE)
        return not types or self.data.type in types

    def check(self, types: Iterable[str], kind: Kind | None = None) -> tuple[str, ...]:
        """Normalize types, raising UnexpectedTypeError for undeclared ones."""
        types = tuple(normalize_type(t) for t in types)
        validator = self.validator
        if not types or not validator.enabled:
            return types

        kinds = (kind,) if kind is not None else (Kind.SUCCESS, Kind.FAILURE)
        declarations = [validator.expectations.for_kind(k) for k in kinds]
        if any(d is None for d in declarations):
            # An undeclared kind accepts any type.
            return types

        allowed = tuple(dict.fromkeys(t for d in declarations for t in validator.allowed_types(d)))
        for type_ in types:
            if type_ not in allowed:
                raise UnexpectedTypeError(type_, allowed)
        return types
