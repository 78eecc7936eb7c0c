"""Outcome factories.

Construction surface bound once to a subject (or to no subject) and passed
explicitly to the code that produces outcomes.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar

from result_flow.application.registry import ContractRegistry, default_registry
from result_flow.domain import (
    CONTINUED_TYPE,
    ContextFailure,
    ContextSuccess,
    ExpectationSet,
    Failure,
    Outcome,
    Success,
)
from result_flow.domain.value_objects import Declaration
from result_flow.shared.config import Settings, get_settings


class ResultFactory:
    """Builds Success/Failure outcomes on behalf of a subject.

    The subject's contract is resolved from the registry by class when no
    expectation set is given.

    Example:
        >>> class Divide:
        ...     def __init__(self):
        ...         self.result = ResultFactory(self)
        ...
        ...     def call(self, a, b):
        ...         if b == 0:
        ...             return self.result.failure("division_by_zero", "b must not be zero")
        ...         return self.result.success("division_completed", a / b)
    """

    success_class: ClassVar[type[Outcome]] = Success
    failure_class: ClassVar[type[Outcome]] = Failure

    def __init__(
        self,
        subject: Any = None,
        *,
        expectations: ExpectationSet | None = None,
        registry: ContractRegistry | None = None,
        config: Settings | None = None,
    ) -> None:
        if registry is None:
            registry = default_registry
        if expectations is None and subject is not None:
            owner = subject if isinstance(subject, type) else type(subject)
            expectations = registry.lookup(owner)

        self.subject = subject
        self.expectations = expectations
        self.config = config or get_settings()

    def success(self, type_: str, value: Any = None) -> Outcome:
        """Create a success; halted when the continuation addon is enabled."""
        return self._build(self.success_class, type_, value, halted=self.config.addon.continuation)

    def failure(self, type_: str, value: Any = None) -> Outcome:
        return self._build(self.failure_class, type_, value)

    def continue_(self, value: Any = None) -> Outcome:
        """Create the non-halted 'continued' success."""
        return self._build(self.success_class, CONTINUED_TYPE, value, halted=False)

    def _build(self, outcome_class: type[Outcome], type_: str, value: Any, halted: bool | None = None) -> Outcome:
        return outcome_class(
            type_,
            value,
            subject=self.subject,
            expectations=self.expectations,
            halted=halted,
            config=self.config,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(subject={self.subject!r})"


class ContextResultFactory(ResultFactory):
    """Builds ContextSuccess/ContextFailure outcomes.

    Values are mappings, given positionally, as keyword fields, or both. Any
    field name is accepted, including ``type_`` and ``value``.
    """

    success_class = ContextSuccess
    failure_class = ContextFailure

    def success(self, type_: str, value: Mapping[str, Any] | None = None, /, **fields: Any) -> Outcome:
        return super().success(type_, _fields(value, fields))

    def failure(self, type_: str, value: Mapping[str, Any] | None = None, /, **fields: Any) -> Outcome:
        return super().failure(type_, _fields(value, fields))

    def continue_(self, value: Mapping[str, Any] | None = None, /, **fields: Any) -> Outcome:
        return super().continue_(_fields(value, fields))


def _fields(value: Mapping[str, Any] | None, fields: dict[str, Any]) -> dict[str, Any]:
    return {**(value or {}), **fields}


class Expectations(ResultFactory):
    """Subject-less factory carrying its own contract.

    Example:
        >>> Result = Expectations(
        ...     success={"division_completed": lambda v: isinstance(v, (int, float))},
        ...     failure=["invalid_arg", "division_by_zero"],
        ... )
        >>> Result.success("division_completed", 5).value
        5
    """

    def __init__(
        self,
        success: Declaration = None,
        failure: Declaration = None,
        *,
        config: Settings | None = None,
    ) -> None:
        super().__init__(
            None,
            expectations=ExpectationSet.declare(success=success, failure=failure),
            config=config,
        )


class ContextExpectations(ContextResultFactory):
    """Subject-less Context factory carrying its own contract."""

    def __init__(
        self,
        success: Declaration = None,
        failure: Declaration = None,
        *,
        config: Settings | None = None,
    ) -> None:
        super().__init__(
            None,
            expectations=ExpectationSet.declare(success=success, failure=failure),
            config=config,
        )
