"""Outcome Domain Entity.

Tagged success/failure values that replace exception-based control flow.
"""
from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping, Set
from typing import Any, ClassVar

from result_flow.domain import chain
from result_flow.domain.contract import ContractValidator, TypeChecker
from result_flow.domain.exceptions import (
    MissingTypeArgumentError,
    NotImplementedOutcomeError,
)
from result_flow.domain.handler import Handler
from result_flow.domain.value_objects import ExpectationSet, Kind, OutcomeData
from result_flow.shared.config import Settings

Callback = Callable[[Any, str], Any]


def _freeze(value: Any) -> Any:
    """Hashable stand-in for common unhashable payloads."""
    if isinstance(value, Mapping):
        return frozenset((k, _freeze(v)) for k, v in value.items())
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    if isinstance(value, Set):
        return frozenset(_freeze(v) for v in value)
    return value


class Outcome:
    """Base outcome: a kind, a type tag and a value.

    Use Success or Failure (or their Context counterparts); the base class has
    no kind and cannot be instantiated.

    Attributes:
        type: Symbolic discriminator
        value: Payload
        subject: Owner the outcome was produced for (may be None)
        halted: Whether and_then stops at this outcome

    Example:
        >>> result = Success("ok", 5)
        >>> result.and_then(lambda value: Success("doubled", value * 2)).value
        10
        >>> match result:
        ...     case Success("ok", value):
        ...         value
        5
    """

    __slots__ = ("_data", "_subject", "_halted", "_observed", "_type_checker")
    __match_args__ = ("type", "value")

    kind: ClassVar[Kind | None] = None
    expected_name: ClassVar[str] = "Success or Failure"

    def __init__(
        self,
        type_: str,
        value: Any = None,
        *,
        subject: Any = None,
        expectations: ExpectationSet | None = None,
        halted: bool | None = None,
        config: Settings | None = None,
    ) -> None:
        kind = self.kind
        if kind is None:
            raise NotImplementedOutcomeError(f"{self.__class__.__name__}.__init__")

        data = OutcomeData(kind, type_, self._prepare_value(value))
        validator = ContractValidator(expectations, config)
        validator.validate(data)

        self._data = data
        self._subject = subject
        self._halted = bool(halted) or kind is Kind.FAILURE
        self._observed = False
        self._type_checker: TypeChecker = validator.type_checker(data)

    @staticmethod
    def _prepare_value(value: Any) -> Any:
        return value

    # =========================================================================
    # Queries
    # =========================================================================
    @property
    def type(self) -> str:
        return self._data.type

    @property
    def value(self) -> Any:
        return self._data.value

    @property
    def subject(self) -> Any:
        return self._subject

    @property
    def halted(self) -> bool:
        return self._halted

    @property
    def chain_base(self) -> type[Outcome]:
        """Outcome family a chain step must return."""
        return Outcome

    def is_success(self, type_: str | None = None) -> bool:
        raise NotImplementedOutcomeError("is_success")

    def is_failure(self, type_: str | None = None) -> bool:
        raise NotImplementedOutcomeError("is_failure")

    def value_or(self, fallback: Callable[[Any], Any]) -> Any:
        raise NotImplementedOutcomeError("value_or")

    # =========================================================================
    # Dispatch
    # =========================================================================
    def on(self, fn: Callback, *types: str) -> Outcome:
        """Call fn(value, type) when the type is one of types."""
        if not types:
            raise MissingTypeArgumentError("on")
        if self._type_checker.allow(types):
            self.observe(fn)
        return self

    on_type = on

    def on_success(self, fn: Callback, *types: str) -> Outcome:
        """Call fn(value, type) for a success, optionally filtered by type."""
        if self._type_checker.allow_success(types) and self.is_success():
            self.observe(fn)
        return self

    def on_failure(self, fn: Callback, *types: str) -> Outcome:
        """Call fn(value, type) for a failure, optionally filtered by type."""
        if self._type_checker.allow_failure(types) and self.is_failure():
            self.observe(fn)
        return self

    def on_unknown(self, fn: Callback) -> Outcome:
        """Call fn(value, type) when no previous dispatch matched."""
        if not self._observed:
            fn(self.value, self.type)
        return self

    def observe(self, fn: Callback) -> Any:
        """Mark the outcome as observed and call fn(value, type)."""
        self._observed = True
        return fn(self.value, self.type)

    def handle(self, builder: Callable[[Handler], Any]) -> Any:
        """Run the first matching branch registered by builder.

        Args:
            builder: Receives a Handler and registers branches on it

        Returns:
            The return value of the branch that ran, or None
        """
        handler = Handler(self, self._type_checker)
        builder(handler)
        return handler.outcome()

    # =========================================================================
    # Composition
    # =========================================================================
    def and_then(
        self,
        method_name: str | Callable[[Any], Any] | None = None,
        context: Any = None,
        fn: Callable[[Any], Any] | None = None,
    ) -> Outcome:
        """Run the next step unless this outcome is halted.

        Args:
            method_name: Name of a subject method (0, 1 or 2 positional
                parameters), or a callable taking the value
            context: Second argument for two-parameter subject methods
            fn: Callable taking the value (exclusive with method_name)

        Returns:
            This outcome when halted, otherwise the step's outcome
        """
        return chain.advance(self, method_name, context, fn)

    def step_input(self) -> Any:
        return self.value

    def absorb(self, result: Outcome) -> Outcome:
        return result

    # =========================================================================
    # Structure
    # =========================================================================
    def deconstruct(self) -> tuple[str, Any]:
        return self._data.to_tuple()

    def deconstruct_keys(self) -> dict[str, dict[str, Any]]:
        return self._data.to_dict()

    def __iter__(self) -> Iterator[Any]:
        return iter(self.deconstruct())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Outcome):
            return NotImplemented
        return self.__class__ is other.__class__ and self.type == other.type and self.value == other.value

    def __hash__(self) -> int:
        try:
            return hash((self.__class__, self.type, _freeze(self.value)))
        except (TypeError, RecursionError):
            return hash((self.__class__, self.type))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(type={self.type!r}, value={self.value!r})"


class SuccessMethods:
    """Kind-specific behavior shared by every success class."""

    __slots__ = ()

    kind: ClassVar[Kind | None] = Kind.SUCCESS

    def is_success(self, type_: str | None = None) -> bool:
        return type_ is None or self.type == type_

    def is_failure(self, type_: str | None = None) -> bool:
        return False

    def value_or(self, fallback: Callable[[Any], Any]) -> Any:
        return self.value


class FailureMethods:
    """Kind-specific behavior shared by every failure class."""

    __slots__ = ()

    kind: ClassVar[Kind | None] = Kind.FAILURE

    def is_success(self, type_: str | None = None) -> bool:
        return False

    def is_failure(self, type_: str | None = None) -> bool:
        return type_ is None or self.type == type_

    def value_or(self, fallback: Callable[[Any], Any]) -> Any:
        return fallback(self.value)


class Success(SuccessMethods, Outcome):
    __slots__ = ()


class Failure(FailureMethods, Outcome):
    __slots__ = ()
