"""Context Outcome Domain Entity.

Outcomes whose value is a mapping that accumulates across chain steps.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any, ClassVar

from result_flow.domain.exceptions import KeyNotFoundError, NotImplementedOutcomeError
from result_flow.domain.models.outcome import FailureMethods, Outcome, SuccessMethods
from result_flow.domain.value_objects import OutcomeData
from result_flow.shared.logging import get_logger

logger = get_logger(__name__)


class ContextOutcome(Outcome):
    """Outcome carrying a mapping payload.

    When a step returns a success, its mapping is merged over the mapping
    accumulated so far (the step's keys win). Failures carry only their own
    payload.

    Example:
        >>> result = ContextSuccess("a", {"a": 1}).and_then(
        ...     lambda data: ContextSuccess("b", {"b": 2})
        ... )
        >>> dict(result.value)
        {'a': 1, 'b': 2}
        >>> result.and_expose("only_b", ["b"]).value
        mappingproxy({'b': 2})
    """

    __slots__ = ()

    expected_name: ClassVar[str] = "ContextSuccess or ContextFailure"

    @staticmethod
    def _prepare_value(value: Any) -> dict[str, Any]:
        if value is None:
            return {}
        if not isinstance(value, Mapping):
            raise TypeError(f"context value must be a mapping, got {value!r}")
        return dict(value)

    @property
    def value(self) -> Mapping[str, Any]:
        return MappingProxyType(self._data.value)

    @property
    def chain_base(self) -> type[Outcome]:
        return ContextOutcome

    def deconstruct(self) -> tuple[str, Mapping[str, Any]]:
        return (self.type, self.value)

    def deconstruct_keys(self) -> dict[str, dict[str, Any]]:
        return {self._data.kind.value: {self.type: self.value}}

    def absorb(self, result: Outcome) -> Outcome:
        if result.is_failure():
            return result
        return result.merged_onto(self._data.value)

    def merged_onto(self, accumulated: Mapping[str, Any]) -> ContextOutcome:
        """Copy of this outcome whose value is accumulated updated with it."""
        data = OutcomeData(self._data.kind, self.type, {**accumulated, **self._data.value})
        merged = object.__new__(self.__class__)
        merged._data = data
        merged._subject = self._subject
        merged._halted = self._halted
        merged._observed = False
        merged._type_checker = self._type_checker.validator.type_checker(data)
        return merged

    def and_expose(self, type_: str, keys: Iterable[str], halted: bool = True) -> ContextOutcome:
        raise NotImplementedOutcomeError("and_expose")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(type={self.type!r}, value={self._data.value!r})"


class ContextSuccess(SuccessMethods, ContextOutcome):
    __slots__ = ()

    def and_expose(self, type_: str, keys: Iterable[str], halted: bool = True) -> ContextOutcome:
        """Project the accumulated mapping onto keys as a new success.

        Args:
            type_: Type of the exposed success
            keys: Keys to keep, in output order
            halted: Whether the exposed success stops the chain

        Returns:
            New ContextSuccess owned by the same subject

        Raises:
            KeyNotFoundError: a key is missing from the accumulated mapping
        """
        accumulated = self._data.value
        exposed: dict[str, Any] = {}
        for key in keys:
            if key not in accumulated:
                raise KeyNotFoundError(key, accumulated)
            exposed[key] = accumulated[key]

        logger.debug("exposing context", type=type_, keys=list(exposed), halted=halted)

        validator = self._type_checker.validator
        return ContextSuccess(
            type_,
            exposed,
            subject=self._subject,
            expectations=validator.expectations,
            halted=halted,
            config=validator.config,
        )


class ContextFailure(FailureMethods, ContextOutcome):
    __slots__ = ()

    def and_expose(self, type_: str, keys: Iterable[str], halted: bool = True) -> ContextOutcome:
        """Failures are returned unchanged."""
        return self
