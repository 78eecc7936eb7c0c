"""Handler dispatch.

Branch registry used by ``Outcome.handle``. Branches are evaluated as they are
registered; the first matching one runs and the rest are skipped.
"""
from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any

from result_flow.domain.contract import TypeChecker
from result_flow.domain.exceptions import (
    DuplicateHandlerTypeError,
    MissingTypeArgumentError,
    UnhandledTypesError,
)
from result_flow.domain.value_objects import Kind

if TYPE_CHECKING:
    from result_flow.domain.models.outcome import Outcome

Callback = Callable[[Any, str], Any]


class Handler:
    """Collects the branches of one ``handle`` session.

    Example:
        >>> result.handle(
        ...     lambda on: on.success(lambda value, _: value * 2)
        ...     .failure(lambda value, _: 0, "division_by_zero")
        ...     .unknown(lambda value, _: -1)
        ... )
    """

    __slots__ = (
        "_outcome",
        "_type_checker",
        "_result",
        "_ran",
        "_handled",
        "_covered_kinds",
        "_covers_all",
    )

    def __init__(self, outcome: Outcome, type_checker: TypeChecker) -> None:
        self._outcome = outcome
        self._type_checker = type_checker
        self._result: Any = None
        self._ran = False
        self._handled: set[str] = set()
        self._covered_kinds: set[Kind] = set()
        self._covers_all = False

    def type(self, fn: Callback, *types: str) -> Handler:
        """Branch for any kind whose type is one of types."""
        if not types:
            raise MissingTypeArgumentError("type")
        types = self._register(types)
        if self._type_checker.allow(types):
            self._run(fn)
        return self

    branch = type

    def success(self, fn: Callback, *types: str) -> Handler:
        """Branch for successes; no types covers every success type."""
        types = self._register(types, Kind.SUCCESS)
        if self._type_checker.allow_success(types) and self._outcome.is_success():
            self._run(fn)
        return self

    def failure(self, fn: Callback, *types: str) -> Handler:
        """Branch for failures; no types covers every failure type."""
        types = self._register(types, Kind.FAILURE)
        if self._type_checker.allow_failure(types) and self._outcome.is_failure():
            self._run(fn)
        return self

    def unknown(self, fn: Callback) -> Handler:
        """Catch-all branch; runs when nothing registered before it matched."""
        self._covers_all = True
        self._run(fn)
        return self

    def outcome(self) -> Any:
        """Return the ran branch's value after checking declared types are covered.

        Raises:
            UnhandledTypesError: a declared type has no branch
        """
        validator = self._type_checker.validator
        if validator.enabled and not self._covers_all:
            missing = [
                type_
                for declaration in validator.expectations.declarations
                if declaration.kind not in self._covered_kinds
                for type_ in declaration.types
                if type_ not in self._handled
            ]
            if missing:
                raise UnhandledTypesError(missing)
        return self._result

    def _register(self, types: Iterable[str], kind: Kind | None = None) -> tuple[str, ...]:
        types = self._type_checker.check(types, kind)
        if not types and kind is not None:
            self._covered_kinds.add(kind)
        for type_ in types:
            if type_ in self._handled:
                raise DuplicateHandlerTypeError(type_)
            self._handled.add(type_)
        return types

    def _run(self, fn: Callback) -> None:
        if self._ran:
            return
        self._ran = True
        self._result = self._outcome.observe(fn)
