"""Domain layer exceptions.

All library exceptions inherit from ResultError. They signal misuse of the
outcome API; business failures are Failure outcomes, never exceptions.
"""
from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def _format_types(types: Iterable[str]) -> str:
    return ", ".join(repr(str(t)) for t in types)


class ResultError(Exception):
    """Base exception for outcome API errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class MissingTypeArgumentError(ResultError):
    def __init__(self, method: str = "on") -> None:
        super().__init__(f"A type (argument) is required to invoke {method}()")
        self.method = method


class NotImplementedOutcomeError(ResultError, NotImplementedError):
    def __init__(self, operation: str) -> None:
        super().__init__(
            f"{operation}() requires a concrete outcome kind (success or failure)"
        )
        self.operation = operation


class InvalidSubjectMethodArityError(ResultError):
    def __init__(self, subject: Any, method_name: str, arity: int | None, max_arity: int = 2) -> None:
        shown = "variadic" if arity is None else str(arity)
        super().__init__(
            f"{type(subject).__name__}.{method_name} has unsupported arity ({shown}). "
            f"Expected 0..{max_arity}",
            {"method": method_name, "arity": arity, "max_arity": max_arity},
        )
        self.subject = subject
        self.method_name = method_name
        self.arity = arity


class UnexpectedOutcomeError(ResultError):
    def __init__(self, outcome: Any, origin: str, expected: str = "Success or Failure") -> None:
        super().__init__(
            f"Unexpected outcome: {outcome!r}. "
            f"The {origin} must return this object wrapped by {expected}",
            {"origin": origin},
        )
        self.outcome = outcome
        self.origin = origin


class InvalidResultSubjectError(ResultError):
    def __init__(self, given_result: Any, expected_subject: Any) -> None:
        super().__init__(
            f"You cannot call and_then and return a result that does not belong "
            f"to the same subject. Expected subject: {expected_subject!r}, "
            f"given result: {given_result!r} (subject: {given_result.subject!r})"
        )
        self.given_result = given_result
        self.expected_subject = expected_subject


class KeyNotFoundError(ResultError, KeyError):
    def __init__(self, key: str, available: Iterable[str]) -> None:
        available = list(available)
        super().__init__(
            f"key {key!r} not found in the accumulated data. "
            f"Available keys: {_format_types(available)}",
            {"key": key, "available": available},
        )
        self.key = key


class DuplicateHandlerTypeError(ResultError):
    def __init__(self, type_: str) -> None:
        super().__init__(f"type {type_!r} is already handled by another branch")
        self.type = type_


class ExpectationsAlreadyRegisteredError(ResultError):
    def __init__(self, owner: type) -> None:
        super().__init__(f"expectations already registered for {owner.__qualname__}")
        self.owner = owner


class ContractError(ResultError):
    """Base exception for expectation (contract) violations."""


class UnexpectedTypeError(ContractError):
    def __init__(self, type_: str, allowed: Iterable[str]) -> None:
        allowed = list(allowed)
        super().__init__(
            f"type {type_!r} is not allowed. Allowed types: {_format_types(allowed)}",
            {"type": type_, "allowed": allowed},
        )
        self.type = type_
        self.allowed = allowed


class UnexpectedValueError(ContractError):
    def __init__(self, type_: str, value: Any, reason: str | None = None) -> None:
        message = f"value {value!r} is not allowed for {type_!r} type"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message, {"type": type_, "reason": reason})
        self.type = type_
        self.value = value
        self.reason = reason


class UnhandledTypesError(ContractError):
    def __init__(self, types: Iterable[str]) -> None:
        types = list(types)
        noun = "This was" if len(types) == 1 else "These were"
        super().__init__(
            f"You must handle all cases. {noun} not handled: {_format_types(types)}",
            {"types": types},
        )
        self.types = types
