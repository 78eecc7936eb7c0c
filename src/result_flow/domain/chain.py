"""Chain engine.

Implements ``and_then``: halting, step resolution, and the checks applied to
every value a step returns.
"""
from __future__ import annotations

import inspect
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Union

from result_flow.domain.exceptions import (
    InvalidResultSubjectError,
    InvalidSubjectMethodArityError,
    UnexpectedOutcomeError,
)
from result_flow.shared.logging import get_logger

if TYPE_CHECKING:
    from result_flow.domain.models.outcome import Outcome

logger = get_logger(__name__)

MAX_METHOD_ARITY = 2


@dataclass(frozen=True, slots=True)
class NoArgStep:
    """Step called with no arguments."""

    fn: Callable[[], Any]


@dataclass(frozen=True, slots=True)
class ValueStep:
    """Step called with the current value."""

    fn: Callable[[Any], Any]


@dataclass(frozen=True, slots=True)
class ValueContextStep:
    """Step called with the current value and the call-site context."""

    fn: Callable[[Any, Any], Any]


Step = Union[NoArgStep, ValueStep, ValueContextStep]

_STEPS_BY_ARITY: dict[int, type[Step]] = {
    0: NoArgStep,
    1: ValueStep,
    2: ValueContextStep,
}


def _positional_arity(method: Callable[..., Any]) -> int | None:
    """Count positional parameters; None when the shape cannot be satisfied."""
    try:
        signature = inspect.signature(method)
    except (TypeError, ValueError):
        return None

    arity = 0
    for parameter in signature.parameters.values():
        if parameter.kind is parameter.VAR_POSITIONAL:
            return None
        if parameter.kind in (parameter.POSITIONAL_ONLY, parameter.POSITIONAL_OR_KEYWORD):
            arity += 1
        elif parameter.kind is parameter.KEYWORD_ONLY and parameter.default is parameter.empty:
            return None
    return arity


def method_step(subject: Any, method_name: str) -> Step:
    """Resolve a subject method into a step variant.

    Args:
        subject: Object owning the method
        method_name: Attribute name of the method

    Returns:
        The step variant matching the method's positional arity

    Raises:
        AttributeError: subject has no such attribute
        InvalidSubjectMethodArityError: arity is outside 0..2
    """
    method = getattr(subject, method_name)
    arity = _positional_arity(method)
    step_class = _STEPS_BY_ARITY.get(arity) if arity is not None else None
    if step_class is None:
        raise InvalidSubjectMethodArityError(subject, method_name, arity, MAX_METHOD_ARITY)
    return step_class(method)


def run_step(step: Step, value: Any, context: Any = None) -> Any:
    match step:
        case NoArgStep(fn):
            return fn()
        case ValueStep(fn):
            return fn(value)
        case ValueContextStep(fn):
            return fn(value, context)
    raise TypeError(f"unknown step variant: {step!r}")


def ensure_outcome(current: Outcome, result: Any, origin: str) -> Outcome:
    """Check a step's return value before it becomes the current outcome.

    Raises:
        UnexpectedOutcomeError: result is not an outcome of the chain's family
        InvalidResultSubjectError: result belongs to another subject
    """
    chain_base = current.chain_base
    if not isinstance(result, chain_base):
        raise UnexpectedOutcomeError(result, origin, chain_base.expected_name)

    if result.subject is not current.subject:
        raise InvalidResultSubjectError(result, current.subject)

    return result


def advance(
    current: Outcome,
    method_name: str | Callable[[Any], Any] | None = None,
    context: Any = None,
    fn: Callable[[Any], Any] | None = None,
) -> Outcome:
    """Run the next step of a chain unless the current outcome is halted."""
    if current.halted:
        logger.debug("chain halted", kind=current.kind.value, type=current.type)
        return current

    if callable(method_name) and fn is None:
        method_name, fn = None, method_name

    if method_name is not None and fn is not None:
        raise TypeError("method_name and fn are mutually exclusive")

    if fn is not None:
        origin = "block"
        step: Step = ValueStep(fn)
    elif method_name is not None:
        origin = "method"
        step = method_step(current.subject, method_name)
    else:
        raise TypeError("and_then() requires a method name or fn")

    result = run_step(step, current.step_input(), context)
    return current.absorb(ensure_outcome(current, result, origin))
