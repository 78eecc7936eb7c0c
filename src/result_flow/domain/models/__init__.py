"""Domain Models.

Outcome entities: the base success/failure pair and the Context variant.
"""
from __future__ import annotations

from result_flow.domain.models.context import (
    ContextFailure,
    ContextOutcome,
    ContextSuccess,
)
from result_flow.domain.models.outcome import (
    Failure,
    FailureMethods,
    Outcome,
    Success,
    SuccessMethods,
)

__all__ = [
    "Outcome",
    "Success",
    "Failure",
    "SuccessMethods",
    "FailureMethods",
    "ContextOutcome",
    "ContextSuccess",
    "ContextFailure",
]
