"""Domain Value Objects.

Immutable objects describing outcome payloads and contracts.
"""
from __future__ import annotations

from result_flow.domain.value_objects.expectation_set import (
    Declaration,
    ExpectationSet,
    KindExpectation,
    Predicate,
)
from result_flow.domain.value_objects.outcome_data import (
    Kind,
    OutcomeData,
    normalize_type,
)

__all__ = [
    "Kind", "OutcomeData", "normalize_type",
    "ExpectationSet", "KindExpectation", "Predicate", "Declaration",
]
