"""Application Layer.

Construction surface: factories bound to a subject and the contract registry.
"""
from __future__ import annotations

from result_flow.application.factory import (
    ContextExpectations,
    ContextResultFactory,
    Expectations,
    ResultFactory,
)
from result_flow.application.registry import (
    ContractRegistry,
    default_registry,
    expects,
)

__all__ = [
    "ResultFactory",
    "ContextResultFactory",
    "Expectations",
    "ContextExpectations",
    "ContractRegistry",
    "default_registry",
    "expects",
]
