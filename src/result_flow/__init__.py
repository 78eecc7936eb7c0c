"""result-flow.

Tagged success/failure outcomes with halting-aware chaining, per-class
expectation contracts, exhaustive handler dispatch and accumulating Context
outcomes.
"""
from __future__ import annotations

__version__ = "0.1.0"

from result_flow.application import (
    ContextExpectations,
    ContextResultFactory,
    ContractRegistry,
    Expectations,
    ResultFactory,
    default_registry,
    expects,
)
from result_flow.domain import (
    CONTINUED_TYPE,
    ContextFailure,
    ContextOutcome,
    ContextSuccess,
    ContractError,
    DuplicateHandlerTypeError,
    ExpectationsAlreadyRegisteredError,
    ExpectationSet,
    Failure,
    Handler,
    InvalidResultSubjectError,
    InvalidSubjectMethodArityError,
    KeyNotFoundError,
    Kind,
    MissingTypeArgumentError,
    NotImplementedOutcomeError,
    Outcome,
    ResultError,
    Success,
    UnexpectedOutcomeError,
    UnexpectedTypeError,
    UnexpectedValueError,
    UnhandledTypesError,
)
from result_flow.shared import Settings, configure_logging, get_settings

__all__ = [
    "__version__",
    # Outcomes
    "Outcome",
    "Success",
    "Failure",
    "ContextOutcome",
    "ContextSuccess",
    "ContextFailure",
    "Kind",
    "Handler",
    "CONTINUED_TYPE",
    # Construction
    "ResultFactory",
    "ContextResultFactory",
    "Expectations",
    "ContextExpectations",
    "ExpectationSet",
    "ContractRegistry",
    "default_registry",
    "expects",
    # Configuration
    "Settings",
    "get_settings",
    "configure_logging",
    # Errors
    "ResultError",
    "ContractError",
    "MissingTypeArgumentError",
    "UnexpectedTypeError",
    "UnexpectedValueError",
    "UnhandledTypesError",
    "InvalidSubjectMethodArityError",
    "UnexpectedOutcomeError",
    "InvalidResultSubjectError",
    "KeyNotFoundError",
    "NotImplementedOutcomeError",
    "DuplicateHandlerTypeError",
    "ExpectationsAlreadyRegisteredError",
]
