"""Domain Layer.

Outcome entities, their value objects, and the engines that validate, chain
and dispatch them. This layer only depends on the shared module.
"""
from __future__ import annotations

from result_flow.domain.chain import NoArgStep, Step, ValueContextStep, ValueStep
from result_flow.domain.contract import CONTINUED_TYPE, ContractValidator, TypeChecker
from result_flow.domain.exceptions import (
    ContractError,
    DuplicateHandlerTypeError,
    ExpectationsAlreadyRegisteredError,
    InvalidResultSubjectError,
    InvalidSubjectMethodArityError,
    KeyNotFoundError,
    MissingTypeArgumentError,
    NotImplementedOutcomeError,
    ResultError,
    UnexpectedOutcomeError,
    UnexpectedTypeError,
    UnexpectedValueError,
    UnhandledTypesError,
)
from result_flow.domain.handler import Handler
from result_flow.domain.models import (
    ContextFailure,
    ContextOutcome,
    ContextSuccess,
    Failure,
    Outcome,
    Success,
)
from result_flow.domain.value_objects import (
    ExpectationSet,
    Kind,
    KindExpectation,
    OutcomeData,
)

__all__ = [
    # Exceptions
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
    # Models
    "Outcome",
    "Success",
    "Failure",
    "ContextOutcome",
    "ContextSuccess",
    "ContextFailure",
    # Value Objects
    "Kind",
    "OutcomeData",
    "ExpectationSet",
    "KindExpectation",
    # Engines
    "CONTINUED_TYPE",
    "ContractValidator",
    "TypeChecker",
    "Handler",
    "Step",
    "NoArgStep",
    "ValueStep",
    "ValueContextStep",
]
