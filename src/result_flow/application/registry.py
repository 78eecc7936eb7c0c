"""Contract registry.

Maps subject classes to the ExpectationSet they declared at definition time.
"""
from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from result_flow.domain import ExpectationSet, ExpectationsAlreadyRegisteredError
from result_flow.domain.value_objects import Declaration
from result_flow.shared.logging import get_logger

logger = get_logger(__name__)

C = TypeVar("C", bound=type)


class ContractRegistry:
    """Registry of per-class expectation sets.

    Registration happens once per class; lookups walk the MRO so subclasses
    inherit their parent's contract.
    """

    def __init__(self) -> None:
        self._contracts: dict[type, ExpectationSet] = {}

    def register(self, owner: type, expectations: ExpectationSet) -> None:
        """Register an expectation set for a class.

        Args:
            owner: Subject class
            expectations: Contract for outcomes produced on its behalf

        Raises:
            ExpectationsAlreadyRegisteredError: owner already has a contract
        """
        if owner in self._contracts:
            raise ExpectationsAlreadyRegisteredError(owner)
        self._contracts[owner] = expectations
        logger.debug("expectations registered", owner=owner.__qualname__, types=list(expectations.all_types))

    def lookup(self, owner: type) -> ExpectationSet | None:
        """Get the contract for a class or its nearest registered ancestor."""
        for klass in owner.__mro__:
            expectations = self._contracts.get(klass)
            if expectations is not None:
                return expectations
        return None

    def __contains__(self, owner: object) -> bool:
        return owner in self._contracts

    def expects(self, success: Declaration = None, failure: Declaration = None) -> Callable[[C], C]:
        """Class decorator registering a contract in this registry."""
        expectations = ExpectationSet.declare(success=success, failure=failure)

        def decorator(cls: C) -> C:
            self.register(cls, expectations)
            return cls

        return decorator


# Process-wide registry used when no registry is passed explicitly
default_registry = ContractRegistry()


def expects(
    success: Declaration = None,
    failure: Declaration = None,
    *,
    registry: ContractRegistry | None = None,
) -> Callable[[C], C]:
    """Declare the outcomes a class may produce.

    Example:
        >>> @expects(success={"division_completed": lambda v: isinstance(v, (int, float))},
        ...          failure=["invalid_arg", "division_by_zero"])
        ... class Divide:
        ...     ...
    """
    if registry is None:
        registry = default_registry
    return registry.expects(success=success, failure=failure)
