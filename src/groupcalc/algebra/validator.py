"""
Finite group validation.

``GroupValidator`` checks a candidate ``(elements, operation, identity)``
against every group axiom. The modulus handed to the operation is always the
cardinality of the element set at the moment of the check.
"""

from dataclasses import dataclass, field
from typing import AbstractSet, Dict, FrozenSet, List, Optional, Tuple

from ..logging import get_logger
from .axioms import (
    Axiom,
    AxiomFailure,
    check_associativity,
    check_closure,
    check_identity,
    check_inverses,
    check_membership,
    find_inverse,
)
from .operation import BinaryOperation, modular_addition

logger = get_logger(__name__)


class GroupValidationError(Exception):
    """Raised when a candidate fails one or more group axioms."""

    def __init__(self, failures: List[AxiomFailure]):
        self.failures = list(failures)
        super().__init__(self._render())

    def _render(self) -> str:
        return "\n".join(str(failure) for failure in self.failures)

    @property
    def axioms(self) -> List[Axiom]:
        return [failure.axiom for failure in self.failures]


class DegenerateGroupError(GroupValidationError):
    """Raised for an empty element set, whose modulus is undefined."""


@dataclass(frozen=True)
class Group:
    """A validated finite group."""
    elements: FrozenSet[int]
    identity: int
    operation: BinaryOperation = field(repr=False, compare=False)

    @property
    def modulus(self) -> int:
        return len(self.elements)

    @property
    def order(self) -> int:
        return len(self.elements)

    def combine(self, a: int, b: int) -> int:
        return self.operation(a, b, self.modulus)

    def inverse_of(self, a: int) -> int:
        if a not in self.elements:
            raise KeyError(a)
        inverse = find_inverse(a, self.elements, self.operation, self.modulus, self.identity)
        if inverse is None:
            raise GroupValidationError([AxiomFailure(
                Axiom.INVERSE,
                f"element {a} has no inverse with respect to identity {self.identity}",
            )])
        return inverse

    def inverses(self) -> Dict[int, int]:
        """Map each element to its inverse, ordered by element."""
        return {a: self.inverse_of(a) for a in sorted(self.elements)}


@dataclass(frozen=True)
class ValidationReport:
    """Outcome of checking a candidate against every axiom."""
    elements: FrozenSet[int]
    identity: int
    modulus: int
    failures: Tuple[AxiomFailure, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.failures

    @property
    def failed_axioms(self) -> List[Axiom]:
        return [failure.axiom for failure in self.failures]

    def failure_for(self, axiom: Axiom) -> Optional[AxiomFailure]:
        for failure in self.failures:
            if failure.axiom is axiom:
                return failure
        return None


class GroupValidator:
    """
    Validates finite group candidates under an injected binary operation.

    Args:
        operation: Callable ``(a, b, modulus) -> int``. Defaults to addition
            modulo the set size.
        large_set_warning: Set size above which a warning is logged, since the
            associativity pass is cubic in the number of elements.
    """

    def __init__(self,
                 operation: BinaryOperation = modular_addition,
                 large_set_warning: int = 100):
        self.operation = operation
        self.large_set_warning = large_set_warning

    def check(self, elements: AbstractSet[int], identity: int) -> ValidationReport:
        """Evaluate every axiom and collect all failures without raising."""
        snapshot = frozenset(elements)
        modulus = len(snapshot)

        if modulus == 0:
            logger.debug("Empty element set, skipping axiom checks")
            return ValidationReport(
                elements=snapshot,
                identity=identity,
                modulus=0,
                failures=(AxiomFailure(
                    Axiom.NON_EMPTY,
                    "the element set is empty, so the modulus is undefined",
                ),),
            )

        if modulus > self.large_set_warning:
            logger.warning(f"Validating {modulus} elements; associativity check is O(n^3)")

        results = [
            check_membership(snapshot, identity),
            check_closure(snapshot, self.operation, modulus),
            check_associativity(snapshot, self.operation, modulus),
            check_identity(snapshot, self.operation, modulus, identity),
            check_inverses(snapshot, self.operation, modulus, identity),
        ]
        failures = tuple(result for result in results if result is not None)

        logger.debug(
            f"Checked {modulus} elements with identity {identity}: "
            f"{len(failures)} axiom failure(s)"
        )
        return ValidationReport(
            elements=snapshot,
            identity=identity,
            modulus=modulus,
            failures=failures,
        )

    def validate(self, elements: AbstractSet[int], identity: int) -> Group:
        """
        Build a ``Group`` from a candidate or raise with every failed axiom.

        Raises:
            DegenerateGroupError: If ``elements`` is empty.
            GroupValidationError: If any other axiom is violated.
        """
        report = self.check(elements, identity)
        if report.failure_for(Axiom.NON_EMPTY) is not None:
            raise DegenerateGroupError(list(report.failures))
        if not report.is_valid:
            raise GroupValidationError(list(report.failures))
        return Group(elements=report.elements, identity=identity, operation=self.operation)
