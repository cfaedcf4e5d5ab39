"""
Group axiom predicates over a finite set of integers.

Every predicate is pure: it receives the element set, the operation and the
modulus, and returns ``None`` when the axiom holds or an ``AxiomFailure``
describing the first counterexample found. Elements are visited in sorted
order so the reported counterexample is stable across runs.
"""

from dataclasses import dataclass
from enum import Enum
from itertools import product
from typing import AbstractSet, List, Optional

from .operation import BinaryOperation, format_application


class Axiom(Enum):
    """Properties a candidate must satisfy to form a group."""
    NON_EMPTY = "Non-empty set"
    MEMBERSHIP = "Identity membership"
    CLOSURE = "Closure"
    ASSOCIATIVITY = "Associativity"
    IDENTITY = "Identity"
    INVERSE = "Inverse"


@dataclass(frozen=True)
class AxiomFailure:
    """A violated axiom together with a human-readable counterexample."""
    axiom: Axiom
    detail: str

    def __str__(self) -> str:
        return f"{self.axiom.value} unsatisfied: {self.detail}"


def _ordered(elements: AbstractSet[int]) -> List[int]:
    return sorted(elements)


def _expr(a: int, b: int, operation: BinaryOperation, modulus: int) -> str:
    return f"{format_application(operation, a, b)} (mod {modulus})"


def check_membership(elements: AbstractSet[int], identity: int) -> Optional[AxiomFailure]:
    if identity in elements:
        return None
    return AxiomFailure(
        Axiom.MEMBERSHIP,
        f"identity {identity} is not an element of the set",
    )


def check_closure(
    elements: AbstractSet[int],
    operation: BinaryOperation,
    modulus: int,
) -> Optional[AxiomFailure]:
    ordered = _ordered(elements)
    for x, y in product(ordered, repeat=2):
        result = operation(x, y, modulus)
        if result not in elements:
            return AxiomFailure(
                Axiom.CLOSURE,
                f"{_expr(x, y, operation, modulus)} = {result}, which is not in the set",
            )
    return None


def check_associativity(
    elements: AbstractSet[int],
    operation: BinaryOperation,
    modulus: int,
) -> Optional[AxiomFailure]:
    ordered = _ordered(elements)
    for a, b, c in product(ordered, repeat=3):
        left = operation(operation(a, b, modulus), c, modulus)
        right = operation(a, operation(b, c, modulus), modulus)
        if left != right:
            grouped_left = format_application(operation, format_application(operation, a, b), c)
            grouped_right = format_application(operation, a, format_application(operation, b, c))
            return AxiomFailure(
                Axiom.ASSOCIATIVITY,
                f"{grouped_left} = {left} but {grouped_right} = {right} (mod {modulus})",
            )
    return None


def check_identity(
    elements: AbstractSet[int],
    operation: BinaryOperation,
    modulus: int,
    identity: int,
) -> Optional[AxiomFailure]:
    for x in _ordered(elements):
        right = operation(x, identity, modulus)
        if right != x:
            return AxiomFailure(
                Axiom.IDENTITY,
                f"{_expr(x, identity, operation, modulus)} = {right}, expected {x}",
            )
        left = operation(identity, x, modulus)
        if left != x:
            return AxiomFailure(
                Axiom.IDENTITY,
                f"{_expr(identity, x, operation, modulus)} = {left}, expected {x}",
            )
    return None


def find_inverse(
    a: int,
    elements: AbstractSet[int],
    operation: BinaryOperation,
    modulus: int,
    identity: int,
) -> Optional[int]:
    """Return the smallest two-sided inverse of ``a`` in ``elements``, if any."""
    for b in _ordered(elements):
        if operation(a, b, modulus) == identity and operation(b, a, modulus) == identity:
            return b
    return None


def check_inverses(
    elements: AbstractSet[int],
    operation: BinaryOperation,
    modulus: int,
    identity: int,
) -> Optional[AxiomFailure]:
    for a in _ordered(elements):
        if find_inverse(a, elements, operation, modulus, identity) is None:
            return AxiomFailure(
                Axiom.INVERSE,
                f"element {a} has no inverse with respect to identity {identity}",
            )
    return None
