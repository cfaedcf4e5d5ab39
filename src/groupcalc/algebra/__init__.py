"""Finite group axioms and validation."""

from .axioms import Axiom, AxiomFailure
from .operation import BinaryOperation, ModulusError, modular_addition
from .validator import (
    DegenerateGroupError,
    Group,
    GroupValidationError,
    GroupValidator,
    ValidationReport,
)

__all__ = [
    "Axiom",
    "AxiomFailure",
    "BinaryOperation",
    "ModulusError",
    "modular_addition",
    "DegenerateGroupError",
    "Group",
    "GroupValidationError",
    "GroupValidator",
    "ValidationReport",
]
