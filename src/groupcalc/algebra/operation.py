"""Binary operations the validator can be parameterised with."""

from typing import Callable

# (a, b, modulus) -> result
BinaryOperation = Callable[[int, int, int], int]


class ModulusError(ValueError):
    """Raised when an operation is evaluated with a non-positive modulus."""


def modular_addition(a: int, b: int, modulus: int) -> int:
    """
    Add two integers modulo ``modulus``.

    Python's floor modulo is used, so the result always lies in
    ``[0, modulus)`` even for negative operands.

    Raises:
        ModulusError: If ``modulus`` is zero or negative.
    """
    if modulus <= 0:
        raise ModulusError(f"undefined modulus {modulus}")
    return (a + b) % modulus


def format_application(operation: BinaryOperation, left: object, right: object) -> str:
    """
    Render ``operation`` applied to two operands for use in messages.

    Modular addition is written infix; any other operation is written as a
    call using its ``__name__``, or ``op`` for anonymous callables.
    """
    if operation is modular_addition:
        left, right = (
            f"({operand})" if " " in str(operand) else str(operand)
            for operand in (left, right)
        )
        return f"{left} + {right}"
    name = getattr(operation, "__name__", "")
    if not name.isidentifier():
        name = "op"
    return f"{name}({left}, {right})"
