"""tdd-kata - learn test-driven development by growing an add function."""

from .calculator import CoercionError, add, coerce_number

__all__ = ["add", "coerce_number", "CoercionError"]
