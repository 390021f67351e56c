"""Successive versions of add, one per lesson stage."""

from typing import Any, Callable

from tdd_kata.calculator import add, coerce_number


def unimplemented(*args: Any) -> Any:
    """Stand-in for a function that has not been written yet."""
    raise NotImplementedError("add has not been written yet")


def add_two(a, b):
    """First version: make add(1, 2) pass."""
    return a + b


def add_coerced(a, b):
    """Second version: accept numeric strings."""
    return coerce_number(a) + coerce_number(b)


def add_variadic(*values):
    """Third version: accept any number of arguments."""
    total = 0
    for value in values:
        total += coerce_number(value)
    return total


IMPLEMENTATIONS: dict[str, Callable[..., Any]] = {
    "unimplemented": unimplemented,
    "add_two": add_two,
    "add_coerced": add_coerced,
    "add_variadic": add_variadic,
    "add": add,
}


def get_implementation(name: str) -> Callable[..., Any]:
    """Look up a stage implementation by name."""
    try:
        return IMPLEMENTATIONS[name]
    except KeyError:
        available = ", ".join(sorted(IMPLEMENTATIONS))
        raise KeyError(f"Unknown implementation '{name}'. Available: {available}") from None
