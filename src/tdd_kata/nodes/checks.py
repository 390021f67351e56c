"""Run lesson examples against an implementation."""

import math
from typing import Any, Callable

from tdd_kata.nodes.schemas import Example, ExampleOutcome


def values_equal(actual: Any, expected: Any) -> bool:
    """Compare results, treating NaN as equal to NaN."""
    if isinstance(actual, float) and isinstance(expected, float):
        if math.isnan(actual) and math.isnan(expected):
            return True
    return actual == expected


def run_example(implementation: Callable[..., Any], example: Example) -> ExampleOutcome:
    """Call implementation with the example's args and record what happened."""
    try:
        actual = implementation(*example.args)
    except Exception as e:
        return ExampleOutcome(
            example=example.describe(),
            passed=False,
            error=f"{type(e).__name__}: {e}",
        )

    return ExampleOutcome(
        example=example.describe(),
        passed=values_equal(actual, example.expected),
        actual=repr(actual),
    )


def run_examples(
    implementation: Callable[..., Any], examples: list[Example]
) -> list[ExampleOutcome]:
    return [run_example(implementation, example) for example in examples]
