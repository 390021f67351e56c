"""Pydantic schemas for lesson files and check outcomes."""

from typing import Optional, Union

from pydantic import BaseModel, Field, field_validator

from tdd_kata.stages import IMPLEMENTATIONS


def _check_implementation(name: str) -> str:
    if name not in IMPLEMENTATIONS:
        available = ", ".join(sorted(IMPLEMENTATIONS))
        raise ValueError(f"unknown implementation '{name}' (available: {available})")
    return name


class Example(BaseModel):
    """One assertion: add(*args) == expected."""

    args: list[Union[int, float, str]] = Field(default_factory=list)
    expected: Union[int, float]

    def describe(self) -> str:
        rendered = ", ".join(repr(arg) for arg in self.args)
        return f"add({rendered}) == {self.expected!r}"


class Stage(BaseModel):
    """One red-green-refactor step of the lesson."""

    name: str
    title: str
    narration: str = ""
    implementation: str
    refactor: Optional[str] = None
    examples: list[Example] = Field(min_length=1)

    @field_validator("implementation")
    @classmethod
    def known_implementation(cls, value: str) -> str:
        return _check_implementation(value)

    @field_validator("refactor")
    @classmethod
    def known_refactor(cls, value: Optional[str]) -> Optional[str]:
        return None if value is None else _check_implementation(value)

    @property
    def final_implementation(self) -> str:
        """Implementation left in place once the stage is done."""
        return self.refactor or self.implementation


class Lesson(BaseModel):
    """A TDD walkthrough: ordered stages driving one function."""

    title: str
    description: str = ""
    stages: list[Stage] = Field(min_length=1)


class ExampleOutcome(BaseModel):
    """Result of running one example against an implementation."""

    example: str
    passed: bool
    actual: Optional[str] = None
    error: Optional[str] = None


class StageReport(BaseModel):
    """What each phase of a stage observed."""

    stage: str
    red: list[ExampleOutcome] = Field(default_factory=list)
    green: list[ExampleOutcome] = Field(default_factory=list)
    refactor: list[ExampleOutcome] = Field(default_factory=list)
