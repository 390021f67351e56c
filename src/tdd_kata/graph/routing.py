"""Conditional routing functions for LangGraph workflow."""

from tdd_kata.graph.state import LessonState


def route_after_red(state: LessonState) -> str:
    """Only write code once the new tests fail."""
    if state.get("red_ok"):
        return "green"
    return "report"


def route_after_green(state: LessonState) -> str:
    """Route after green node based on whether the new tests pass."""
    if state.get("green_ok"):
        return "refactor"
    return "report"


def route_after_refactor(state: LessonState) -> str:
    """Loop to the next stage, or finish."""
    if not state.get("refactor_ok"):
        return "report"
    stages = state.get("lesson", {}).get("stages", [])
    if state.get("stage_index", 0) < len(stages):
        return "red"
    return "report"
