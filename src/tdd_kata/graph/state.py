"""LessonState schema for LangGraph workflow."""

from typing import Optional, TypedDict


class LessonState(TypedDict, total=False):
    """State schema for replaying a lesson."""

    # === Input ===
    lesson: dict  # Lesson.model_dump()

    # === Progress ===
    stage_index: int
    red_ok: bool
    green_ok: bool
    refactor_ok: bool

    # === Results ===
    current_report: dict  # StageReport being filled for the current stage
    reports: list[dict]  # Completed StageReport dumps
    passed: bool
    failed_stage: Optional[str]
    failed_phase: Optional[str]
