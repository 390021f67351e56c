"""LangGraph workflow definition."""

from langgraph.graph import END, StateGraph

from tdd_kata.graph.routing import (
    route_after_green,
    route_after_red,
    route_after_refactor,
)
from tdd_kata.graph.state import LessonState
from tdd_kata.nodes.cycle import green_node, red_node, refactor_node, report_node
from tdd_kata.nodes.schemas import Lesson

# Graph steps per stage (red, green, refactor) plus headroom for report.
STEPS_PER_STAGE = 3
EXTRA_STEPS = 5


def _build_cycle_graph() -> StateGraph:
    """Build the red → green → refactor loop over every lesson stage."""
    workflow = StateGraph(LessonState)

    workflow.add_node("red", red_node)
    workflow.add_node("green", green_node)
    workflow.add_node("refactor", refactor_node)
    workflow.add_node("report", report_node)

    workflow.set_entry_point("red")

    workflow.add_conditional_edges(
        "red",
        route_after_red,
        {
            "green": "green",
            "report": "report",
        },
    )

    workflow.add_conditional_edges(
        "green",
        route_after_green,
        {
            "refactor": "refactor",
            "report": "report",
        },
    )

    workflow.add_conditional_edges(
        "refactor",
        route_after_refactor,
        {
            "red": "red",
            "report": "report",
        },
    )

    workflow.add_edge("report", END)

    return workflow


def create_cycle_workflow() -> StateGraph:
    """Compile the red-green-refactor workflow."""
    return _build_cycle_graph().compile()


cycle_graph = create_cycle_workflow()


def run_lesson(lesson: Lesson) -> LessonState:
    """Replay every stage of a lesson.

    Args:
        lesson: Validated lesson to replay.

    Returns:
        Final workflow state; ``passed`` tells whether every phase behaved.
    """
    recursion_limit = len(lesson.stages) * STEPS_PER_STAGE + EXTRA_STEPS
    return cycle_graph.invoke(
        {
            "lesson": lesson.model_dump(),
            "stage_index": 0,
            "reports": [],
        },
        config={"recursion_limit": recursion_limit},
    )
