"""Red, green and refactor nodes for replaying a lesson."""

from tdd_kata.graph.state import LessonState
from tdd_kata.nodes.checks import run_examples
from tdd_kata.nodes.schemas import Example, Stage, StageReport
from tdd_kata.observability import log_node_event, traced_node
from tdd_kata.stages import get_implementation


def _stages(state: LessonState) -> list[Stage]:
    return [Stage.model_validate(stage) for stage in state["lesson"]["stages"]]


def _count_passed(outcomes: list) -> int:
    return sum(1 for outcome in outcomes if outcome.passed)


@traced_node("red")
def red_node(state: LessonState) -> dict:
    """Run the new stage's examples against the code as it stood before."""
    stages = _stages(state)
    index = state.get("stage_index", 0)
    stage = stages[index]
    previous = stages[index - 1].final_implementation if index > 0 else "unimplemented"

    outcomes = run_examples(get_implementation(previous), stage.examples)
    passed = _count_passed(outcomes)
    red_ok = passed == 0

    if red_ok:
        log_node_event("red", "new tests fail as expected", "red", stage=stage.name)
    else:
        log_node_event(
            "red",
            "tests pass before any code was written",
            "warning",
            stage=stage.name,
            passing=passed,
        )

    return {
        "stage_index": index,
        "red_ok": red_ok,
        "green_ok": False,
        "refactor_ok": False,
        "current_report": StageReport(stage=stage.name, red=outcomes).model_dump(),
    }


@traced_node("green")
def green_node(state: LessonState) -> dict:
    """Run the new examples against the stage's implementation."""
    stage = _stages(state)[state["stage_index"]]

    outcomes = run_examples(get_implementation(stage.implementation), stage.examples)
    green_ok = all(outcome.passed for outcome in outcomes)

    log_node_event(
        "green",
        "implementation passes" if green_ok else "implementation still fails",
        "green" if green_ok else "error",
        stage=stage.name,
        implementation=stage.implementation,
        passing=f"{_count_passed(outcomes)}/{len(outcomes)}",
    )

    report = StageReport.model_validate(state["current_report"])
    report.green = outcomes
    return {"green_ok": green_ok, "current_report": report.model_dump()}


@traced_node("refactor")
def refactor_node(state: LessonState) -> dict:
    """Re-run every example so far against the cleaned-up implementation."""
    stages = _stages(state)
    index = state["stage_index"]
    stage = stages[index]

    examples: list[Example] = []
    for done in stages[: index + 1]:
        examples.extend(done.examples)

    outcomes = run_examples(get_implementation(stage.final_implementation), examples)
    refactor_ok = all(outcome.passed for outcome in outcomes)

    report = StageReport.model_validate(state["current_report"])
    report.refactor = outcomes

    if not refactor_ok:
        log_node_event(
            "refactor",
            "regression after refactor",
            "error",
            stage=stage.name,
            implementation=stage.final_implementation,
        )
        return {"refactor_ok": False, "current_report": report.model_dump()}

    log_node_event(
        "refactor",
        "all tests still pass",
        "green",
        stage=stage.name,
        total=len(outcomes),
    )
    return {
        "refactor_ok": True,
        "stage_index": index + 1,
        "current_report": {},
        "reports": [*state.get("reports", []), report.model_dump()],
    }


@traced_node("report")
def report_node(state: LessonState) -> dict:
    """Summarize the run, naming the stage and phase that broke."""
    stages = state["lesson"]["stages"]
    index = state.get("stage_index", 0)
    reports = list(state.get("reports", []))

    if index >= len(stages) and state.get("refactor_ok"):
        log_node_event("report", "lesson complete", "end", stages=len(stages))
        return {"passed": True, "failed_stage": None, "failed_phase": None}

    if not state.get("red_ok"):
        phase = "red"
    elif not state.get("green_ok"):
        phase = "green"
    else:
        phase = "refactor"

    if state.get("current_report"):
        reports.append(state["current_report"])

    stage_name = stages[index]["name"]
    log_node_event("report", "lesson stopped", "error", stage=stage_name, phase=phase)
    return {
        "passed": False,
        "failed_stage": stage_name,
        "failed_phase": phase,
        "reports": reports,
    }
