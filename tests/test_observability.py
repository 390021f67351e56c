"""Tests for node logging and tracing."""

import pytest

from tdd_kata.observability import (
    describe_stage,
    format_elapsed,
    log_node_event,
    traced_node,
)

LESSON = {"stages": [{"name": "two-numbers"}, {"name": "numeric-strings"}]}


class TestTracedNode:
    """Tests for traced_node decorator."""

    def test_returns_node_result(self, capsys):
        @traced_node("sample")
        def sample_node(state: dict) -> dict:
            return {"seen": state["value"]}

        assert sample_node({"value": 1}) == {"seen": 1}

        err = capsys.readouterr().err
        assert "[sample] Starting no lesson" in err
        assert "[sample] Completed in" in err

    def test_logs_stage_and_verdict(self, capsys):
        @traced_node("green")
        def green_node(state: dict) -> dict:
            return {"green_ok": False}

        green_node({"lesson": LESSON, "stage_index": 1})

        err = capsys.readouterr().err
        assert "[green] Starting stage 2/2 (numeric-strings)" in err
        assert "[green] Did not pass" in err

    def test_logs_passing_verdict(self, capsys):
        @traced_node("red")
        def red_node(state: dict) -> dict:
            return {"red_ok": True}

        red_node({"lesson": LESSON, "stage_index": 0})

        assert "[red] Passed in" in capsys.readouterr().err

    def test_logs_and_reraises_errors(self, capsys):
        @traced_node("broken")
        def broken_node(state: dict) -> dict:
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            broken_node({})

        assert "[broken] Failed after" in capsys.readouterr().err


class TestDescribeStage:
    """Tests for describe_stage function."""

    def test_current_stage(self):
        assert describe_stage({"lesson": LESSON}) == "stage 1/2 (two-numbers)"

    def test_past_last_stage(self):
        assert describe_stage({"lesson": LESSON, "stage_index": 2}) == "all 2 stages"


class TestFormatElapsed:
    """Tests for format_elapsed function."""

    def test_milliseconds(self):
        assert format_elapsed(0.25) == "250ms"

    def test_seconds(self):
        assert format_elapsed(1.5) == "1.50s"


class TestLogNodeEvent:
    """Tests for log_node_event function."""

    def test_with_data(self, capsys):
        log_node_event("red", "new tests fail", "red", stage="two-numbers")

        assert "[red] new tests fail (stage=two-numbers)" in capsys.readouterr().err

    def test_without_data(self, capsys):
        log_node_event("report", "done")

        assert "[report] done" in capsys.readouterr().err
