"""Tests for reasoning scrubbing."""

from turnwise.messages import Message, TextBlock
from turnwise.scrubber import scrub_reasoning

from .conftest import assistant, tool_result, tool_use, user


class TestScrubReasoning:
    """Test scrub_reasoning."""

    def test_clears_single_assistant(self) -> None:
        """The trace is removed and content kept."""
        result = scrub_reasoning([user("Hello"), assistant("Hi", reasoning="R")], should_clear=True)

        assert result[1].reasoning_trace is None
        assert result[1].content == "Hi"
        assert "reasoning_trace" not in result[1].model_dump(exclude_none=True)

    def test_keeps_trace_when_not_clearing(self) -> None:
        """With should_clear=False the trace survives."""
        result = scrub_reasoning([assistant("Hi", reasoning="R")], should_clear=False)

        assert result[0].reasoning_trace == "R"

    def test_clears_every_assistant(self) -> None:
        """All assistant messages lose their traces."""
        history = [
            user("Q1"),
            assistant("A1", reasoning="R1"),
            user("Q2"),
            assistant("A2", reasoning="R2"),
            assistant("A3", reasoning="R3"),
        ]

        result = scrub_reasoning(history, should_clear=True)

        assert [m.reasoning_trace for m in result] == [None] * 5
        assert [m.content for m in result] == ["Q1", "A1", "Q2", "A2", "A3"]

    def test_preserves_tool_blocks(self) -> None:
        """Tool uses and results are untouched."""
        history = [
            assistant([TextBlock(text="Checking"), tool_use("c1", "get_date")], reasoning="R"),
            user([tool_result("c1", "2025-01-01")]),
        ]

        result = scrub_reasoning(history, should_clear=True)

        assert result[0].content == history[0].content
        assert result[1] == history[1]

    def test_preserves_extra_fields(self) -> None:
        """Extension fields on the message are kept exactly."""
        msg = Message(role="assistant", content="Hi", reasoning_trace="R", ts=123, meta={"source": "cache"})

        result = scrub_reasoning([msg], should_clear=True)

        assert result[0].model_extra == {"ts": 123, "meta": {"source": "cache"}}

    def test_empty_history(self) -> None:
        """Empty in, empty out."""
        assert scrub_reasoning([], should_clear=True) == []
        assert scrub_reasoning([], should_clear=False) == []

    def test_message_without_trace(self) -> None:
        """Absence of a trace is a no-op."""
        history = [user("Hi"), assistant("Hello")]

        assert scrub_reasoning(history, should_clear=True) == history

    def test_idempotent(self, tool_round_history) -> None:
        """Scrubbing twice equals scrubbing once."""
        once = scrub_reasoning(tool_round_history, should_clear=True)

        assert scrub_reasoning(once, should_clear=True) == once

    def test_identity_when_not_clearing(self, tool_round_history) -> None:
        """should_clear=False returns an equal but independent copy."""
        result = scrub_reasoning(tool_round_history, should_clear=False)

        assert result == tool_round_history
        assert all(a is not b for a, b in zip(result, tool_round_history))

    def test_input_not_mutated(self, tool_round_history) -> None:
        """Caller-owned history keeps its traces."""
        scrub_reasoning(tool_round_history, should_clear=True)

        assert tool_round_history[1].reasoning_trace == "I need to open the file first."
        assert tool_round_history[3].reasoning_trace == "The file has a single function."
