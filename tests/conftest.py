import pytest

from turnwise.config import TurnwiseConfig
from turnwise.messages import (
    ImageBlock,
    Message,
    TextBlock,
    ToolResultBlock,
    ToolUseBlock,
)


def user(content: str | list = "") -> Message:
    return Message(role="user", content=content)


def assistant(content: str | list = "", reasoning: str | None = None) -> Message:
    return Message(role="assistant", content=content, reasoning_trace=reasoning)


def tool_use(call_id: str = "call_1", name: str = "read_file", **args) -> ToolUseBlock:
    return ToolUseBlock(id=call_id, name=name, input=args)


def tool_result(call_id: str = "call_1", payload: str = "ok") -> ToolResultBlock:
    return ToolResultBlock(tool_use_id=call_id, payload=payload)


@pytest.fixture
def config(monkeypatch: pytest.MonkeyPatch, tmp_path) -> TurnwiseConfig:
    """Provide a default config isolated from the environment and any .env file."""
    monkeypatch.chdir(tmp_path)
    for name in ("REASONING_SIDE_CHANNEL", "REASONING_FIELD"):
        monkeypatch.delenv(f"TURNWISE_{name}", raising=False)
    return TurnwiseConfig()


@pytest.fixture
def tool_round_history() -> list[Message]:
    """A turn with one finished tool round, reasoning on both assistant messages."""
    return [
        user("What is in auth.py?"),
        assistant(
            [TextBlock(text="Let me read it."), tool_use(path="auth.py")],
            reasoning="I need to open the file first.",
        ),
        user([tool_result(payload="def login(): ...")]),
        assistant("It defines login().", reasoning="The file has a single function."),
    ]


@pytest.fixture
def two_turn_history() -> list[Message]:
    """Two plain question/answer turns followed by a new question."""
    return [
        user("What is 2+2?"),
        assistant("The answer is 4.", reasoning="I need to add 2 and 2 together."),
        user("What about 3+3?"),
    ]


@pytest.fixture
def image_block() -> ImageBlock:
    return ImageBlock(media_type="image/png", data="iVBORw0KGgo=")
