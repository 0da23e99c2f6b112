"""Source message representation for turnwise.

This module provides the rich, block-based message types the pipeline reads.
Use adapters to convert from provider-specific formats (Anthropic, etc.) to
these types.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    model_validator,
)

Role = Literal["user", "assistant", "system", "tool"]

KNOWN_BLOCK_TYPES = frozenset({"text", "image", "tool_use", "tool_result"})


class TextBlock(BaseModel):
    """Plain text content."""

    type: Literal["text"] = "text"
    text: str


class ImageBlock(BaseModel):
    """Inline image carried as a base64 payload."""

    type: Literal["image"] = "image"
    media_type: str
    data: str

    @property
    def data_url(self) -> str:
        """Locator string in the form ``data:<media_type>;base64,<data>``."""
        return f"data:{self.media_type};base64,{self.data}"


class ToolUseBlock(BaseModel):
    """A tool invocation within an assistant message."""

    type: Literal["tool_use"] = "tool_use"
    id: str
    name: str
    input: dict[str, Any] = Field(default_factory=dict)


class ToolResultBlock(BaseModel):
    """The result of a tool invocation, sent back in a user message."""

    type: Literal["tool_result"] = "tool_result"
    tool_use_id: str
    payload: str | list[dict[str, Any]] = ""
    is_error: bool = False


class UnknownBlock(BaseModel):
    """Any block whose type tag is not recognized.

    Kept as-is so callers can still see it. The converter ignores it.
    """

    model_config = ConfigDict(extra="allow")

    type: str


# Keys a block dict needs before it is treated as its typed variant.
_REQUIRED_KEYS = {
    "text": {"text"},
    "image": {"media_type", "data"},
    "tool_use": {"id", "name"},
    "tool_result": {"tool_use_id"},
}


def _block_tag(value: Any) -> str:
    if isinstance(value, UnknownBlock):
        return "unknown"
    if isinstance(value, dict):
        tag = value.get("type")
        # e.g. a dumped UnknownBlock(type="image") holding a URL source
        if tag in _REQUIRED_KEYS and not _REQUIRED_KEYS[tag] <= value.keys():
            return "unknown"
    else:
        tag = getattr(value, "type", None)
    return tag if tag in KNOWN_BLOCK_TYPES else "unknown"


ContentBlock = Annotated[
    Union[
        Annotated[TextBlock, Tag("text")],
        Annotated[ImageBlock, Tag("image")],
        Annotated[ToolUseBlock, Tag("tool_use")],
        Annotated[ToolResultBlock, Tag("tool_result")],
        Annotated[UnknownBlock, Tag("unknown")],
    ],
    Discriminator(_block_tag),
]


class Message(BaseModel):
    """Source message representation.

    Attributes:
        role: The role of the message sender. Only ``user`` and ``assistant``
            take part in turn detection and merging; other roles pass through.
        content: Either a plain string or an ordered list of content blocks.
        reasoning_trace: Reasoning side channel. Assistant messages only.

    Fields not declared here are kept as extras and survive every pipeline
    stage unchanged.
    """

    model_config = ConfigDict(extra="allow")

    role: Role
    content: str | list[ContentBlock] = ""
    reasoning_trace: str | None = None

    @model_validator(mode="after")
    def _reasoning_only_on_assistant(self) -> "Message":
        if self.reasoning_trace is not None and self.role != "assistant":
            raise ValueError(f"reasoning_trace is only allowed on assistant messages, got role={self.role!r}")
        return self

    @property
    def blocks(self) -> list[ContentBlock]:
        """Content as a block list; string content counts as no blocks."""
        if isinstance(self.content, str):
            return []
        return list(self.content)

    @property
    def has_tool_use(self) -> bool:
        return any(isinstance(block, ToolUseBlock) for block in self.blocks)

    @property
    def has_tool_result(self) -> bool:
        return any(isinstance(block, ToolResultBlock) for block in self.blocks)


def with_reasoning(message: Message, trace: str | None) -> Message:
    """Return a copy of an assistant message carrying ``trace`` in the side channel.

    Used when recording a freshly produced assistant reply. An empty or
    missing trace leaves the copy without one.

    Args:
        message: The assistant message to record.
        trace: Reasoning text returned by the backend, if any.

    Returns:
        A new Message; the input is not modified.

    Raises:
        ValueError: If ``message`` is not an assistant message.
    """
    if message.role != "assistant":
        raise ValueError(f"cannot attach reasoning to a {message.role!r} message")
    return message.model_copy(update={"reasoning_trace": trace or None}, deep=True)
