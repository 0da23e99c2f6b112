from pydantic import BaseModel, ConfigDict, Field

from turnwise.messages import Role, ToolResultBlock, ToolUseBlock
from turnwise.models.parts import ContentPart, TextPart


class TargetMessage(BaseModel):
    """Message in the constrained backend schema.

    Content is a plain string or a list of text/image parts. Tool blocks do
    not fit that shape, so they ride along typed in ``tool_uses`` and
    ``tool_results`` in their original order.
    """

    model_config = ConfigDict(extra="allow")

    role: Role
    content: str | list[ContentPart] = ""
    reasoning_trace: str | None = None
    tool_uses: list[ToolUseBlock] = Field(default_factory=list)
    tool_results: list[ToolResultBlock] = Field(default_factory=list)

    def content_parts(self) -> list[ContentPart]:
        """Content in part-list form; a bare string becomes one text part."""
        if isinstance(self.content, str):
            return [TextPart(text=self.content)]
        return list(self.content)
