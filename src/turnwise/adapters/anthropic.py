"""Anthropic message adapter.

Converts Anthropic Messages API message dicts (``{"role": ..., "content":
...}``) to turnwise's source Message format.
"""

import logging
from typing import Any

from turnwise.messages import (
    ContentBlock,
    ImageBlock,
    Message,
    TextBlock,
    ToolResultBlock,
    ToolUseBlock,
    UnknownBlock,
)

logger = logging.getLogger(__name__)


class AnthropicAdapter:
    """Converts Anthropic-style message dicts to Message.

    Assistant messages recorded for reasoning models may carry the trace as
    a top-level ``reasoning_content`` key, or as ``reasoning_trace`` when
    they were persisted from a Message. Either becomes ``reasoning_trace``.

    Usage:
        ```python
        adapter = AnthropicAdapter()
        messages = adapter.convert([
            {"role": "user", "content": "Read auth.py"},
            {
                "role": "assistant",
                "content": [{"type": "tool_use", "id": "c1", "name": "read_file", "input": {"path": "auth.py"}}],
                "reasoning_content": "I should open the file first.",
            },
        ])
        ```
    """

    REASONING_KEY = "reasoning_content"

    def convert(self, messages: list[dict[str, Any]]) -> list[Message]:
        """Convert a list of Anthropic message dicts.

        Args:
            messages: List of message dicts.

        Returns:
            List of Message objects.
        """
        return [self.convert_single(msg) for msg in messages]

    def convert_single(self, message: dict[str, Any]) -> Message:
        """Convert a single Anthropic message dict.

        Unrecognized top-level keys are kept as extra fields on the Message.

        Args:
            message: A message dict.

        Returns:
            Message object.

        Raises:
            pydantic.ValidationError: If the dict does not describe a valid message.
        """
        role = message.get("role")
        fields = {key: value for key, value in message.items() if key not in Message.model_fields}

        if role == "assistant":
            # reasoning_trace is what Message.model_dump() persists
            wire_trace = fields.pop(self.REASONING_KEY, None)
            fields["reasoning_trace"] = message.get("reasoning_trace") or wire_trace or None
        elif message.get("reasoning_trace"):
            logger.debug("convert_single dropped reasoning_trace role=%s", role)

        content = message.get("content", "")
        if isinstance(content, list):
            content = [self._convert_block(block) for block in content]

        return Message.model_validate({**fields, "role": role, "content": content})

    def _convert_block(self, block: Any) -> ContentBlock:
        """Convert one content block dict to a typed block."""
        if isinstance(block, str):
            return TextBlock(text=block)

        block_type = block.get("type")
        if block_type == "text":
            return TextBlock.model_validate({"text": block.get("text", "")})

        elif block_type == "image":
            source = block.get("source") or {}
            if source.get("type") != "base64":
                # URL and file sources have no inline payload to transcode
                logger.debug("convert_block image source=%s kept as unknown", source.get("type"))
                return UnknownBlock.model_validate(block)
            return ImageBlock.model_validate({"media_type": source.get("media_type"), "data": source.get("data")})

        elif block_type == "tool_use":
            return ToolUseBlock.model_validate(
                {"id": block.get("id"), "name": block.get("name"), "input": block.get("input") or {}}
            )

        elif block_type == "tool_result":
            return ToolResultBlock.model_validate(
                {
                    "tool_use_id": block.get("tool_use_id"),
                    "payload": block.get("content", ""),
                    "is_error": block.get("is_error", False),
                }
            )

        else:
            return UnknownBlock.model_validate(block)
