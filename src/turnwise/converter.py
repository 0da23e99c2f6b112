"""Conversion from block-based messages to the constrained target schema.

Reasoning backends reject two consecutive messages with the same role and
only understand text and image content parts. ``FormatConverter`` transcodes
every message and folds runs of same-role messages into one.
"""

import logging
from collections.abc import Sequence

from turnwise.messages import (
    ImageBlock,
    Message,
    TextBlock,
    ToolResultBlock,
    ToolUseBlock,
)
from turnwise.models.parts import ContentPart, ImagePart, TextPart
from turnwise.models.target import TargetMessage

logger = logging.getLogger(__name__)

MERGEABLE_ROLES = frozenset({"user", "assistant"})


class FormatConverter:
    """Converts source messages to target messages, merging same-role runs.

    Usage:
        ```python
        converter = FormatConverter()
        converter.convert([
            Message(role="user", content="Hello"),
            Message(role="user", content="How are you?"),
        ])
        # [TargetMessage(role="user", content="Hello\\nHow are you?")]
        ```
    """

    def convert(self, history: Sequence[Message]) -> list[TargetMessage]:
        """Convert a conversation.

        Args:
            history: Source messages in chronological order. Never modified.

        Returns:
            Target messages where no two adjacent user/assistant messages
            share a role.
        """
        merged: list[TargetMessage] = []
        merges = 0
        for message in history:
            converted = self.convert_single(message)
            if merged and converted.role in MERGEABLE_ROLES and merged[-1].role == converted.role:
                merged[-1] = self._merge(merged[-1], converted)
                merges += 1
            else:
                merged.append(converted)

        logger.debug("convert messages=%d output=%d merged=%d", len(history), len(merged), merges)
        return merged

    def convert_single(self, message: Message) -> TargetMessage:
        """Transcode one message without merging.

        Args:
            message: A source message.

        Returns:
            Target message with the same role, extras and (for assistant
            messages) reasoning trace.
        """
        tool_uses: list[ToolUseBlock] = []
        tool_results: list[ToolResultBlock] = []

        if isinstance(message.content, str):
            content: str | list[ContentPart] = message.content
        else:
            texts: list[str] = []
            images: list[ImagePart] = []
            for block in message.content:
                if isinstance(block, TextBlock):
                    texts.append(block.text)
                elif isinstance(block, ImageBlock):
                    images.append(ImagePart(url=block.data_url))
                elif isinstance(block, ToolUseBlock):
                    tool_uses.append(block.model_copy(deep=True))
                elif isinstance(block, ToolResultBlock):
                    tool_results.append(block.model_copy(deep=True))
                else:
                    logger.debug("convert ignored block type=%s role=%s", block.type, message.role)

            if images:
                parts: list[ContentPart] = []
                if texts:
                    parts.append(TextPart(text="\n".join(texts)))
                parts.extend(images)
                content = parts
            else:
                content = "\n".join(texts)

        fields = dict(message.model_extra or {})
        fields.update(
            role=message.role,
            content=content,
            reasoning_trace=message.reasoning_trace if message.role == "assistant" else None,
            tool_uses=tool_uses,
            tool_results=tool_results,
        )
        return TargetMessage(**fields)

    def _merge(self, previous: TargetMessage, current: TargetMessage) -> TargetMessage:
        """Fold ``current`` into ``previous`` and return the combined message."""
        if isinstance(previous.content, str) and isinstance(current.content, str):
            content: str | list[ContentPart] = f"{previous.content}\n{current.content}"
        else:
            content = previous.content_parts() + current.content_parts()

        # Latest trace wins; a message without one keeps the earlier trace.
        reasoning = current.reasoning_trace if current.reasoning_trace is not None else previous.reasoning_trace

        return previous.model_copy(
            update={
                "content": content,
                "reasoning_trace": reasoning,
                "tool_uses": previous.tool_uses + current.tool_uses,
                "tool_results": previous.tool_results + current.tool_results,
            },
            deep=True,
        )
