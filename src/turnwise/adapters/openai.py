"""OpenAI chat-completion encoder.

Turns TargetMessages into the message dicts sent to OpenAI-compatible
chat-completion endpoints (DeepSeek reasoner and friends).
"""

import json
import logging
from typing import Any

from openai.types.chat import (
    ChatCompletionContentPartParam,
    ChatCompletionMessageParam,
    ChatCompletionMessageToolCallParam,
    ChatCompletionToolMessageParam,
)

from turnwise.messages import ToolResultBlock, ToolUseBlock
from turnwise.models.parts import ImagePart, TextPart
from turnwise.models.target import TargetMessage

logger = logging.getLogger(__name__)


class OpenAIEncoder:
    """Encodes TargetMessages as OpenAI chat-completion message dicts.

    Args:
        reasoning_field: Key used for the reasoning trace on assistant messages.
    """

    def __init__(
        self,
        *,
        reasoning_field: str = "reasoning_content",
    ) -> None:
        self.reasoning_field = reasoning_field

    def encode(self, messages: list[TargetMessage]) -> list[ChatCompletionMessageParam]:
        """Encode a list of target messages.

        A user message holding tool results expands into one ``tool`` message
        per result, followed by the user message itself unless it has no
        content left. Whitespace-only content, such as the separator left
        by merging two tool-result messages, counts as none.

        Args:
            messages: Output of FormatConverter.

        Returns:
            Chat-completion message dicts in order.
        """
        encoded: list[ChatCompletionMessageParam] = []
        for message in messages:
            encoded.extend(self.encode_single(message))
        return encoded

    def encode_single(self, message: TargetMessage) -> list[ChatCompletionMessageParam]:
        """Encode one target message into one or more dicts."""
        if message.role == "assistant":
            assistant: dict[str, Any] = {"role": "assistant", "content": self._encode_content(message.content)}
            if message.tool_uses:
                assistant["tool_calls"] = [self._encode_tool_use(tool_use) for tool_use in message.tool_uses]
            if message.reasoning_trace is not None:
                assistant[self.reasoning_field] = message.reasoning_trace
            return [assistant]  # type: ignore[list-item]

        if message.role == "user":
            encoded: list[ChatCompletionMessageParam] = [
                self._encode_tool_result(result) for result in message.tool_results
            ]
            if _has_content(message.content) or not encoded:
                encoded.append({"role": "user", "content": self._encode_content(message.content)})
            return encoded

        passthrough: dict[str, Any] = dict(message.model_extra or {})
        passthrough.update(role=message.role, content=self._encode_content(message.content))
        return [passthrough]  # type: ignore[list-item]

    def _encode_content(self, content: str | list[TextPart | ImagePart]) -> str | list[ChatCompletionContentPartParam]:
        if isinstance(content, str):
            return content
        parts: list[ChatCompletionContentPartParam] = []
        for part in content:
            if isinstance(part, ImagePart):
                parts.append({"type": "image_url", "image_url": {"url": part.url}})
            else:
                parts.append({"type": "text", "text": part.text})
        return parts

    def _encode_tool_use(self, tool_use: ToolUseBlock) -> ChatCompletionMessageToolCallParam:
        return {
            "id": tool_use.id,
            "type": "function",
            "function": {
                "name": tool_use.name,
                "arguments": json.dumps(tool_use.input, ensure_ascii=False),
            },
        }

    def _encode_tool_result(self, result: ToolResultBlock) -> ChatCompletionToolMessageParam:
        if isinstance(result.payload, str):
            text = result.payload
        else:
            texts: list[str] = []
            for item in result.payload:
                if isinstance(item, dict) and item.get("type") == "text":
                    texts.append(item.get("text", ""))
                else:
                    # tool messages only carry text
                    item_type = item.get("type") if isinstance(item, dict) else type(item).__name__
                    logger.debug("encode dropped tool_result item type=%s tool_use_id=%s", item_type, result.tool_use_id)
            text = "\n".join(texts)
        return {"role": "tool", "tool_call_id": result.tool_use_id, "content": text}


def _has_content(content: str | list[TextPart | ImagePart]) -> bool:
    if isinstance(content, str):
        return bool(content.strip())
    return any(isinstance(part, ImagePart) or part.text.strip() for part in content)
