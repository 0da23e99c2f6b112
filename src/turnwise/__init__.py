from turnwise.adapters import AnthropicAdapter, OpenAIEncoder
from turnwise.boundary import is_new_user_turn
from turnwise.config import TurnwiseConfig
from turnwise.converter import FormatConverter
from turnwise.messages import (
    ContentBlock,
    ImageBlock,
    Message,
    TextBlock,
    ToolResultBlock,
    ToolUseBlock,
    UnknownBlock,
    with_reasoning,
)
from turnwise.models import ContentPart, ImagePart, TargetMessage, TextPart
from turnwise.pipeline import TurnPipeline
from turnwise.scrubber import scrub_reasoning

__all__ = [
    # Main class
    "TurnPipeline",
    # Config
    "TurnwiseConfig",
    # Stages
    "is_new_user_turn",
    "scrub_reasoning",
    "FormatConverter",
    # Source messages
    "Message",
    "ContentBlock",
    "TextBlock",
    "ImageBlock",
    "ToolUseBlock",
    "ToolResultBlock",
    "UnknownBlock",
    "with_reasoning",
    # Target messages
    "TargetMessage",
    "ContentPart",
    "TextPart",
    "ImagePart",
    # Adapters
    "AnthropicAdapter",
    "OpenAIEncoder",
]
