"""Adapters between provider message formats and turnwise's own types.

Available adapters:
    - AnthropicAdapter: Parses Anthropic Messages API dicts into Messages
    - OpenAIEncoder: Encodes TargetMessages as OpenAI chat-completion dicts

Usage:
    ```python
    from turnwise.adapters import AnthropicAdapter, OpenAIEncoder
    from turnwise.converter import FormatConverter

    history = AnthropicAdapter().convert([
        {"role": "user", "content": "Hello"},
        {"role": "assistant", "content": "Hi there!"},
    ])
    payload = OpenAIEncoder().encode(FormatConverter().convert(history))
    ```
"""

from turnwise.adapters.anthropic import AnthropicAdapter
from turnwise.adapters.openai import OpenAIEncoder

__all__ = ["AnthropicAdapter", "OpenAIEncoder"]
