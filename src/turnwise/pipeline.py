"""turnwise - message preparation for reasoning chat-completion backends.

Usage with adapter:
    ```python
    from turnwise import TurnPipeline
    from turnwise.adapters import AnthropicAdapter

    history = AnthropicAdapter().convert(stored_messages)
    payload = TurnPipeline().prepare_request(history)
    client.chat.completions.create(model="deepseek-reasoner", messages=payload)
    ```

Direct usage:
    ```python
    from turnwise import Message, TurnPipeline

    pipeline = TurnPipeline()
    messages = pipeline.prepare([
        Message(role="user", content="What is 2+2?"),
        Message(role="assistant", content="4", reasoning_trace="2 plus 2 is 4."),
        Message(role="user", content="And 3+3?"),
    ])
    ```
"""

import logging
from collections.abc import Sequence

from openai.types.chat import ChatCompletionMessageParam

from turnwise.adapters.openai import OpenAIEncoder
from turnwise.boundary import is_new_user_turn
from turnwise.config import TurnwiseConfig
from turnwise.converter import FormatConverter
from turnwise.messages import Message
from turnwise.models.target import TargetMessage
from turnwise.scrubber import scrub_reasoning

logger = logging.getLogger(__name__)


class TurnPipeline:
    """Prepares a conversation history for one outbound request.

    Runs three stateless stages in order:

    - **Turn detection**: does the request start a new user turn or continue
      a tool-call sequence?
    - **Reasoning scrubbing**: drop traces from earlier turns, keep them
      inside a running tool-call sequence.
    - **Conversion**: transcode content and merge same-role runs.

    The caller's history is never modified, so it can be persisted as-is
    while the prepared messages are only used for the request.
    """

    def __init__(
        self,
        config: TurnwiseConfig | None = None,
        converter: FormatConverter | None = None,
        encoder: OpenAIEncoder | None = None,
    ) -> None:
        """Initialize the pipeline.

        Args:
            config: Configuration settings. Uses defaults if not provided.
            converter: Custom converter. Uses FormatConverter if not provided.
            encoder: Custom wire encoder. Built from config if not provided.
        """
        self.config = config or TurnwiseConfig()
        self.converter = converter or FormatConverter()
        self.encoder = encoder or OpenAIEncoder(reasoning_field=self.config.reasoning_field)

    def should_clear_reasoning(self, history: Sequence[Message]) -> bool:
        """Decide whether reasoning traces must be stripped for this request."""
        if not self.config.reasoning_side_channel:
            return True
        return is_new_user_turn(history)

    def prepare(self, history: Sequence[Message]) -> list[TargetMessage]:
        """Run turn detection, scrubbing and conversion.

        Args:
            history: Conversation in chronological order.

        Returns:
            Target messages ready for encoding.
        """
        clear = self.should_clear_reasoning(history)
        logger.debug("prepare messages=%d clear_reasoning=%s", len(history), clear)
        return self.converter.convert(scrub_reasoning(history, clear))

    def prepare_request(self, history: Sequence[Message]) -> list[ChatCompletionMessageParam]:
        """Prepare and encode as OpenAI chat-completion message dicts."""
        return self.encoder.encode(self.prepare(history))
