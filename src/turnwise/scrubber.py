"""Reasoning side-channel scrubbing."""

import logging
from collections.abc import Sequence

from turnwise.messages import Message

logger = logging.getLogger(__name__)


def scrub_reasoning(history: Sequence[Message], should_clear: bool) -> list[Message]:
    """Remove reasoning traces from assistant messages.

    Only the final answers of earlier turns belong in the context of a new
    turn, so callers clear traces when `is_new_user_turn` says a turn begins
    and keep them while a tool-call sequence is still running.

    Args:
        history: Conversation in chronological order. Never modified.
        should_clear: Whether to drop ``reasoning_trace`` from assistant messages.

    Returns:
        New Message objects. Everything except the trace is preserved,
        including extra fields. With ``should_clear=False`` the result is
        equal to ``history`` element by element.
    """
    if not should_clear:
        return [message.model_copy(deep=True) for message in history]

    scrubbed: list[Message] = []
    cleared = 0
    for message in history:
        if message.role == "assistant" and message.reasoning_trace is not None:
            scrubbed.append(message.model_copy(update={"reasoning_trace": None}, deep=True))
            cleared += 1
        else:
            scrubbed.append(message.model_copy(deep=True))

    logger.debug("scrub_reasoning messages=%d cleared=%d", len(history), cleared)
    return scrubbed
