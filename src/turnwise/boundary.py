"""Turn boundary detection.

Reasoning backends want the reasoning trace kept for the whole of a tool-call
sequence and dropped once a new user question arrives. This module decides
which of the two situations the next request is in.
"""

import logging
from collections.abc import Sequence

from turnwise.messages import Message

logger = logging.getLogger(__name__)


def is_new_user_turn(history: Sequence[Message]) -> bool:
    """Return True if the next request starts a new user turn.

    Heuristics, applied to the last message:

    - empty history or last message from the user: new turn
    - assistant message with tool use blocks: still inside the turn
    - assistant message without tool use: look at the message before it
        - user message with tool results: wrap-up of a tool round, same turn
        - user message without tool results: the exchange is over, new turn
        - another assistant message: unflushed continuation, same turn
    - any other role: new turn

    Example:
        ```python
        is_new_user_turn([
            Message(role="assistant", content=[ToolUseBlock(id="c1", name="ls")]),
            Message(role="user", content=[ToolResultBlock(tool_use_id="c1", payload="a.py")]),
            Message(role="assistant", content="done"),
        ])  # False
        ```

    Args:
        history: Conversation in chronological order.

    Returns:
        True if reasoning from earlier turns should be cleared, False if the
        current tool-call sequence is still running and it must be kept.
    """
    if not history:
        return True

    last = history[-1]
    if last.role == "user":
        return True
    if last.role != "assistant":
        logger.debug("is_new_user_turn unknown last role=%s", last.role)
        return True

    if last.has_tool_use:
        return False

    # A lone assistant message has nothing to continue.
    if len(history) == 1:
        return True

    previous = history[-2]
    if previous.role == "user":
        return not previous.has_tool_result
    if previous.role == "assistant":
        return False
    return True
