# History window: last N turns + fixed system instruction + current question.

from __future__ import annotations
from typing import Any, List, Mapping, Sequence, Union

from .types import Message

DEFAULT_WINDOW_SIZE = 10

TurnLike = Union[Message, Mapping[str, Any]]


def as_message(turn: TurnLike) -> Message:
    """Accept a Message or a plain {role, content} mapping; roles pass through unchecked."""
    if isinstance(turn, Message):
        return turn
    return Message(role=str(turn.get("role", "")), content=str(turn.get("content", "")))


class HistoryWindowBuilder:
    """
    Builds the message sequence sent to the generation service.

    The result is always: one system message, at most `window_size` of the most
    recent history turns in their original order, and the user's question.
    """

    def __init__(self, system_prompt: str, window_size: int = DEFAULT_WINDOW_SIZE):
        self.system_prompt = system_prompt
        self.window_size = window_size

    def window(self, history: Sequence[TurnLike]) -> List[Message]:
        if self.window_size <= 0 or not history:
            return []
        return [as_message(t) for t in list(history)[-self.window_size:]]

    def build(self, history: Sequence[TurnLike], question: str) -> List[Message]:
        return [
            Message(role="system", content=self.system_prompt),
            *self.window(history),
            Message(role="user", content=question),
        ]
