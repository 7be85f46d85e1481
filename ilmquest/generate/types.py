# Typed dataclasses shared across generator modules.

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Dict, Any


@dataclass(frozen=True)
class Message:
    """Single chat turn: system, user, or assistant."""
    role: str
    content: str

    def to_dict(self) -> Dict[str, str]:
        return {"role": self.role, "content": self.content}


@dataclass
class ModelParams:
    """LLM parameters per request."""
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None


@dataclass(frozen=True)
class Citation:
    source: str
    content: str


class ParseOutcome(str, Enum):
    """How the follow-up payload was (or was not) recovered from the raw text."""
    OK = "ok"
    RECOVERED = "recovered"
    SENTINEL_MALFORMED = "sentinel-malformed"
    FENCE_MALFORMED = "fence-malformed"
    NONE_FOUND = "none-found"


@dataclass
class Segmentation:
    """Answer / follow-ups split of one raw model output."""
    answer: str
    followups: List[str] = field(default_factory=list)
    tier: str = "plain"
    outcome: ParseOutcome = ParseOutcome.NONE_FOUND


@dataclass
class ChatResponse:
    """Final response from the generator."""
    text: str
    citations: List[Citation]
    suggested_followups: List[str]
    history: List[Message]
    meta: Dict[str, Any] = field(default_factory=dict)

    def to_payload(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "citations": [{"source": c.source, "content": c.content} for c in self.citations],
            "suggested_followups": list(self.suggested_followups),
            "history": [m.to_dict() for m in self.history],
        }
