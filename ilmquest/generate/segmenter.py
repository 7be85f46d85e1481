"""
Split one block of generated text into an answer and suggested follow-ups.

The model is asked to end its reply with a delimiter line followed by a JSON
array, but nothing forces it to comply. Each strategy below is a pure function
that either claims the text (returning a Segmentation) or returns None, and
`segment` tries them in a fixed order:

  1. sentinel - the delimiter is present; the answer is everything before it
  2. fence    - no delimiter, but a ``` fenced block exists; the last one holds
                the follow-ups
  3. plain    - no structure; the whole text is the answer

`segment` never raises. The worst case is the full text as the answer and no
follow-ups.
"""

from __future__ import annotations
import json
import re
from typing import Any, Callable, List, Optional, Tuple

from .prompts import FOLLOWUPS_DELIMITER, NO_RESPONSE_PLACEHOLDER
from .types import ParseOutcome, Segmentation

FOLLOWUPS_FIELD = "suggested_followups"

_FENCE_MARKER = re.compile(r"```json|```", re.IGNORECASE)
_FENCED_BLOCK = re.compile(r"```(?:json)?.*?```", re.IGNORECASE | re.DOTALL)
_ARRAY_BLOCK = re.compile(r"\[.*\]", re.DOTALL)

_UNPARSED = object()


def strip_fences(text: str) -> str:
    """Drop every ``` / ```json marker (any case) and trim."""
    return _FENCE_MARKER.sub("", text).strip()


def string_items(items: List[Any]) -> List[str]:
    """Keep only str elements, in order; nothing is coerced."""
    return [s for s in items if isinstance(s, str)]


def _loads(text: str) -> Any:
    try:
        return json.loads(text)
    except (ValueError, RecursionError):
        return _UNPARSED


def parse_followups(value: Any) -> Optional[List[str]]:
    """
    Accept a bare array or an object with a `suggested_followups` array.
    Returns None when the value has neither shape.
    """
    if isinstance(value, list):
        return string_items(value)
    if isinstance(value, dict) and isinstance(value.get(FOLLOWUPS_FIELD), list):
        return string_items(value[FOLLOWUPS_FIELD])
    return None


def recover_array(text: str) -> Optional[List[str]]:
    """Best effort for near-miss JSON: parse the widest [...] span in the text."""
    m = _ARRAY_BLOCK.search(text)
    if not m:
        return None
    value = _loads(m.group(0))
    if isinstance(value, list):
        return string_items(value)
    return None


# -------------------------
# Strategies
# -------------------------
def split_on_sentinel(raw: str, delimiter: str = FOLLOWUPS_DELIMITER) -> Optional[Segmentation]:
    if delimiter not in raw:
        return None
    # Only the first occurrence splits; later ones stay in the payload.
    answer_part, _, payload = raw.partition(delimiter)
    answer = answer_part.strip()
    clean = strip_fences(payload)

    value = _loads(clean)
    if value is not _UNPARSED:
        followups = parse_followups(value)
        if followups is None:
            return Segmentation(answer, [], "sentinel", ParseOutcome.SENTINEL_MALFORMED)
        return Segmentation(answer, followups, "sentinel", ParseOutcome.OK)

    recovered = recover_array(clean)
    if recovered is None:
        return Segmentation(answer, [], "sentinel", ParseOutcome.SENTINEL_MALFORMED)
    return Segmentation(answer, recovered, "sentinel", ParseOutcome.RECOVERED)


def split_on_last_fence(raw: str) -> Optional[Segmentation]:
    blocks = list(_FENCED_BLOCK.finditer(raw))
    if not blocks:
        return None
    # Earlier blocks are part of the answer's own formatting and stay verbatim.
    last = blocks[-1]
    answer = (raw[:last.start()] + raw[last.end():]).strip()

    followups = parse_followups(_loads(strip_fences(last.group(0))))
    if followups is None:
        return Segmentation(answer, [], "fence", ParseOutcome.FENCE_MALFORMED)
    return Segmentation(answer, followups, "fence", ParseOutcome.OK)


def plain_answer(raw: Optional[str]) -> Segmentation:
    answer = raw.strip() if raw else NO_RESPONSE_PLACEHOLDER
    return Segmentation(answer, [], "plain", ParseOutcome.NONE_FOUND)


TIERS: Tuple[Callable[[str], Optional[Segmentation]], ...] = (
    split_on_sentinel,
    split_on_last_fence,
)


def segment(raw: Optional[str], tiers=TIERS) -> Segmentation:
    """Run each strategy in order; the first one that claims the text wins."""
    if raw is None or raw == "":
        return plain_answer(raw)
    if not isinstance(raw, str):
        raw = str(raw)
    for tier in tiers:
        result = tier(raw)
        if result is not None:
            return result
    return plain_answer(raw)
