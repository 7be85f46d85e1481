# ===============================================
# tests/test_segmenter.py
# Answer / follow-up splitting across all three strategies
# ===============================================

from ilmquest.generate.prompts import FOLLOWUPS_DELIMITER, NO_RESPONSE_PLACEHOLDER
from ilmquest.generate.segmenter import (
    plain_answer,
    recover_array,
    segment,
    split_on_last_fence,
    split_on_sentinel,
    strip_fences,
)
from ilmquest.generate.types import ParseOutcome

D = FOLLOWUPS_DELIMITER


# --- sentinel ---

def test_sentinel_with_array():
    out = segment(f"  The answer.  \n{D}\n[\"Q1\", \"Q2\", \"Q3\"]")
    assert out.answer == "The answer."
    assert out.followups == ["Q1", "Q2", "Q3"]
    assert out.tier == "sentinel"
    assert out.outcome == ParseOutcome.OK


def test_sentinel_with_object_drops_non_strings():
    out = segment('Answer===SUGGESTED_FOLLOWUPS===\n{"suggested_followups": ["Q1", "Q2", 5]}')
    assert out.answer == "Answer"
    assert out.followups == ["Q1", "Q2"]


def test_sentinel_with_fenced_json():
    raw = f"Answer.\n{D}\n```JSON\n[\"a\", \"b\"]\n```"
    out = segment(raw)
    assert out.answer == "Answer."
    assert out.followups == ["a", "b"]


def test_sentinel_wins_over_fenced_blocks():
    raw = f"Intro\n```json\n[\"fenced\"]\n```\nMore.\n{D}\n[\"from-sentinel\"]"
    out = segment(raw)
    assert out.tier == "sentinel"
    assert out.followups == ["from-sentinel"]
    assert "```json" in out.answer


def test_sentinel_splits_on_first_occurrence_only():
    raw = f"A{D}[\"x\"]{D}tail"
    out = segment(raw)
    assert out.answer == "A"
    # trailing text after the array -> recovered via the [...] search
    assert out.followups == ["x"]
    assert out.outcome == ParseOutcome.RECOVERED


def test_sentinel_recovers_array_followed_by_prose():
    raw = f"Answer{D}\nHere you go: [\"Q1\", \"Q2\"] hope this helps"
    out = segment(raw)
    assert out.followups == ["Q1", "Q2"]
    assert out.outcome == ParseOutcome.RECOVERED


def test_sentinel_with_garbage_degrades_to_empty():
    out = segment(f"  Real answer \n{D} not json at all")
    assert out.answer == "Real answer"
    assert out.followups == []
    assert out.outcome == ParseOutcome.SENTINEL_MALFORMED


def test_sentinel_parsed_but_wrong_shape():
    out = segment(f"Answer{D}{{\"other\": [\"Q1\"]}}")
    assert out.followups == []
    assert out.outcome == ParseOutcome.SENTINEL_MALFORMED


def test_sentinel_object_with_non_array_field():
    out = segment(f"Answer{D}{{\"suggested_followups\": \"Q1\"}}")
    assert out.followups == []


def test_sentinel_broken_bracket_span():
    out = segment(f"Answer{D}[\"a\", oops]")
    assert out.followups == []
    assert out.outcome == ParseOutcome.SENTINEL_MALFORMED


def test_sentinel_is_case_sensitive():
    out = segment("Answer ===suggested_followups=== [\"Q1\"]")
    assert out.tier == "plain"
    assert out.followups == []


def test_empty_answer_before_sentinel_is_kept():
    out = segment(f"   {D}[\"Q1\"]")
    assert out.answer == ""
    assert out.followups == ["Q1"]


def test_duplicates_are_kept_in_order():
    out = segment(f"A{D}[\"b\", \"a\", \"b\"]")
    assert out.followups == ["b", "a", "b"]


def test_no_cap_on_followup_count():
    items = [f"Q{i}" for i in range(8)]
    out = segment(f"A{D}" + str(items).replace("'", '"'))
    assert out.followups == items


# --- fence ---

def test_last_fenced_block_is_selected():
    raw = 'Answer text. ```json\n["a"]\n``` trailing ```json\n["b","c"]\n```'
    out = segment(raw)
    assert out.tier == "fence"
    assert out.followups == ["b", "c"]
    assert out.answer == 'Answer text. ```json\n["a"]\n``` trailing'


def test_fenced_object_with_field():
    raw = 'Answer.\n```\n{"suggested_followups": ["x", null, "y"]}\n```'
    out = segment(raw)
    assert out.answer == "Answer."
    assert out.followups == ["x", "y"]
    assert out.outcome == ParseOutcome.OK


def test_fenced_block_unparsable_has_no_recovery():
    raw = 'Answer.\n```json\nsure: ["x", "y"] thanks\n```'
    out = segment(raw)
    assert out.answer == "Answer."
    assert out.followups == []
    assert out.outcome == ParseOutcome.FENCE_MALFORMED


def test_only_last_block_removed_when_identical_blocks():
    block = '```json\n["same"]\n```'
    out = split_on_last_fence(f"one {block} two {block}")
    assert out.answer == f"one {block} two"


# --- plain ---

def test_plain_text():
    out = segment("Just a plain answer, no markers.")
    assert out.answer == "Just a plain answer, no markers."
    assert out.followups == []
    assert out.outcome == ParseOutcome.NONE_FOUND


def test_plain_text_is_trimmed():
    assert segment("\n  hello  \n").answer == "hello"


def test_empty_or_missing_uses_placeholder():
    assert segment("").answer == NO_RESPONSE_PLACEHOLDER
    assert segment(None).answer == NO_RESPONSE_PLACEHOLDER
    assert plain_answer(None).followups == []


def test_whitespace_only_is_not_replaced():
    assert segment("   ").answer == ""


# --- helpers / properties ---

def test_strip_fences():
    assert strip_fences("```Json\n[1]\n```") == "[1]"


def test_recover_array_none_when_missing():
    assert recover_array("no brackets here") is None


def test_split_helpers_decline_unstructured_text():
    assert split_on_sentinel("plain") is None
    assert split_on_last_fence("plain") is None


def test_followups_always_strings():
    samples = [
        f"A{D}[1, 2.5, true, null, {{}}, [], \"ok\"]",
        "A ```json\n[1, \"ok\", false]\n```",
        f"A{D}{{\"suggested_followups\": [[\"nested\"], \"ok\"]}}",
        "no structure",
    ]
    for raw in samples:
        out = segment(raw)
        assert all(isinstance(s, str) for s in out.followups)
        assert out.answer == out.answer.strip()
