from pathlib import Path
import sys

sys.path.append(str(Path(__file__).resolve().parents[1]))

from skill_bridge.services.generation import extract_json_object


def test_extracts_object_from_fenced_prose():
    text = 'Here is your assessment:\n```json\n{"title": "Career", "questions": []}\n```\nGood luck!'
    assert extract_json_object(text) == {"title": "Career", "questions": []}


def test_braces_inside_strings_do_not_end_the_object():
    text = 'prefix {"note": "use {curly} braces", "nested": {"a": 1}} trailing {"b": 2}'
    assert extract_json_object(text) == {"note": "use {curly} braces", "nested": {"a": 1}}


def test_escaped_quotes_inside_strings():
    text = '{"quote": "she said \\"hi {\\"", "ok": true}'
    assert extract_json_object(text) == {"quote": 'she said "hi {"', "ok": True}


def test_skips_unparsable_candidate_and_uses_next_object():
    text = "{not json} then {\"questions\": [1, 2]}"
    assert extract_json_object(text) == {"questions": [1, 2]}


def test_unbalanced_leading_brace_does_not_hide_later_object():
    text = '{ "broken": "value" then later {"ok": 1}'
    assert extract_json_object(text) == {"ok": 1}


def test_returns_none_without_an_object():
    assert extract_json_object("") is None
    assert extract_json_object("no json here") is None
    assert extract_json_object("[1, 2, 3]") is None
