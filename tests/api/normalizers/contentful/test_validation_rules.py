"""Testes da comparação semântica de regras de validação."""

from __future__ import annotations

import pytest

from api.normalizers.contentful import keep_equivalent_rule_text, rules_equivalent


@pytest.mark.parametrize(
    ("old", "new", "expected"),
    [
        ('{"size":{"max":5}}', '{ "size": { "max": 5 } }', True),
        ('{"a":1,"b":2}', '{"b":2,"a":1}', True),
        ('{"size":{"max":5}}', '{"size":{"max":6}}', False),
        ("{broken", '{"a":1}', False),
        ("[1]", "[1]", False),
    ],
)
def test_rules_equivalent(old: str, new: str, expected: bool) -> None:
    assert rules_equivalent(old, new) is expected


def test_keeps_desired_text_for_equivalent_rules() -> None:
    observed = [
        {"id": "title", "validations": ['{"size":{"max":5}}', '{"unique":true}']},
    ]
    desired = [
        {"id": "title", "validations": ['{ "size": {"max": 5} }', '{"unique":false}']},
    ]

    result = keep_equivalent_rule_text(observed, desired)

    assert result[0]["validations"] == ['{ "size": {"max": 5} }', '{"unique":true}']


def test_items_rules_matched_too() -> None:
    observed = [{"id": "tags", "items": [{"validations": ['{"in":["a","b"]}']}]}]
    desired = [{"id": "tags", "items": [{"validations": ['{"in": ["a", "b"]}']}]}]

    keep_equivalent_rule_text(observed, desired)

    assert observed[0]["items"][0]["validations"] == ['{"in": ["a", "b"]}']


def test_unmatched_fields_and_length_mismatch_untouched() -> None:
    observed = [
        {"id": "a", "validations": ['{"x":1}']},
        {"id": "b", "validations": ['{"x":1}']},
    ]
    desired = [{"id": "b", "validations": ['{ "x": 1 }', '{"y":2}']}]

    keep_equivalent_rule_text(observed, desired)

    assert observed[0]["validations"] == ['{"x":1}']
    assert observed[1]["validations"] == ['{"x":1}']


def test_no_desired_fields() -> None:
    observed = [{"id": "a", "validations": ['{"x":1}']}]

    assert keep_equivalent_rule_text(observed, None) == observed
