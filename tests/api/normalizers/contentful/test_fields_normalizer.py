"""Testes do normalizer de fields (formato externo ↔ API)."""

from __future__ import annotations

import copy

import pytest

from api.normalizers.contentful import (
    field_from_api,
    field_to_api,
    fields_from_api,
    fields_to_api,
)
from utils.errors import FieldShapeError


def _tags_field() -> dict:
    return {
        "id": "tags",
        "name": "Tags",
        "type": "Array",
        "link_type": "",
        "default_value": '{"en-US": []}',
        "items": [{"type": "Symbol", "validations": ['{"size":{"max":5}}']}],
        "validations": ['{"size":{"max":10}}'],
        "required": False,
    }


class TestFieldToApi:
    def test_full_field(self) -> None:
        api_field = field_to_api(_tags_field())

        assert api_field == {
            "id": "tags",
            "name": "Tags",
            "type": "Array",
            "defaultValue": {"en-US": []},
            "items": {"type": "Symbol", "validations": [{"size": {"max": 5}}]},
            "validations": [{"size": {"max": 10}}],
            "required": False,
        }

    def test_absent_optional_keys_stay_absent(self) -> None:
        api_field = field_to_api({"id": "title", "name": "Title", "type": "Symbol"})

        assert api_field == {"id": "title", "name": "Title", "type": "Symbol"}

    def test_link_type_renamed_inside_items(self) -> None:
        api_field = field_to_api(
            {
                "id": "refs",
                "type": "Array",
                "items": [{"type": "Link", "link_type": "Entry"}],
            }
        )

        assert api_field["items"] == {"type": "Link", "linkType": "Entry"}

    def test_link_type_on_field(self) -> None:
        api_field = field_to_api({"id": "author", "type": "Link", "link_type": "Entry"})

        assert api_field["linkType"] == "Entry"
        assert "link_type" not in api_field

    def test_empty_items_list_becomes_none(self) -> None:
        assert field_to_api({"id": "x", "type": "Array", "items": []})["items"] is None

    def test_more_than_one_items_block_rejected(self) -> None:
        with pytest.raises(FieldShapeError, match="at most one"):
            field_to_api({"id": "x", "items": [{"type": "Symbol"}, {"type": "Symbol"}]})

    def test_malformed_validation_rejected(self) -> None:
        with pytest.raises(FieldShapeError, match="validation #0"):
            field_to_api({"id": "x", "validations": ["{not json"]})

    def test_validation_must_be_object(self) -> None:
        with pytest.raises(FieldShapeError, match="JSON object"):
            field_to_api({"id": "x", "validations": ["[1, 2]"]})

    def test_malformed_default_value_rejected(self) -> None:
        with pytest.raises(FieldShapeError, match="default_value"):
            field_to_api({"id": "x", "default_value": "{oops"})

    def test_input_not_mutated(self) -> None:
        original = _tags_field()
        snapshot = copy.deepcopy(original)

        field_to_api(original)

        assert original == snapshot


class TestFieldFromApi:
    def test_full_field(self) -> None:
        field = field_from_api(
            {
                "id": "tags",
                "name": "Tags",
                "type": "Array",
                "defaultValue": {"en-US": []},
                "items": {"type": "Symbol", "validations": [{"size": {"max": 5}}]},
                "validations": [{"size": {"max": 10}}],
            }
        )

        assert field == {
            "id": "tags",
            "name": "Tags",
            "type": "Array",
            "default_value": '{"en-US":[]}',
            "items": [{"type": "Symbol", "validations": ['{"size":{"max":5}}']}],
            "validations": ['{"size":{"max":10}}'],
        }

    def test_absent_optional_keys_stay_absent(self) -> None:
        field = field_from_api({"id": "title", "type": "Symbol"})

        assert field == {"id": "title", "type": "Symbol"}

    def test_empty_default_value_dropped(self) -> None:
        field = field_from_api({"id": "title", "defaultValue": {}})

        assert "default_value" not in field
        assert "defaultValue" not in field

    def test_link_type_renamed(self) -> None:
        field = field_from_api(
            {"id": "refs", "items": {"type": "Link", "linkType": "Asset"}}
        )

        assert field["items"] == [{"type": "Link", "link_type": "Asset"}]


class TestRoundTrip:
    def test_simple_validation_round_trip(self) -> None:
        field = {"id": "slug", "type": "Symbol", "validations": ['{"type":"X"}']}

        api_field = field_to_api(field)
        assert api_field["validations"] == [{"type": "X"}]
        assert field_from_api(api_field) == field

    def test_lists_preserve_order(self) -> None:
        fields = [{"id": "a", "type": "Symbol"}, {"id": "b", "type": "Text"}]

        assert [f["id"] for f in fields_from_api(fields_to_api(fields))] == ["a", "b"]

    def test_none_list_is_empty(self) -> None:
        assert fields_to_api(None) == []
        assert fields_from_api(None) == []

    def test_non_object_field_rejected(self) -> None:
        with pytest.raises(FieldShapeError):
            fields_to_api(["title"])
