"""Normalização de fields de content type.

Formato externo (operador):
    {"id": "tags", "name": "Tags", "type": "Array", "link_type": "",
     "default_value": '{"en-US": []}',
     "items": [{"type": "Symbol", "validations": ['{"size":{"max":5}}']}],
     "validations": ['{"size":{"max":10}}'], "required": False, ...}

Formato da API:
    {"id": "tags", "name": "Tags", "type": "Array",
     "defaultValue": {"en-US": []},
     "items": {"type": "Symbol", "validations": [{"size": {"max": 5}}]},
     "validations": [{"size": {"max": 10}}], "required": False, ...}

As duas direções são transformações puras: o input nunca é mutado e
chaves ausentes continuam ausentes.
"""

from __future__ import annotations

import copy
from collections.abc import Iterable, Mapping
from typing import Any

from api.normalizers.contentful._conversion_helpers import (
    dump_json,
    parse_json_value,
    parse_validations,
    rename_map_field,
    rename_string_field,
    serialize_validations,
    unwrap_single,
    wrap_single,
)
from utils.errors import FieldShapeError


def _field_label(field: Mapping[str, Any]) -> str:
    return f"field {field.get('id', '?')!r}"


def field_to_api(field: Mapping[str, Any]) -> dict[str, Any]:
    """Converte um field externo para o formato da API."""
    record = copy.deepcopy(dict(field))
    label = _field_label(record)

    parse_validations(record, label)
    rename_string_field(record, "link_type", "linkType")
    rename_string_field(record, "default_value", "defaultValue")
    if "defaultValue" in record:
        record["defaultValue"] = parse_json_value(
            record["defaultValue"], f"default_value of {label}"
        )

    unwrap_single(record, "items")
    items = record.get("items")
    if items is not None:
        if not isinstance(items, dict):
            raise FieldShapeError(f"items of {label} must be an object")
        rename_string_field(items, "link_type", "linkType")
        parse_validations(items, f"items of {label}")

    return record


def field_from_api(field: Mapping[str, Any]) -> dict[str, Any]:
    """Converte um field da API para o formato externo."""
    record = copy.deepcopy(dict(field))
    label = _field_label(record)

    serialize_validations(record, label)
    rename_string_field(record, "linkType", "link_type")
    rename_map_field(record, "defaultValue", "default_value")
    if "default_value" in record:
        record["default_value"] = dump_json(record["default_value"])

    items = record.get("items")
    if items is not None:
        if not isinstance(items, dict):
            raise FieldShapeError(f"items of {label} must be an object")
        rename_string_field(items, "linkType", "link_type")
        serialize_validations(items, f"items of {label}")
        wrap_single(record, "items")

    return record


def fields_to_api(fields: Iterable[Mapping[str, Any]] | None) -> list[dict[str, Any]]:
    """Converte a lista de fields externos (None = lista vazia).

    Raises:
        FieldShapeError: JSON inválido em validation/default_value ou
            aninhamento inválido. Nenhuma chamada de rede deve ocorrer.
    """
    return [field_to_api(_require_mapping(field)) for field in fields or ()]


def fields_from_api(fields: Iterable[Mapping[str, Any]] | None) -> list[dict[str, Any]]:
    return [field_from_api(_require_mapping(field)) for field in fields or ()]


def _require_mapping(field: Any) -> Mapping[str, Any]:
    if not isinstance(field, Mapping):
        raise FieldShapeError(f"field must be an object, got {type(field).__name__}")
    return field
