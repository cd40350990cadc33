"""Helpers de conversão entre o formato externo e o formato da API.

Separado de fields.py/controls.py para manter SRP. Todas as funções
operam sobre o dict recebido (já copiado pelo chamador).
"""

from __future__ import annotations

import json
from typing import Any

from utils.errors import FieldShapeError


def rename_string_field(record: dict[str, Any], old: str, new: str) -> None:
    """Renomeia chave string; string vazia é descartada, não repassada."""
    value = record.pop(old, None)
    if value is None:
        return
    if not isinstance(value, str):
        raise FieldShapeError(f"{old} must be a string, got {type(value).__name__}")
    if value:
        record[new] = value


def rename_map_field(record: dict[str, Any], old: str, new: str) -> None:
    """Renomeia valor estruturado; objeto vazio é descartado."""
    value = record.pop(old, None)
    if value is None:
        return
    if isinstance(value, dict) and not value:
        return
    record[new] = value


def rename_bool_field(record: dict[str, Any], old: str, new: str) -> None:
    value = record.pop(old, None)
    if value is not None:
        record[new] = value


def parse_json_value(raw: Any, what: str) -> Any:
    """Converte string JSON em valor estruturado.

    Raises:
        FieldShapeError: Se não é string ou o JSON é inválido.
    """
    if not isinstance(raw, str):
        raise FieldShapeError(f"{what} must be a JSON string, got {type(raw).__name__}")
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise FieldShapeError(f"invalid JSON in {what}: {exc.msg} (pos {exc.pos})") from exc


def parse_json_object(raw: Any, what: str) -> dict[str, Any]:
    value = parse_json_value(raw, what)
    if not isinstance(value, dict):
        raise FieldShapeError(f"{what} must be a JSON object, got {type(value).__name__}")
    return value


def dump_json(value: Any) -> str:
    """Serialização compacta e determinística (chaves ordenadas)."""
    return json.dumps(value, separators=(",", ":"), sort_keys=True, ensure_ascii=False)


def unwrap_single(record: dict[str, Any], key: str) -> None:
    """Lista de no máximo um elemento → o próprio elemento (vazia → None)."""
    if key not in record:
        return
    value = record[key]
    if value is None:
        return
    if not isinstance(value, list):
        raise FieldShapeError(f"{key} must be a list with at most one element")
    if len(value) > 1:
        raise FieldShapeError(f"{key} accepts at most one element, got {len(value)}")
    record[key] = value[0] if value else None


def wrap_single(record: dict[str, Any], key: str) -> None:
    """Objeto aninhado da API → lista de um elemento."""
    value = record.get(key)
    if value is None:
        return
    if not isinstance(value, dict):
        raise FieldShapeError(f"{key} must be an object, got {type(value).__name__}")
    record[key] = [value]


def parse_validations(record: dict[str, Any], owner: str) -> None:
    """Cada regra (string JSON) vira objeto."""
    rules = record.get("validations")
    if rules is None:
        record.pop("validations", None)
        return
    if not isinstance(rules, list):
        raise FieldShapeError(f"validations of {owner} must be a list")
    record["validations"] = [
        parse_json_object(rule, f"validation #{index} of {owner}")
        for index, rule in enumerate(rules)
    ]


def serialize_validations(record: dict[str, Any], owner: str) -> None:
    """Cada regra (objeto) vira string JSON."""
    rules = record.get("validations")
    if rules is None:
        record.pop("validations", None)
        return
    if not isinstance(rules, list):
        raise FieldShapeError(f"validations of {owner} must be a list")
    record["validations"] = [dump_json(rule) for rule in rules]
