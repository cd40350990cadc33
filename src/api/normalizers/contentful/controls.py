"""Normalização de controls de editor interface.

Formato externo: field_id/widget_id/widget_namespace e `settings` como
lista de no máximo um bloco (help_text, bulk_editing,
show_link_entity_action, show_create_entity_action).
Formato da API: camelCase e `settings` como objeto.
"""

from __future__ import annotations

import copy
from collections.abc import Iterable, Mapping
from typing import Any

from api.normalizers.contentful._conversion_helpers import (
    rename_bool_field,
    rename_string_field,
    unwrap_single,
    wrap_single,
)
from utils.errors import FieldShapeError

_CONTROL_STRING_FIELDS = (
    ("field_id", "fieldId"),
    ("widget_id", "widgetId"),
    ("widget_namespace", "widgetNamespace"),
)

_SETTINGS_BOOL_FIELDS = (
    ("bulk_editing", "bulkEditing"),
    ("show_link_entity_action", "showLinkEntityAction"),
    ("show_create_entity_action", "showCreateEntityAction"),
)

# Defaults do bloco settings no formato externo
SETTINGS_DEFAULTS: dict[str, bool] = {
    "bulk_editing": True,
    "show_link_entity_action": True,
    "show_create_entity_action": True,
}


def control_to_api(control: Mapping[str, Any]) -> dict[str, Any]:
    record = copy.deepcopy(dict(control))
    for old, new in _CONTROL_STRING_FIELDS:
        rename_string_field(record, old, new)

    unwrap_single(record, "settings")
    settings = record.get("settings")
    if settings is not None:
        settings = _require_mapping(settings, "settings")
        for key, default in SETTINGS_DEFAULTS.items():
            if settings.get(key) is None:
                settings[key] = default
        rename_string_field(settings, "help_text", "helpText")
        for old, new in _SETTINGS_BOOL_FIELDS:
            rename_bool_field(settings, old, new)
        record["settings"] = settings

    return record


def control_from_api(control: Mapping[str, Any]) -> dict[str, Any]:
    record = copy.deepcopy(dict(control))
    for old, new in _CONTROL_STRING_FIELDS:
        rename_string_field(record, new, old)

    settings = record.get("settings")
    if settings is not None:
        settings = _require_mapping(settings, "settings")
        rename_string_field(settings, "helpText", "help_text")
        for old, new in _SETTINGS_BOOL_FIELDS:
            rename_bool_field(settings, new, old)
        record["settings"] = settings
        wrap_single(record, "settings")

    return record


def controls_to_api(controls: Iterable[Mapping[str, Any]] | None) -> list[dict[str, Any]]:
    """Converte controls externos para o formato da API.

    Raises:
        FieldShapeError: Se um control ou settings não é objeto.
    """
    return [control_to_api(_require_mapping(control, "control")) for control in controls or ()]


def controls_from_api(controls: Iterable[Mapping[str, Any]] | None) -> list[dict[str, Any]]:
    return [control_from_api(_require_mapping(control, "control")) for control in controls or ()]


def _require_mapping(value: Any, what: str) -> dict[str, Any]:
    if not isinstance(value, Mapping):
        raise FieldShapeError(f"{what} must be an object, got {type(value).__name__}")
    return dict(value)
