"""Builder do corpo de upsert de editor interface."""

from __future__ import annotations

from typing import Any


def build_editor_interface_body(controls: list[dict[str, Any]]) -> dict[str, Any]:
    """Monta o corpo de PUT .../editor_interface com controls já normalizados."""
    return {"controls": controls}
