"""Builder do corpo de upsert de content type."""

from __future__ import annotations

from typing import Any

from app.constants.contentful import WARNING_MESSAGE


def build_description(description: str | None) -> str:
    """Prefixa a description com o marcador de gerenciamento (sempre)."""
    return WARNING_MESSAGE + (description or "")


def strip_description(description: str | None) -> str:
    """Inverso de build_description para leitura do documento remoto."""
    return (description or "").removeprefix(WARNING_MESSAGE)


def build_content_type_body(
    name: str | None,
    description: str | None,
    display_field: str | None,
    fields: list[dict[str, Any]],
) -> dict[str, Any]:
    """Monta o corpo de PUT /content_types/{id}.

    Args:
        name: Nome do content type (omitido se vazio)
        description: Description do operador (pode ser vazia)
        display_field: Id do field de exibição (omitido se vazio)
        fields: Fields já no formato da API

    Returns:
        Corpo novo a cada chamada; `fields` é referenciado, não copiado.
    """
    body: dict[str, Any] = {}
    if name:
        body["name"] = name
    body["description"] = build_description(description)
    if display_field:
        body["displayField"] = display_field
    body["fields"] = fields
    return body
