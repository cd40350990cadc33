"""Passos nomeados da atualização de content type.

Cada passo recebe a versão corrente e devolve a versão resultante, para
que a versão seja encadeada explicitamente entre as chamadas:

    soft_remove_deleted_fields  (só quando há fields removidos)
        PUT campos antigos com removidos omitted=True → activate
    apply_desired_fields
        PUT campos novos → activate

A API exige que um field esteja omitted antes de ser removido da
estrutura do content type.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.domain.resource_id import ResourceId
    from app.protocols.contentful_services import ContentTypeServiceProtocol

logger = logging.getLogger(__name__)


def deleted_field_ids(
    old_fields: Iterable[Mapping[str, Any]] | None,
    new_fields: Iterable[Mapping[str, Any]] | None,
) -> list[str]:
    """Ids presentes em `old_fields` e ausentes em `new_fields` (ordem antiga)."""
    new_ids = {field.get("id") for field in new_fields or ()}
    return [
        field["id"]
        for field in old_fields or ()
        if field.get("id") is not None and field.get("id") not in new_ids
    ]


def mark_omitted(
    api_fields: list[dict[str, Any]],
    field_ids: Iterable[str],
) -> list[dict[str, Any]]:
    """Nova lista com `omitted=True` nos fields indicados."""
    targets = set(field_ids)
    return [
        {**field, "omitted": True} if field.get("id") in targets else field
        for field in api_fields
    ]


async def put_and_activate(
    service: ContentTypeServiceProtocol,
    resource: ResourceId,
    version: int,
    body: dict[str, Any],
) -> int:
    """PUT na versão informada e activate na versão resultante.

    Returns:
        Versão após o activate.
    """
    put_doc = await service.put(
        resource.space_id, resource.env_id, resource.content_type_id, version, body
    )
    logger.info(
        "content_type_upserted",
        extra={"resource_id": str(resource), "version": put_doc.version},
    )
    activated = await service.activate(
        resource.space_id, resource.env_id, resource.content_type_id, put_doc.version
    )
    logger.info(
        "content_type_activated",
        extra={"resource_id": str(resource), "version": activated.version},
    )
    return activated.version


async def soft_remove_deleted_fields(
    service: ContentTypeServiceProtocol,
    resource: ResourceId,
    version: int,
    base_body: Mapping[str, Any],
    omitted_fields: list[dict[str, Any]],
) -> int:
    """Fase 1: publica os fields antigos com os removidos marcados omitted."""
    return await put_and_activate(
        service, resource, version, {**base_body, "fields": omitted_fields}
    )


async def apply_desired_fields(
    service: ContentTypeServiceProtocol,
    resource: ResourceId,
    version: int,
    base_body: Mapping[str, Any],
    desired_fields: list[dict[str, Any]],
) -> int:
    """Fase 2: publica a lista de fields desejada."""
    return await put_and_activate(
        service, resource, version, {**base_body, "fields": desired_fields}
    )
