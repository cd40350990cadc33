"""Protocolos dos serviços da Contentful usados pelos reconcilers.

Evita dependência direta da camada api.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from api.connectors.contentful.models import (
        ContentTypeDocument,
        EditorInterfaceDocument,
    )


class ContentTypeServiceProtocol(Protocol):
    """Contrato mínimo para content types."""

    async def read(
        self, space_id: str, env: str, content_type_id: str
    ) -> ContentTypeDocument: ...

    async def put(
        self,
        space_id: str,
        env: str,
        content_type_id: str,
        version: int,
        body: dict[str, Any],
    ) -> ContentTypeDocument: ...

    async def activate(
        self, space_id: str, env: str, content_type_id: str, version: int
    ) -> ContentTypeDocument: ...


class EditorInterfaceServiceProtocol(Protocol):
    """Contrato mínimo para editor interfaces (sem activate)."""

    async def read(
        self, space_id: str, env: str, content_type_id: str
    ) -> EditorInterfaceDocument: ...

    async def put(
        self,
        space_id: str,
        env: str,
        content_type_id: str,
        version: int,
        body: dict[str, Any],
    ) -> EditorInterfaceDocument: ...
