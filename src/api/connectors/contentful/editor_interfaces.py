"""Serviço de editor interfaces (read, put).

Layouts não têm publicação: não existe activate.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.connectors.contentful.models import EditorInterfaceDocument, parse_document

if TYPE_CHECKING:
    from api.connectors.contentful.http_client import ContentfulHttpClient


class EditorInterfaceService:
    def __init__(self, client: ContentfulHttpClient) -> None:
        self._client = client

    def _path(self, space_id: str, env: str, content_type_id: str) -> str:
        env_id = self._client.resolve_environment(env)
        return (
            f"/spaces/{space_id}/environments/{env_id}"
            f"/content_types/{content_type_id}/editor_interface"
        )

    async def read(
        self, space_id: str, env: str, content_type_id: str
    ) -> EditorInterfaceDocument:
        data = await self._client.request_document(
            "GET",
            self._path(space_id, env, content_type_id),
            operation="reading content_type editor interface",
        )
        return parse_document(EditorInterfaceDocument, data)

    async def put(
        self,
        space_id: str,
        env: str,
        content_type_id: str,
        version: int,
        body: dict[str, Any],
    ) -> EditorInterfaceDocument:
        data = await self._client.request_document(
            "PUT",
            self._path(space_id, env, content_type_id),
            operation="updating content_type editor interface",
            expected_version=version,
            body=body,
        )
        return parse_document(EditorInterfaceDocument, data)
