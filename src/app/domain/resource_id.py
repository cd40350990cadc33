"""Identificador externo persistido dos recursos.

Formatos:
    content type:     "{space}/{env}/{content_type_id}"
    editor interface: "{space}/{env}/{content_type_id}/editor_interface"
"""

from __future__ import annotations

from dataclasses import dataclass

from app.constants.contentful import EDITOR_INTERFACE_ID_SUFFIX, ResourceKind
from utils.errors import InvalidResourceIdError

_SEPARATOR = "/"


@dataclass(frozen=True, slots=True)
class ResourceId:
    """Tupla (space, env, content type) + tipo do recurso."""

    space_id: str
    env_id: str
    content_type_id: str
    kind: ResourceKind = ResourceKind.CONTENT_TYPE

    def format(self) -> str:
        parts = [self.space_id, self.env_id, self.content_type_id]
        if self.kind is ResourceKind.EDITOR_INTERFACE:
            parts.append(EDITOR_INTERFACE_ID_SUFFIX)
        return _SEPARATOR.join(parts)

    def __str__(self) -> str:
        return self.format()

    @classmethod
    def parse(cls, raw: str, kind: ResourceKind = ResourceKind.CONTENT_TYPE) -> ResourceId:
        """Divide o identificador persistido nos seus componentes.

        Raises:
            InvalidResourceIdError: Se o número de segmentos não corresponde
                ao tipo (3 para content type, 4 para editor interface) ou o
                sufixo de editor interface está errado.
        """
        parts = raw.split(_SEPARATOR)
        expected = 4 if kind is ResourceKind.EDITOR_INTERFACE else 3
        if len(parts) != expected:
            raise InvalidResourceIdError(raw)
        if kind is ResourceKind.EDITOR_INTERFACE and parts[3] != EDITOR_INTERFACE_ID_SUFFIX:
            raise InvalidResourceIdError(raw)
        return cls(space_id=parts[0], env_id=parts[1], content_type_id=parts[2], kind=kind)
