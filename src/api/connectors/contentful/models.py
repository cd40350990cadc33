"""Documentos da Contentful Management API.

Cada recurso tem um modelo validado na decodificação; documentos com
estrutura inválida são rejeitados cedo com InvalidResponseError.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from utils.errors import InvalidResponseError

DEFAULT_VERSION = 1


class SysMetadata(BaseModel):
    """Bloco `sys` com metadados atribuídos pelo servidor."""

    model_config = ConfigDict(extra="allow")

    id: str | None = None
    type: str | None = None
    version: int | None = None


class ApiDocument(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    sys: SysMetadata | None = None

    @property
    def version(self) -> int:
        """Versão remota; 1 quando o documento não traz sys.version."""
        if self.sys is not None and self.sys.version is not None:
            return self.sys.version
        return DEFAULT_VERSION


class ContentTypeDocument(ApiDocument):
    name: str = ""
    description: str | None = None
    display_field: str | None = Field(default=None, alias="displayField")
    fields: list[dict[str, Any]] = Field(default_factory=list)


class EditorInterfaceDocument(ApiDocument):
    controls: list[dict[str, Any]] = Field(default_factory=list)


DocumentT = TypeVar("DocumentT", bound=ApiDocument)


def parse_document(model: type[DocumentT], data: Any) -> DocumentT:
    """Valida o corpo decodificado contra o modelo do recurso.

    Raises:
        InvalidResponseError: Se o corpo não é objeto ou não respeita o schema.
    """
    if not isinstance(data, dict):
        raise InvalidResponseError(
            f"expected JSON object for {model.__name__}, got {type(data).__name__}"
        )
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise InvalidResponseError(f"invalid {model.__name__}: {exc}") from exc


def get_version(document: dict[str, Any]) -> int:
    """Extrai sys.version de um documento bruto (default 1)."""
    sys_block = document.get("sys")
    if isinstance(sys_block, dict) and sys_block.get("version") is not None:
        return int(sys_block["version"])
    return DEFAULT_VERSION
