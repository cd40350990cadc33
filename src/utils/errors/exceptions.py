"""Exceções de domínio para sincronização de content models."""

from __future__ import annotations

from collections.abc import Iterable


class ContentfulSyncError(RuntimeError):
    """Base para todas as falhas da sincronização."""


class ContentfulTransportError(ContentfulSyncError):
    """Falha de conexão com a API (nunca retentada)."""


class ContentfulApiError(ContentfulSyncError):
    """Resposta HTTP >= 400 da API.

    O corpo da resposta é preservado literalmente para diagnóstico.

    Attributes:
        status_code: Status HTTP recebido
        body: Corpo bruto da resposta
        operation: Operação em andamento (ex: "reading content_type")
    """

    def __init__(self, status_code: int, body: str, operation: str) -> None:
        super().__init__(
            f"contentful-api: received http status code {status_code} "
            f"when {operation}\n\n{body}"
        )
        self.status_code = status_code
        self.body = body
        self.operation = operation


class ResourceNotFoundError(ContentfulApiError):
    """404: recurso ausente no lado remoto."""


class VersionConflictError(ContentfulApiError):
    """409: versão remota avançou fora de banda."""


class InvalidResponseError(ContentfulSyncError):
    """Resposta não é um objeto JSON ou não respeita o schema do documento."""


class FieldShapeError(ContentfulSyncError):
    """JSON malformado em validation/default_value ou aninhamento inválido."""


class InvalidResourceIdError(ContentfulSyncError):
    """Identificador persistido com número de segmentos inesperado."""

    def __init__(self, resource_id: str) -> None:
        super().__init__(f"Got invalid id: {resource_id}")
        self.resource_id = resource_id


class ProtectedFieldDeletionError(ContentfulSyncError):
    """Remoção de fields bloqueada pela flag protected."""

    def __init__(self, deleted_ids: Iterable[str]) -> None:
        self.deleted_ids = list(deleted_ids)
        super().__init__(
            "Protected is set to true and these field(s) will be removed: "
            f"{', '.join(self.deleted_ids)}"
        )


class UnsupportedOperationError(ContentfulSyncError):
    """Operação fora da autoridade do sistema (ex: delete)."""
