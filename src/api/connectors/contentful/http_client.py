"""Cliente HTTP especializado para a Contentful Management API.

Estende HttpClient com:
- Autenticação Bearer e headers fixos (content-type, user-agent)
- Header de versão para concorrência otimista (omitido quando 0)
- Resolução do environment padrão
- Decodificação de respostas e erros com corpo bruto preservado
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import TYPE_CHECKING, Any

from api.connectors.contentful.api_logging import log_api_error, log_success
from api.connectors.contentful.http_base import HttpClient, HttpClientConfig, SleepFunc
from utils.errors import (
    ContentfulApiError,
    InvalidResponseError,
    ResourceNotFoundError,
    VersionConflictError,
)

if TYPE_CHECKING:
    import httpx

    from config.settings import ContentfulSettings

logger: logging.Logger = logging.getLogger(__name__)

CONTENT_TYPE = "application/vnd.contentful.delivery.v1+json"
USER_AGENT_HEADER = "X-Contentful-User-Agent"
USER_AGENT = "contentful-sync/1.0.0"
VERSION_HEADER = "X-Contentful-Version"

_STATUS_ERRORS: dict[int, type[ContentfulApiError]] = {
    404: ResourceNotFoundError,
    409: VersionConflictError,
}


class ContentfulHttpClient(HttpClient):
    """Cliente HTTP autenticado da Contentful.

    Args:
        config: Configuração HTTP base
        access_token: Token da Content Management API
        default_environment: Environment usado quando o chamador passa ""
        http_client: AsyncClient compartilhado (opcional)
        sleep: Espera entre tentativas em 429
    """

    def __init__(
        self,
        config: HttpClientConfig,
        access_token: str,
        default_environment: str = "",
        http_client: httpx.AsyncClient | None = None,
        sleep: SleepFunc = asyncio.sleep,
    ) -> None:
        if not access_token or not access_token.strip():
            raise ValueError(
                "access_token é obrigatório. "
                "Verifique se CONTENTFUL_MANAGEMENT_TOKEN está configurado."
            )
        super().__init__(config, http_client=http_client, sleep=sleep)
        self._access_token = access_token
        self.default_environment = default_environment

    def resolve_environment(self, env: str) -> str:
        """Substitui env vazio pelo environment padrão configurado."""
        return env or self.default_environment

    def build_headers(self, expected_version: int) -> dict[str, str]:
        """Headers de toda requisição; versão só quando diferente de 0."""
        headers = {
            "Authorization": f"Bearer {self._access_token}",
            "Content-Type": CONTENT_TYPE,
            USER_AGENT_HEADER: USER_AGENT,
        }
        if expected_version != 0:
            headers[VERSION_HEADER] = str(expected_version)
        return headers

    async def execute(
        self,
        method: str,
        path: str,
        expected_version: int = 0,
        body: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """Executa a requisição com retry de 429 (ver HttpClient.request)."""
        return await self.request(
            method,
            path,
            headers=self.build_headers(expected_version),
            json=body,
        )

    async def request_document(
        self,
        method: str,
        path: str,
        operation: str,
        expected_version: int = 0,
        body: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Executa e decodifica um objeto JSON.

        Args:
            method: Método HTTP
            path: Caminho relativo ao host da API
            operation: Descrição para mensagens de erro (ex: "reading content_type")
            expected_version: Versão esperada (0 = sem checagem de concorrência)
            body: Corpo JSON (opcional)

        Returns:
            Objeto JSON da resposta

        Raises:
            ResourceNotFoundError: Status 404
            VersionConflictError: Status 409
            ContentfulApiError: Qualquer outro status >= 400
            InvalidResponseError: Corpo não é um objeto JSON
        """
        response = await self.execute(method, path, expected_version, body)
        if response.status_code >= 400:
            log_api_error(method, path, response.status_code)
            error_cls = _STATUS_ERRORS.get(response.status_code, ContentfulApiError)
            raise error_cls(response.status_code, response.text, operation)

        try:
            data = response.json()
        except json.JSONDecodeError as exc:
            logger.error("contentful_invalid_json", extra={"path": path})
            raise InvalidResponseError(f"invalid JSON when {operation}") from exc

        if not isinstance(data, dict):
            raise InvalidResponseError(
                f"expected JSON object when {operation}, got {type(data).__name__}"
            )

        log_success(method, path, response.status_code)
        return data


def create_contentful_http_client(
    settings: ContentfulSettings | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> ContentfulHttpClient:
    """Factory para criar o cliente com config padrão.

    Args:
        settings: ContentfulSettings opcional. Se None, carrega do ambiente.
        http_client: AsyncClient compartilhado (opcional)

    Returns:
        Cliente HTTP configurado.
    """
    # Import local para evitar dependência circular
    from config.settings import get_contentful_settings

    contentful = settings or get_contentful_settings()
    config = HttpClientConfig(
        base_url=contentful.api_base_url,
        timeout_seconds=contentful.request_timeout_seconds,
        max_attempts=contentful.max_attempts,
    )
    return ContentfulHttpClient(
        config=config,
        access_token=contentful.cma_token,
        default_environment=contentful.environment,
        http_client=http_client,
    )
