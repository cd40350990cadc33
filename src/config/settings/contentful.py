"""Settings da Contentful Management API.

Credenciais e alvo (organização, environment padrão) são resolvidos a
partir de valores explícitos, com fallback para variáveis de ambiente.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from functools import lru_cache
from typing import Any

CONTENTFUL_API_BASE_URL: str = "https://api.contentful.com"


@dataclass(frozen=True)
class ContentfulSettings:
    """Configurações do cliente Contentful.

    Attributes:
        cma_token: Token da Content Management API
        organization_id: ID da organização
        environment: Environment padrão quando o recurso não informa env_id
        api_base_url: URL base da API
        request_timeout_seconds: Timeout para requisições HTTP
        max_attempts: Total de tentativas em caso de 429
    """

    cma_token: str = ""
    organization_id: str = ""
    environment: str = ""

    api_base_url: str = CONTENTFUL_API_BASE_URL

    request_timeout_seconds: float = 30.0
    max_attempts: int = 3

    def validate(self) -> list[str]:
        """Valida configurações mínimas.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.cma_token:
            errors.append("CONTENTFUL_MANAGEMENT_TOKEN não configurado")

        if not self.organization_id:
            errors.append("CONTENTFUL_ORGANIZATION_ID não configurado")

        if not self.environment:
            errors.append("CONTENTFUL_ENVIRONMENT não configurado")

        if self.request_timeout_seconds <= 0:
            errors.append("CONTENTFUL_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.max_attempts < 1:
            errors.append("CONTENTFUL_MAX_ATTEMPTS deve ser >= 1")

        return errors


def _load_from_env() -> ContentfulSettings:
    """Carrega ContentfulSettings a partir de variáveis de ambiente."""
    return ContentfulSettings(
        cma_token=os.getenv("CONTENTFUL_MANAGEMENT_TOKEN", ""),
        organization_id=os.getenv("CONTENTFUL_ORGANIZATION_ID", ""),
        environment=os.getenv("CONTENTFUL_ENVIRONMENT", ""),
        api_base_url=os.getenv("CONTENTFUL_API_BASE_URL", CONTENTFUL_API_BASE_URL),
        request_timeout_seconds=float(
            os.getenv("CONTENTFUL_REQUEST_TIMEOUT_SECONDS", "30")
        ),
        max_attempts=int(os.getenv("CONTENTFUL_MAX_ATTEMPTS", "3")),
    )


def build_contentful_settings(**overrides: Any) -> ContentfulSettings:
    """Monta settings onde valores explícitos (não vazios) vencem o ambiente.

    Exemplo:
        build_contentful_settings(cma_token="CFPAT-...", environment="staging")
    """
    explicit = {key: value for key, value in overrides.items() if value not in (None, "")}
    return replace(_load_from_env(), **explicit)


@lru_cache(maxsize=1)
def get_contentful_settings() -> ContentfulSettings:
    """Retorna instância cacheada de ContentfulSettings."""
    return _load_from_env()
