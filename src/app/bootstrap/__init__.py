"""Bootstrap da aplicação: inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings e
conecta implementações concretas aos reconcilers.

Uso:
    from app.bootstrap import initialize_app, get_reconcilers

    initialize_app()
    reconcilers = get_reconcilers()
    await reconcilers.content_type.update(state)
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache

from app.bootstrap.clients import (
    ContentfulClient,
    Reconcilers,
    create_contentful_client,
    create_reconcilers,
)
from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_contentful_settings

SERVICE_NAME = "contentful_sync"

DEFAULT_LOG_LEVEL = "INFO"

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging JSON com correlation_id (uma vez por processo)."""
    configure_logging(
        level=os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        service_name=SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
    )


def initialize_test_app() -> None:
    """Inicializa a aplicação para testes (DEBUG)."""
    configure_logging(
        level="DEBUG",
        service_name=f"{SERVICE_NAME}_test",
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Raises:
        RuntimeError: Com a lista de problemas, se houver.
    """
    errors = get_contentful_settings().validate()
    if not errors:
        logger.info("settings_validated", extra={"component": "bootstrap", "result": "ok"})
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "error_count": len(errors),
            "errors": errors,
        },
    )
    details = "\n".join(f"- {error}" for error in errors)
    raise RuntimeError(f"Configuração inválida:\n{details}")


@lru_cache(maxsize=1)
def get_contentful_client() -> ContentfulClient:
    """Cliente Contentful (singleton) a partir do ambiente."""
    return create_contentful_client(get_contentful_settings())


def get_reconcilers() -> Reconcilers:
    return create_reconcilers(get_contentful_client())


__all__ = [
    "SERVICE_NAME",
    "ContentfulClient",
    "Reconcilers",
    "create_contentful_client",
    "create_reconcilers",
    "get_contentful_client",
    "get_reconcilers",
    "initialize_app",
    "initialize_test_app",
    "validate_runtime_settings",
]
