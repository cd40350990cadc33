"""Logging estruturado JSON.

Uso:
    from config.logging import configure_logging, get_logger

    # No bootstrap
    configure_logging(level="INFO", service_name="contentful_sync")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("content_type_activated", extra={"version": 4})

Nunca logar corpos de requisição; tokens são redigidos pelo handler.
"""

from config.logging.config import NOISY_LOGGERS, configure_logging, get_logger
from config.logging.filters import CorrelationIdFilter, SecretRedactionFilter, redact_secrets
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "NOISY_LOGGERS",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "SecretRedactionFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "redact_secrets",
]
