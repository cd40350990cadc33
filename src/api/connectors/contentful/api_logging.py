"""Helpers de logging para a Contentful API (sem tokens nem corpos)."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_api_error(method: str, path: str, status_code: int) -> None:
    """Loga erro HTTP da API."""
    logger.warning(
        "contentful_api_error",
        extra={
            "method": method,
            "path": path,
            "status_code": status_code,
        },
    )


def log_success(method: str, path: str, status_code: int) -> None:
    """Loga sucesso em nível debug."""
    logger.debug(
        "contentful_api_success",
        extra={
            "method": method,
            "path": path,
            "status_code": status_code,
        },
    )
