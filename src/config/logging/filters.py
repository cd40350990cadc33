"""Filters de logging: contexto da reconciliação e redação de tokens."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

# Tokens da Content Management API (personal access tokens)
_TOKEN_PATTERN = re.compile(r"CFPAT-[A-Za-z0-9_\-]+")
_BEARER_PATTERN = re.compile(r"(Bearer\s+)\S+")

REDACTED = "[REDACTED]"


def redact_secrets(value: str) -> str:
    """Substitui tokens e credenciais Bearer por [REDACTED]."""
    value = _BEARER_PATTERN.sub(rf"\g<1>{REDACTED}", value)
    return _TOKEN_PATTERN.sub(REDACTED, value)


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.
            Se não fornecida, usa string vazia.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        """Enriquece o record; nunca descarta.

        Um correlation_id passado explicitamente via `extra` é preservado.
        """
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


class SecretRedactionFilter(logging.Filter):
    """Remove tokens da mensagem e dos campos string de `extra`.

    Vale também para tokens ecoados em corpos de erro da API.
    """

    _STANDARD_ATTRS = frozenset(vars(logging.makeLogRecord({})))

    def filter(self, record: logging.LogRecord) -> bool:
        if record.args:
            record.msg = record.getMessage()
            record.args = None
        if isinstance(record.msg, str):
            record.msg = redact_secrets(record.msg)
        for key, value in list(vars(record).items()):
            if key not in self._STANDARD_ATTRS and isinstance(value, str):
                setattr(record, key, redact_secrets(value))
        return True
