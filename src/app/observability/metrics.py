"""Registro de métricas via structured logging.

As métricas são logs estruturados, agregáveis depois pelo coletor de logs.

Métricas suportadas:
- Latência: tempo de cada operação de reconciliação
- Outcome: estado final e versão de cada recurso reconciliado

Uso:
    start = time.perf_counter()
    # ... operação ...
    record_latency("content_type", "update", (time.perf_counter() - start) * 1000)
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Tipo de recurso (ex: "content_type", "editor_interface")
        operation: Nome da operação (ex: "create", "read", "update")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": correlation_id,
        },
    )


def record_outcome(
    component: str,
    operation: str,
    state: str,
    version: int | None,
    correlation_id: str | None = None,
) -> None:
    """Registra o estado final de uma reconciliação."""
    logger.info(
        "metric_reconcile_outcome",
        extra={
            "metric_type": "outcome",
            "component": component,
            "operation": operation,
            "state": state,
            "version": version,
            "correlation_id": correlation_id,
        },
    )
