"""Métricas via logging estruturado.

Cada chamada ao backend registra a latência por ação; o agregador de
logs calcula percentis depois.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    *,
    result: str = "ok",
    correlation_id: str | None = None,
) -> None:
    """Registra latência de uma operação.

    Args:
        component: Nome do componente (ex: "agenda_api_client")
        operation: Nome da operação (ex: "Agenda_ListarDia")
        latency_ms: Latência em milissegundos
        result: "ok" ou tipo da falha (transport/format/application)
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "result": result,
            "correlation_id": correlation_id,
        },
    )
