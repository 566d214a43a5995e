"""Configuração centralizada de logging da agenda.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização (app/bootstrap)
    configure_logging(level="INFO", service_name="prontio_agenda")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("agenda_day_loaded", extra={"appointments": 12})
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "prontio_agenda"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON estruturado no logger raiz.

    Deve ser chamada uma única vez, no bootstrap.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço nos logs.
        correlation_id_getter: Função que devolve o correlation_id do
            contexto atual (ex: app.observability.get_correlation_id).

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substitui handlers existentes para evitar duplicação
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo (geralmente __name__)."""
    return logging.getLogger(name)


def log_fallback(
    logger: logging.Logger,
    component: str,
    reason: str | None = None,
    elapsed_ms: float | None = None,
) -> None:
    """Registra que um fallback determinístico foi aplicado.

    Usado, por exemplo, quando a configuração da agenda não pôde ser
    obtida e os valores padrão foram mantidos.

    Args:
        logger: Logger do módulo chamador.
        component: Nome do componente (ex: "agenda_config_resolver").
        reason: Motivo curto, sem PII (ex: "request_failed").
        elapsed_ms: Tempo decorrido até o fallback, quando medido.
    """
    extra: dict[str, object] = {
        "fallback_used": True,
        "component": component,
    }
    if reason:
        extra["reason"] = reason
    if elapsed_ms is not None:
        extra["elapsed_ms"] = elapsed_ms

    logger.warning(
        "Fallback applied for %s",
        component,
        extra=extra,
    )
