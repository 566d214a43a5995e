"""Bootstrap da agenda — inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings e
conecta o cliente HTTP concreto ao protocolo de requisição.

Uso:
    from app.bootstrap import create_agenda_view_session, initialize_app

    initialize_app()
    session = create_agenda_view_session()
    await session.load_day()
"""

from __future__ import annotations

import logging

from app.bootstrap.dependencies import create_agenda_api_client, create_agenda_view_session
from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_agenda_settings, get_base_settings

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging JSON com correlation_id.

    Deve ser chamada uma vez no início do processo.
    """
    base = get_base_settings()
    configure_logging(
        level=base.log_level.upper(),
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
    )


def initialize_test_app() -> None:
    """Inicializa logging para testes (nível DEBUG)."""
    base = get_base_settings()
    configure_logging(
        level="DEBUG",
        service_name=f"{base.service_name}_test",
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido; em `development` apenas
    registra o alerta.
    """
    base = get_base_settings()
    errors = [f"base: {error}" for error in base.validate()]
    errors.extend(f"agenda: {error}" for error in get_agenda_settings().validate_settings())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.environment in STRICT_VALIDATION_ENVS:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


__all__ = [
    "create_agenda_api_client",
    "create_agenda_view_session",
    "initialize_app",
    "initialize_test_app",
    "validate_runtime_settings",
]
