"""correlation_id por ciclo de carga ou ação da agenda.

Usa ContextVar para seguir a tarefa asyncio corrente.

Uso:
    token = set_correlation_id()
    try:
        await session.load_day()
    finally:
        reset_correlation_id(token)
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual (ou string vazia)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id no contexto atual.

    Args:
        correlation_id: ID a definir. Se None, gera um novo UUID.

    Returns:
        Token para reset posterior via reset_correlation_id().
    """
    return _correlation_id.set(correlation_id or generate_correlation_id())


def reset_correlation_id(token: Token[str]) -> None:
    """Restaura o correlation_id anterior."""
    _correlation_id.reset(token)


def generate_correlation_id() -> str:
    """Gera um novo correlation_id (UUID v4)."""
    return str(uuid.uuid4())
