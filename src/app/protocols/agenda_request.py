"""Contrato único de requisição ao backend da agenda.

O núcleo de agendamento só conhece este protocolo; transporte HTTP,
envelope e variações de formato ficam na implementação concreta.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class AgendaRequestProtocol(Protocol):
    """Executa uma ação no backend.

    Resolve com o `data` já desembrulhado e normalizado, ou levanta
    `app.domain.errors.AgendaRequestError` (message, code, details).
    """

    async def request(self, action: str, payload: dict[str, Any]) -> Any: ...
