"""Marcador otimista de ações em andamento por agendamento.

A UI mostra um indicador enquanto a troca de status ou a remoção de
bloqueio não termina. Cada ação recebe um token próprio; liberar o token
é idempotente, então o indicador nunca fica preso.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Literal

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class InFlightToken:
    """Identifica uma ação iniciada para um agendamento."""

    appointment_id: str
    action: str = ""
    token_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    started_at: datetime = field(default_factory=lambda: datetime.now(UTC))


@dataclass(frozen=True, slots=True)
class InFlightEvent:
    """Notificação enviada ao listener em begin/settle."""

    token: InFlightToken
    phase: Literal["begin", "settle"]
    succeeded: bool | None = None


InFlightListener = Callable[[InFlightEvent], None]


class InFlightTracker:
    """Registra tokens ativos e quais agendamentos estão em andamento.

    Duas ações sobre o mesmo agendamento podem coexistir; o agendamento
    só deixa de estar em andamento quando todos os tokens forem liberados.
    """

    def __init__(self, listener: InFlightListener | None = None) -> None:
        self._active: dict[str, InFlightToken] = {}
        self._listener = listener

    def begin(self, appointment_id: str, action: str = "") -> InFlightToken:
        token = InFlightToken(appointment_id=appointment_id, action=action)
        self._active[token.token_id] = token
        self._notify(InFlightEvent(token=token, phase="begin"))
        return token

    def settle(self, token: InFlightToken, *, succeeded: bool) -> bool:
        """Libera o token. Retorna False se ele já tinha sido liberado."""
        if self._active.pop(token.token_id, None) is None:
            return False
        self._notify(InFlightEvent(token=token, phase="settle", succeeded=succeeded))
        return True

    def is_in_flight(self, appointment_id: str) -> bool:
        return any(token.appointment_id == appointment_id for token in self._active.values())

    def in_flight_ids(self) -> frozenset[str]:
        return frozenset(token.appointment_id for token in self._active.values())

    @property
    def active_count(self) -> int:
        return len(self._active)

    def _notify(self, event: InFlightEvent) -> None:
        if self._listener is None:
            return
        try:
            self._listener(event)
        except Exception:
            logger.exception(
                "in_flight_listener_failed",
                extra={"component": "in_flight_tracker", "phase": event.phase},
            )


__all__ = ["InFlightEvent", "InFlightListener", "InFlightToken", "InFlightTracker"]
