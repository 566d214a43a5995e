"""Sessão da tela de agenda (estado explícito + operações)."""

from app.sessions.agenda_view import AgendaViewSession
from app.sessions.view_state import AgendaViewState

__all__ = ["AgendaViewSession", "AgendaViewState"]
