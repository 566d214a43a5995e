"""Estado da tela de agenda, passado explicitamente entre operações."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from app.domain.appointment import Appointment, DaySummary
from app.domain.schedule import DayFilters, WeekSchedule
from config.settings.agenda import ViewMode


@dataclass(slots=True)
class AgendaViewState:
    """Estado mutável da visão.

    Atributos:
        current_date: Data selecionada (dia exibido ou referência da semana)
        view_mode: "dia" ou "semana"
        filters: Filtros da visão dia
        day_cache: Agendamentos do último carregamento do dia (sem filtro)
        day_summary: Resumo do dia carregado
        week: Matriz da última semana carregada
        focus_time: Horário a destacar na próxima renderização do dia
    """

    current_date: date = field(default_factory=date.today)
    view_mode: ViewMode = "dia"
    filters: DayFilters = field(default_factory=DayFilters)
    day_cache: tuple[Appointment, ...] = ()
    day_summary: DaySummary | None = None
    week: WeekSchedule = field(default_factory=WeekSchedule)
    focus_time: str | None = None

    @property
    def is_week_mode(self) -> bool:
        return self.view_mode == "semana"

    def consume_focus_time(self) -> str | None:
        """Devolve o horário de foco e o limpa (vale para uma renderização)."""
        focus, self.focus_time = self.focus_time, None
        return focus


__all__ = ["AgendaViewState"]
