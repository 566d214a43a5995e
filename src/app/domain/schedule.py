"""Estruturas renderizáveis das visões de dia e semana."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.domain.appointment import Appointment


@dataclass(frozen=True, slots=True)
class DayFilters:
    """Filtros da visão dia (nome do paciente e status, por substring)."""

    name_contains: str = ""
    status_contains: str = ""

    @property
    def name_term(self) -> str:
        return self.name_contains.strip().lower()

    @property
    def status_term(self) -> str:
        return self.status_contains.strip().lower()

    @property
    def is_active(self) -> bool:
        return bool(self.name_term or self.status_term)


@dataclass(frozen=True, slots=True)
class DaySlot:
    """Horário do dia com os agendamentos que sobreviveram ao filtro."""

    time_label: str
    appointments: tuple[Appointment, ...]


@dataclass(frozen=True, slots=True)
class DaySchedule:
    """Slots do dia em ordem crescente de horário (nunca vazios)."""

    slots: tuple[DaySlot, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.slots

    @property
    def time_labels(self) -> list[str]:
        return [slot.time_label for slot in self.slots]

    @property
    def appointment_count(self) -> int:
        return sum(len(slot.appointments) for slot in self.slots)

    def find_slot(self, time_label: str) -> DaySlot | None:
        return next((slot for slot in self.slots if slot.time_label == time_label), None)


@dataclass(frozen=True, slots=True)
class WeekDay:
    """Entrada da visão semana: uma data e seus agendamentos."""

    date: str
    appointments: tuple[Appointment, ...] = ()


@dataclass(frozen=True, slots=True)
class WeekRow:
    """Linha da matriz semanal: um horário e uma célula por data."""

    time_label: str
    cells: tuple[tuple[Appointment, ...], ...]


@dataclass(frozen=True, slots=True)
class WeekSchedule:
    """Matriz esparsa da semana: só horários usados viram linhas.

    Uma semana sem nenhum horário é vazia (`is_empty`) e deve ser
    exibida como "Nenhum agendamento para esta semana.".
    """

    dates: tuple[str, ...] = ()
    rows: tuple[WeekRow, ...] = ()

    @classmethod
    def empty(cls, dates: tuple[str, ...] = ()) -> WeekSchedule:
        return cls(dates=dates, rows=())

    @property
    def is_empty(self) -> bool:
        return not self.rows

    @property
    def time_labels(self) -> list[str]:
        return [row.time_label for row in self.rows]

    def cell(self, time_label: str, date: str) -> tuple[Appointment, ...]:
        """Agendamentos de uma célula (vazio se horário/data não existirem)."""
        if date not in self.dates:
            return ()
        column = self.dates.index(date)
        for row in self.rows:
            if row.time_label == time_label:
                return row.cells[column]
        return ()


__all__ = [
    "DayFilters",
    "DaySchedule",
    "DaySlot",
    "WeekDay",
    "WeekRow",
    "WeekSchedule",
]
