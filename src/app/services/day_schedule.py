"""Agregação da visão dia: agrupa por horário, filtra e ordena."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from app.domain.agenda_time import minutes_to_label
from app.domain.appointment import Appointment, DaySummary
from app.domain.schedule import DayFilters, DaySchedule, DaySlot


def matches_filters(appointment: Appointment, filters: DayFilters) -> bool:
    """Aplica os filtros de nome e status (substring, sem caixa).

    Bloqueios não têm nome de paciente e, portanto, nunca passam por um
    filtro de nome não vazio.
    """
    name_term = filters.name_term
    if name_term and name_term not in (appointment.patient_name or "").lower():
        return False
    status_term = filters.status_term
    if status_term and status_term not in appointment.status.lower():
        return False
    return True


def aggregate_day(
    appointments: Iterable[Appointment],
    filters: DayFilters | None = None,
) -> DaySchedule:
    """Monta os slots do dia a partir da lista em cache.

    Itens sem horário válido são descartados. Dentro de um horário a
    ordem de chegada é preservada; horários esvaziados pelo filtro somem.
    A entrada não é modificada.
    """
    active = filters or DayFilters()
    buckets: dict[int, list[Appointment]] = {}
    for appointment in appointments:
        key = appointment.time_key
        if key is None:
            continue
        buckets.setdefault(key, []).append(appointment)

    slots: list[DaySlot] = []
    for key in sorted(buckets):
        kept = tuple(item for item in buckets[key] if matches_filters(item, active))
        if not kept:
            continue
        label = kept[0].start_time or minutes_to_label(key)
        slots.append(DaySlot(time_label=label, appointments=kept))
    return DaySchedule(slots=tuple(slots))


def appointments_from_day(data: Mapping[str, Any] | None) -> list[Appointment]:
    """Achata `horarios[].agendamentos[]` da resposta canônica do dia."""
    if not isinstance(data, Mapping):
        return []
    appointments: list[Appointment] = []
    for slot in data.get("horarios") or []:
        if not isinstance(slot, Mapping):
            continue
        for item in slot.get("agendamentos") or []:
            if isinstance(item, Mapping):
                appointments.append(Appointment.model_validate(item))
    return appointments


def summary_from_day(
    data: Mapping[str, Any] | None,
    appointments: Iterable[Appointment] = (),
) -> DaySummary:
    """Resumo devolvido pelo backend ou, na falta dele, calculado localmente."""
    if isinstance(data, Mapping) and isinstance(data.get("resumo"), Mapping):
        return DaySummary.model_validate(data["resumo"])
    return DaySummary.from_appointments(appointments)


__all__ = [
    "aggregate_day",
    "appointments_from_day",
    "matches_filters",
    "summary_from_day",
]
