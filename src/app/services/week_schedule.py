"""Agregação da visão semana em matriz esparsa (horário x data)."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from app.domain.agenda_time import normalize_date, time_to_minutes
from app.domain.appointment import Appointment
from app.domain.schedule import WeekDay, WeekRow, WeekSchedule


def aggregate_week(days: Iterable[WeekDay]) -> WeekSchedule:
    """Monta a matriz da semana.

    Linhas são apenas os horários efetivamente usados, em ordem de
    minutos; colunas são as datas em ordem ISO. Datas repetidas na
    entrada viram uma única coluna. Itens sem horário válido são
    descartados. Sem nenhum horário o resultado é a semana vazia.
    """
    per_date: dict[str, list[Appointment]] = {}
    for day in days:
        bucket = per_date.setdefault(day.date, [])
        bucket.extend(item for item in day.appointments if item.time_key is not None)

    dates = tuple(sorted(per_date))
    hours = sorted(
        {item.start_time for items in per_date.values() for item in items if item.start_time},
        key=time_to_minutes,
    )
    if not hours:
        return WeekSchedule.empty(dates)

    rows = tuple(
        WeekRow(
            time_label=hour,
            cells=tuple(
                tuple(item for item in per_date[day] if item.start_time == hour)
                for day in dates
            ),
        )
        for hour in hours
    )
    return WeekSchedule(dates=dates, rows=rows)


def week_days_from_response(data: Mapping[str, Any] | None) -> list[WeekDay]:
    """Converte `dias[]` da resposta canônica da semana em WeekDay.

    Dias com data inválida são ignorados. O horário efetivo de cada item
    (hora_inicio ou a hora do slot) já vem resolvido pelo normalizador.
    """
    if not isinstance(data, Mapping):
        return []
    days: list[WeekDay] = []
    for raw_day in data.get("dias") or []:
        if not isinstance(raw_day, Mapping):
            continue
        day_date = normalize_date(raw_day.get("data"))
        if day_date is None:
            continue
        appointments: list[Appointment] = []
        for slot in raw_day.get("horarios") or []:
            if not isinstance(slot, Mapping):
                continue
            appointments.extend(
                Appointment.model_validate(item)
                for item in slot.get("agendamentos") or []
                if isinstance(item, Mapping)
            )
        days.append(WeekDay(date=day_date, appointments=tuple(appointments)))
    return days


__all__ = ["aggregate_week", "week_days_from_response"]
