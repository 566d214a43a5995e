"""Normalização de horários e datas da agenda.

O backend devolve horários em formatos variados ("9:5", "09:00:00",
datas ISO completas) e às vezes como objetos date/time. Tudo passa por
aqui antes de virar chave de agrupamento.
"""

from __future__ import annotations

from datetime import date, datetime, time

MINUTES_PER_DAY = 24 * 60


def minutes_to_label(minutes: int) -> str:
    """Formata minutos desde a meia-noite como HH:MM."""
    hours, mins = divmod(minutes, 60)
    return f"{hours:02d}:{mins:02d}"


def normalize_time(value: object) -> str | None:
    """Converte um horário qualquer em HH:MM (24h, zero à esquerda).

    Aceita `datetime`, `time` ou texto ("9", "9:5", "09:00:00",
    "2026-03-10T09:00:00"). Valores ausentes ou malformados viram None.
    """
    if isinstance(value, datetime | time):
        return f"{value.hour:02d}:{value.minute:02d}"
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not text:
        return None
    if "T" in text or " " in text:
        return _time_from_iso(text)
    return _time_from_parts(text)


def time_to_minutes(value: object) -> int | None:
    """Converte um horário em minutos desde a meia-noite (TimeSlotKey)."""
    label = normalize_time(value)
    if label is None:
        return None
    hours, mins = label.split(":")
    return int(hours) * 60 + int(mins)


def normalize_date(value: object) -> str | None:
    """Converte uma data em YYYY-MM-DD; None se ausente ou inválida."""
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    try:
        return date.fromisoformat(text[:10]).isoformat()
    except ValueError:
        return None


def parse_date(value: object) -> date | None:
    """Como normalize_date, mas devolve `date`."""
    normalized = normalize_date(value)
    return date.fromisoformat(normalized) if normalized else None


def _time_from_iso(text: str) -> str | None:
    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        return None
    return f"{parsed.hour:02d}:{parsed.minute:02d}"


def _time_from_parts(text: str) -> str | None:
    parts = text.split(":")
    if len(parts) > 3:
        return None
    hour_part = parts[0].strip()
    minute_part = parts[1].strip() if len(parts) > 1 else "0"
    if not hour_part.isdigit() or not minute_part.isdigit():
        return None
    hours, mins = int(hour_part), int(minute_part)
    if hours >= 24 or mins >= 60:
        return None
    return f"{hours:02d}:{mins:02d}"
