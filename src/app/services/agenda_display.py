"""Rótulos e classes de exibição usados pelas visões dia e semana."""

from __future__ import annotations

from app.domain.agenda_time import normalize_date, parse_date
from app.domain.appointment import Appointment

WEEKDAY_LABELS = ("Seg", "Ter", "Qua", "Qui", "Sex", "Sáb", "Dom")
BLOCK_LABEL = "Bloqueado"
NO_NAME_LABEL = "(sem nome)"

# Primeiro fragmento encontrado define a classe
_STATUS_CATEGORIES = (
    ("confirm", "status-confirmado"),
    ("falt", "status-falta"),
    ("cancel", "status-cancelado"),
    ("encaixe", "status-encaixe"),
    ("atendimento", "status-em-atendimento"),
    ("conclu", "status-concluido"),
)
_DEFAULT_CATEGORY = "status-agendado"


def status_category(status: str | None) -> str:
    """Classe visual do status; desconhecidos e vazios são "agendado"."""
    text = (status or "").lower()
    if not text:
        return _DEFAULT_CATEGORY
    for fragment, category in _STATUS_CATEGORIES:
        if fragment in text:
            return category
    return _DEFAULT_CATEGORY


def week_item_label(appointment: Appointment) -> str:
    """Texto de um item da visão semana."""
    if appointment.is_block:
        return BLOCK_LABEL
    parts = [appointment.patient_name or NO_NAME_LABEL]
    if appointment.type:
        parts.append(appointment.type)
    if appointment.status:
        parts.append(appointment.status)
    return " • ".join(parts)


def weekday_label(value: object) -> str:
    """Dia da semana abreviado ("Dom".."Sáb"); vazio para data inválida."""
    parsed = parse_date(value)
    return WEEKDAY_LABELS[parsed.weekday()] if parsed else ""


def short_date(value: object) -> str:
    """Data no formato dd/mm; vazio para data inválida."""
    normalized = normalize_date(value)
    if normalized is None:
        return ""
    _, month, day = normalized.split("-")
    return f"{day}/{month}"


def block_description(appointment: Appointment) -> str:
    return f"Das {appointment.start_time or ''} às {appointment.end_time or ''}"


__all__ = [
    "BLOCK_LABEL",
    "NO_NAME_LABEL",
    "WEEKDAY_LABELS",
    "block_description",
    "short_date",
    "status_category",
    "week_item_label",
]
