"""Grade de horários exibida no formulário e na visão dia."""

from __future__ import annotations

from app.domain.agenda_config import AgendaConfig
from app.domain.agenda_time import minutes_to_label


def build_grid(config: AgendaConfig) -> list[str]:
    """Lista HH:MM do início ao fim efetivo, inclusive nas duas pontas.

    Quando o fim configurado não é posterior ao início, o fim efetivo é
    início + 60 minutos.

    Example:
        >>> build_grid(AgendaConfig(start_time="08:00", end_time="09:00",
        ...     slot_granularity_minutes=30))
        ['08:00', '08:30', '09:00']
    """
    step = config.slot_granularity_minutes
    start = config.start_minutes
    end = config.effective_end_minutes
    return [minutes_to_label(minutes) for minutes in range(start, end + 1, step)]


__all__ = ["build_grid"]
