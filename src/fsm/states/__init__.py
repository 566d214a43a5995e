"""
Exports públicos do módulo fsm/states.

Status canônicos de agendamento.
"""

from fsm.states.status import (
    DEFAULT_STATUS,
    TERMINAL_STATUSES,
    AppointmentStatus,
    is_terminal,
    is_valid_status,
    parse_status,
)

__all__ = [
    "DEFAULT_STATUS",
    "TERMINAL_STATUSES",
    "AppointmentStatus",
    "is_terminal",
    "is_valid_status",
    "parse_status",
]
