"""
Módulo FSM — status de agendamento.

Estrutura:
    - states/: AppointmentStatus e status terminais
    - transitions/: tabelas de transição (irrestrita / terminais travados)
    - rules/: guards
    - manager/: StatusStateMachine
    - types/: StatusTransition, TransitionResult
"""

from fsm.manager import (
    StatusStateMachine,
    create_status_machine,
)
from fsm.rules import (
    GuardResult,
    evaluate_guards,
)
from fsm.states import (
    DEFAULT_STATUS,
    TERMINAL_STATUSES,
    AppointmentStatus,
    is_terminal,
    is_valid_status,
    parse_status,
)
from fsm.transitions import (
    TERMINAL_LOCKED_TRANSITIONS,
    UNRESTRICTED_TRANSITIONS,
    get_transition_table,
    get_valid_targets,
    is_transition_valid,
    validate_transition_map,
)
from fsm.types import (
    StatusTransition,
    TransitionResult,
)

__all__ = [
    "DEFAULT_STATUS",
    "TERMINAL_LOCKED_TRANSITIONS",
    "TERMINAL_STATUSES",
    "UNRESTRICTED_TRANSITIONS",
    "AppointmentStatus",
    "GuardResult",
    "StatusStateMachine",
    "StatusTransition",
    "TransitionResult",
    "create_status_machine",
    "evaluate_guards",
    "get_transition_table",
    "get_valid_targets",
    "is_terminal",
    "is_transition_valid",
    "is_valid_status",
    "parse_status",
    "validate_transition_map",
]
