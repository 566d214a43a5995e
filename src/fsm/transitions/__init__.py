"""
Exports públicos do módulo fsm/transitions.
"""

from fsm.transitions.rules import (
    TERMINAL_LOCKED_TRANSITIONS,
    UNRESTRICTED_TRANSITIONS,
    TransitionMap,
    get_transition_table,
    get_valid_targets,
    is_transition_valid,
    validate_transition_map,
)

__all__ = [
    "TERMINAL_LOCKED_TRANSITIONS",
    "UNRESTRICTED_TRANSITIONS",
    "TransitionMap",
    "get_transition_table",
    "get_valid_targets",
    "is_transition_valid",
    "validate_transition_map",
]
