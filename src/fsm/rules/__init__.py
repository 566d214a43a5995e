"""
Exports públicos do módulo fsm/rules.

Guards para transições de status.
"""

from fsm.rules.guards import (
    DEFAULT_GUARDS,
    Guard,
    GuardResult,
    evaluate_guards,
)

__all__ = [
    "DEFAULT_GUARDS",
    "Guard",
    "GuardResult",
    "evaluate_guards",
]
