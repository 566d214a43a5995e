"""
Exports públicos do módulo fsm/manager.
"""

from fsm.manager.machine import StatusStateMachine, create_status_machine

__all__ = [
    "StatusStateMachine",
    "create_status_machine",
]
