"""
Guards para transições de status.

Guards são regras adicionais à tabela de transições: mesmo uma
transição presente na tabela pode ser negada por um guard.
"""

from collections.abc import Callable

from fsm.states.status import AppointmentStatus


class GuardResult:
    """
    Resultado da avaliação de um guard.

    Attributes:
        allowed: Se a transição é permitida
        reason: Motivo do bloqueio (se allowed=False)
    """

    __slots__ = ("allowed", "reason")

    def __init__(self, allowed: bool, reason: str | None = None) -> None:
        self.allowed = allowed
        self.reason = reason

    @classmethod
    def allow(cls) -> "GuardResult":
        """Cria resultado permitindo a transição."""
        return cls(allowed=True)

    @classmethod
    def deny(cls, reason: str) -> "GuardResult":
        """Cria resultado negando a transição."""
        return cls(allowed=False, reason=reason)


Guard = Callable[[AppointmentStatus, AppointmentStatus], GuardResult]


# Aplicados em ordem; o primeiro deny interrompe. A agenda não restringe
# nada além da tabela de transições.
DEFAULT_GUARDS: list[Guard] = []


def evaluate_guards(
    from_status: AppointmentStatus,
    to_status: AppointmentStatus,
    guards: list[Guard] | None = None,
) -> GuardResult:
    """
    Avalia os guards de uma transição.

    Args:
        from_status: Status de origem
        to_status: Status de destino
        guards: Guards a aplicar (usa DEFAULT_GUARDS se None)

    Returns:
        GuardResult do primeiro guard que negar, ou allow()
    """
    guards_to_apply = guards if guards is not None else DEFAULT_GUARDS

    for guard in guards_to_apply:
        result = guard(from_status, to_status)
        if not result.allowed:
            return result

    return GuardResult.allow()
