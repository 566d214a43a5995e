"""
Máquina de status (StatusStateMachine) de um agendamento.

Valida a mudança de status contra a tabela configurada e os guards,
mantendo histórico das transições aceitas.
"""

from typing import Any

from fsm.rules.guards import Guard, GuardResult, evaluate_guards
from fsm.states.status import (
    DEFAULT_STATUS,
    AppointmentStatus,
    is_terminal,
)
from fsm.transitions.rules import (
    TransitionMap,
    get_transition_table,
    get_valid_targets,
    is_transition_valid,
)
from fsm.types.transition import StatusTransition, TransitionResult


class StatusStateMachine:
    """
    Máquina de status de um único agendamento.

    Attributes:
        appointment_id: ID_Agenda do agendamento
        current_status: Status atual conhecido pela UI
        history: Transições aceitas
    """

    __slots__ = ("_appointment_id", "_current_status", "_guards", "_history", "_table")

    def __init__(
        self,
        appointment_id: str,
        current_status: AppointmentStatus | None = None,
        table: TransitionMap | None = None,
        guards: list[Guard] | None = None,
    ) -> None:
        """
        Args:
            appointment_id: ID_Agenda do agendamento
            current_status: Status atual (usa DEFAULT_STATUS se None)
            table: Tabela de transições (padrão: irrestrita)
            guards: Regras extras avaliadas antes da tabela
        """
        self._appointment_id = appointment_id
        self._current_status = current_status or DEFAULT_STATUS
        self._table = table if table is not None else get_transition_table()
        self._guards = guards
        self._history: list[StatusTransition] = []

    @property
    def appointment_id(self) -> str:
        return self._appointment_id

    @property
    def current_status(self) -> AppointmentStatus:
        return self._current_status

    @property
    def history(self) -> list[StatusTransition]:
        """Histórico de transições (cópia)."""
        return list(self._history)

    @property
    def is_terminal(self) -> bool:
        return is_terminal(self._current_status)

    def can_transition_to(self, target: AppointmentStatus) -> bool:
        """Verifica se pode mudar para o status alvo."""
        if not is_transition_valid(self._current_status, target, self._table):
            return False
        return evaluate_guards(self._current_status, target, self._guards).allowed

    def get_valid_targets(self) -> frozenset[AppointmentStatus]:
        """Retorna status alcançáveis a partir do atual."""
        return get_valid_targets(self._current_status, self._table)

    def transition(
        self,
        target: AppointmentStatus,
        trigger: str,
        metadata: dict[str, Any] | None = None,
    ) -> TransitionResult:
        """
        Tenta mudar o status.

        Args:
            target: Status de destino
            trigger: Origem da mudança (ex: 'status_button')
            metadata: Dados adicionais para auditoria (nunca PII)

        Returns:
            TransitionResult com sucesso/falha
        """
        guard_result: GuardResult = evaluate_guards(self._current_status, target, self._guards)
        if not guard_result.allowed:
            return TransitionResult(
                success=False,
                error_reason=guard_result.reason,
            )

        if not is_transition_valid(self._current_status, target, self._table):
            return TransitionResult(
                success=False,
                error_reason=(
                    f"Transição não permitida: {self._current_status} → {target}"
                ),
            )

        transition = StatusTransition(
            appointment_id=self._appointment_id,
            from_status=self._current_status,
            to_status=target,
            trigger=trigger,
            metadata=metadata or {},
        )

        self._current_status = target
        self._history.append(transition)

        return TransitionResult(success=True, transition=transition)

    def get_state_summary(self) -> dict[str, Any]:
        """Resumo seguro para logs."""
        return {
            "appointment_id": self._appointment_id,
            "current_status": self._current_status.name,
            "is_terminal": self.is_terminal,
            "transition_count": len(self._history),
            "valid_targets": sorted(s.name for s in self.get_valid_targets()),
        }


def create_status_machine(
    appointment_id: str,
    current_status: AppointmentStatus | None = None,
    *,
    lock_terminal: bool = False,
) -> StatusStateMachine:
    """
    Factory para StatusStateMachine com a tabela da configuração.

    Args:
        appointment_id: ID_Agenda do agendamento
        current_status: Status atual (opcional)
        lock_terminal: Trava saída de status terminais
    """
    return StatusStateMachine(
        appointment_id=appointment_id,
        current_status=current_status,
        table=get_transition_table(lock_terminal=lock_terminal),
    )
