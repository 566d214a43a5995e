"""Troca de status e remoção de bloqueio a partir da agenda.

Cada ação marca o agendamento como "em andamento", chama o backend uma
única vez e, em caso de sucesso, recarrega a visão ativa. O marcador é
sempre liberado, com sucesso ou falha.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any

from app.constants.agenda import AgendaAction
from app.domain.errors import AgendaRequestError
from app.domain.messages import ActionOutcome, UserMessage
from app.observability import get_correlation_id
from app.services.conflict_policy import classify
from app.services.in_flight import InFlightTracker
from fsm import create_status_machine, parse_status

if TYPE_CHECKING:
    from app.protocols.agenda_request import AgendaRequestProtocol
    from fsm import AppointmentStatus

logger = logging.getLogger(__name__)

_COMPONENT = "status_transition_controller"

REMOVE_BLOCK_CONFIRMATION = "Deseja realmente remover este bloqueio de horário?"

ReloadCallback = Callable[[], Awaitable[UserMessage | None]]


class StatusTransitionController:
    """Orquestra `Agenda_MudarStatus` e `Agenda_RemoverBloqueio`.

    Não serializa ações por agendamento: duas trocas seguidas geram duas
    requisições independentes, e a última resposta a chegar prevalece.
    """

    def __init__(
        self,
        request: AgendaRequestProtocol,
        *,
        reload: ReloadCallback,
        tracker: InFlightTracker | None = None,
        lock_terminal_statuses: bool = False,
    ) -> None:
        self._request = request
        self._reload = reload
        self._tracker = tracker or InFlightTracker()
        self._lock_terminal = lock_terminal_statuses

    @property
    def tracker(self) -> InFlightTracker:
        return self._tracker

    async def change_status(
        self,
        appointment_id: str,
        new_status: str,
        *,
        current_status: str | None = None,
    ) -> ActionOutcome:
        """Muda o status de um agendamento.

        Args:
            appointment_id: ID_Agenda
            new_status: Status de destino (texto do botão)
            current_status: Status exibido hoje; quando reconhecido, a troca
                é validada contra a tabela de transições antes da chamada

        Returns:
            ActionOutcome; em falha, `message` traz o erro classificado.
        """
        if not appointment_id:
            logger.warning(
                "status_change_rejected",
                extra={"component": _COMPONENT, "reason": "id_ausente"},
            )
            return ActionOutcome.failed(
                "id_ausente",
                UserMessage.error("Agendamento sem ID_Agenda para mudar status."),
            )

        target = parse_status(new_status)
        if target is None:
            return ActionOutcome.failed(
                "status_invalido",
                UserMessage.error(f"Status inválido: {new_status}"),
            )

        denial = self._check_transition(appointment_id, current_status, target)
        if denial is not None:
            return denial

        return await self._run(
            appointment_id,
            AgendaAction.MUDAR_STATUS,
            {"ID_Agenda": appointment_id, "novo_status": target.value},
            error_prefix="Erro ao mudar status do agendamento: ",
        )

    async def remove_block(self, appointment_id: str, *, confirmed: bool) -> ActionOutcome:
        """Remove um bloqueio já confirmado pelo usuário.

        Sem confirmação nada é enviado e o resultado não traz mensagem.
        """
        if not appointment_id:
            return ActionOutcome.failed(
                "id_ausente",
                UserMessage.error("Bloqueio sem ID_Agenda para remover."),
            )
        if not confirmed:
            return ActionOutcome.failed("confirmacao_ausente")

        return await self._run(
            appointment_id,
            AgendaAction.REMOVER_BLOQUEIO,
            {"ID_Agenda": appointment_id},
            error_prefix="Erro ao remover bloqueio: ",
        )

    def _check_transition(
        self,
        appointment_id: str,
        current_status: str | None,
        target: AppointmentStatus,
    ) -> ActionOutcome | None:
        current = parse_status(current_status) if current_status else None
        if current is None:
            return None
        machine = create_status_machine(
            appointment_id, current, lock_terminal=self._lock_terminal
        )
        summary = machine.get_state_summary()
        result = machine.transition(target, trigger="status_button")
        if result.transition is not None:
            logger.debug(
                "status_transition_checked",
                extra={"component": _COMPONENT, **result.transition.to_log_dict()},
            )
            return None
        logger.info(
            "status_change_denied",
            extra={
                "component": _COMPONENT,
                **summary,
                "to_status": target.name,
                "reason": result.error_reason,
            },
        )
        return ActionOutcome.failed(
            "transicao_negada",
            UserMessage.error(f"Não é possível mudar o status de {current} para {target}."),
        )

    async def _run(
        self,
        appointment_id: str,
        action: AgendaAction,
        payload: dict[str, Any],
        *,
        error_prefix: str,
    ) -> ActionOutcome:
        token = self._tracker.begin(appointment_id, action)
        succeeded = False
        try:
            try:
                await self._request.request(action, payload)
            except AgendaRequestError as exc:
                logger.info(
                    "agenda_action_failed",
                    extra={
                        "component": _COMPONENT,
                        "action": str(action),
                        "result": exc.kind,
                        "error_code": exc.code,
                        "correlation_id": get_correlation_id(),
                    },
                )
                return ActionOutcome.failed(
                    "falha_requisicao",
                    classify(exc, operation="agendar", fallback_prefix=error_prefix),
                )
            succeeded = True
            reload_message = await self._reload()
            if reload_message is not None:
                logger.warning(
                    "agenda_reload_failed",
                    extra={
                        "component": _COMPONENT,
                        "action": str(action),
                        "result": "recarga_falhou",
                        "correlation_id": get_correlation_id(),
                    },
                )
                return ActionOutcome.ok(reload_message, reason="recarga_falhou")
            logger.info(
                "agenda_action_applied",
                extra={
                    "component": _COMPONENT,
                    "action": str(action),
                    "result": "ok",
                    "correlation_id": get_correlation_id(),
                },
            )
            return ActionOutcome.ok()
        finally:
            self._tracker.settle(token, succeeded=succeeded)


__all__ = ["REMOVE_BLOCK_CONFIRMATION", "ReloadCallback", "StatusTransitionController"]
