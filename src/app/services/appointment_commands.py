"""Criação, edição e bloqueio de horários.

Erros de conflito viram frases específicas via `classify`; demais erros
recebem o prefixo da operação. Sucesso recarrega a visão ativa.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.constants.agenda import AgendaAction
from app.domain.errors import AgendaRequestError
from app.domain.messages import ActionOutcome, UserMessage
from app.observability import get_correlation_id
from app.services.conflict_policy import ConflictOperation, classify

if TYPE_CHECKING:
    from app.domain.appointment_drafts import AppointmentDraft, AppointmentUpdate, BlockDraft
    from app.protocols.agenda_request import AgendaRequestProtocol
    from app.services.status_transition import ReloadCallback

logger = logging.getLogger(__name__)

_COMPONENT = "appointment_commands"

REQUIRED_FIELDS_MESSAGE = "Preencha pelo menos data, hora inicial e duração."
INVALID_UPDATE_MESSAGE = "Agendamento inválido para edição."


class AppointmentCommands:
    """Operações de escrita da agenda (`Agenda_Criar`, `Agenda_Atualizar`,
    `Agenda_BloquearHorario`)."""

    def __init__(self, request: AgendaRequestProtocol, *, reload: ReloadCallback) -> None:
        self._request = request
        self._reload = reload

    async def create_appointment(self, draft: AppointmentDraft) -> ActionOutcome:
        if not draft.is_complete:
            return ActionOutcome.failed(
                "campos_obrigatorios", UserMessage.error(REQUIRED_FIELDS_MESSAGE)
            )
        return await self._submit(
            AgendaAction.CRIAR,
            draft.to_payload(),
            operation="agendar",
            error_prefix="Erro ao salvar agendamento: ",
            success_text="Agendamento criado com sucesso!",
        )

    async def update_appointment(self, update: AppointmentUpdate) -> ActionOutcome:
        if not update.appointment_id:
            return ActionOutcome.failed(
                "id_ausente", UserMessage.error(INVALID_UPDATE_MESSAGE)
            )
        if not update.is_complete:
            return ActionOutcome.failed(
                "campos_obrigatorios", UserMessage.error(REQUIRED_FIELDS_MESSAGE)
            )
        return await self._submit(
            AgendaAction.ATUALIZAR,
            update.to_payload(),
            operation="reagendar",
            error_prefix="Erro ao atualizar agendamento: ",
            success_text="Agendamento atualizado com sucesso!",
        )

    async def block_interval(self, draft: BlockDraft) -> ActionOutcome:
        if not draft.is_complete:
            return ActionOutcome.failed(
                "campos_obrigatorios", UserMessage.error(REQUIRED_FIELDS_MESSAGE)
            )
        return await self._submit(
            AgendaAction.BLOQUEAR_HORARIO,
            draft.to_payload(),
            operation="agendar",
            error_prefix="Erro ao salvar bloqueio: ",
            success_text="Horário bloqueado com sucesso!",
        )

    async def _submit(
        self,
        action: AgendaAction,
        payload: dict[str, Any],
        *,
        operation: ConflictOperation,
        error_prefix: str,
        success_text: str,
    ) -> ActionOutcome:
        try:
            await self._request.request(action, payload)
        except AgendaRequestError as exc:
            logger.info(
                "agenda_command_failed",
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
                classify(exc, operation=operation, fallback_prefix=error_prefix),
            )

        logger.info(
            "agenda_command_applied",
            extra={
                "component": _COMPONENT,
                "action": str(action),
                "result": "ok",
                "correlation_id": get_correlation_id(),
            },
        )
        reload_message = await self._reload()
        if reload_message is not None:
            logger.warning(
                "agenda_reload_failed",
                extra={
                    "component": _COMPONENT,
                    "action": str(action),
                    "result": "recarga_falhou",
                },
            )
            return ActionOutcome.ok(
                UserMessage.error(f"{success_text} {reload_message.text}", reload_message.code),
                reason="recarga_falhou",
            )
        return ActionOutcome.ok(UserMessage.success(success_text))


__all__ = ["INVALID_UPDATE_MESSAGE", "REQUIRED_FIELDS_MESSAGE", "AppointmentCommands"]
