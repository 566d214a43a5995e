"""Sessão da tela de agenda: carga, navegação, filtros e ações.

Reúne os serviços da agenda sobre um único `AgendaViewState`. Toda
recarga após uma escrita usa a visão ativa (dia ou semana).
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date, timedelta
from typing import TYPE_CHECKING

from app.constants.agenda import AgendaAction
from app.domain.agenda_time import parse_date
from app.domain.errors import AgendaRequestError
from app.domain.messages import ActionOutcome, UserMessage
from app.domain.schedule import DayFilters, DaySchedule, WeekSchedule
from app.services.agenda_config_resolver import AgendaConfigResolver
from app.services.appointment_commands import AppointmentCommands
from app.services.day_schedule import aggregate_day, appointments_from_day, summary_from_day
from app.services.in_flight import InFlightTracker
from app.services.patient_search import PatientSearch, PatientSearchResult
from app.services.status_transition import StatusTransitionController
from app.services.time_grid import build_grid
from app.services.week_schedule import aggregate_week, week_days_from_response
from app.sessions.view_state import AgendaViewState
from config.settings.agenda import AgendaSettings

if TYPE_CHECKING:
    from app.domain.appointment_drafts import AppointmentDraft, AppointmentUpdate, BlockDraft
    from app.protocols.agenda_request import AgendaRequestProtocol
    from config.settings.agenda import ViewMode

logger = logging.getLogger(__name__)

_COMPONENT = "agenda_view_session"


class AgendaViewSession:
    """Operações da tela de agenda sobre um estado explícito.

    Cargas com falha mantêm o cache anterior e devolvem a mensagem de
    erro; cargas bem-sucedidas devolvem None.
    """

    def __init__(
        self,
        request: AgendaRequestProtocol,
        *,
        settings: AgendaSettings | None = None,
        state: AgendaViewState | None = None,
        config_resolver: AgendaConfigResolver | None = None,
        tracker: InFlightTracker | None = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        settings = settings if settings is not None else AgendaSettings()
        self._request = request
        self._today = today
        self._state = state or AgendaViewState(
            current_date=today(), view_mode=settings.default_view_mode
        )
        self._config = config_resolver or AgendaConfigResolver(request)
        self._controller = StatusTransitionController(
            request,
            reload=self.reload_active_view,
            tracker=tracker,
            lock_terminal_statuses=settings.lock_terminal_statuses,
        )
        self._commands = AppointmentCommands(request, reload=self.reload_active_view)
        self._patients = PatientSearch(
            request,
            limit=settings.patient_search_limit,
            min_chars=settings.patient_search_min_chars,
        )

    @property
    def state(self) -> AgendaViewState:
        return self._state

    @property
    def config_resolver(self) -> AgendaConfigResolver:
        return self._config

    @property
    def tracker(self) -> InFlightTracker:
        return self._controller.tracker

    # Carga

    async def load_day(self) -> UserMessage | None:
        await self._config.ensure_loaded()
        day = self._state.current_date.isoformat()
        try:
            data = await self._request.request(AgendaAction.LISTAR_DIA, {"data": day})
        except AgendaRequestError as exc:
            self._log_load_failure("load_day", exc)
            return UserMessage.error(f"Não foi possível carregar a agenda do dia: {exc.message}")

        appointments = appointments_from_day(data)
        self._state.day_cache = tuple(appointments)
        self._state.day_summary = summary_from_day(data, appointments)
        logger.info(
            "agenda_day_loaded",
            extra={
                "component": _COMPONENT,
                "action": "load_day",
                "result": "ok",
                "appointment_count": len(appointments),
            },
        )
        return None

    async def load_week(self) -> UserMessage | None:
        await self._config.ensure_loaded()
        reference = self._state.current_date.isoformat()
        try:
            data = await self._request.request(
                AgendaAction.LISTAR_SEMANA, {"data_referencia": reference}
            )
        except AgendaRequestError as exc:
            self._log_load_failure("load_week", exc)
            return UserMessage.error(f"Não foi possível carregar a semana: {exc.message}")

        self._state.week = aggregate_week(week_days_from_response(data))
        logger.info(
            "agenda_week_loaded",
            extra={
                "component": _COMPONENT,
                "action": "load_week",
                "result": "ok",
                "row_count": len(self._state.week.rows),
            },
        )
        return None

    async def reload_active_view(self) -> UserMessage | None:
        if self._state.is_week_mode:
            return await self.load_week()
        return await self.load_day()

    # Visões derivadas

    def day_schedule(self) -> DaySchedule:
        """Slots do dia com os filtros atuais aplicados ao cache."""
        return aggregate_day(self._state.day_cache, self._state.filters)

    def week_schedule(self) -> WeekSchedule:
        return self._state.week

    def apply_filters(self, name_contains: str = "", status_contains: str = "") -> DaySchedule:
        """Troca os filtros e reagrupa o cache, sem nova requisição."""
        self._state.filters = DayFilters(
            name_contains=name_contains, status_contains=status_contains
        )
        return self.day_schedule()

    def clear_filters(self) -> DaySchedule:
        return self.apply_filters()

    def time_grid(self) -> list[str]:
        return build_grid(self._config.get_config())

    # Navegação

    async def set_view_mode(self, mode: ViewMode) -> UserMessage | None:
        if mode not in ("dia", "semana"):
            raise ValueError(f"Modo de visão inválido: {mode!r}")
        self._state.view_mode = mode
        return await self.reload_active_view()

    async def go_today(self) -> UserMessage | None:
        return await self.change_date(self._today())

    async def go_previous(self) -> UserMessage | None:
        return await self.change_date(self._state.current_date - self._step())

    async def go_next(self) -> UserMessage | None:
        return await self.change_date(self._state.current_date + self._step())

    async def change_date(self, value: date | str) -> UserMessage | None:
        """Seleciona outra data e recarrega a visão ativa.

        Datas inválidas são ignoradas (nenhuma requisição).
        """
        new_date = value if isinstance(value, date) else parse_date(value)
        if new_date is None:
            return None
        self._state.current_date = new_date
        return await self.reload_active_view()

    async def open_day_from_week(
        self, day: date | str, time_label: str | None = None
    ) -> UserMessage | None:
        """Abre a visão dia de uma data da semana, focando o horário clicado."""
        new_date = day if isinstance(day, date) else parse_date(day)
        if new_date is None:
            return None
        self._state.current_date = new_date
        self._state.view_mode = "dia"
        self._state.focus_time = time_label
        return await self.load_day()

    # Ações

    async def change_status(
        self,
        appointment_id: str,
        new_status: str,
        *,
        current_status: str | None = None,
    ) -> ActionOutcome:
        return await self._controller.change_status(
            appointment_id, new_status, current_status=current_status
        )

    async def remove_block(self, appointment_id: str, *, confirmed: bool) -> ActionOutcome:
        return await self._controller.remove_block(appointment_id, confirmed=confirmed)

    async def create_appointment(self, draft: AppointmentDraft) -> ActionOutcome:
        return await self._commands.create_appointment(draft)

    async def update_appointment(self, update: AppointmentUpdate) -> ActionOutcome:
        return await self._commands.update_appointment(update)

    async def block_interval(self, draft: BlockDraft) -> ActionOutcome:
        return await self._commands.block_interval(draft)

    async def search_patients(self, term: str) -> PatientSearchResult:
        return await self._patients.search_patients(term)

    def _step(self) -> timedelta:
        return timedelta(days=7 if self._state.is_week_mode else 1)

    def _log_load_failure(self, action: str, exc: AgendaRequestError) -> None:
        logger.info(
            "agenda_load_failed",
            extra={
                "component": _COMPONENT,
                "action": action,
                "result": exc.kind,
                "error_code": exc.code,
            },
        )


__all__ = ["AgendaViewSession"]
