"""Testes da sessão da tela de agenda."""

from __future__ import annotations

from datetime import date

import pytest
from tests.fakes.fake_agenda_api import FakeAgendaApi, appointment, day_response

from app.domain.appointment_drafts import AppointmentDraft, BlockDraft
from app.domain.errors import AgendaTransportError
from app.sessions import AgendaViewSession, AgendaViewState
from config.settings import AgendaSettings

DIA = "Agenda_ListarDia"
SEMANA = "Agenda_ListarSemana"
CONFIG = "AgendaConfig_Obter"
TODAY = date(2026, 3, 10)


def _session(api: FakeAgendaApi, **settings: object) -> AgendaViewSession:
    return AgendaViewSession(
        api,
        settings=AgendaSettings(**settings),
        today=lambda: TODAY,
    )


def _week_response() -> dict[str, object]:
    return {
        "dias": [
            {
                "data": "2026-03-10",
                "horarios": [
                    {"hora": "09:00", "agendamentos": [appointment("a1", "09:00")]},
                ],
            },
            {
                "data": "2026-03-12",
                "horarios": [
                    {
                        "hora": "14:00",
                        "agendamentos": [appointment("a2", "14:00", data="2026-03-12")],
                    },
                ],
            },
        ]
    }


@pytest.mark.asyncio
async def test_load_day_ensures_config_then_fills_cache() -> None:
    api = FakeAgendaApi()
    api.respond(CONFIG, {"duracao_grade_minutos": 30})
    api.respond(DIA, day_response(appointment("a1", "10:00"), appointment("a2", "09:00")))
    session = _session(api)

    message = await session.load_day()

    assert message is None
    assert [name for name, _ in api.calls] == [CONFIG, DIA]
    assert api.calls_for(DIA) == [{"data": "2026-03-10"}]
    assert session.day_schedule().time_labels == ["09:00", "10:00"]
    assert session.state.day_summary is not None
    assert session.state.day_summary.total == 2
    assert session.time_grid()[:3] == ["08:00", "08:30", "09:00"]


@pytest.mark.asyncio
async def test_failed_day_load_keeps_previous_cache() -> None:
    api = FakeAgendaApi()
    api.respond(DIA, day_response(appointment("a1", "09:00")))
    session = _session(api)
    await session.load_day()

    api.fail(DIA, "Planilha indisponível")
    message = await session.load_day()

    assert message is not None
    assert message.text == "Não foi possível carregar a agenda do dia: Planilha indisponível"
    assert [a.id for a in session.state.day_cache] == ["a1"]


@pytest.mark.asyncio
async def test_filters_do_not_refetch() -> None:
    api = FakeAgendaApi()
    api.respond(
        DIA,
        day_response(
            appointment("a1", "09:00", nome="Ana", status="Confirmado"),
            appointment("a2", "10:00", nome="Bruno", status="Agendado"),
        ),
    )
    session = _session(api)
    await session.load_day()

    filtered = session.apply_filters(status_contains="confirm")

    assert filtered.time_labels == ["09:00"]
    assert len(api.calls_for(DIA)) == 1
    assert session.clear_filters().time_labels == ["09:00", "10:00"]


@pytest.mark.asyncio
async def test_navigation_steps_by_mode() -> None:
    api = FakeAgendaApi().respond(DIA, day_response()).respond(SEMANA, {"dias": []})
    session = _session(api)

    await session.go_next()
    assert session.state.current_date == date(2026, 3, 11)

    await session.set_view_mode("semana")
    await session.go_next()
    assert session.state.current_date == date(2026, 3, 18)
    await session.go_previous()
    assert session.state.current_date == date(2026, 3, 11)

    await session.go_today()
    assert session.state.current_date == TODAY
    assert api.calls_for(SEMANA)[-1] == {"data_referencia": "2026-03-10"}


@pytest.mark.asyncio
async def test_change_date_ignores_invalid_value() -> None:
    api = FakeAgendaApi()
    session = _session(api)

    assert await session.change_date("não é data") is None
    assert api.calls == []

    api.respond(DIA, day_response())
    await session.change_date("2026-04-01")
    assert session.state.current_date == date(2026, 4, 1)


@pytest.mark.asyncio
async def test_invalid_view_mode_raises() -> None:
    session = _session(FakeAgendaApi())
    with pytest.raises(ValueError):
        await session.set_view_mode("mes")  # type: ignore[arg-type]


@pytest.mark.asyncio
async def test_week_load_and_open_day_sets_focus() -> None:
    api = FakeAgendaApi().respond(SEMANA, _week_response()).respond(DIA, day_response())
    session = _session(api, default_view_mode="semana")

    assert await session.reload_active_view() is None
    week = session.week_schedule()
    assert week.dates == ("2026-03-10", "2026-03-12")
    assert week.time_labels == ["09:00", "14:00"]

    await session.open_day_from_week("2026-03-12", "14:00")

    assert session.state.view_mode == "dia"
    assert session.state.current_date == date(2026, 3, 12)
    assert session.state.consume_focus_time() == "14:00"
    assert session.state.consume_focus_time() is None
    assert api.calls_for(DIA) == [{"data": "2026-03-12"}]


@pytest.mark.asyncio
async def test_failed_week_load_keeps_previous_week() -> None:
    api = FakeAgendaApi().respond(SEMANA, _week_response())
    session = _session(api, default_view_mode="semana")
    await session.load_week()

    api.fail(SEMANA, "Timeout")
    message = await session.load_week()

    assert message is not None
    assert message.text == "Não foi possível carregar a semana: Timeout"
    assert session.week_schedule().time_labels == ["09:00", "14:00"]


@pytest.mark.asyncio
async def test_status_change_reloads_active_week_view() -> None:
    api = (
        FakeAgendaApi()
        .respond(SEMANA, _week_response())
        .respond("Agenda_MudarStatus", {})
    )
    session = _session(api, default_view_mode="semana")

    outcome = await session.change_status("a1", "Confirmado")

    assert outcome.success is True
    assert len(api.calls_for(SEMANA)) == 1
    assert api.calls_for(DIA) == []
    assert session.tracker.in_flight_ids() == frozenset()


@pytest.mark.asyncio
async def test_status_change_reports_failed_reload() -> None:
    api = FakeAgendaApi().respond(
        DIA,
        day_response(appointment("a1", "09:00")),
        AgendaTransportError("Sem conexão"),
    )
    api.respond("Agenda_MudarStatus", {})
    session = _session(api)
    await session.load_day()

    outcome = await session.change_status("a1", "Confirmado")

    assert outcome.success is True
    assert outcome.reason == "recarga_falhou"
    assert outcome.message is not None
    assert outcome.message.level == "erro"
    assert outcome.message.text == "Não foi possível carregar a agenda do dia: Sem conexão"
    # Cache anterior preservado
    assert [a.id for a in session.state.day_cache] == ["a1"]
    assert session.tracker.in_flight_ids() == frozenset()


@pytest.mark.asyncio
async def test_create_appointment_keeps_success_text_when_reload_fails() -> None:
    api = FakeAgendaApi().respond("Agenda_Criar", {}).fail(DIA, "Timeout")
    session = _session(api)

    outcome = await session.create_appointment(
        AppointmentDraft(date="2026-03-10", start_time="10:00", duration_minutes=30)
    )

    assert outcome.success is True
    assert outcome.reason == "recarga_falhou"
    assert outcome.message is not None
    assert outcome.message.text == (
        "Agendamento criado com sucesso! "
        "Não foi possível carregar a agenda do dia: Timeout"
    )


@pytest.mark.asyncio
async def test_block_interval_reloads_day() -> None:
    api = FakeAgendaApi().respond("Agenda_BloquearHorario", {}).respond(DIA, day_response())
    session = _session(api)

    outcome = await session.block_interval(
        BlockDraft(date="2026-03-10", start_time="12:00", duration_minutes=30)
    )

    assert outcome.success is True
    assert len(api.calls_for(DIA)) == 1


@pytest.mark.asyncio
async def test_search_patients_uses_settings_limit() -> None:
    api = FakeAgendaApi().respond("Pacientes_BuscarSimples", {"pacientes": []})
    session = _session(api, patient_search_limit=5)

    await session.search_patients("Ana")

    assert api.calls_for("Pacientes_BuscarSimples") == [{"termo": "Ana", "limite": 5}]


def test_explicit_state_is_used() -> None:
    state = AgendaViewState(current_date=date(2026, 1, 2), view_mode="semana")
    session = AgendaViewSession(FakeAgendaApi(), state=state)
    assert session.state is state


@pytest.mark.asyncio
async def test_failed_status_change_leaves_schedule_unchanged() -> None:
    api = FakeAgendaApi().respond(DIA, day_response(appointment("a1", "09:00")))
    api.fail("Agenda_MudarStatus", "Erro")
    session = _session(api)
    await session.load_day()
    before = session.day_schedule()

    outcome = await session.change_status("a1", "Confirmado")

    assert outcome.success is False
    assert session.day_schedule() == before
    assert len(api.calls_for(DIA)) == 1
