"""Testes do resolvedor de configuração da agenda."""

from __future__ import annotations

import asyncio
import logging

import pytest
from tests.fakes.fake_agenda_api import FakeAgendaApi

from app.domain.agenda_config import AgendaConfig
from app.domain.errors import AgendaTransportError
from app.services.agenda_config_resolver import AgendaConfigResolver, merge_config

CONFIG = "AgendaConfig_Obter"


@pytest.mark.asyncio
async def test_loads_config_once() -> None:
    api = FakeAgendaApi().respond(
        CONFIG,
        {"hora_inicio_padrao": "07:00", "hora_fim_padrao": "12:00", "duracao_grade_minutos": 20},
    )
    resolver = AgendaConfigResolver(api)

    assert resolver.get_config() == AgendaConfig()
    await resolver.ensure_loaded()
    await resolver.ensure_loaded()

    config = resolver.get_config()
    assert (config.start_time, config.end_time, config.slot_granularity_minutes) == (
        "07:00",
        "12:00",
        20,
    )
    assert len(api.calls_for(CONFIG)) == 1
    assert resolver.is_loaded is True


@pytest.mark.asyncio
async def test_failure_keeps_defaults_and_is_not_retried(
    caplog: pytest.LogCaptureFixture,
) -> None:
    caplog.set_level(logging.WARNING)
    api = FakeAgendaApi().respond(
        CONFIG, AgendaTransportError("Não foi possível se comunicar com o servidor.")
    )
    resolver = AgendaConfigResolver(api)

    config = await resolver.ensure_loaded()
    await resolver.ensure_loaded()

    assert config == AgendaConfig()
    assert len(api.calls_for(CONFIG)) == 1
    fallback = [r for r in caplog.records if getattr(r, "fallback_used", False)]
    assert fallback and fallback[0].reason == "transport"


@pytest.mark.asyncio
async def test_unexpected_exception_never_reaches_caller() -> None:
    api = FakeAgendaApi().respond(CONFIG, RuntimeError("boom"))
    resolver = AgendaConfigResolver(api)
    assert await resolver.ensure_loaded() == AgendaConfig()


@pytest.mark.asyncio
async def test_concurrent_first_calls_share_one_fetch() -> None:
    api = FakeAgendaApi().respond(CONFIG, {"duracao_grade_minutos": 30})
    gate = api.hold(CONFIG)
    resolver = AgendaConfigResolver(api)

    tasks = [asyncio.create_task(resolver.ensure_loaded()) for _ in range(3)]
    await asyncio.sleep(0)
    gate.set()
    results = await asyncio.gather(*tasks)

    assert len(api.calls_for(CONFIG)) == 1
    assert all(result.slot_granularity_minutes == 30 for result in results)


def test_merge_keeps_default_for_falsy_and_invalid_fields() -> None:
    merged = merge_config(
        AgendaConfig(),
        {"hora_inicio_padrao": "", "hora_fim_padrao": "99:99", "duracao_grade_minutos": 0},
    )
    assert merged == AgendaConfig()


def test_merge_applies_each_valid_field_independently() -> None:
    merged = merge_config(
        AgendaConfig(),
        {"hora_inicio_padrao": "9:00", "hora_fim_padrao": "xx", "duracao_grade_minutos": "-5"},
    )
    assert merged.start_time == "09:00"
    assert merged.end_time == "18:00"
    assert merged.slot_granularity_minutes == 15


def test_merge_ignores_non_mapping() -> None:
    assert merge_config(AgendaConfig(), None) == AgendaConfig()
