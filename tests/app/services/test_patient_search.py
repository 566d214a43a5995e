"""Testes da busca simples de pacientes."""

from __future__ import annotations

import pytest
from tests.fakes.fake_agenda_api import FakeAgendaApi

from app.services.patient_search import PatientSearch

BUSCAR = "Pacientes_BuscarSimples"


@pytest.mark.asyncio
async def test_short_term_sends_nothing() -> None:
    api = FakeAgendaApi()
    result = await PatientSearch(api).search_patients(" a ")

    assert result.found is False
    assert result.message is not None
    assert result.message.text == "Digite pelo menos 2 caracteres para buscar."
    assert api.calls == []


@pytest.mark.asyncio
async def test_search_returns_patients() -> None:
    api = FakeAgendaApi().respond(
        BUSCAR,
        {"pacientes": [{"ID_Paciente": "p-1", "nome": "Ana", "documento": "123",
                        "data_nascimento": "01/02/1990"}]},
    )
    result = await PatientSearch(api, limit=10).search_patients(" Ana ")

    assert api.calls_for(BUSCAR) == [{"termo": "Ana", "limite": 10}]
    assert result.message is None
    assert result.patients[0].patient_id == "p-1"
    assert result.patients[0].details_line == "123 • Nasc.: 01/02/1990"


@pytest.mark.asyncio
async def test_empty_result_message() -> None:
    api = FakeAgendaApi().respond(BUSCAR, {"pacientes": []})
    result = await PatientSearch(api).search_patients("Zé")

    assert result.message is not None
    assert result.message.text == "Nenhum paciente encontrado para este termo."
    assert result.message.level == "info"


@pytest.mark.asyncio
async def test_failure_message() -> None:
    api = FakeAgendaApi().fail(BUSCAR, "Planilha indisponível")
    result = await PatientSearch(api).search_patients("Ana")

    assert result.message is not None
    assert result.message.text == "Erro ao buscar pacientes: Planilha indisponível"
    assert result.message.level == "erro"
