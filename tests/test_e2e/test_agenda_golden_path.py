"""Teste E2E: HTTP (MockTransport) → client → sessão → agregação → ação."""

from __future__ import annotations

import json
from datetime import date
from typing import Any

import httpx
import pytest

from app.bootstrap import create_agenda_view_session
from app.infra.http import AgendaApiClient
from config.settings import AgendaSettings

BASE_URL = "https://script.example.com/exec"


class _Backend:
    """Backend simulado no nível HTTP, com estado de status por agendamento."""

    def __init__(self) -> None:
        self.status = {"a1": "Agendado", "a2": "Confirmado"}
        self.actions: list[str] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content.decode("utf-8"))
        action, payload = body["action"], body["payload"]
        self.actions.append(action)
        handler = getattr(self, f"_{action.lower()}")
        return httpx.Response(200, json=handler(payload))

    def _agendaconfig_obter(self, payload: dict[str, Any]) -> dict[str, Any]:
        return {"success": True, "data": {"config": {"duracao_grade_minutos": 30}}}

    def _agenda_listardia(self, payload: dict[str, Any]) -> dict[str, Any]:
        # Formato plano: o normalizador agrupa por hora_inicio
        return {
            "success": True,
            "data": [
                {"ID_Agenda": "a1", "hora_inicio": "10:00", "nome_paciente": "Ana",
                 "status": self.status["a1"], "data": payload["data"]},
                {"ID_Agenda": "a2", "hora_inicio": "9:00", "nome_paciente": "Bruno",
                 "status": self.status["a2"], "data": payload["data"]},
                {"ID_Agenda": "b1", "hora_inicio": "12:00", "hora_fim": "13:00",
                 "bloqueio": True, "data": payload["data"]},
            ],
        }

    def _agenda_mudarstatus(self, payload: dict[str, Any]) -> dict[str, Any]:
        if payload["novo_status"] == "Cancelado":
            return {
                "success": False,
                "data": None,
                "errors": [
                    {
                        "code": "AGENDA_CONFLITO_CONSULTA",
                        "message": "Conflito",
                        "details": {"hora_inicio": "10:00", "hora_fim": "10:30",
                                    "nome_paciente": "Carla"},
                    }
                ],
            }
        self.status[payload["ID_Agenda"]] = payload["novo_status"]
        return {"success": True, "data": {}}


@pytest.mark.e2e
@pytest.mark.asyncio
async def test_day_view_status_change_round_trip() -> None:
    backend = _Backend()
    client = AgendaApiClient(
        BASE_URL, http_client=httpx.AsyncClient(transport=httpx.MockTransport(backend))
    )
    session = create_agenda_view_session(client, AgendaSettings(api_base_url=BASE_URL))
    session.state.current_date = date(2026, 3, 10)

    assert await session.load_day() is None
    schedule = session.day_schedule()
    assert schedule.time_labels == ["09:00", "10:00", "12:00"]
    assert session.time_grid()[1] == "08:30"

    outcome = await session.change_status("a1", "Confirmado", current_status="Agendado")
    assert outcome.success is True
    assert backend.actions == [
        "AgendaConfig_Obter",
        "Agenda_ListarDia",
        "Agenda_MudarStatus",
        "Agenda_ListarDia",
    ]
    confirmed = session.apply_filters(status_contains="confirmado")
    assert [a.id for slot in confirmed.slots for a in slot.appointments] == ["a2", "a1"]

    failed = await session.change_status("a2", "Cancelado")
    assert failed.success is False
    assert failed.message is not None
    assert failed.message.text == (
        "Não é possível agendar: já existe consulta das 10:00 às 10:30 (Carla)."
    )
    assert session.tracker.in_flight_ids() == frozenset()
    assert backend.actions[-1] == "Agenda_MudarStatus"

    await client.aclose()
