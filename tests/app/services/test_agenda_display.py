"""Testes dos helpers de exibição e do contexto de prontuário."""

from __future__ import annotations

import pytest

from app.domain.appointment import Appointment
from app.domain.messages import UserMessage
from app.services.agenda_display import (
    block_description,
    short_date,
    status_category,
    week_item_label,
    weekday_label,
)
from app.services.patient_record import (
    UNLINKED_PATIENT_MESSAGE,
    PatientRecordContext,
    build_patient_record_context,
)


@pytest.mark.parametrize(
    ("status", "expected"),
    [
        (None, "status-agendado"),
        ("", "status-agendado"),
        ("Agendado", "status-agendado"),
        ("Confirmado", "status-confirmado"),
        ("Falta", "status-falta"),
        ("Faltou", "status-falta"),
        ("Cancelado", "status-cancelado"),
        ("Encaixe", "status-encaixe"),
        ("Em atendimento", "status-em-atendimento"),
        ("Concluído", "status-concluido"),
        ("Qualquer", "status-agendado"),
    ],
)
def test_status_category(status: str | None, expected: str) -> None:
    assert status_category(status) == expected


def test_week_item_label() -> None:
    appointment = Appointment.model_validate(
        {"nome_paciente": "Ana", "tipo": "Consulta", "status": "Confirmado"}
    )
    assert week_item_label(appointment) == "Ana • Consulta • Confirmado"
    assert week_item_label(Appointment()) == "(sem nome)"
    assert week_item_label(Appointment.model_validate({"bloqueio": "true"})) == "Bloqueado"


def test_dates() -> None:
    assert weekday_label("2026-03-08") == "Dom"
    assert weekday_label("2026-03-10") == "Ter"
    assert weekday_label("x") == ""
    assert short_date("2026-03-10") == "10/03"
    assert short_date(None) == ""


def test_block_description() -> None:
    block = Appointment.model_validate(
        {"bloqueio": True, "hora_inicio": "12:00", "hora_fim": "13:00"}
    )
    assert block_description(block) == "Das 12:00 às 13:00"


def test_patient_record_requires_linked_patient() -> None:
    result = build_patient_record_context(Appointment.model_validate({"ID_Agenda": "ag-1"}))
    assert isinstance(result, UserMessage)
    assert result.text == UNLINKED_PATIENT_MESSAGE


def test_patient_record_context() -> None:
    appointment = Appointment.model_validate(
        {
            "ID_Agenda": "ag-1",
            "ID_Paciente": "p 1",
            "nome_paciente": "Ana",
            "data": "2026-03-10",
            "hora_inicio": "09:00",
            "status": "Confirmado",
            "tipo": "Consulta",
        }
    )
    context = build_patient_record_context(appointment)

    assert isinstance(context, PatientRecordContext)
    assert context.to_dict()["hora_inicio"] == "09:00"
    assert context.url == "prontuario.html?idPaciente=p+1&idAgenda=ag-1"
