"""Dados de formulário para criar, editar e bloquear horários.

Os rascunhos aceitam campos incompletos; `is_complete` diz se data,
hora inicial e duração estão presentes e válidas. A montagem do payload
segue os nomes de campo do backend.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from app.domain.agenda_time import normalize_date, normalize_time
from app.domain.appointment import PatientSummary


class _IntervalDraft(BaseModel):
    model_config = ConfigDict(extra="ignore")

    date: str | None = None
    start_time: str | None = None
    duration_minutes: int | None = None

    @field_validator("date", mode="before")
    @classmethod
    def _normalize_date(cls, value: Any) -> str | None:
        return normalize_date(value)

    @field_validator("start_time", mode="before")
    @classmethod
    def _normalize_time(cls, value: Any) -> str | None:
        return normalize_time(value)

    @field_validator("duration_minutes", mode="before")
    @classmethod
    def _coerce_duration(cls, value: Any) -> int | None:
        if value is None or value == "":
            return None
        try:
            return int(value)
        except (TypeError, ValueError):
            return None

    @property
    def is_complete(self) -> bool:
        return bool(self.date and self.start_time and (self.duration_minutes or 0) > 0)

    def _interval_payload(self) -> dict[str, Any]:
        return {
            "data": self.date or "",
            "hora_inicio": self.start_time or "",
            "duracao_minutos": self.duration_minutes or 0,
        }


class AppointmentDraft(_IntervalDraft):
    """Novo agendamento.

    Com paciente selecionado, os dados dele prevalecem sobre nome e
    telefone digitados.
    """

    patient: PatientSummary | None = None
    patient_name: str = ""
    patient_phone: str = ""
    type: str = ""
    reason: str = ""
    origin: str = ""
    channel: str = ""

    def to_payload(self) -> dict[str, Any]:
        patient = self.patient
        return {
            **self._interval_payload(),
            "ID_Paciente": patient.patient_id if patient else "",
            "nome_paciente": patient.name if patient else self.patient_name,
            "documento_paciente": patient.document if patient else "",
            "telefone_paciente": patient.phone if patient else self.patient_phone,
            "tipo": self.type,
            "motivo": self.reason,
            "origem": self.origin,
            "canal": self.channel,
            "ID_Sala": "",
            "profissional": "",
            "permite_encaixe": True,
        }


class AppointmentUpdate(_IntervalDraft):
    """Edição de um agendamento existente.

    Campos de paciente só vão no payload quando um novo paciente foi
    escolhido na edição.
    """

    appointment_id: str = ""
    patient: PatientSummary | None = None
    type: str = ""
    reason: str = ""
    origin: str = ""
    channel: str = ""

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "ID_Agenda": self.appointment_id,
            **self._interval_payload(),
            "tipo": self.type,
            "motivo": self.reason,
            "origem": self.origin,
            "canal": self.channel,
        }
        if self.patient is not None:
            payload.update(
                {
                    "ID_Paciente": self.patient.patient_id,
                    "nome_paciente": self.patient.name,
                    "documento_paciente": self.patient.document,
                    "telefone_paciente": self.patient.phone,
                }
            )
        return payload


class BlockDraft(_IntervalDraft):
    """Bloqueio de um intervalo (sem paciente)."""

    def to_payload(self) -> dict[str, Any]:
        return self._interval_payload()


__all__ = ["AppointmentDraft", "AppointmentUpdate", "BlockDraft"]
