"""Contexto para abrir o prontuário a partir de um agendamento."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from urllib.parse import urlencode

from app.domain.appointment import Appointment
from app.domain.messages import UserMessage

RECORD_PAGE = "prontuario.html"
UNLINKED_PATIENT_MESSAGE = (
    "Este agendamento não está vinculado a um paciente cadastrado.\n\n"
    "Use a seleção de pacientes na criação/edição do agendamento para "
    "vincular ao prontuário."
)


@dataclass(frozen=True, slots=True)
class PatientRecordContext:
    """Dados do atendimento repassados à tela de prontuário."""

    ID_Paciente: str
    nome_paciente: str = ""
    documento_paciente: str = ""
    telefone_paciente: str = ""
    ID_Agenda: str = ""
    data: str = ""
    hora_inicio: str = ""
    status: str = ""
    tipo: str = ""

    def to_dict(self) -> dict[str, str]:
        return asdict(self)

    @property
    def url(self) -> str:
        params = {"idPaciente": self.ID_Paciente}
        if self.ID_Agenda:
            params["idAgenda"] = self.ID_Agenda
        return f"{RECORD_PAGE}?{urlencode(params)}"


def build_patient_record_context(
    appointment: Appointment,
) -> PatientRecordContext | UserMessage:
    """Monta o contexto; sem paciente vinculado devolve a mensagem de erro."""
    if not appointment.has_patient:
        return UserMessage.error(UNLINKED_PATIENT_MESSAGE)
    return PatientRecordContext(
        ID_Paciente=appointment.patient_id or "",
        nome_paciente=appointment.patient_name or "",
        documento_paciente=appointment.patient_document or "",
        telefone_paciente=appointment.patient_phone or "",
        ID_Agenda=appointment.id,
        data=appointment.date or "",
        hora_inicio=appointment.start_time or "",
        status=appointment.status,
        tipo=appointment.type,
    )


__all__ = [
    "UNLINKED_PATIENT_MESSAGE",
    "PatientRecordContext",
    "build_patient_record_context",
]
