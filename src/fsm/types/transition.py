"""
Registros de transição de status.

Cada mudança de status aceita gera um StatusTransition imutável,
seguro para log (sem dados de paciente).
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from fsm.states.status import AppointmentStatus


@dataclass(frozen=True, slots=True)
class StatusTransition:
    """
    Mudança de status de um agendamento.

    Attributes:
        appointment_id: ID_Agenda do agendamento
        from_status: Status anterior
        to_status: Status solicitado
        trigger: Origem da mudança (ex: 'status_button')
        metadata: Dados adicionais para auditoria (nunca PII)
        timestamp: Momento da transição (UTC)
    """

    appointment_id: str
    from_status: AppointmentStatus
    to_status: AppointmentStatus
    trigger: str
    metadata: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(
        default_factory=lambda: datetime.now(UTC)
    )

    def __post_init__(self) -> None:
        if not self.appointment_id:
            raise ValueError("appointment_id não pode ser vazio")
        if not self.trigger or not self.trigger.strip():
            raise ValueError("trigger não pode ser vazio")

    def to_log_dict(self) -> dict[str, Any]:
        """Retorna representação segura para logs."""
        return {
            "appointment_id": self.appointment_id,
            "from_status": self.from_status.name,
            "to_status": self.to_status.name,
            "trigger": self.trigger,
            "timestamp": self.timestamp.isoformat(),
            "metadata": self.metadata,
        }


@dataclass(frozen=True, slots=True)
class TransitionResult:
    """
    Resultado de uma tentativa de transição.

    Attributes:
        success: Se a transição foi aceita
        transition: Dados da transição (se success=True)
        error_reason: Motivo da recusa (se success=False)
    """

    success: bool
    transition: StatusTransition | None = None
    error_reason: str | None = None

    def __post_init__(self) -> None:
        if self.success and self.transition is None:
            raise ValueError("Transição bem-sucedida deve incluir transition")
        if not self.success and self.error_reason is None:
            raise ValueError("Transição falha deve incluir error_reason")
