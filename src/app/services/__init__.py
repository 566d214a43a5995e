"""Serviços de aplicação da agenda.

Unidades reutilizáveis de orquestração; o IO chega apenas pelo
protocolo de requisição. Implementações concretas ficam em app/infra/.
"""

from app.services.agenda_config_resolver import AgendaConfigResolver, merge_config
from app.services.appointment_commands import AppointmentCommands
from app.services.conflict_policy import classify
from app.services.day_schedule import aggregate_day
from app.services.in_flight import InFlightToken, InFlightTracker
from app.services.patient_search import PatientSearch, PatientSearchResult
from app.services.status_transition import StatusTransitionController
from app.services.time_grid import build_grid
from app.services.week_schedule import aggregate_week

__all__ = [
    "AgendaConfigResolver",
    "AppointmentCommands",
    "InFlightToken",
    "InFlightTracker",
    "PatientSearch",
    "PatientSearchResult",
    "StatusTransitionController",
    "aggregate_day",
    "aggregate_week",
    "build_grid",
    "classify",
    "merge_config",
]
