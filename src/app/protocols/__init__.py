"""Protocolos e contratos do núcleo da agenda."""

from .agenda_request import AgendaRequestProtocol

__all__ = [
    "AgendaRequestProtocol",
]
