"""Normalização das respostas do backend da agenda.

- envelope.py: `{success, data, errors}` → data ou AgendaRequestError
- responses.py: formatos variáveis de `data` → formato canônico por ação
"""

from .envelope import unwrap_envelope
from .responses import (
    RESPONSE_NORMALIZERS,
    normalize_config_response,
    normalize_day_response,
    normalize_patients_response,
    normalize_response,
    normalize_week_response,
)

__all__ = [
    "RESPONSE_NORMALIZERS",
    "normalize_config_response",
    "normalize_day_response",
    "normalize_patients_response",
    "normalize_response",
    "normalize_week_response",
    "unwrap_envelope",
]
