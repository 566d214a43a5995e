"""Formatter JSON da agenda (campos fixos, sem dados de paciente)."""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

REQUIRED_LOG_FIELDS = frozenset(
    {
        "asctime",
        "levelname",
        "name",
        "message",
        "correlation_id",
        "service",
    }
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """JsonFormatter com REQUIRED_LOG_FIELDS em ordem estável."""
    format_string = " ".join(f"%({field})s" for field in sorted(REQUIRED_LOG_FIELDS))
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
