"""Agregador de settings da agenda.

Re-exporta as settings de cada módulo.
"""

from __future__ import annotations

from config.settings.agenda import (
    AgendaSettings,
    ViewMode,
    get_agenda_settings,
)
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

__all__ = [
    "AgendaSettings",
    "BaseSettings",
    "Environment",
    "ViewMode",
    "get_agenda_settings",
    "get_base_settings",
]
