"""Presets — реестр функций-примеров для исследования пределов."""

from .catalog import LIMIT_PRESETS, PRESETS_BY_ID, get_limit_preset

__all__ = [
    "LIMIT_PRESETS",
    "PRESETS_BY_ID",
    "get_limit_preset",
]
