"""
Immutable configuration for quickprop.

See: quickprop.config.settings
"""

from quickprop.config.settings import (
    SETTINGS,
    CheckConfig,
    GenerationConfig,
    Settings,
)

__all__ = [
    "SETTINGS",
    "Settings",
    "GenerationConfig",
    "CheckConfig",
]
