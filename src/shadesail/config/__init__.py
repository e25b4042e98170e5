"""Configuration management for shadesail.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- CaptureConfig: Freehand capture and simplification settings
- SailConfig: Sail creation settings (sag ratio, capacity, style)
- PerspectiveConfig: Perspective estimator settings
- AxisAdjustment: Validated positioning slider values
- LoggingConfig: Logging settings
- ShadeSailSettings: Main application settings
"""

from shadesail.config.settings import (
    AxisAdjustment,
    CaptureConfig,
    LoggingConfig,
    PerspectiveConfig,
    SailConfig,
    ShadeSailSettings,
    StyleConfig,
    get_default_settings,
)

__all__ = [
    "AxisAdjustment",
    "CaptureConfig",
    "LoggingConfig",
    "PerspectiveConfig",
    "SailConfig",
    "ShadeSailSettings",
    "StyleConfig",
    "get_default_settings",
]
