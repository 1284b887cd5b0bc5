"""Configuration management for quadpath.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- ArcEmissionOrder: Emission order of arc decompositions
- ApproximationConfig: Error bound, iteration cap and stream options
- LoggingConfig: Logging settings
- QuadpathSettings: Main application settings
"""

from quadpath.config.settings import (
    MAX_APPROXIMATION_ITERATIONS,
    ApproximationConfig,
    ArcEmissionOrder,
    LoggingConfig,
    LogLevel,
    QuadpathSettings,
    get_default_settings,
)

__all__ = [
    "MAX_APPROXIMATION_ITERATIONS",
    "ApproximationConfig",
    "ArcEmissionOrder",
    "LoggingConfig",
    "LogLevel",
    "QuadpathSettings",
    "get_default_settings",
]
