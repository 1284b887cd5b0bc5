"""Configuration settings for quadpath."""

from enum import Enum
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

MAX_APPROXIMATION_ITERATIONS = 32

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class ArcEmissionOrder(str, Enum):
    """Order in which an arc's quadratic segments are emitted.

    REVERSED drains the decomposition from its end, so segments come out last
    to first. FORWARD follows the arc's direction of travel.
    """

    REVERSED = "reversed"
    FORWARD = "forward"


class ApproximationConfig(BaseModel):
    """Configuration for curve approximation."""

    error_bound: float = Field(
        default=0.1,
        gt=0.0,
        allow_inf_nan=False,
        description="Maximum tolerated deviation between a cubic piece and its quadratic",
    )
    max_iterations: int = Field(
        default=MAX_APPROXIMATION_ITERATIONS,
        ge=1,
        le=64,
        description="Total subdivision checks allowed per cubic",
    )
    arc_order: ArcEmissionOrder = Field(
        default=ArcEmissionOrder.REVERSED,
        description="Emission order of an arc's quadratic segments",
    )
    reset_on_close: bool = Field(
        default=False,
        description="Reset the current point to the subpath start on close",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: LogLevel = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: LogLevel = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class QuadpathSettings(BaseModel):
    """Main application settings."""

    approximation: ApproximationConfig = Field(default_factory=ApproximationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> QuadpathSettings:
    """Get default application settings."""
    return QuadpathSettings()
