"""Logging utilities for quadpath."""

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path

import structlog

# Handlers installed by configure_logging, replaced on reconfiguration
_installed_handlers: list[logging.Handler] = []


@dataclass
class ConversionStats:
    """Statistics from a conversion run."""

    paths_converted: int = 0
    cubics_converted: int = 0
    arcs_converted: int = 0
    quadratics_emitted: int = 0
    cap_exhausted_count: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate conversion duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def error_count(self) -> int:
        return len(self.errors)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)
    _installed_handlers.append(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("quadpath")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class ConversionLogger:
    """Logger for tracking conversion progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ConversionStats()

    def log_path_start(self, source: str) -> None:
        """Log start of path conversion."""
        self._logger.debug("Converting path", source=source)

    def log_path_complete(
        self,
        source: str,
        cubics: int,
        arcs: int,
        quadratics: int,
        duration_ms: float,
    ) -> None:
        """Log successful path conversion."""
        self._logger.info(
            "Path converted",
            source=source,
            cubics=cubics,
            arcs=arcs,
            quadratics=quadratics,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.paths_converted += 1
        self._stats.cubics_converted += cubics
        self._stats.arcs_converted += arcs
        self._stats.quadratics_emitted += quadratics

    def log_cap_exhausted(self, source: str, count: int, max_iterations: int) -> None:
        """Log cubics emitted without meeting the error bound."""
        self._logger.warning(
            "Iteration cap exhausted",
            source=source,
            cubics=count,
            max_iterations=max_iterations,
        )
        self._stats.cap_exhausted_count += count

    def log_path_error(self, source: str, error: Exception) -> None:
        """Log path conversion error."""
        self._logger.error(
            "Path conversion failed",
            source=source,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.errors.append((source, str(error)))

    @property
    def stats(self) -> ConversionStats:
        """Get current conversion statistics."""
        return self._stats
