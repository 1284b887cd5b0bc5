"""Orchestration of path conversion runs.

PathProcessor ties the transformer to its configuration, logging and
statistics, and accepts the input forms the I/O layer understands.
"""

import time
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

import structlog

from quadpath.config import QuadpathSettings
from quadpath.core.transformer import CubicToQuadraticTransformer, TransformStats
from quadpath.domain import PathEvent
from quadpath.exceptions import QuadpathError
from quadpath.io.converter import recording_to_events
from quadpath.io.svg import parse_svg_path
from quadpath.utils import ConversionLogger, ConversionStats


@dataclass
class ProcessingResult:
    """Output of one conversion."""

    events: list[PathEvent]
    stats: TransformStats = field(default_factory=TransformStats)
    duration_ms: float = 0.0

    @property
    def cap_exhausted(self) -> bool:
        """True if any cubic was emitted without meeting the error bound."""
        return self.stats.cap_exhausted_count > 0


class PathProcessor:
    """Converts paths to quadratic-only form.

    Example:
        processor = PathProcessor(QuadpathSettings())
        result = processor.process_svg("M0 0 C0 1 1 1 1 0")
        print(result.events)
    """

    def __init__(
        self,
        config: QuadpathSettings,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize path processor with configuration.

        Args:
            config: Quadpath settings containing the approximation config
            logger: Bound logger to report to (defaults to the quadpath logger)
        """
        self.config = config
        self.logger = logger if logger is not None else structlog.get_logger("quadpath")
        self.conversion_logger = ConversionLogger(self.logger)

    @property
    def stats(self) -> ConversionStats:
        """Statistics accumulated over every conversion run by this processor."""
        return self.conversion_logger.stats

    def process(self, events: Iterable[PathEvent], source: str = "events") -> ProcessingResult:
        """Convert a sequence of path events.

        Args:
            events: Path events to convert
            source: Label used in log records

        Returns:
            ProcessingResult holding the converted events and statistics
        """
        start_time = time.time()
        if self.stats.start_time is None:
            self.stats.start_time = start_time
        self.conversion_logger.log_path_start(source)

        transformer = CubicToQuadraticTransformer.from_settings(events, self.config.approximation)
        try:
            output = list(transformer)
        except QuadpathError as e:
            self.conversion_logger.log_path_error(source, e)
            raise

        stats = transformer.stats
        duration_ms = (time.time() - start_time) * 1000

        self.conversion_logger.log_path_complete(
            source,
            cubics=stats.cubics_converted,
            arcs=stats.arcs_converted,
            quadratics=stats.quadratics_emitted,
            duration_ms=duration_ms,
        )
        if stats.cap_exhausted_count:
            self.conversion_logger.log_cap_exhausted(
                source,
                count=stats.cap_exhausted_count,
                max_iterations=self.config.approximation.max_iterations,
            )

        self.stats.end_time = time.time()
        return ProcessingResult(events=output, stats=stats, duration_ms=duration_ms)

    def process_svg(self, path_data: str) -> ProcessingResult:
        """Parse SVG path data and convert it.

        Raises:
            PathParseError: If the path data is malformed
        """
        try:
            events = parse_svg_path(path_data)
        except QuadpathError as e:
            self.conversion_logger.log_path_error("svg", e)
            raise
        return self.process(events, source="svg")

    def process_recording(self, recording: Iterable[tuple[str, tuple[Any, ...]]]) -> ProcessingResult:
        """Convert a fontTools RecordingPen command list.

        Raises:
            PathConversionError: If a command has no path event counterpart
        """
        try:
            events = recording_to_events(recording)
        except QuadpathError as e:
            self.conversion_logger.log_path_error("recording", e)
            raise
        return self.process(events, source="recording")
