"""Exception hierarchy for quadpath."""


class QuadpathError(Exception):
    """Base exception for all quadpath errors."""

    pass


class ApproximationError(QuadpathError):
    """Errors related to approximator construction."""

    pass


class InvalidErrorBoundError(ApproximationError):
    """Error bound is not a positive finite number."""

    def __init__(self, error_bound: float) -> None:
        self.error_bound = error_bound
        super().__init__(f"Error bound must be a positive finite number, got {error_bound!r}")


class InvalidIterationCapError(ApproximationError):
    """Iteration cap is negative."""

    def __init__(self, max_iterations: int) -> None:
        self.max_iterations = max_iterations
        super().__init__(f"Iteration cap must be non-negative, got {max_iterations!r}")


class PathError(QuadpathError):
    """Errors related to reading or writing path data."""

    pass


class PathParseError(PathError):
    """Path data could not be parsed."""

    def __init__(self, path_data: str, reason: str) -> None:
        self.path_data = path_data
        self.reason = reason
        preview = path_data if len(path_data) <= 40 else path_data[:37] + "..."
        super().__init__(f"Failed to parse path data '{preview}': {reason}")


class PathConversionError(PathError):
    """A pen command has no path event counterpart."""

    def __init__(self, command: str, reason: str) -> None:
        self.command = command
        self.reason = reason
        super().__init__(f"Cannot convert '{command}': {reason}")


class UnsupportedEventError(PathError):
    """A path event cannot be handled by the requested operation."""

    def __init__(self, kind: str, reason: str) -> None:
        self.kind = kind
        self.reason = reason
        super().__init__(f"Unsupported path event '{kind}': {reason}")
