"""
Error Taxonomy

All failures raised by benchgen derive from BenchgenError:
- DataUnavailable: auxiliary data file missing or unreadable
- DataTruncated: auxiliary data shorter than a caller requires
- DimensionMismatch: input vector of the wrong length
- InvalidSolution: input vector outside the problem domain
- UnsupportedVersion: no layout/bias/definition for a version/function pair
"""

from pathlib import Path
from typing import Optional


class BenchgenError(Exception):
    """Base class for benchgen errors."""


class DataUnavailable(BenchgenError):
    """An auxiliary data file could not be opened or parsed."""

    def __init__(self, path: Path, reason: str = "file not found"):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Auxiliary data unavailable: {self.path} ({reason})")


class DataTruncated(BenchgenError):
    """An auxiliary buffer holds fewer values than required."""

    def __init__(self, path: Optional[Path], expected: int, actual: int):
        self.path = Path(path) if path is not None else None
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Auxiliary data truncated: {self.path} has {actual} values, "
            f"{expected} required"
        )


class DimensionMismatch(BenchgenError, ValueError):
    """Input length does not match the problem dimension."""

    def __init__(self, expected: int, actual: int, what: str = "input",
                 message: Optional[str] = None):
        self.expected = expected
        self.actual = actual
        super().__init__(message or f"{what} has length {actual}, expected {expected}")


class InvalidSolution(BenchgenError, ValueError):
    """Input holds values outside the search domain."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid solution: {reason}")


class UnsupportedVersion(BenchgenError, ValueError):
    """No rule is known for the requested version/function combination."""

    def __init__(self, family: str, function_id: Optional[int] = None):
        self.family = family
        self.function_id = function_id
        if function_id is None:
            msg = f"Unsupported benchmark version: {family}"
        else:
            msg = f"Unsupported function {function_id} for {family}"
        super().__init__(msg)
