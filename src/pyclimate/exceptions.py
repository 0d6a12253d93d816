"""Custom exception hierarchy for pyclimate."""

from __future__ import annotations


class ClimateError(Exception):
    """Base exception for all pyclimate errors."""


class ClimateConfigError(ClimateError):
    """Invalid or missing configuration."""


class DecodeError(ClimateError):
    """A raw observation line could not be decoded.

    The ingestion driver catches this and skips the offending line.
    """

    def __init__(
        self,
        message: str,
        *,
        line_number: int | None = None,
        source: str | None = None,
        line: str = "",
    ) -> None:
        self.line_number = line_number
        self.source = source
        self.line = line
        super().__init__(message)

    def __str__(self) -> str:
        message = super().__str__()
        if self.source is not None and self.line_number is not None:
            return f"{self.source}:{self.line_number}: {message}"
        if self.line_number is not None:
            return f"line {self.line_number}: {message}"
        return message


class MalformedLineError(DecodeError):
    """Line has fewer fields than the record format requires."""


class NumericParseError(DecodeError):
    """A numeric field is not parseable as its expected type."""

    def __init__(
        self,
        message: str,
        *,
        field: str,
        line_number: int | None = None,
        source: str | None = None,
        line: str = "",
    ) -> None:
        self.field = field
        super().__init__(message, line_number=line_number, source=source, line=line)


class SourceUnavailableError(ClimateError):
    """A line source (file or stream) could not be opened or read."""

    def __init__(self, message: str, *, path: str = "") -> None:
        self.path = path
        super().__init__(message)
