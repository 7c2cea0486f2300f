"""Exception taxonomy for minixml.

Tree construction and serialization only ever raise ``InvalidArgumentError``
(plus the built-in ``IndexError`` from ``remove`` and ``OSError`` from
``save``). The remaining exceptions belong to the parsing entry points.
"""

from typing import Optional


class MinixmlError(Exception):
    """Base exception for all minixml errors."""


class InvalidArgumentError(MinixmlError, ValueError):
    """Raised when an element name or positional argument is invalid."""

    def __init__(self, message: str, value: object = None) -> None:
        super().__init__(message)
        self.value = value


class ParseError(MinixmlError):
    """Raised when the XML backend fails to parse the input."""

    def __init__(
        self,
        message: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.line = line
        self.column = column

    def __str__(self) -> str:
        message = super().__str__()
        if self.line is not None:
            return f"{message} (line {self.line}, column {self.column})"
        return message


class DependencyMissingError(MinixmlError, ImportError):
    """Raised when the XML parsing backend is not installed."""

    def __init__(self, distribution: str, feature: str) -> None:
        super().__init__(
            f"{feature}: need '{distribution}' installed to read XML"
        )
        self.distribution = distribution
        self.feature = feature
