from __future__ import annotations

from typing import Any

ERROR_CODE_PARSE = "PARSE_ERROR"
ERROR_CODE_OUTPUT = "OUTPUT_ERROR"


class YamlDeltaError(Exception):
    code = "YAMLDELTA_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = dict(details or {})

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ParseError(YamlDeltaError):
    """Raised when a document cannot be turned into a node tree."""

    code = ERROR_CODE_PARSE

    def __init__(self, source: str, description: str, line: int | None = None) -> None:
        location = f"{source}:{line}" if line is not None else source
        super().__init__(
            f"Unable to parse {location}: {description}",
            details={"source": source, "description": description, "line": line},
        )
        self.source = source
        self.description = description
        self.line = line


class OutputError(YamlDeltaError):
    """Raised when the output sink rejects a write."""

    code = ERROR_CODE_OUTPUT


__all__ = [
    "ERROR_CODE_OUTPUT",
    "ERROR_CODE_PARSE",
    "OutputError",
    "ParseError",
    "YamlDeltaError",
]
