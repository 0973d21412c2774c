"""Normalized error codes and structured error model for sheetkit.

``ErrorCode`` lists every fatal error and logged warning a conversion run
can produce.  ``ConvertError`` is the Pydantic data model describing one
such event; ``ConvertException`` wraps it so it can be raised and caught.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class ErrorCode(str, Enum):
    """Normalized error codes for sheetkit.

    Values equal their names so they are stable strings.  ``E_`` prefix =
    fatal, ``W_`` prefix = warning (logged only, never reported to the user
    as a distinct outcome).
    """

    # I/O
    E_IO_INPUT = "E_IO_INPUT"
    E_IO_OUTPUT = "E_IO_OUTPUT"

    # Parse
    E_PARSE_CORRUPT = "E_PARSE_CORRUPT"
    E_PARSE_SHEET = "E_PARSE_SHEET"

    # Shape construction
    E_SHAPE_EMPTY_COLUMN = "E_SHAPE_EMPTY_COLUMN"
    E_SHEET_NOT_FOUND = "E_SHEET_NOT_FOUND"

    # Output
    E_SERIALIZE = "E_SERIALIZE"

    # Configuration
    E_CONFIG_INVALID = "E_CONFIG_INVALID"

    # Warnings (non-fatal)
    W_PARSER_FALLBACK = "W_PARSER_FALLBACK"


class ConvertError(BaseModel):
    """Structured error with code, message, and location context.

    Note: this is a Pydantic model (data structure), not a Python
    exception.  Use ``ConvertException`` to raise it.
    """

    code: ErrorCode
    message: str
    sheet_name: str | None = None
    column_index: int | None = None
    stage: str | None = None
    recoverable: bool = False


class ConvertException(Exception):
    """Raisable exception wrapping a ``ConvertError`` data model.

    The structured error is available as ``.error``; the convenience
    properties delegate to it.
    """

    def __init__(self, **kwargs: object) -> None:
        self.error = ConvertError(**kwargs)  # type: ignore[arg-type]
        super().__init__(self.error.message)

    @property
    def code(self) -> ErrorCode:
        return self.error.code

    @property
    def message(self) -> str:
        return self.error.message

    @property
    def sheet_name(self) -> str | None:
        return self.error.sheet_name

    @property
    def stage(self) -> str | None:
        return self.error.stage

    @property
    def column_index(self) -> int | None:
        return self.error.column_index
