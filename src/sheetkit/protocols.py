"""Backend protocol for sheetkit.

Defines the structural-subtyping interface that spreadsheet backends must
satisfy.  The protocol is ``@runtime_checkable`` so callers can optionally
verify conformance with ``isinstance`` checks.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol, runtime_checkable


@runtime_checkable
class ColumnSource(Protocol):
    """Interface for spreadsheet backends that expose sheets column by column."""

    def sheet_names(self) -> list[str]:
        """Return every sheet name in workbook order."""
        ...

    def iter_columns(self, sheet_name: str) -> Iterator[list[str]]:
        """Yield the columns of *sheet_name* in order, each a list of text cells."""
        ...

    def close(self) -> None:
        """Release any resources held by the backend."""
        ...
