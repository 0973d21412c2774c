"""Concrete ColumnSource backends for sheetkit.

``OpenpyxlColumnSource`` is the primary reader; ``PandasColumnSource`` is
the reduced-fidelity fallback used by the parser chain.
"""

from __future__ import annotations

from sheetkit.backends.openpyxl_source import OpenpyxlColumnSource
from sheetkit.backends.pandas_source import PandasColumnSource

__all__ = [
    "OpenpyxlColumnSource",
    "PandasColumnSource",
]
