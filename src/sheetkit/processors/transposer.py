"""Column-major to row-major transposition for delimited output."""

from __future__ import annotations

from sheetkit.models import Grid, MatrixTable


def transpose(matrix: MatrixTable, strip_header: bool = False) -> Grid:
    """Turn a (possibly ragged) matrix table into a rectangular grid.

    Two passes: the first finds the column count ``C`` and the longest
    column ``R``; the second copies ``matrix[c][r]`` into ``grid[r][c]``
    inside each column's own bounds.  Cells past the end of a short column
    stay ``""``.

    Parameters
    ----------
    matrix:
        Columns of one sheet, header cell included.
    strip_header:
        Skip row 0 of every column.  The grid then has ``R - 1`` rows.

    Returns
    -------
    Grid
        ``R`` rows (``R - 1`` when stripping), each of length ``C``.
    """
    n_cols = len(matrix)
    n_rows = 0
    for column in matrix:
        if len(column) > n_rows:
            n_rows = len(column)

    offset = 1 if strip_header else 0
    n_rows = max(n_rows - offset, 0)

    grid: Grid = [["" for _ in range(n_cols)] for _ in range(n_rows)]
    for c in range(n_cols):
        column = matrix[c]
        for r in range(offset, len(column)):
            grid[r - offset][c] = column[r]
    return grid
