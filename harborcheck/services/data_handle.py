"""
Data handles consumed by the safe harbor validator.

A handle exposes the column count, the header of each column, and a
single-pass row iterator whose first element is the header row.
"""

from typing import Any, Iterator, List, Protocol, Sequence

import pandas as pd


class DataHandle(Protocol):
    def column_count(self) -> int:
        ...

    def header_at(self, index: int) -> str:
        ...

    def rows(self) -> Iterator[Sequence[str]]:
        ...


def cell_to_text(value: Any) -> str:
    """Render a cell as text; missing values become an empty string."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    try:
        if pd.isna(value):
            return ""
    except (TypeError, ValueError):
        # list-like cells make pd.isna ambiguous
        pass
    return str(value)


class TableHandle:
    """In-memory table built from a header list and row lists."""

    def __init__(self, headers: Sequence[str], rows: Sequence[Sequence[Any]] = ()):
        self._headers: List[str] = [cell_to_text(h) for h in headers]
        self._rows = rows

    def column_count(self) -> int:
        return len(self._headers)

    def header_at(self, index: int) -> str:
        return self._headers[index]

    def rows(self) -> Iterator[Sequence[str]]:
        yield list(self._headers)
        for row in self._rows:
            yield [cell_to_text(cell) for cell in row]


class DataFrameHandle:
    """Handle over a pandas DataFrame. Column labels are used as headers."""

    def __init__(self, df: pd.DataFrame):
        self.df = df

    def column_count(self) -> int:
        return len(self.df.columns)

    def header_at(self, index: int) -> str:
        return cell_to_text(self.df.columns[index])

    def rows(self) -> Iterator[Sequence[str]]:
        yield [cell_to_text(col) for col in self.df.columns]
        for values in self.df.itertuples(index=False, name=None):
            yield [cell_to_text(cell) for cell in values]
