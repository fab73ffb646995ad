"""
Fixed-width text rendering of the ranked city table.

Layout is driven by ``CITY_COLUMNS``, a tuple of column descriptors. Cells are
padded to their column width but never truncated, so an oversized value
simply widens its row.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Literal, Sequence

import typer

from city_density.domain.models import EnrichedCityRecord

NO_DATA_MESSAGE = "No data to display"


@dataclass(frozen=True)
class ColumnSpec:
    """
    Display settings for one table column.
    """

    key: str
    label: str
    width: int
    align: Literal["left", "right"] = "right"
    grouped: bool = False

    def pad(self, text: str) -> str:
        if self.align == "left":
            return text.ljust(self.width)
        return text.rjust(self.width)

    def format_value(self, value: Any) -> str:
        if self.grouped:
            return f"{value:,}"
        return str(value)


CITY_COLUMNS: tuple[ColumnSpec, ...] = (
    ColumnSpec("city", "City", 18, align="left"),
    ColumnSpec("population", "Population", 10, grouped=True),
    ColumnSpec("area", "Area", 8, grouped=True),
    ColumnSpec("density", "Density", 8, grouped=True),
    ColumnSpec("country", "Country", 18),
    ColumnSpec("relative_density", "Rel%", 6),
)


def format_header(columns: Sequence[ColumnSpec] = CITY_COLUMNS) -> str:
    return "".join(column.pad(column.label) for column in columns)


def format_row(record: EnrichedCityRecord, columns: Sequence[ColumnSpec] = CITY_COLUMNS) -> str:
    return "".join(
        column.pad(column.format_value(getattr(record, column.key))) for column in columns
    )


def render_table(
    records: Sequence[EnrichedCityRecord], columns: Sequence[ColumnSpec] = CITY_COLUMNS
) -> List[str]:
    """
    Render records as a header line, a dash separator and one line per record.

    An empty sequence renders as a single informational line instead.
    """
    if not records:
        return [NO_DATA_MESSAGE]

    header = format_header(columns)
    lines = [header, "-" * len(header)]
    lines.extend(format_row(record, columns) for record in records)
    return lines


def print_table(lines: Iterable[str]) -> None:
    """
    Write rendered lines to stdout in order, exactly as rendered.

    ``color=True`` keeps click from stripping escape sequences off non-terminals.
    """
    for line in lines:
        typer.echo(line, color=True)


__all__ = [
    "CITY_COLUMNS",
    "ColumnSpec",
    "NO_DATA_MESSAGE",
    "format_header",
    "format_row",
    "print_table",
    "render_table",
]
