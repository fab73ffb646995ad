"""
CSV parsing for the city statistics table.

Turns the raw comma-separated text into ``CityRecord`` values, validating the
header and every row on the way. Parsing stops at the first problem.

Two behaviours are kept deliberately loose and logged when they kick in:

- Numeric cells use leading-integer semantics: ``"100abc"`` parses as 100.
- Values are taken by column position, not by header name, so a reordered
  header validates but maps cells to the positional fields.
"""

from __future__ import annotations

import re
from typing import List, Tuple

from city_density.domain.models import CityRecord
from city_density.errors import (
    InvalidInputError,
    InvalidNumberError,
    MissingHeaderError,
    RowShapeError,
)
from city_density.utils.logging import get_logger

log = get_logger(__name__)

REQUIRED_HEADERS: Tuple[str, ...] = ("city", "population", "area", "density", "country")

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_leading_int(value: str, field: str) -> int:
    """
    Parse the leading integer of ``value``, ignoring anything after it.

    Raises
    ------
    InvalidNumberError
        If ``value`` does not start with digits or the number is negative.
    """
    match = _LEADING_INT.match(value)
    if match is None:
        raise InvalidNumberError(field, value)
    number = int(match.group(1))
    if number < 0:
        raise InvalidNumberError(field, value)
    if match.end() != len(value):
        log.warning(
            f"Ignoring trailing characters in {field} value {value!r}",
            extra={"field": field, "value": value, "parsed": number},
        )
    return number


def _split_cells(line: str) -> List[str]:
    return [cell.strip() for cell in line.split(",")]


def _check_headers(line: str) -> None:
    headers = [h.lower() for h in _split_cells(line)]
    missing = [name for name in REQUIRED_HEADERS if name not in headers]
    if missing:
        raise MissingHeaderError(missing)

    found_order = [h for h in headers if h in REQUIRED_HEADERS]
    if found_order != list(REQUIRED_HEADERS):
        log.warning(
            "Header order differs from the positional layout; values are read by position",
            extra={"headers": headers, "expected": list(REQUIRED_HEADERS)},
        )


def _parse_row(line: str, row: int) -> CityRecord:
    cells = _split_cells(line)
    if len(cells) != len(REQUIRED_HEADERS):
        raise RowShapeError(row, expected=len(REQUIRED_HEADERS), actual=len(cells))

    city, population, area, density, country = cells
    return CityRecord(
        city=city,
        population=parse_leading_int(population, "population"),
        area=parse_leading_int(area, "area"),
        density=parse_leading_int(density, "density"),
        country=country,
    )


def parse_city_data(raw: str) -> List[CityRecord]:
    """
    Parse the raw table into records, preserving row order.

    Parameters
    ----------
    raw : str
        Header line followed by one line per city. Blank lines are skipped.

    Returns
    -------
    List[CityRecord]
        One record per data row.
    """
    if not isinstance(raw, str) or not raw:
        raise InvalidInputError("Invalid input: data must be a non-empty string")

    lines = [line for line in raw.split("\n") if line.strip()]
    if len(lines) < 2:
        raise InvalidInputError(
            "Invalid input: data must contain at least a header and one data row"
        )

    _check_headers(lines[0])
    records = [_parse_row(line, row) for row, line in enumerate(lines[1:], start=1)]
    log.debug(f"Parsed {len(records)} city records", extra={"rows": len(records)})
    return records


__all__ = ["REQUIRED_HEADERS", "parse_city_data", "parse_leading_int"]
