"""
Error taxonomy for the city density pipeline.

Every stage fails fast by raising one of these; the CLI entry point is the
only place that catches them. All derive from ``CityDataError`` so callers
can handle the whole family at once.
"""

from __future__ import annotations

from typing import Sequence


class CityDataError(ValueError):
    """Base class for all pipeline failures."""


class InvalidInputError(CityDataError):
    """Raw input is missing, not text, or lacks a header plus one data row."""


class MissingHeaderError(CityDataError):
    """One or more required header names are absent."""

    def __init__(self, missing: Sequence[str]) -> None:
        self.missing = list(missing)
        super().__init__(f"Missing required headers: {', '.join(self.missing)}")


class RowShapeError(CityDataError):
    """A data row has the wrong number of cells."""

    def __init__(self, row: int, expected: int, actual: int) -> None:
        self.row = row
        self.expected = expected
        self.actual = actual
        super().__init__(f"Invalid data in row {row}: incorrect number of columns")


class InvalidNumberError(CityDataError):
    """A numeric cell does not start with a non-negative integer."""

    def __init__(self, field: str, value: str) -> None:
        self.field = field
        self.value = value
        super().__init__(f"Invalid {field}: {value}")


class EmptyDatasetError(CityDataError):
    """Normalization was attempted on zero records."""


class ZeroMaxDensityError(CityDataError):
    """Every density is zero, so relative density is undefined."""


__all__ = [
    "CityDataError",
    "InvalidInputError",
    "MissingHeaderError",
    "RowShapeError",
    "InvalidNumberError",
    "EmptyDatasetError",
    "ZeroMaxDensityError",
]
