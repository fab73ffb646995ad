"""
Relative density calculation.

Expresses each city's density as a whole-number percentage of the densest
city in the working set. Input order is preserved; sorting happens later.
"""

from __future__ import annotations

from typing import List, Sequence

from city_density.domain.models import CityRecord, EnrichedCityRecord
from city_density.errors import EmptyDatasetError, ZeroMaxDensityError
from city_density.utils.logging import get_logger

log = get_logger(__name__)


def relative_percent(value: int, maximum: int) -> int:
    """Return ``value * 100 / maximum`` rounded half up, in integer arithmetic."""
    return (200 * value + maximum) // (2 * maximum)


def calculate_relative_density(records: Sequence[CityRecord]) -> List[EnrichedCityRecord]:
    """
    Attach ``relative_density`` to every record.

    The densest record(s) get 100. Raises ``EmptyDatasetError`` for an empty
    working set and ``ZeroMaxDensityError`` when every density is zero.
    """
    if not records:
        raise EmptyDatasetError("No cities data provided for density calculation")

    max_density = max(record.density for record in records)
    if max_density == 0:
        raise ZeroMaxDensityError("Invalid data: maximum density cannot be zero")

    log.debug(f"Maximum density is {max_density}", extra={"max_density": max_density})
    return [
        EnrichedCityRecord.from_record(record, relative_percent(record.density, max_density))
        for record in records
    ]


__all__ = ["calculate_relative_density", "relative_percent"]
