"""
Pipeline that turns the raw city table into ranked, enriched records.

Usage:
    from city_density.dataset import CITY_DATA
    from city_density.pipeline import run_pipeline

    ranked = run_pipeline(CITY_DATA)

Stages run in order (parse, normalize, sort) and any stage error propagates
unchanged to the caller.
"""

from __future__ import annotations

from typing import List, Sequence

from city_density.domain.models import EnrichedCityRecord
from city_density.normalizer import calculate_relative_density
from city_density.parser import parse_city_data
from city_density.utils.logging import get_logger

log = get_logger(__name__)


def sort_descending(records: Sequence[EnrichedCityRecord]) -> List[EnrichedCityRecord]:
    """Return a new list ordered by relative density, highest first. Ties keep input order."""
    return sorted(records, key=lambda record: record.relative_density, reverse=True)


def run_pipeline(raw: str) -> List[EnrichedCityRecord]:
    """
    Parse, normalize and sort ``raw``.

    Parameters
    ----------
    raw : str
        The comma-separated city table.

    Returns
    -------
    List[EnrichedCityRecord]
        Records ordered by descending relative density.
    """
    log.info("[PARSE] Reading city table")
    records = parse_city_data(raw)
    log.info(f"[PARSE] {len(records)} records", extra={"rows": len(records)})

    enriched = calculate_relative_density(records)
    ranked = sort_descending(enriched)
    log.info(
        f"[RANK] Densest city is {ranked[0].city}",
        extra={"city": ranked[0].city, "density": ranked[0].density},
    )
    return ranked


__all__ = ["run_pipeline", "sort_descending"]
