"""
Domain models for the city density report.

``CityRecord`` is what the parser produces from one data row;
``EnrichedCityRecord`` adds the derived relative density. Both are frozen so
each pipeline stage hands the next one a fresh value instead of mutating.
"""
from __future__ import annotations

from pydantic import BaseModel, Field


class CityRecord(BaseModel):
    """
    One row of the city statistics table.
    """

    city: str = Field(..., description="City name as written in the dataset.")
    population: int = Field(..., ge=0, description="Number of inhabitants.")
    area: int = Field(..., ge=0, description="Area in square kilometres.")
    density: int = Field(..., ge=0, description="Inhabitants per square kilometre.")
    country: str = Field(..., description="Country the city belongs to.")

    model_config = {
        "frozen": True,
        "extra": "forbid",
    }


class EnrichedCityRecord(CityRecord):
    """
    A city record with its density expressed relative to the densest city.
    """

    relative_density: int = Field(
        ..., ge=0, le=100, description="Density as a percentage of the working set maximum."
    )

    @classmethod
    def from_record(cls, record: CityRecord, relative_density: int) -> EnrichedCityRecord:
        fields = record.model_dump(exclude={"relative_density"})
        return cls(**fields, relative_density=relative_density)


__all__ = ["CityRecord", "EnrichedCityRecord"]
