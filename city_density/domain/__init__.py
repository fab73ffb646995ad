"""
Domain package for the city density report.

Exports the record models passed between pipeline stages. Keep this package
focused on data definitions and validation concerns.
"""

from city_density.domain.models import CityRecord, EnrichedCityRecord

__all__ = [
    "CityRecord",
    "EnrichedCityRecord",
]
