"""
City density report: ranks a built-in table of large cities by how dense they
are relative to the densest one, and prints the result as a fixed-width table.

The pipeline is a straight line:

- parse the comma-separated table into validated records
- express each density as a percentage of the maximum
- sort by that percentage, descending
- render aligned columns to stdout
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from city_density.config import Settings, get_settings
from city_density.dataset import CITY_DATA
from city_density.domain.models import CityRecord, EnrichedCityRecord
from city_density.errors import (
    CityDataError,
    EmptyDatasetError,
    InvalidInputError,
    InvalidNumberError,
    MissingHeaderError,
    RowShapeError,
    ZeroMaxDensityError,
)
from city_density.normalizer import calculate_relative_density
from city_density.parser import parse_city_data
from city_density.pipeline import run_pipeline, sort_descending
from city_density.reporter import CITY_COLUMNS, ColumnSpec, print_table, render_table
from city_density.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Data
    "CITY_DATA",
    "CityRecord",
    "EnrichedCityRecord",
    # Errors
    "CityDataError",
    "InvalidInputError",
    "MissingHeaderError",
    "RowShapeError",
    "InvalidNumberError",
    "EmptyDatasetError",
    "ZeroMaxDensityError",
    # Pipeline
    "parse_city_data",
    "calculate_relative_density",
    "sort_descending",
    "run_pipeline",
    # Reporting
    "CITY_COLUMNS",
    "ColumnSpec",
    "render_table",
    "print_table",
    # Logging
    "configure_logging",
    "get_logger",
]
