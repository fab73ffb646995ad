"""
Utilities package for the city density report.

Exports shared logging helpers. Keep this package free of domain logic.
"""

from city_density.utils.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
