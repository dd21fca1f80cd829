"""Geometric applications of integration.

Volumes of revolution, volumes of known cross-sections and polar areas, all
built on the unrounded Simpson integral.
"""

from .cross_section import (
    CrossSection,
    InvalidCrossSectionTypeError,
    cross_section_integrand,
    cross_section_volume,
)
from .polar import polar_area
from .revolution import revolution_volume, squared_offset

__all__ = [
    "CrossSection",
    "InvalidCrossSectionTypeError",
    "cross_section_integrand",
    "cross_section_volume",
    "polar_area",
    "revolution_volume",
    "squared_offset",
]
