"""Provides all calckit methods."""

from importlib.metadata import PackageNotFoundError, version

from calckit.calculus_kit import CalculusKit
from calckit.config import AccuracyConfig
from calckit.differentiation.tangent import TangentLine
from calckit.volumes.cross_section import CrossSection, InvalidCrossSectionTypeError

try:
    __version__ = version("calckit")
except PackageNotFoundError:
    pass

__all__ = [
    "AccuracyConfig",
    "CalculusKit",
    "CrossSection",
    "InvalidCrossSectionTypeError",
    "TangentLine",
]
