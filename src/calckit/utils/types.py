"""Shared typing aliases for CalcKit."""

from __future__ import annotations

from typing import Callable, TypeAlias

import numpy as np
from numpy.typing import NDArray

FloatArray: TypeAlias = NDArray[np.float64]

Function: TypeAlias = Callable[[float], float]
"""A real-valued function of one real argument, supplied by the caller."""
