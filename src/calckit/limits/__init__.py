"""Limit algorithms."""

from .core import left_limit, limit_exists, probe_points, right_limit

__all__ = ["probe_points", "left_limit", "right_limit", "limit_exists"]
