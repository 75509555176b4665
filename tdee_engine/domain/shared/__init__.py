"""Shared domain helpers."""

from .rounding import round_half_up, round_half_up_tenths

__all__ = ["round_half_up", "round_half_up_tenths"]
