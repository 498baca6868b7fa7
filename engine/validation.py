"""
Input validation for anomaly detection calls: series length against the seasonal period, parameter ranges, and numeric validity of the series values.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import numbers
from typing import Sequence, Tuple

import numpy as np

from engine.enums import Direction
from engine.errors import DataError, InvalidArgument


def _check_period(period: int) -> int:
    if isinstance(period, bool) or not isinstance(period, numbers.Integral):
        raise InvalidArgument("period must be an integer")
    if period < 1:
        raise InvalidArgument("period must be positive")
    return int(period)


def _check_direction(direction: str | Direction) -> Direction:
    try:
        return Direction(direction)
    except ValueError as exc:
        raise InvalidArgument("direction must be pos, neg, or both") from exc


def _as_array(values: Sequence[float]) -> np.ndarray:
    try:
        # always a private copy so callers' buffers are never aliased
        arr = np.array(values, dtype=float, copy=True)
    except (TypeError, ValueError) as exc:
        raise DataError(f"series must contain only numbers: {exc}") from exc
    if arr.ndim != 1:
        raise DataError(f"series must be one-dimensional, got shape {arr.shape}")
    return arr


def _as_fraction(value: float, name: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidArgument(f"{name} must be a number") from exc


def validate(
    values: Sequence[float],
    period: int,
    max_anoms: float,
    alpha: float,
    direction: str | Direction,
) -> Tuple[np.ndarray, Direction]:
    period = _check_period(period)
    arr = _as_array(values)
    if len(arr) < period * 2:
        raise InvalidArgument("series must contain at least 2 periods")
    if not 0.0 <= _as_fraction(max_anoms, "max_anoms") <= 1.0:
        raise InvalidArgument("max_anoms must be between 0 and 1")
    if not 0.0 < _as_fraction(alpha, "alpha") < 1.0:
        raise InvalidArgument("alpha must be between 0 and 1 (exclusive)")
    resolved = _check_direction(direction)

    if np.isnan(arr).any():
        raise DataError("series contains NANs")
    if np.isinf(arr).any():
        raise DataError("series contains infinite values")
    return arr, resolved
