"""
Robust seasonal decomposition of a univariate series into trend, seasonal and residual components. The default method pairs a whole-series median level with a periodic robust STL seasonal; the median method uses a centred moving median trend and per-phase medians. Both keep the anomalies being searched for from biasing the baseline.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional

import numpy as np
from statsmodels.tsa.seasonal import STL

from config import settings
from engine.enums import DecompositionMethod
from engine.errors import InvalidArgument

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Decomposition:
    trend: np.ndarray
    seasonal: np.ndarray
    residual: np.ndarray

    def __len__(self) -> int:
        return len(self.residual)


def _next_odd(value: float) -> int:
    out = int(value)
    return out + 1 if out % 2 == 0 else out


def _assemble(arr: np.ndarray, trend: np.ndarray, seasonal: np.ndarray) -> Decomposition:
    residual = arr - trend - seasonal
    # smoother rounding residue counts as an exact fit
    scale = float(np.max(np.abs(arr)))
    residual[np.abs(residual) <= settings.residual_tolerance * scale] = 0.0
    return Decomposition(trend=trend, seasonal=seasonal, residual=residual)


def moving_median(arr: np.ndarray, window: int) -> np.ndarray:
    """Centred moving median; the window is truncated at the series edges."""
    n = len(arr)
    half = window // 2
    out = np.empty(n, dtype=float)
    for i in range(n):
        lo = max(0, i - half)
        hi = min(n, i + half + 1)
        out[i] = np.median(arr[lo:hi])
    return out


def phase_medians(detrended: np.ndarray, period: int) -> np.ndarray:
    profile = np.array([np.median(detrended[p::period]) for p in range(period)])
    return np.resize(profile, len(detrended))


def _stl_seasonal(arr: np.ndarray, period: int) -> np.ndarray:
    n = len(arr)
    seasonal_span = n * int(settings.stl_seasonal_multiplier) + 1
    trend_span = _next_odd(math.ceil(1.5 * period / (1.0 - 1.5 / seasonal_span)))
    low_pass_span = _next_odd(period + 1)

    stl = STL(
        arr,
        period=period,
        seasonal=seasonal_span,
        trend=trend_span,
        low_pass=low_pass_span,
        seasonal_deg=0,
        trend_deg=1,
        low_pass_deg=1,
        robust=True,
        seasonal_jump=math.ceil(seasonal_span / 10.0),
        trend_jump=math.ceil(trend_span / 10.0),
        low_pass_jump=math.ceil(low_pass_span / 10.0),
    )
    result = stl.fit(
        inner_iter=int(settings.stl_inner_iter),
        outer_iter=int(settings.stl_outer_iter),
    )
    return np.asarray(result.seasonal, dtype=float)


def stl_decompose(arr: np.ndarray, period: int) -> Decomposition:
    # whole-series median as the level; STL's own trend is not used
    trend = np.full(len(arr), float(np.median(arr)))
    if period < 2:
        seasonal = np.zeros(len(arr))
    else:
        seasonal = _stl_seasonal(arr, period)
    return _assemble(arr, trend, seasonal)


def median_decompose(arr: np.ndarray, period: int, window: Optional[int] = None) -> Decomposition:
    if window is None:
        window = settings.median_trend_window
    if window is None:
        window = _next_odd(period)
    if window < 1:
        raise InvalidArgument("median trend window must be positive")

    trend = moving_median(arr, int(window))
    if period < 2:
        seasonal = np.zeros(len(arr))
    else:
        seasonal = phase_medians(arr - trend, period)
    return _assemble(arr, trend, seasonal)


def decompose(
    values: np.ndarray,
    period: int,
    method: str | DecompositionMethod | None = None,
) -> Decomposition:
    if method is None:
        method = settings.decomposition_method
    try:
        method = DecompositionMethod(method)
    except ValueError as exc:
        raise InvalidArgument(f"unknown decomposition method: {method!r}") from exc

    arr = np.array(values, dtype=float, copy=True)
    if method is DecompositionMethod.median:
        result = median_decompose(arr, period)
    else:
        result = stl_decompose(arr, period)
    log.debug(
        "decomposed %d points (period=%d, method=%s, residual spread=%.4g)",
        len(arr), period, method.value, float(np.ptp(result.residual)),
    )
    return result
