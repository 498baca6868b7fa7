"""
Series shape handling for anomaly detection: accepts either a plain ordered sequence of values or a mapping keyed by timestamp, sorts keyed input, infers the period from the keys when none is given, and maps detected positions back to the caller's keys.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, List, Optional, Sequence, Tuple, Union

from engine.anomaly.detection import detect_anomalies
from engine.enums import Direction
from engine.errors import InvalidArgument
from engine.period import estimate_period

log = logging.getLogger(__name__)

SeriesInput = Union[Mapping, Sequence[float]]


def split_series(series: Mapping) -> Tuple[List[Any], List[float]]:
    try:
        pairs = sorted(series.items(), key=lambda kv: kv[0])
    except TypeError as exc:
        raise InvalidArgument(f"series keys must be mutually comparable: {exc}") from exc
    return [k for k, _ in pairs], [v for _, v in pairs]


def detect(
    series: SeriesInput,
    period: Optional[int] = None,
    max_anoms: float | None = None,
    alpha: float | None = None,
    direction: str | Direction | None = None,
    verbose: bool | None = None,
) -> List[Any]:
    if isinstance(series, Mapping):
        keys, values = split_series(series)
        if period is None:
            # any period needs at least two points
            if len(keys) < 2:
                raise InvalidArgument("series must contain at least 2 periods")
            period = estimate_period(keys)
            log.debug("inferred period %d from %d keys", period, len(keys))
    else:
        keys, values = None, list(series)
        if period is None:
            raise InvalidArgument("period is required for a plain sequence")

    anomalies = detect_anomalies(
        values,
        period,
        max_anoms=max_anoms,
        alpha=alpha,
        direction=direction,
        verbose=verbose,
    )
    if keys is None:
        return [a.position for a in anomalies]
    return [keys[a.position] for a in anomalies]
