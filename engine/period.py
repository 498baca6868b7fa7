"""
Calendar period heuristic: infers a seasonal period from the typical spacing between timestamps (minutely, hourly, daily, weekly, monthly or quarterly cadence).

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any, Iterable, List

import numpy as np

from config import CALENDAR_PERIODS, SECONDS_PER_DAY
from engine.errors import InvalidArgument


def _to_seconds(value: Any) -> float:
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.timestamp()
    if isinstance(value, date):
        return float(value.toordinal()) * SECONDS_PER_DAY
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidArgument(f"unsupported timestamp: {value!r}") from exc


def estimate_period(timestamps: Iterable[Any]) -> int:
    seconds: List[float] = sorted({_to_seconds(t) for t in timestamps})
    if len(seconds) < 2:
        raise InvalidArgument("at least two distinct timestamps are needed to infer a period")

    step = float(np.median(np.diff(seconds)))
    for low, high, period in CALENDAR_PERIODS.values():
        if low <= step <= high:
            return period
    raise InvalidArgument(f"cannot infer a period from a spacing of {step:g} seconds")
