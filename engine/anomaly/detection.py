"""
Detection entry point for flagging anomalous points in a fixed-frequency series: validates the inputs, removes seasonal and level structure with a robust decomposition, runs the generalized ESD test on the residual, and filters the significant candidates by direction into an ascending list of positions with their scores.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Sequence

from config import settings
from engine.decomposition import decompose
from engine.enums import Direction
from engine.esd import Candidate, generalized_esd, max_outliers
from engine.validation import validate

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Anomaly:
    position: int
    score: float
    sign: int


def _assemble(candidates: Iterable[Candidate], direction: Direction) -> List[Anomaly]:
    kept = [
        Anomaly(position=c.position, score=c.score, sign=c.sign)
        for c in candidates
        if direction.keeps(c.sign)
    ]
    return sorted(kept, key=lambda a: a.position)


def detect_anomalies(
    values: Sequence[float],
    period: int,
    max_anoms: float | None = None,
    alpha: float | None = None,
    direction: str | Direction | None = None,
    verbose: bool | None = None,
) -> List[Anomaly]:
    if max_anoms is None:
        max_anoms = settings.default_max_anoms
    if alpha is None:
        alpha = settings.default_alpha
    if direction is None:
        direction = settings.default_direction
    if verbose is None:
        verbose = settings.verbose
    level = logging.INFO if verbose else logging.DEBUG

    arr, resolved = validate(values, period, max_anoms, alpha, direction)
    max_anoms, alpha = float(max_anoms), float(alpha)
    if max_anoms == 0:
        return []

    k_max = max_outliers(len(arr), max_anoms)
    log.log(
        level,
        "detecting up to %d anomalies in %d points (period=%d, alpha=%g, direction=%s)",
        k_max, len(arr), period, alpha, resolved.value,
    )

    decomposition = decompose(arr, int(period))
    result = generalized_esd(decomposition.residual, k_max, alpha, verbose=verbose)
    anomalies = _assemble(result.anomalies, resolved)

    log.log(level, "found %d anomalies", len(anomalies))
    return anomalies
