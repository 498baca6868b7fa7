"""
Generalized ESD (Rosner) outlier test over decomposition residuals, using median and scaled MAD in place of mean and standard deviation. Each round removes the most extreme point from a shrinking working set and records its test statistic next to a round-specific critical value; a single backward scan then finds the last round whose statistic exceeds its critical value, so anomalies masked by a larger one are still reported.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import List, Tuple

import numpy as np
from scipy.stats import t as student_t

from config import settings

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Candidate:
    position: int
    score: float
    sign: int


@dataclass(frozen=True)
class TestRound:
    __test__ = False  # not a pytest class

    statistic: float
    critical_value: float

    @property
    def significant(self) -> bool:
        return self.statistic > self.critical_value


@dataclass(frozen=True)
class EsdResult:
    candidates: List[Candidate] = field(default_factory=list)
    rounds: List[TestRound] = field(default_factory=list)
    significant_rounds: int = 0

    @property
    def anomalies(self) -> List[Candidate]:
        return self.candidates[: self.significant_rounds]


def max_outliers(n: int, max_anoms: float) -> int:
    if max_anoms <= 0:
        return 0
    return max(1, int(math.floor(max_anoms * n)))


def median_mad(arr: np.ndarray, scale: float | None = None) -> Tuple[float, float]:
    if scale is None:
        scale = settings.mad_scale
    med = float(np.median(arr))
    mad = float(scale * np.median(np.abs(arr - med)))
    return med, mad


def critical_value(n: int, i: int, alpha: float) -> float:
    p = 1.0 - alpha / (2.0 * (n - i + 1))
    t = float(student_t.ppf(p, n - i - 1))
    return t * (n - i) / math.sqrt((n - i - 1 + t ** 2) * (n - i + 1))


def last_significant_round(rounds: List[TestRound]) -> int:
    for i in range(len(rounds), 0, -1):
        if rounds[i - 1].significant:
            return i
    return 0


def generalized_esd(
    residual: np.ndarray,
    k_max: int,
    alpha: float,
    verbose: bool = False,
) -> EsdResult:
    level = logging.INFO if verbose else logging.DEBUG
    work = np.array(residual, dtype=float, copy=True)
    positions = np.arange(len(work))
    n = len(work)

    # the t quantile needs n - i - 1 >= 1
    rounds_cap = min(k_max, n - 2)
    candidates: List[Candidate] = []
    rounds: List[TestRound] = []

    for i in range(1, rounds_cap + 1):
        med, mad = median_mad(work)
        if mad == 0:
            log.log(level, "round %d: MAD collapsed to zero, stopping", i)
            break

        deviations = np.abs(work - med)
        j = int(np.argmax(deviations))
        statistic = float(deviations[j] / mad)
        sign = 1 if work[j] > med else -1
        candidates.append(Candidate(position=int(positions[j]), score=statistic, sign=sign))

        work = np.delete(work, j)
        positions = np.delete(positions, j)

        lam = critical_value(n, i, alpha)
        rounds.append(TestRound(statistic=statistic, critical_value=lam))
        log.log(
            level,
            "round %d: position=%d R=%.4f lambda=%.4f %s",
            i, candidates[-1].position, statistic, lam,
            "significant" if statistic > lam else "not significant",
        )

    i_max = last_significant_round(rounds)
    log.log(level, "%d of %d rounds significant", i_max, len(rounds))
    return EsdResult(candidates=candidates, rounds=rounds, significant_rounds=i_max)
