"""
Anomaly detection route: runs the seasonal ESD engine over a posted series and returns the anomalous positions with their scores.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from fastapi import APIRouter, HTTPException

from api.requests import DetectRequest
from api.responses import AnomalyPoint, DetectResponse
from api.routes.exception import handle_exceptions
from engine.anomaly import detect_anomalies
from engine.period import estimate_period

router = APIRouter(tags=["Anomalies"])


def _resolve_period(req: DetectRequest) -> int:
    if req.period is not None:
        return req.period
    if not req.timestamps:
        raise HTTPException(status_code=400, detail="period or timestamps must be provided")
    return estimate_period(req.timestamps)


@router.post("/anomalies/detect", summary="Seasonal hybrid ESD anomalies for one series")
@handle_exceptions
async def detect_series_anomalies(req: DetectRequest) -> DetectResponse:
    if req.timestamps is not None and len(req.timestamps) != len(req.values):
        raise HTTPException(status_code=400, detail="timestamps and values must have the same length")

    period = _resolve_period(req)
    anomalies = detect_anomalies(
        req.values,
        period,
        max_anoms=req.max_anoms,
        alpha=req.alpha,
        direction=req.direction,
        verbose=req.verbose,
    )
    points = [
        AnomalyPoint(
            position=a.position,
            value=req.values[a.position],
            score=round(a.score, 4),
            sign=a.sign,
            timestamp=req.timestamps[a.position] if req.timestamps else None,
        )
        for a in anomalies
    ]
    return DetectResponse(period=period, count=len(points), anomalies=points)
