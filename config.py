"""
Constants and configuration for the Seasonal ESD anomaly engine.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import os
from typing import Dict, Optional, Tuple

from pydantic_settings import BaseSettings


DIRECTION_BOTH = "both"

DECOMPOSITION_STL = "stl"

# scale factor turning a raw MAD into a standard deviation estimate under normality
MAD_NORMAL_SCALE: float = 1.4826

# calendar spacings (seconds) and the seasonal period each one implies;
# ordered from finest to coarsest granularity
SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 86400
CALENDAR_PERIODS: Dict[str, Tuple[float, float, int]] = {
    # label: (min spacing, max spacing, period)
    "minute": (SECONDS_PER_MINUTE * 0.95, SECONDS_PER_MINUTE * 1.05, 60),
    "hour": (SECONDS_PER_HOUR * 0.95, SECONDS_PER_HOUR * 1.05, 24),
    "day": (SECONDS_PER_DAY * 0.95, SECONDS_PER_DAY * 1.05, 7),
    "week": (SECONDS_PER_DAY * 6.5, SECONDS_PER_DAY * 7.5, 52),
    "month": (SECONDS_PER_DAY * 28, SECONDS_PER_DAY * 31, 12),
    "quarter": (SECONDS_PER_DAY * 89, SECONDS_PER_DAY * 92, 4),
}

SEASONAL_ESD_HOST = os.getenv("SEASONAL_ESD_HOST", "0.0.0.0")
SEASONAL_ESD_PORT = int(os.getenv("SEASONAL_ESD_PORT", "4323"))
HEALTH_PATH = "/health"


class Settings(BaseSettings):
    # detection defaults used when a caller leaves a parameter unset
    default_max_anoms: float = 0.1
    default_alpha: float = 0.05
    default_direction: str = DIRECTION_BOTH

    # robust spread
    mad_scale: float = MAD_NORMAL_SCALE

    # decomposition
    decomposition_method: str = DECOMPOSITION_STL
    # periodic STL: seasonal span is n * multiplier + 1
    stl_seasonal_multiplier: int = 10
    stl_inner_iter: int = 1
    stl_outer_iter: int = 15
    # residuals within this fraction of the series magnitude are snapped to zero
    residual_tolerance: float = 1e-10
    # moving median window for the median method; None derives it from the period
    median_trend_window: Optional[int] = None

    # progress reporting
    verbose: bool = False

    # api server
    host: str = SEASONAL_ESD_HOST
    port: int = SEASONAL_ESD_PORT
    log_level: str = "info"

    model_config = {
        "env_prefix": "SEASONAL_ESD_",
        "extra": "ignore",
    }


settings = Settings()
