"""
Engine Packages for the Seasonal ESD anomaly engine

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.anomaly import Anomaly, detect, detect_anomalies
from engine.enums import DecompositionMethod, Direction
from engine.errors import AnomalyDetectionError, DataError, InvalidArgument
from engine.period import estimate_period

__all__ = [
    "Anomaly",
    "AnomalyDetectionError",
    "DataError",
    "DecompositionMethod",
    "Direction",
    "InvalidArgument",
    "detect",
    "detect_anomalies",
    "estimate_period",
]
