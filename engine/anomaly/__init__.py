"""
Anomaly subpackage for the Seasonal ESD engine.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.anomaly.detection import Anomaly, detect_anomalies
from engine.anomaly.series import detect, split_series

__all__ = ["Anomaly", "detect_anomalies", "detect", "split_series"]
