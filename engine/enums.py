"""
Enumerations for anomaly direction and decomposition method.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from enum import Enum


class Direction(str, Enum):
    pos = "pos"
    neg = "neg"
    both = "both"

    def keeps(self, sign: int) -> bool:
        if self is Direction.pos:
            return sign > 0
        if self is Direction.neg:
            return sign < 0
        return True


class DecompositionMethod(str, Enum):
    stl = "stl"
    median = "median"
