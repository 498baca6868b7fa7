from __future__ import annotations

from typing import List, Optional
from pydantic import BaseModel

from engine.enums import Direction


class DetectRequest(BaseModel):
    values: List[float]
    timestamps: Optional[List[float]] = None
    period: Optional[int] = None
    # range checks happen in the engine; unset falls back to settings defaults
    max_anoms: Optional[float] = None
    alpha: Optional[float] = None
    direction: Direction = Direction.both
    verbose: bool = False
