from __future__ import annotations

import math
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator, model_validator


RGB = Tuple[int, int, int]


def finite_or_none(value: float) -> Optional[float]:
    # NaN/inf are not valid JSON
    return value if math.isfinite(value) else None


class CurveSample(BaseModel):
    progress: float = Field(..., description="Input progress, nominally in [0,1]")
    value: float = Field(..., description="Eased output, may leave [0,1] for overshoot curves")


class CurveSamples(BaseModel):
    name: str
    samples: List[CurveSample] = Field(default_factory=list)

    def values(self) -> List[float]:
        return [s.value for s in self.samples]

    def overshoots(self) -> bool:
        """True when any finite sampled value falls outside [0,1]."""
        return any(math.isfinite(v) and not 0.0 <= v <= 1.0 for v in self.values())

    def to_json(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "overshoots": self.overshoots(),
            "samples": [
                {"progress": s.progress, "value": finite_or_none(s.value)} for s in self.samples
            ],
        }


class PlotConfig(BaseModel):
    width: int = Field(640, gt=0)
    height: int = Field(360, gt=0)
    padding: int = Field(32, ge=0)
    line_color: RGB = (255, 80, 80)
    axis_color: RGB = (120, 120, 140)
    background: RGB = (24, 24, 36)
    line_width: int = Field(2, gt=0)

    @field_validator("line_color", "axis_color", "background")
    @classmethod
    def _clamp_rgb(cls, value: RGB) -> RGB:
        return tuple(max(0, min(255, int(c))) for c in value)  # type: ignore[return-value]

    @model_validator(mode="after")
    def _check_drawable(self) -> "PlotConfig":
        if 2 * self.padding >= min(self.width, self.height):
            raise ValueError("padding leaves no drawable area")
        return self
