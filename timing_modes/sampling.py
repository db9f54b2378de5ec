from __future__ import annotations

from typing import Iterable, List, Optional

import numpy as np

from .easing import curve_names, get_easing
from .types import CurveSample, CurveSamples


def progress_steps(steps: int) -> np.ndarray:
    """Return ``steps`` evenly spaced progress values covering [0, 1]."""
    if steps < 2:
        raise ValueError(f"steps must be at least 2, got {steps}")
    return np.linspace(0.0, 1.0, steps)


def sample_curve(name: str, steps: int = 11) -> CurveSamples:
    fn = get_easing(name)
    samples: List[CurveSample] = []
    for p in progress_steps(steps):
        # plain float so the curve runs on Python floats, not numpy scalars
        x = float(p)
        samples.append(CurveSample(progress=x, value=fn(x)))
    return CurveSamples(name=name, samples=samples)


def sample_catalog(steps: int = 11, names: Optional[Iterable[str]] = None) -> List[CurveSamples]:
    selected = list(names) if names is not None else curve_names()
    # resolve everything first so a bad name fails before any work
    for name in selected:
        get_easing(name)
    return [sample_curve(name, steps) for name in selected]
