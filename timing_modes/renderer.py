from __future__ import annotations

import math
import os
from typing import Callable, List, Optional, Sequence, Tuple

from PIL import Image, ImageDraw
from tqdm import tqdm

from .easing import get_easing
from .sampling import sample_curve
from .types import CurveSamples, PlotConfig


def _ensure_dir(path: str) -> None:
    os.makedirs(path, exist_ok=True)


def _value_range(samples: CurveSamples) -> Tuple[float, float]:
    finite = [v for v in samples.values() if math.isfinite(v)]
    low = min([0.0] + finite)
    high = max([1.0] + finite)
    return low, high


def _to_pixel(
    progress: float,
    value: float,
    low: float,
    high: float,
    config: PlotConfig,
) -> Tuple[float, float]:
    inner_w = config.width - 2 * config.padding
    inner_h = config.height - 2 * config.padding
    px = config.padding + progress * inner_w
    # image y grows downward
    py = config.padding + (high - value) / (high - low) * inner_h
    return px, py


def render_curve(samples: CurveSamples, config: Optional[PlotConfig] = None) -> Image.Image:
    config = config or PlotConfig()
    low, high = _value_range(samples)

    img = Image.new("RGB", (config.width, config.height), config.background)
    draw = ImageDraw.Draw(img)

    # unit box: progress 0..1 against value 0..1
    x0, y0 = _to_pixel(0.0, 0.0, low, high, config)
    x1, y1 = _to_pixel(1.0, 1.0, low, high, config)
    draw.rectangle((x0, y1, x1, y0), outline=config.axis_color)

    segment: List[Tuple[float, float]] = []
    for s in samples.samples:
        if not math.isfinite(s.value):
            _draw_segment(draw, segment, config)
            segment = []
            continue
        segment.append(_to_pixel(s.progress, s.value, low, high, config))
    _draw_segment(draw, segment, config)
    return img


def _draw_segment(draw: ImageDraw.ImageDraw, points: Sequence[Tuple[float, float]], config: PlotConfig) -> None:
    if len(points) >= 2:
        draw.line(list(points), fill=config.line_color, width=config.line_width)
    elif len(points) == 1:
        x, y = points[0]
        r = config.line_width
        draw.ellipse((x - r, y - r, x + r, y + r), fill=config.line_color)


def render_catalog(
    names: List[str],
    output_dir: str,
    steps: int = 101,
    config: Optional[PlotConfig] = None,
    on_progress: Optional[Callable[[int, int], None]] = None,
) -> List[str]:
    for name in names:
        get_easing(name)
    _ensure_dir(output_dir)
    config = config or PlotConfig()

    paths: List[str] = []
    for idx, name in enumerate(tqdm(names, desc="Curves")):
        img = render_curve(sample_curve(name, steps), config)
        path = os.path.join(output_dir, f"{name}.png")
        img.save(path)
        paths.append(path)
        if on_progress is not None:
            on_progress(idx + 1, len(names))
    return paths
