import os

import pytest

from timing_modes.easing import UnknownEasingError
from timing_modes.renderer import render_catalog, render_curve
from timing_modes.sampling import sample_curve
from timing_modes.types import CurveSample, CurveSamples, PlotConfig


def test_render_curve_size_and_line():
    cfg = PlotConfig(width=200, height=100, padding=10)
    img = render_curve(sample_curve("linear", 11), cfg)
    assert img.size == (200, 100)
    # linear passes through the centre of the unit box
    around = [img.getpixel((100 + dx, 50 + dy)) for dx in (-1, 0, 1) for dy in (-1, 0, 1)]
    assert cfg.line_color in around
    assert img.getpixel((100, 5)) == cfg.background


def test_render_curve_skips_nan():
    samples = CurveSamples(
        name="broken",
        samples=[
            CurveSample(progress=0.0, value=0.0),
            CurveSample(progress=0.5, value=float("nan")),
            CurveSample(progress=1.0, value=1.0),
        ],
    )
    img = render_curve(samples, PlotConfig(width=100, height=100, padding=10))
    assert img.size == (100, 100)


def test_render_catalog_writes_pngs(tmp_path):
    seen = []
    out = tmp_path / "plots"
    paths = render_catalog(
        ["easeInQuad", "easeOutElastic"],
        str(out),
        steps=21,
        config=PlotConfig(width=64, height=48, padding=4),
        on_progress=lambda done, total: seen.append((done, total)),
    )
    assert paths == [str(out / "easeInQuad.png"), str(out / "easeOutElastic.png")]
    assert all(os.path.exists(p) for p in paths)
    assert seen == [(1, 2), (2, 2)]


def test_render_catalog_unknown_name_writes_nothing(tmp_path):
    out = tmp_path / "plots"
    with pytest.raises(UnknownEasingError):
        render_catalog(["linear", "nope"], str(out))
    assert not out.exists()
