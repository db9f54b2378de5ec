import json
import math

import pytest

from timing_modes.easing import UnknownEasingError, curve_names
from timing_modes.sampling import progress_steps, sample_catalog, sample_curve
from timing_modes.types import CurveSample, CurveSamples


def test_progress_steps_cover_unit_interval():
    steps = progress_steps(5)
    assert list(steps) == [0.0, 0.25, 0.5, 0.75, 1.0]


def test_progress_steps_requires_two():
    with pytest.raises(ValueError):
        progress_steps(1)


def test_sample_curve_values_are_plain_floats():
    samples = sample_curve("easeOutBounce", 5)
    assert samples.name == "easeOutBounce"
    assert [s.progress for s in samples.samples] == [0.0, 0.25, 0.5, 0.75, 1.0]
    assert math.isclose(samples.samples[2].value, 0.765625)
    assert all(type(v) is float for v in samples.values())


def test_sample_curve_overshoot_detection():
    assert sample_curve("easeInBack", 11).overshoots()
    assert sample_curve("easeOutElastic", 21).overshoots()
    assert not sample_curve("easeInOutQuad", 11).overshoots()


def test_sample_curve_unknown():
    with pytest.raises(UnknownEasingError):
        sample_curve("nope")


def test_sample_catalog_defaults_to_everything():
    result = sample_catalog(steps=3)
    assert [s.name for s in result] == curve_names()
    assert all(len(s.samples) == 3 for s in result)


def test_sample_catalog_fails_before_sampling():
    with pytest.raises(UnknownEasingError):
        sample_catalog(names=["linear", "nope"])


def test_to_json_writes_nan_as_null():
    samples = CurveSamples(
        name="broken",
        samples=[CurveSample(progress=0.0, value=0.0), CurveSample(progress=1.0, value=float("nan"))],
    )
    data = samples.to_json()
    assert data["samples"][1]["value"] is None
    # strict JSON round trip
    assert json.loads(json.dumps(data, allow_nan=False)) == data
