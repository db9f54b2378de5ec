"""Easing (timing) curves.

Each curve maps a progress value, nominally in ``[0, 1]``, to an eased value.
The formulas follow the easings.net set: see https://easings.net/.

Inputs are never clamped or validated. Values outside ``[0, 1]`` extrapolate,
and where a formula has no real result (a square root of a negative number in
the circular family, for example) the curve returns ``nan`` instead of raising.
"""

from __future__ import annotations

import math
from types import MappingProxyType
from typing import Callable, List, Mapping

# A number 0 -> 1
Progress = float
TimingModeFn = Callable[[Progress], float]

PI = math.pi
c1 = 1.70158
c2 = c1 * 1.525
c3 = c1 + 1
c4 = (2 * PI) / 3
c5 = (2 * PI) / 4.5


class UnknownEasingError(KeyError):
    """Raised when a curve name is not in the catalog."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown easing '{self.name}'"


# float helpers that follow IEEE-754 instead of raising like ``math`` does


def _pow(base: float, exp: float) -> float:
    try:
        return math.pow(base, exp)
    except OverflowError:
        if base < 0 and exp % 2 == 1:
            return -math.inf
        return math.inf
    except ValueError:
        return math.nan


def _sqrt(value: float) -> float:
    if value >= 0:
        return math.sqrt(value)
    return math.nan


def _sin(value: float) -> float:
    if math.isinf(value):
        return math.nan
    return math.sin(value)


def _cos(value: float) -> float:
    if math.isinf(value):
        return math.nan
    return math.cos(value)


def _bounce_out(x: Progress) -> float:
    n1 = 7.5625
    d1 = 2.75

    if x < 1 / d1:
        return n1 * x * x
    elif x < 2 / d1:
        x -= 1.5 / d1
        return n1 * x * x + 0.75
    elif x < 2.5 / d1:
        x -= 2.25 / d1
        return n1 * x * x + 0.9375
    x -= 2.625 / d1
    return n1 * x * x + 0.984375


def linear(x: Progress) -> float:
    return x


def ease_in_quad(x: Progress) -> float:
    return x * x


def ease_out_quad(x: Progress) -> float:
    return 1 - (1 - x) * (1 - x)


def ease_in_out_quad(x: Progress) -> float:
    if x < 0.5:
        return 2 * x * x
    return 1 - _pow(-2 * x + 2, 2) / 2


def ease_in_cubic(x: Progress) -> float:
    return x * x * x


def ease_out_cubic(x: Progress) -> float:
    return 1 - _pow(1 - x, 3)


def ease_in_out_cubic(x: Progress) -> float:
    if x < 0.5:
        return 4 * x * x * x
    return 1 - _pow(-2 * x + 2, 3) / 2


def ease_in_quart(x: Progress) -> float:
    return x * x * x * x


def ease_out_quart(x: Progress) -> float:
    return 1 - _pow(1 - x, 4)


def ease_in_out_quart(x: Progress) -> float:
    if x < 0.5:
        return 8 * x * x * x * x
    return 1 - _pow(-2 * x + 2, 4) / 2


def ease_in_quint(x: Progress) -> float:
    return x * x * x * x * x


def ease_out_quint(x: Progress) -> float:
    return 1 - _pow(1 - x, 5)


def ease_in_out_quint(x: Progress) -> float:
    if x < 0.5:
        return 16 * x * x * x * x * x
    return 1 - _pow(-2 * x + 2, 5) / 2


def ease_in_sine(x: Progress) -> float:
    return 1 - _cos((x * PI) / 2)


def ease_out_sine(x: Progress) -> float:
    return _sin((x * PI) / 2)


def ease_in_out_sine(x: Progress) -> float:
    return -(_cos(PI * x) - 1) / 2


def ease_in_expo(x: Progress) -> float:
    if x == 0:
        return 0.0
    return _pow(2, 10 * x - 10)


def ease_out_expo(x: Progress) -> float:
    if x == 1:
        return 1.0
    return 1 - _pow(2, -10 * x)


def ease_in_out_expo(x: Progress) -> float:
    if x == 0:
        return 0.0
    if x == 1:
        return 1.0
    if x < 0.5:
        return _pow(2, 20 * x - 10) / 2
    return (2 - _pow(2, -20 * x + 10)) / 2


def ease_in_circ(x: Progress) -> float:
    return 1 - _sqrt(1 - _pow(x, 2))


def ease_out_circ(x: Progress) -> float:
    return _sqrt(1 - _pow(x - 1, 2))


def ease_in_out_circ(x: Progress) -> float:
    if x < 0.5:
        return (1 - _sqrt(1 - _pow(2 * x, 2))) / 2
    return (_sqrt(1 - _pow(-2 * x + 2, 2)) + 1) / 2


def ease_in_back(x: Progress) -> float:
    return c3 * x * x * x - c1 * x * x


def ease_out_back(x: Progress) -> float:
    return 1 + c3 * _pow(x - 1, 3) + c1 * _pow(x - 1, 2)


def ease_in_out_back(x: Progress) -> float:
    if x < 0.5:
        return (_pow(2 * x, 2) * ((c2 + 1) * 2 * x - c2)) / 2
    return (_pow(2 * x - 2, 2) * ((c2 + 1) * (x * 2 - 2) + c2) + 2) / 2


def ease_in_elastic(x: Progress) -> float:
    if x == 0:
        return 0.0
    if x == 1:
        return 1.0
    return -_pow(2, 10 * x - 10) * _sin((x * 10 - 10.75) * c4)


def ease_out_elastic(x: Progress) -> float:
    if x == 0:
        return 0.0
    if x == 1:
        return 1.0
    return _pow(2, -10 * x) * _sin((x * 10 - 0.75) * c4) + 1


def ease_in_out_elastic(x: Progress) -> float:
    if x == 0:
        return 0.0
    if x == 1:
        return 1.0
    if x < 0.5:
        return -(_pow(2, 20 * x - 10) * _sin((20 * x - 11.125) * c5)) / 2
    return (_pow(2, -20 * x + 10) * _sin((20 * x - 11.125) * c5)) / 2 + 1


def ease_in_bounce(x: Progress) -> float:
    return 1 - _bounce_out(1 - x)


def ease_in_out_bounce(x: Progress) -> float:
    if x < 0.5:
        return (1 - _bounce_out(1 - 2 * x)) / 2
    return (1 + _bounce_out(2 * x - 1)) / 2


EASING_FUNCTIONS: Mapping[str, TimingModeFn] = MappingProxyType({
    "linear": linear,
    "easeInQuad": ease_in_quad,
    "easeOutQuad": ease_out_quad,
    "easeInOutQuad": ease_in_out_quad,
    "easeInCubic": ease_in_cubic,
    "easeOutCubic": ease_out_cubic,
    "easeInOutCubic": ease_in_out_cubic,
    "easeInQuart": ease_in_quart,
    "easeOutQuart": ease_out_quart,
    "easeInOutQuart": ease_in_out_quart,
    "easeInQuint": ease_in_quint,
    "easeOutQuint": ease_out_quint,
    "easeInOutQuint": ease_in_out_quint,
    "easeInSine": ease_in_sine,
    "easeOutSine": ease_out_sine,
    "easeInOutSine": ease_in_out_sine,
    "easeInExpo": ease_in_expo,
    "easeOutExpo": ease_out_expo,
    "easeInOutExpo": ease_in_out_expo,
    "easeInCirc": ease_in_circ,
    "easeOutCirc": ease_out_circ,
    "easeInOutCirc": ease_in_out_circ,
    "easeInBack": ease_in_back,
    "easeOutBack": ease_out_back,
    "easeInOutBack": ease_in_out_back,
    "easeInElastic": ease_in_elastic,
    "easeOutElastic": ease_out_elastic,
    "easeInOutElastic": ease_in_out_elastic,
    "easeInBounce": ease_in_bounce,
    "easeOutBounce": _bounce_out,
    "easeInOutBounce": ease_in_out_bounce,
})


def curve_names() -> List[str]:
    return list(EASING_FUNCTIONS)


def get_easing(name: str) -> TimingModeFn:
    """Return the curve registered under ``name``.

    Raises :class:`UnknownEasingError` for names outside the catalog; there is
    no fallback curve.
    """
    try:
        return EASING_FUNCTIONS[name]
    except KeyError:
        raise UnknownEasingError(name) from None
