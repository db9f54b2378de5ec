from .easing import (
    EASING_FUNCTIONS,
    Progress,
    TimingModeFn,
    UnknownEasingError,
    curve_names,
    get_easing,
)

__all__ = [
    "EASING_FUNCTIONS",
    "Progress",
    "TimingModeFn",
    "UnknownEasingError",
    "curve_names",
    "get_easing",
]
