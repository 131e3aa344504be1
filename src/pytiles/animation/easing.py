"""Easing curves mapping elapsed-time fraction to interpolation fraction.

Every curve maps 0.0 to 0.0 and 1.0 to 1.0 exactly and is monotonic in
between.
"""

from typing import Callable

from pytiles.errors import ValidationError

Easing = Callable[[float], float]


def linear(t: float) -> float:
    """Constant speed."""
    return t


def smoothstep(t: float) -> float:
    """Cubic ease-in-out."""
    return t * t * (3.0 - 2.0 * t)


def exponential_in_out(t: float) -> float:
    """Exponential ease-in-out: slow start, fast middle, slow finish.

    Args:
        t: Elapsed fraction in [0, 1]

    Returns:
        Interpolation fraction in [0, 1]
    """
    if t <= 0.0:
        return 0.0
    if t >= 1.0:
        return 1.0

    t *= 2.0
    if t < 1.0:
        return 0.5 * 1024.0 ** (t - 1.0)
    return 0.5 * (2.0 - 2.0 ** (-10.0 * (t - 1.0)))


EASINGS: dict[str, Easing] = {
    "linear": linear,
    "smoothstep": smoothstep,
    "exponential": exponential_in_out,
}


def get_easing(name: str) -> Easing:
    """Look up an easing curve by name.

    Raises:
        ValidationError: If no curve has that name
    """
    try:
        return EASINGS[name]
    except KeyError:
        raise ValidationError("easing", name, f"one of {', '.join(EASINGS)}") from None
