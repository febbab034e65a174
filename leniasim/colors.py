"""RGBA colours, the simulation palette and small random helpers."""

from __future__ import annotations

import random
from dataclasses import dataclass

_rng = random.Random()


@dataclass(frozen=True, slots=True)
class Color:
    """An 8-bit RGBA colour."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"colour channel {name} must be an int in 0..255, got {value!r}")

    def __iter__(self):
        yield self.r
        yield self.g
        yield self.b
        yield self.a


BLUE_PLANET = Color(93, 176, 199, 255)
GRAY_ROCKY = Color(183, 184, 185, 255)
SUN_YELLOW = Color(253, 184, 19, 255)
JUPITER = Color(188, 175, 178, 255)
SPACE_NIGH = Color(3, 0, 53, 255)
FULL_MOON = Color(245, 238, 188, 255)
RED_MERCURY = Color(120, 6, 6, 255)
VENUS_TAN = Color(248, 226, 176, 255)
MARS_RED = Color(193, 68, 14, 255)
SATURN_ROSE = Color(206, 184, 184, 255)
NEPTUNE_PURPLE = Color(91, 93, 223, 255)
URANUS_BLUE = Color(46, 132, 206, 255)
PLUTO_TAN = Color(255, 241, 213, 255)
LITE_GREY = Color(211, 211, 211, 255)
CHARCOAL_GREY = Color(54, 69, 79, 255)
DARK = Color(0, 0, 0, 255)
BLUE = Color(0, 0, 255, 255)
GREEN = Color(127, 255, 0, 255)
GOLD = Color(239, 191, 4, 255)
WHITE = Color(255, 255, 255, 255)
PINK = Color(255, 192, 203, 255)
ORANGE = Color(255, 165, 0, 255)
TAN = Color(210, 180, 140, 255)

COLOR_PALETTE: tuple[Color, ...] = (
    DARK, BLUE, GREEN, GOLD, WHITE,
    PINK, ORANGE, JUPITER,
    SPACE_NIGH, FULL_MOON, RED_MERCURY, VENUS_TAN, RED_MERCURY,
    MARS_RED, SATURN_ROSE, NEPTUNE_PURPLE, TAN, BLUE_PLANET, GRAY_ROCKY, SUN_YELLOW, URANUS_BLUE,
    PLUTO_TAN, LITE_GREY,
)


def random_bool() -> bool:
    """Return True or False with equal probability."""
    return _rng.random() < 0.5


def random_int(low: int, high: int) -> int:
    """Return a random integer in the inclusive range [low, high]."""
    if low > high:
        raise ValueError(f"empty range: low={low} is greater than high={high}")
    return _rng.randint(low, high)