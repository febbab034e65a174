"""Sampled radial kernel profiles and grey-scale views of 2D kernels."""

from __future__ import annotations

import math
from collections.abc import Sequence

DEFAULT_SAMPLES = 100


def _radii(samples: int):
    if samples < 2:
        raise ValueError(f"at least two samples are needed, got {samples}")
    last = samples - 1
    return (i / last for i in range(samples))


def shell_kernel_slice(alpha: float, samples: int = DEFAULT_SAMPLES) -> list[float]:
    """Sample the shell profile exp(alpha - alpha / (4 r (1 - r))) over r in [0, 1].

    The profile is zero at both end points.
    """

    def value(r: float) -> float:
        if 0.0 < r < 1.0:
            return math.exp(alpha - alpha / (4.0 * r * (1.0 - r)))
        return 0.0

    return [value(r) for r in _radii(samples)]


def bell_kernel_slice(m: float, s: float, samples: int = DEFAULT_SAMPLES) -> list[float]:
    """Sample the bell profile exp(-(r - m)^2 / (2 s^2)) over r in [0, 1]."""
    if s == 0:
        raise ValueError("bell width s must not be zero")
    two_s_sq = 2.0 * s * s
    return [math.exp(-((r - m) ** 2) / two_s_sq) for r in _radii(samples)]


def kernel_shades(kernel: Sequence[float], size: int) -> list[list[int]]:
    """Map a row-major ``size`` x ``size`` kernel to rows of 0..255 grey shades.

    Values are clamped to [0, 1] before scaling and truncated to int.
    """
    if size < 0:
        raise ValueError(f"kernel size must not be negative, got {size}")
    if len(kernel) < size * size:
        raise ValueError(
            f"kernel holds {len(kernel)} values, fewer than {size}x{size}"
        )

    def shade(value: float) -> int:
        return int(min(max(value, 0.0), 1.0) * 255.0)

    return [
        [shade(v) for v in kernel[row * size:(row + 1) * size]]
        for row in range(size)
    ]