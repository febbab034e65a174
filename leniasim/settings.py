"""Tunable parameters of the Lenia simulation and its control panel."""

from __future__ import annotations

import platform
from dataclasses import dataclass

_SMALL_DEVICE = platform.machine().lower() in ("aarch64", "arm64")

DEFAULT_TOTAL_PARTICLES = 150_000 if _SMALL_DEVICE else 1_000_000
PARTICLE_RANGE = (10_000, 200_000) if _SMALL_DEVICE else (10_000, 2_000_000)

PARTICLE_RADIUS_RANGE = (0.1, 30.0)
SPACING_RANGE = (0.2, 30.0)
CONVOLUTION_RADIUS_RANGE = (1, 12)
ALPHA_RANGE = (2.0, 6.0)
SIGMA_RANGE = (0.01, 0.08)
MU_RANGE = (0.014, 0.28)
M_RANGE = (0.01, 0.9)
S_RANGE = (0.01, 0.21)
CONV_DT_RANGE = (0.001, 0.15)
FPS_RANGE = (20, 120)
CELL_SIZE_RANGE = (3.0, 15.0)

SIGMA_STEP = 0.001
SIGMA_FINE_STEP = 0.0001
MU_STEP = 0.001
MU_FINE_STEP = 0.0001


@dataclass
class Settings:
    """Simulation parameters as edited from the control panel."""

    total_particles: int = DEFAULT_TOTAL_PARTICLES
    particle_radius: float = 0.5
    spacing: float = 1.0
    convolution_radius: int = 8
    alpha: float = 4.0
    sigma: float = 0.03
    mu: float = 0.15
    m: float = 0.03
    s: float = 0.15
    conv_dt: float = 0.05
    target_fps: int = 90
    start_simulation: bool = False
    zoom: float = 1.0
    pan_x: float = 0.0
    pan_y: float = 0.0
    show_menu: bool = True
    cell_size: float = 8.0

    def reset(self) -> None:
        """Restore particle count, radius and spacing to their defaults."""
        self.total_particles = DEFAULT_TOTAL_PARTICLES
        self.spacing = 1.0
        self.particle_radius = 0.5

    def nudge_sigma(self, delta: float) -> float:
        """Shift sigma by ``delta`` and return the new value."""
        self.sigma += delta
        return self.sigma

    def nudge_mu(self, delta: float) -> float:
        """Shift mu by ``delta`` and return the new value."""
        self.mu += delta
        return self.mu