"""Particle grid that holds the state of a Lenia world."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from leniasim.colors import DARK, Color
from leniasim.vectors import Vec2


@dataclass
class Particle:
    """One cell of the Lenia world."""

    position: Vec2 = field(default_factory=Vec2)
    radius: float = 0.0
    alive: bool = False
    next_alive: bool = False
    energy: float = 0.0
    next_energy: float = 0.0
    color: Color = DARK


def calculate_grid_dimensions(total_particles: int, a: int, b: int) -> tuple[int, int]:
    """Pick (rows, cols) holding ``total_particles`` whose cols/rows is nearest a/b.

    The first row count reaching the smallest difference wins.
    """
    if total_particles < 0:
        raise ValueError(f"total_particles must not be negative, got {total_particles}")
    if b == 0:
        raise ValueError("grid ratio denominator must not be zero")
    target = a / b
    best_diff = math.inf
    best = (1, total_particles)
    for rows in range(1, total_particles + 1):
        cols = -(-total_particles // rows)
        diff = abs(cols / rows - target)
        if diff < best_diff:
            best_diff = diff
            best = (rows, cols)
    return best


class Lenia:
    """A rectangular grid of particles centred on the display."""

    def __init__(
        self,
        display_width: int,
        display_height: int,
        total_particles: int,
        particle_radius: float,
        spacing: float,
        grid_ratio: tuple[int, int],
    ) -> None:
        self.width = display_width
        self.height = display_height
        self.total_particles = total_particles
        self.particle_radius = particle_radius
        self.spacing = spacing

        rows, cols = calculate_grid_dimensions(total_particles, *grid_ratio)
        self.grid_rows = rows
        self.grid_cols = cols

        offset_x = (display_width - (cols - 1) * spacing) / 2.0
        offset_y = (display_height - (rows - 1) * spacing) / 2.0
        self.top_left = Vec2(offset_x, offset_y)

        self.particles: list[Particle] = [
            Particle(
                position=Vec2(offset_x + c * spacing, offset_y + r * spacing),
                radius=particle_radius,
            )
            for r in range(rows)
            for c in range(cols)
        ]

    def __len__(self) -> int:
        return len(self.particles)

    def __iter__(self):
        return iter(self.particles)