# leniasim

Building blocks for a particle-grid Lenia simulation. The package uses only
the standard library.

## Modules

### `leniasim.vectors`

`Vec2` and `Vec3` are frozen dataclasses of floats. Both have `mag`,
`mag_sq`, `normalized` and `dot`. `normalized` returns the zero vector when
the length is zero. Both also have `angle_between`, which gives radians and
returns 0 if either vector is zero. They support `+`, `-`, `*` and `/` by a
scalar, unary `-`, and iteration over their components. `Vec2` adds
`perpendicular()`, which rotates the vector 90° counter-clockwise, and
`Vec2.splat(n)`. `Vec3` adds `cross`.

### `leniasim.colors`

`Color(r, g, b, a=255)` is a frozen RGBA colour. It raises `ValueError`
unless every channel is an int in 0..255, and it iterates as `(r, g, b, a)`.

The module also holds:

- The named colours: `DARK`, `BLUE`, `GREEN`, `GOLD`, `WHITE`, `PINK`,
  `ORANGE`, `TAN`, `BLUE_PLANET`, `GRAY_ROCKY`, `SUN_YELLOW`, `JUPITER`,
  `SPACE_NIGH`, `FULL_MOON`, `RED_MERCURY`, `VENUS_TAN`, `MARS_RED`,
  `SATURN_ROSE`, `NEPTUNE_PURPLE`, `URANUS_BLUE`, `PLUTO_TAN`, `LITE_GREY`
  and `CHARCOAL_GREY`.
- `COLOR_PALETTE`, a tuple of 23 of these colours.
- `random_bool()`, which is fair.
- `random_int(low, high)`, which includes both bounds and raises
  `ValueError` if `low > high`.

### `leniasim.lenia`

`calculate_grid_dimensions(total_particles, a, b)` tries every row count
from 1 to `total_particles`. For each it sets `cols = ceil(total / rows)`
and returns the `(rows, cols)` pair whose `cols / rows` is nearest `a / b`.
On a tie the first such pair wins. It raises `ValueError` when
`total_particles` is negative or `b` is zero.

`Lenia(display_width, display_height, total_particles, particle_radius,
spacing, grid_ratio)` builds `grid_rows × grid_cols` `Particle` objects, row
by row. They are spaced `spacing` apart, and the grid is centred on the
display with `top_left` as its first position. A `Lenia` supports `len()`
and iteration over its particles.

A `Particle` has these fields:

- `position`
- `radius`
- `alive`
- `next_alive`
- `energy`
- `next_energy`
- `color`

### `leniasim.kernels`

The first two functions sample a profile at `samples` evenly spaced radii
from 0 to 1. The default is 100 samples, and fewer than 2 raises
`ValueError`.

- `shell_kernel_slice(alpha, samples)` samples
  `exp(alpha - alpha / (4 r (1 - r)))`. The value is 0 at both ends.
- `bell_kernel_slice(m, s, samples)` samples `exp(-(r - m)² / (2 s²))`. It
  raises `ValueError` if `s` is zero.
- `kernel_shades(kernel, size)` turns a row-major `size × size` kernel into
  rows of grey levels. Each value is clamped to [0, 1], multiplied by 255
  and truncated.

### `leniasim.settings`

`Settings` is a dataclass that holds the tunable parameters:

- particle count, radius and spacing
- convolution radius
- `alpha`, `sigma`, `mu`, `m` and `s`
- `conv_dt`
- target FPS
- zoom and pan
- menu and cell-size options

The default particle count is 150 000 on ARM64 machines and 1 000 000
elsewhere.

- `reset()` restores the particle count, radius and spacing.
- `nudge_sigma(delta)` and `nudge_mu(delta)` shift the value by `delta` and
  return the new value.

The module also exports constants:

- slider ranges such as `SIGMA_RANGE`, `MU_RANGE` and `PARTICLE_RANGE`
- step sizes `SIGMA_STEP`, `SIGMA_FINE_STEP`, `MU_STEP` and `MU_FINE_STEP`

### `leniasim.monitors`

- `MonitorInfo(x, y, width, height, name="Unknown")` describes one display.
- `centered_position(monitor, width, height)` returns the top-left corner
  that centres a window on `monitor`.
- `default_monitor_index(monitors)` returns the second monitor if there is
  one, otherwise 0.
- `frame_sleep_ms(target_fps, elapsed_ms)` returns
  `max(0, 1000 // target_fps - elapsed_ms)`. It raises `ValueError` for a
  non-positive FPS.
- `MonitorSelection(monitors)` starts on the default monitor.
  - `select(index)` chooses a monitor and marks the window to be moved. It
    raises `IndexError` for an index out of range.
  - `pending_position(width, height)` returns the centred position once,
    then `None` until the next `select`.

## Example

```python
from leniasim.lenia import Lenia, calculate_grid_dimensions
from leniasim.kernels import bell_kernel_slice

rows, cols = calculate_grid_dimensions(12, 4, 3)
world = Lenia(1920, 1080, 12, 0.5, 1.0, (16, 9))
print(len(world), world.top_left)

profile = bell_kernel_slice(0.03, 0.15, 100)
```

## What the package does not do

The package has no command. It does not run the Lenia update step that
convolves the particle grid with a kernel and applies growth. It does not
draw anything, open a window, or show a control panel. It does not ask the
desktop which monitors are attached. It supplies the model, the parameters
and the placement arithmetic that such a program would build on.

## Running the tests

```
pip install -e .[test]
pytest
```