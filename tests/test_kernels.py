import math

import pytest

from leniasim.kernels import bell_kernel_slice, kernel_shades, shell_kernel_slice


def test_shell_has_requested_length_and_zero_ends():
    data = shell_kernel_slice(4.0)
    assert len(data) == 100
    assert data[0] == 0.0
    assert data[-1] == 0.0


def test_shell_peaks_at_half_radius():
    data = shell_kernel_slice(4.0, samples=3)
    assert data[1] == pytest.approx(1.0)


def test_shell_is_symmetric_and_bounded():
    data = shell_kernel_slice(5.0, samples=51)
    for left, right in zip(data, reversed(data)):
        assert left == pytest.approx(right)
    assert all(0.0 <= v <= 1.0 for v in data)


def test_bell_peaks_where_r_equals_m():
    data = bell_kernel_slice(0.5, 0.15, samples=3)
    assert data[1] == pytest.approx(1.0)
    assert data[0] == pytest.approx(data[2])
    assert data[0] < data[1]


def test_bell_default_length_and_monotone_after_peak():
    data = bell_kernel_slice(0.0, 0.15)
    assert len(data) == 100
    assert data[0] == pytest.approx(1.0)
    assert all(a >= b for a, b in zip(data, data[1:]))


def test_bell_rejects_zero_width():
    with pytest.raises(ValueError):
        bell_kernel_slice(0.5, 0.0)


@pytest.mark.parametrize("samples", [0, 1])
def test_too_few_samples_rejected(samples):
    with pytest.raises(ValueError):
        shell_kernel_slice(4.0, samples=samples)
    with pytest.raises(ValueError):
        bell_kernel_slice(0.1, 0.1, samples=samples)


def test_kernel_shades_clamps_and_scales():
    rows = kernel_shades([-1.0, 0.0, 1.0, 2.0], 2)
    assert rows == [[0, 0], [255, 255]]


def test_kernel_shades_shape_and_range():
    size = 5
    kernel = [math.sin(i) for i in range(size * size)]
    rows = kernel_shades(kernel, size)
    assert len(rows) == size
    assert all(len(row) == size for row in rows)
    assert all(0 <= v <= 255 for row in rows for v in row)


def test_kernel_shades_rejects_short_kernel():
    with pytest.raises(ValueError):
        kernel_shades([0.5, 0.5, 0.5], 2)


def test_kernel_shades_empty():
    assert kernel_shades([], 0) == []