import pytest

from leniasim.settings import (
    DEFAULT_TOTAL_PARTICLES,
    MU_FINE_STEP,
    MU_STEP,
    PARTICLE_RANGE,
    SIGMA_FINE_STEP,
    SIGMA_STEP,
    Settings,
)


def test_defaults_match_simulation_values():
    s = Settings()
    assert s.total_particles == DEFAULT_TOTAL_PARTICLES
    assert s.particle_radius == 0.5
    assert s.spacing == 1.0
    assert s.convolution_radius == 8
    assert s.alpha == 4.0
    assert s.sigma == pytest.approx(0.03)
    assert s.mu == pytest.approx(0.15)
    assert s.m == pytest.approx(0.03)
    assert s.s == pytest.approx(0.15)
    assert s.conv_dt == pytest.approx(0.05)
    assert s.target_fps == 90
    assert s.start_simulation is False


def test_default_particle_count_within_slider_range():
    low, high = PARTICLE_RANGE
    s = Settings()
    s.total_particles = low
    s.reset()
    assert low <= s.total_particles <= high


def test_reset_restores_grid_parameters_only():
    s = Settings()
    s.total_particles = 12_345
    s.spacing = 7.0
    s.particle_radius = 3.0
    s.alpha = 5.5
    s.reset()
    assert s.total_particles == DEFAULT_TOTAL_PARTICLES
    assert s.spacing == 1.0
    assert s.particle_radius == 0.5
    assert s.alpha == 5.5


def test_nudge_sigma_up_and_down_round_trip():
    s = Settings()
    start = s.sigma
    assert s.nudge_sigma(SIGMA_STEP) == pytest.approx(start + SIGMA_STEP)
    s.nudge_sigma(-SIGMA_STEP)
    s.nudge_sigma(SIGMA_FINE_STEP)
    s.nudge_sigma(-SIGMA_FINE_STEP)
    assert s.sigma == pytest.approx(start)


def test_nudge_mu_up_and_down_round_trip():
    s = Settings()
    start = s.mu
    assert s.nudge_mu(-MU_STEP) == pytest.approx(start - MU_STEP)
    s.nudge_mu(MU_STEP)
    s.nudge_mu(MU_FINE_STEP)
    assert s.mu == pytest.approx(start + MU_FINE_STEP)


def test_fine_steps_are_smaller_than_coarse():
    s = Settings()
    start_sigma = s.sigma
    coarse_sigma = s.nudge_sigma(SIGMA_STEP) - start_sigma
    start_sigma = s.sigma
    fine_sigma = s.nudge_sigma(SIGMA_FINE_STEP) - start_sigma
    assert 0 < fine_sigma < coarse_sigma

    start_mu = s.mu
    coarse_mu = s.nudge_mu(MU_STEP) - start_mu
    start_mu = s.mu
    fine_mu = s.nudge_mu(MU_FINE_STEP) - start_mu
    assert 0 < fine_mu < coarse_mu


def test_equality_detects_changes():
    a = Settings()
    b = Settings()
    assert a == b
    b.conv_dt = 0.1
    assert a != b
    b.conv_dt = a.conv_dt
    assert a == b