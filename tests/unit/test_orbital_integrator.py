import numpy as np
import pytest

from orbits.core.config import (
    GM_EARTH,
    GM_PERTURBER,
    GM_SUN,
    STEP_SIZE,
    InvalidConfig,
    OrbitalConfig,
    create_default_config,
    create_near_earth_config,
    create_outer_belt_config,
)
from orbits.core.integrator import OrbitalIntegrator
from orbits.dynamics.gravity import GravityModel


def test_gravitational_parameters_follow_mass_ratios():
    assert GM_SUN == pytest.approx(4 * np.pi**2)
    assert GM_EARTH == pytest.approx(GM_SUN * 6.0e24 / 1.989e30)
    assert GM_PERTURBER == pytest.approx(GM_SUN * 1.9e27 / 1.989e30)


def test_initialize_places_bodies_at_perihelion_start():
    integ = OrbitalIntegrator()
    state = integ.initialize(OrbitalConfig(semi_major_axis=2.5, eccentricity=0.2, inclination_offset=0.1))

    assert np.allclose(state.earth.position, [1.0, 0.0, 0.0])
    assert np.allclose(state.earth.velocity, [0.0, 2 * np.pi, 0.0])
    assert np.allclose(state.asteroid.position, [2.0, 0.0, 0.1])
    assert np.allclose(state.asteroid.velocity, [0.0, np.sqrt(4 * np.pi**2 / 2.5), 0.1])
    assert state.asteroid.velocity[1] == pytest.approx(3.9738, abs=1e-4)
    assert state.elapsed_time == 0.0
    assert state.step_size == STEP_SIZE


def test_bodies_carry_their_perturbation_parameters():
    state = OrbitalIntegrator().snapshot()
    assert state.earth.mu == GM_EARTH
    assert state.asteroid.mu == GM_PERTURBER


@pytest.mark.parametrize(
    "a,e",
    [(0.0, 0.2), (-1.0, 0.2), (2.5, 1.0), (2.5, -0.1), (float("nan"), 0.2), (2.5, float("inf"))],
)
def test_initialize_rejects_non_physical_config(a, e):
    integ = OrbitalIntegrator()
    with pytest.raises(InvalidConfig):
        integ.initialize(OrbitalConfig(semi_major_axis=a, eccentricity=e))


def test_invalid_config_leaves_previous_state_intact():
    integ = OrbitalIntegrator()
    integ.advance(3)
    before = integ.snapshot()

    with pytest.raises(InvalidConfig):
        integ.initialize(OrbitalConfig(semi_major_axis=0.0))

    after = integ.snapshot()
    assert after.step_count == 3
    assert np.array_equal(before.asteroid.position, after.asteroid.position)


def test_elapsed_time_is_n_times_step_size():
    integ = OrbitalIntegrator(OrbitalConfig(semi_major_axis=3.0, eccentricity=0.5))
    n = 1000
    for _ in range(n):
        integ.step()

    state = integ.snapshot()
    assert state.step_count == n
    assert np.isclose(state.elapsed_time, n * STEP_SIZE, rtol=1e-9, atol=0.0)


def test_earth_radius_stays_bounded_without_mutual_term():
    integ = OrbitalIntegrator(gravity=GravityModel(enable_mutual_perturbation=False))

    radii = np.empty(10000)
    for i in range(10000):
        radii[i] = integ.step().earth.radius

    assert np.all(np.abs(radii - 1.0) < 0.01)


def test_step_matches_kick_drift_kick_with_simultaneous_positions():
    gravity = GravityModel()
    integ = OrbitalIntegrator(gravity=gravity)
    s0 = integ.snapshot()
    h = s0.step_size

    a_t, a_a = gravity.pair_accelerations(s0.earth.position, s0.asteroid.position)
    v_t_half = s0.earth.velocity + 0.5 * h * a_t
    v_a_half = s0.asteroid.velocity + 0.5 * h * a_a
    r_t = s0.earth.position + h * v_t_half
    r_a = s0.asteroid.position + h * v_a_half
    a_t_new, a_a_new = gravity.pair_accelerations(r_t, r_a)
    v_t = v_t_half + 0.5 * h * a_t_new
    v_a = v_a_half + 0.5 * h * a_a_new

    s1 = integ.step()
    assert np.allclose(s1.earth.position, r_t, rtol=0, atol=1e-15)
    assert np.allclose(s1.asteroid.position, r_a, rtol=0, atol=1e-15)
    assert np.allclose(s1.earth.velocity, v_t, rtol=0, atol=1e-13)
    assert np.allclose(s1.asteroid.velocity, v_a, rtol=0, atol=1e-13)


def test_identical_runs_are_bit_identical():
    config = OrbitalConfig(semi_major_axis=1.7, eccentricity=0.4, inclination_offset=-0.3)
    first = OrbitalIntegrator(config)
    second = OrbitalIntegrator(config)

    first.advance(500)
    second.advance(500)

    s1, s2 = first.snapshot(), second.snapshot()
    assert np.array_equal(s1.earth.position, s2.earth.position)
    assert np.array_equal(s1.earth.velocity, s2.earth.velocity)
    assert np.array_equal(s1.asteroid.position, s2.asteroid.position)
    assert np.array_equal(s1.asteroid.velocity, s2.asteroid.velocity)
    assert s1.elapsed_time == s2.elapsed_time


def test_reinitialize_mid_run_discards_trajectory():
    config = OrbitalConfig()
    integ = OrbitalIntegrator(config)
    for _ in range(5):
        integ.step()

    state = integ.initialize(config)
    fresh = OrbitalIntegrator(config).snapshot()

    assert state.elapsed_time == 0.0
    assert state.step_count == 0
    assert np.array_equal(state.asteroid.position, fresh.asteroid.position)
    assert np.array_equal(state.earth.position, fresh.earth.position)


def test_configure_takes_effect_on_reset_only():
    integ = OrbitalIntegrator(OrbitalConfig(semi_major_axis=2.5))
    integ.advance(10)
    running = integ.snapshot()

    integ.configure(OrbitalConfig(semi_major_axis=4.0, eccentricity=0.5, inclination_offset=-0.2))
    assert np.array_equal(integ.snapshot().asteroid.position, running.asteroid.position)
    assert integ.elapsed_time == running.elapsed_time

    state = integ.reset()
    assert np.allclose(state.asteroid.position, [2.0, 0.0, -0.2])
    assert state.elapsed_time == 0.0


def test_configure_rejects_invalid_config():
    integ = OrbitalIntegrator()
    with pytest.raises(InvalidConfig):
        integ.configure(OrbitalConfig(eccentricity=1.5))
    assert integ.config == OrbitalConfig()


def test_snapshot_is_independent_copy():
    integ = OrbitalIntegrator()
    snap = integ.snapshot()
    snap.earth.position[0] = 42.0
    snap.elapsed_time = 99.0

    live = integ.snapshot()
    assert live.earth.position[0] == 1.0
    assert live.elapsed_time == 0.0

    integ.step()
    assert snap.step_count == 0


def test_step_does_not_raise_at_zero_separation():
    # Asteroid starts on top of Earth
    integ = OrbitalIntegrator(OrbitalConfig(semi_major_axis=1.0, eccentricity=0.0, inclination_offset=0.0))
    assert integ.snapshot().separation == 0.0

    with np.errstate(all="ignore"):
        state = integ.step()

    assert state.step_count == 1


def test_negative_step_count_rejected():
    with pytest.raises(ValueError):
        OrbitalIntegrator().advance(-1)


@pytest.mark.parametrize(
    "factory", [create_default_config, create_near_earth_config, create_outer_belt_config]
)
def test_preset_configs_are_valid(factory):
    config = factory()
    assert config.validate() is config
    assert config.perihelion == pytest.approx(config.semi_major_axis * (1 - config.eccentricity))

    state = OrbitalIntegrator(config).snapshot()
    assert state.asteroid.position[0] == pytest.approx(config.perihelion)


def test_default_config_period_follows_keplers_third_law():
    config = create_default_config()
    assert config == OrbitalConfig()
    assert config.period_years == pytest.approx(2.5**1.5)
