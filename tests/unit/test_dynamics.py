import numpy as np
import pytest

from orbits.core.config import GM_EARTH, GM_PERTURBER, GM_SUN
from orbits.core.state import Body
from orbits.dynamics.diagnostics import (
    orbital_elements,
    specific_angular_momentum,
    specific_energy,
)
from orbits.dynamics.gravity import GravityModel
from orbits.dynamics.integrators import VelocityVerletIntegrator


def test_sun_term_points_to_origin_with_inverse_square_magnitude():
    gravity = GravityModel(enable_mutual_perturbation=False)
    a = gravity.acceleration(np.array([2.0, 0.0, 0.0]), np.array([5.0, 0.0, 0.0]), GM_EARTH)
    assert np.allclose(a, [-GM_SUN / 4.0, 0.0, 0.0])


def test_mutual_term_attracts_towards_other_body():
    gravity = GravityModel(gm_sun=0.0)
    earth = np.array([1.0, 0.0, 0.0])
    asteroid = np.array([1.0, 2.0, 0.0])

    a_earth, a_asteroid = gravity.pair_accelerations(earth, asteroid)

    # Earth is pulled with the perturber parameter, asteroid with Earth's
    assert np.allclose(a_earth, [0.0, GM_PERTURBER / 4.0, 0.0])
    assert np.allclose(a_asteroid, [0.0, -GM_EARTH / 4.0, 0.0])


def test_stacked_acceleration_matches_pair():
    gravity = GravityModel()
    r = np.array([[1.0, 0.1, 0.0], [2.0, -0.5, 0.3]])
    a_earth, a_asteroid = gravity.pair_accelerations(r[0], r[1])
    stacked = gravity.stacked_acceleration(r)
    assert stacked.shape == (2, 3)
    assert np.array_equal(stacked[0], a_earth)
    assert np.array_equal(stacked[1], a_asteroid)


def test_verlet_integrate_harmonic_oscillator_energy_bounded():
    verlet = VelocityVerletIntegrator(lambda r: -r)
    times, positions, velocities = verlet.integrate(
        np.array([[1.0, 0.0, 0.0]]), np.array([[0.0, 0.0, 0.0]]), dt=0.01, n_steps=5000
    )

    assert times.shape == (5001,)
    assert positions.shape == (5001, 1, 3)
    assert times[-1] == pytest.approx(50.0)

    energy = 0.5 * np.sum(velocities**2, axis=(1, 2)) + 0.5 * np.sum(positions**2, axis=(1, 2))
    assert np.max(np.abs(energy - 0.5)) < 1e-4


def test_verlet_step_uses_supplied_acceleration():
    calls = []

    def accel(r):
        calls.append(r.copy())
        return np.zeros_like(r)

    verlet = VelocityVerletIntegrator(accel)
    r, v = verlet.step(np.zeros((1, 3)), np.ones((1, 3)), 0.5, a=np.zeros((1, 3)))

    assert len(calls) == 1
    assert np.allclose(r, 0.5)
    assert np.allclose(v, 1.0)


def test_circular_earth_orbit_elements():
    earth = Body(name='Earth', position=[1.0, 0.0, 0.0], velocity=[0.0, 2 * np.pi, 0.0])
    elements = orbital_elements(earth)

    assert elements['semi_major_axis_au'] == pytest.approx(1.0)
    assert elements['eccentricity'] == pytest.approx(0.0, abs=1e-12)
    assert elements['inclination_deg'] == pytest.approx(0.0)
    assert elements['period_years'] == pytest.approx(1.0)

    assert specific_energy(earth) == pytest.approx(-GM_SUN / 2)
    assert np.allclose(specific_angular_momentum(earth), [0.0, 0.0, 2 * np.pi])


def test_escape_orbit_has_infinite_semi_major_axis():
    body = Body(name='Probe', position=[1.0, 0.0, 0.0], velocity=[0.0, 20.0, 0.0])
    elements = orbital_elements(body)
    assert elements['semi_major_axis_au'] == float('inf')
    assert elements['eccentricity'] > 1.0


def test_body_rejects_wrong_shape():
    with pytest.raises(ValueError):
        Body(name='Bad', position=[1.0, 0.0], velocity=[0.0, 0.0, 0.0])
