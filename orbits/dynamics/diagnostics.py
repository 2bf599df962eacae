"""
Orbit Diagnostics
=================

Conserved quantities and osculating elements, used to check integrator
accuracy. Heliocentric two-body approximation only.
"""

import numpy as np

from ..core.config import GM_SUN
from ..core.state import Body


def specific_energy(body: Body, gm: float = GM_SUN) -> float:
    """Specific orbital energy v²/2 - GM/r [AU²/yr²]."""
    return 0.5 * float(np.dot(body.velocity, body.velocity)) - gm / body.radius


def specific_angular_momentum(body: Body) -> np.ndarray:
    """Specific angular momentum r x v [AU²/yr]."""
    return np.cross(body.position, body.velocity)


def orbital_elements(body: Body, gm: float = GM_SUN) -> dict:
    """
    Calculate osculating elements from the state vector.

    Args:
        body: Body in heliocentric coordinates
        gm: Central gravitational parameter

    Returns:
        Dictionary with orbital elements
    """
    r = body.position
    v = body.velocity
    r_mag = np.linalg.norm(r)
    v_mag = np.linalg.norm(v)

    h = np.cross(r, v)
    h_mag = np.linalg.norm(h)

    # Eccentricity vector
    e_vec = ((v_mag**2 - gm/r_mag) * r - np.dot(r, v) * v) / gm
    e = np.linalg.norm(e_vec)

    energy = v_mag**2 / 2 - gm / r_mag
    if abs(e - 1.0) > 1e-10 and energy < 0:
        a = -gm / (2 * energy)
        period = 2*np.pi*np.sqrt(a**3/gm)
    else:
        a = float('inf')
        period = float('inf')

    i = np.arccos(h[2] / h_mag) if h_mag > 0 else 0.0

    return {
        'semi_major_axis_au': a,
        'eccentricity': e,
        'inclination_deg': np.degrees(i),
        'period_years': period,
    }
