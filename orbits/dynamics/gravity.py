"""
Gravity Model
=============

Heliocentric gravity with a mutual perturbation between the two tracked
bodies.
"""

import numpy as np
from typing import Tuple

from ..core.config import GM_SUN, GM_EARTH, GM_PERTURBER


class GravityModel:
    """
    Force model for the Earth and asteroid.

    Features:
    - Keplerian attraction towards a static Sun at the origin
    - Pairwise attraction towards the other tracked body

    The pull on Earth uses the perturber (Jupiter-mass) parameter while the
    pull on the asteroid uses Earth's; no third body is positioned.
    """

    def __init__(self,
                 gm_sun: float = GM_SUN,
                 gm_earth: float = GM_EARTH,
                 gm_perturber: float = GM_PERTURBER,
                 enable_mutual_perturbation: bool = True):
        """
        Initialize gravity model.

        Args:
            gm_sun: Solar gravitational parameter [AU³/yr²]
            gm_earth: Earth's gravitational parameter, pulls the asteroid
            gm_perturber: Perturber gravitational parameter, pulls Earth
            enable_mutual_perturbation: Include the body-body term
        """
        self.gm_sun = gm_sun
        self.gm_earth = gm_earth
        self.gm_perturber = gm_perturber
        self.enable_mutual_perturbation = enable_mutual_perturbation

    def acceleration(self,
                     r_self: np.ndarray,
                     r_other: np.ndarray,
                     mu_other: float) -> np.ndarray:
        """
        Acceleration of one body.

        Args:
            r_self: Position of the body [AU]
            r_other: Position of the other tracked body [AU]
            mu_other: Gravitational parameter applied for the other body

        Returns:
            Acceleration [AU/yr²]
        """
        a = self._sun_acceleration(r_self)

        if self.enable_mutual_perturbation:
            a += self._mutual_acceleration(r_self, r_other, mu_other)

        return a

    def _sun_acceleration(self, r: np.ndarray) -> np.ndarray:
        """Keplerian two-body acceleration."""
        r_mag = np.linalg.norm(r)
        return -self.gm_sun * r / r_mag**3

    def _mutual_acceleration(self,
                             r_self: np.ndarray,
                             r_other: np.ndarray,
                             mu_other: float) -> np.ndarray:
        """Attraction towards the other body. Unsoftened."""
        d = r_other - r_self
        d_mag = np.linalg.norm(d)
        return mu_other * d / d_mag**3

    def pair_accelerations(self,
                           earth_r: np.ndarray,
                           asteroid_r: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        """
        Accelerations of both bodies evaluated at the same positions.

        Returns:
            Tuple of (earth_acceleration, asteroid_acceleration)
        """
        a_earth = self.acceleration(earth_r, asteroid_r, self.gm_perturber)
        a_asteroid = self.acceleration(asteroid_r, earth_r, self.gm_earth)
        return a_earth, a_asteroid

    def stacked_acceleration(self, positions: np.ndarray) -> np.ndarray:
        """
        Acceleration for stacked positions.

        Args:
            positions: (2, 3) array, row 0 Earth, row 1 asteroid

        Returns:
            (2, 3) array of accelerations
        """
        a_earth, a_asteroid = self.pair_accelerations(positions[0], positions[1])
        return np.vstack([a_earth, a_asteroid])
