"""
Simulation Configuration
========================

Physical constants and orbital parameters for the Sun-Earth-asteroid system.

Units: astronomical units (AU) and years, so that G*M_sun = 4*pi^2.
"""

import math
from dataclasses import dataclass
from typing import Dict, Tuple

import numpy as np


# Solar gravitational parameter (AU³/yr²)
GM_SUN = 4 * np.pi ** 2

# Masses (kg), only used as ratios
MASS_SUN_KG = 1.989e30
MASS_EARTH_KG = 6.0e24
MASS_JUPITER_KG = 1.9e27

GM_EARTH = GM_SUN * (MASS_EARTH_KG / MASS_SUN_KG)
GM_PERTURBER = GM_SUN * (MASS_JUPITER_KG / MASS_SUN_KG)

# Fixed integration step (years)
STEP_SIZE = 0.004

# Suggested slider ranges for a control surface: (min, max)
CONTROL_RANGES: Dict[str, Tuple[float, float]] = {
    'semi_major_axis': (1.0, 5.0),
    'eccentricity': (0.0, 0.9),
    'inclination_offset': (-1.0, 1.0),
}


class InvalidConfig(ValueError):
    """Raised for a non-physical orbital configuration."""


@dataclass(frozen=True)
class OrbitalConfig:
    """Initial orbit of the asteroid."""
    semi_major_axis: float = 2.5  # AU
    eccentricity: float = 0.2
    inclination_offset: float = 0.1  # AU, out-of-plane start offset

    @property
    def perihelion(self) -> float:
        """Perihelion distance a*(1-e)."""
        return self.semi_major_axis * (1 - self.eccentricity)

    @property
    def period_years(self) -> float:
        """Orbital period using Kepler's third law."""
        return 2 * np.pi * np.sqrt(self.semi_major_axis**3 / GM_SUN)

    def validate(self) -> 'OrbitalConfig':
        """
        Check the configuration is physical.

        Returns:
            self, so calls can be chained

        Raises:
            InvalidConfig: if a <= 0, e outside [0, 1) or a field is not finite
        """
        values = (self.semi_major_axis, self.eccentricity, self.inclination_offset)
        if not all(math.isfinite(v) for v in values):
            raise InvalidConfig(f"Non-finite orbital parameters: {values}")
        if self.semi_major_axis <= 0:
            raise InvalidConfig(
                f"Semi-major axis must be positive, got {self.semi_major_axis}")
        if not 0.0 <= self.eccentricity < 1.0:
            raise InvalidConfig(
                f"Eccentricity must be in [0, 1), got {self.eccentricity}")
        return self


# Pre-defined configurations
def create_default_config() -> OrbitalConfig:
    """Configuration matching the demo's initial slider positions."""
    return OrbitalConfig(semi_major_axis=2.5, eccentricity=0.2, inclination_offset=0.1)


def create_near_earth_config() -> OrbitalConfig:
    """Asteroid on an orbit crossing 1 AU at perihelion."""
    return OrbitalConfig(semi_major_axis=1.3, eccentricity=0.25, inclination_offset=0.0)


def create_outer_belt_config() -> OrbitalConfig:
    """Low-eccentricity orbit in the outer main belt."""
    return OrbitalConfig(semi_major_axis=3.2, eccentricity=0.05, inclination_offset=-0.2)
