"""
Impact Estimator
================

Kinetic-energy estimate for an asteroid impact with a simple damage radius
and population exposure figure.
"""

import math
import logging
import numpy as np
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

# Damage radius scaling: R_km = K_RADIUS * E_Mt^(1/3)
K_RADIUS = 1.5
# Joules per megaton of TNT
J_PER_MT = 4.184e15

# Default impact site (Saltillo, Mexico)
INITIAL_LAT = 25.4146
INITIAL_LNG = -101.0076

# Population density draw range (persons/km²)
POPULATION_DENSITY_MIN = 100.0
POPULATION_DENSITY_SPAN = 500.0
FATALITY_RATE = 0.7


class InvalidImpactParameters(ValueError):
    """Raised for impact inputs that are missing or non-physical."""


@dataclass(frozen=True)
class ImpactParameters:
    """Impactor properties and impact site."""
    diameter_m: float = 50.0
    density_kg_m3: float = 3000.0
    velocity_km_s: float = 20.0
    angle_deg: float = 45.0  # not used by the energy estimate
    latitude: float = INITIAL_LAT
    longitude: float = INITIAL_LNG

    def validate(self) -> 'ImpactParameters':
        """
        Raises:
            InvalidImpactParameters: on non-finite input or non-positive
                diameter, density or velocity
        """
        values = (self.diameter_m, self.density_kg_m3, self.velocity_km_s,
                  self.angle_deg, self.latitude, self.longitude)
        if not all(math.isfinite(v) for v in values):
            raise InvalidImpactParameters(f"Non-finite impact parameters: {values}")
        for name in ('diameter_m', 'density_kg_m3', 'velocity_km_s'):
            if getattr(self, name) <= 0:
                raise InvalidImpactParameters(f"{name} must be positive")
        return self

    @property
    def volume_m3(self) -> float:
        return math.pi * self.diameter_m**3 / 6

    @property
    def mass_kg(self) -> float:
        return self.volume_m3 * self.density_kg_m3

    @property
    def coordinates(self) -> str:
        return f"{self.latitude:.4f}, {self.longitude:.4f}"


@dataclass
class ImpactResult:
    """Impact estimate."""
    energy_joules: float
    energy_megatons: float
    impact_radius_km: float
    area_km2: float
    population_density: float  # persons/km²
    affected_population: int
    estimated_deaths: int
    coordinates: str

    def to_dict(self) -> dict:
        return {
            'energy_joules': self.energy_joules,
            'energy_megatons': self.energy_megatons,
            'impact_radius_km': self.impact_radius_km,
            'area_km2': self.area_km2,
            'population_density': self.population_density,
            'affected_population': self.affected_population,
            'estimated_deaths': self.estimated_deaths,
            'coordinates': self.coordinates,
        }


def kinetic_energy(params: ImpactParameters) -> float:
    """Impactor kinetic energy in joules."""
    v_m_s = params.velocity_km_s * 1000
    return 0.5 * params.mass_kg * v_m_s**2


def impact_radius_km(energy_megatons: float) -> float:
    """Damage radius from cube-root energy scaling."""
    return K_RADIUS * np.cbrt(energy_megatons)


class ImpactEstimator:
    """
    Impact energy and exposure estimator.

    The energy and radius are deterministic. Population density is drawn
    at random per estimate; pass a seeded generator for reproducible output.
    """

    def __init__(self, rng: Optional[np.random.Generator] = None):
        """
        Initialize estimator.

        Args:
            rng: Random generator for the population density draw
        """
        self.rng = rng or np.random.default_rng()

    def estimate(self, params: ImpactParameters = None) -> ImpactResult:
        """
        Run the estimate.

        Args:
            params: Impact parameters (default: ImpactParameters())

        Returns:
            Impact result

        Raises:
            InvalidImpactParameters: if params are invalid
        """
        params = (params or ImpactParameters()).validate()

        energy_j = kinetic_energy(params)
        energy_mt = energy_j / J_PER_MT
        radius_km = float(impact_radius_km(energy_mt))
        area_km2 = math.pi * radius_km**2

        density = POPULATION_DENSITY_MIN + POPULATION_DENSITY_SPAN * self.rng.random()
        affected = int(round(density * area_km2))
        deaths = int(round(affected * FATALITY_RATE))

        logger.debug("Impact estimate: %.3e J (%.3f Mt), radius %.2f km",
                     energy_j, energy_mt, radius_km)

        return ImpactResult(
            energy_joules=energy_j,
            energy_megatons=energy_mt,
            impact_radius_km=radius_km,
            area_km2=area_km2,
            population_density=float(round(density)),
            affected_population=affected,
            estimated_deaths=deaths,
            coordinates=params.coordinates,
        )
