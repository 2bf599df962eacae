"""
Asteroid Orbits Simulation Framework
====================================

Restricted three-body simulation of the Sun, Earth and an asteroid.

Units: AU and years (G*M_sun = 4*pi^2).

Components:
- Orbital integrator (velocity-Verlet, fixed step)
- Gravity model (solar term + mutual Earth-asteroid perturbation)
- Frame-based driving loop with bounded trails
- Matplotlib renderer (top-down projection)
"""

__version__ = "1.0.0"

from orbits.core.config import OrbitalConfig, InvalidConfig
from orbits.core.integrator import OrbitalIntegrator
from orbits.core.loop import SimulationLoop

__all__ = [
    'OrbitalConfig',
    'InvalidConfig',
    'OrbitalIntegrator',
    'SimulationLoop',
]
