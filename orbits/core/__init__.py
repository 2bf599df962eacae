"""
Simulation Core Module
======================

Configuration, state and the orbital integrator.
"""

from .config import OrbitalConfig, InvalidConfig
from .state import Body, IntegratorState
from .integrator import OrbitalIntegrator
from .loop import SimulationLoop, FrameInfo

__all__ = [
    'OrbitalConfig',
    'InvalidConfig',
    'Body',
    'IntegratorState',
    'OrbitalIntegrator',
    'SimulationLoop',
    'FrameInfo',
]
