"""
Dynamics Module
===============

Force model, integrators and orbit diagnostics.
"""

from .gravity import GravityModel
from .integrators import VelocityVerletIntegrator

__all__ = [
    'GravityModel',
    'VelocityVerletIntegrator',
]
