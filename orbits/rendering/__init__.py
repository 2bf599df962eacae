"""
Rendering Module
================

Projection and matplotlib drawing of integrator snapshots.
"""

from .projection import Projection
from .renderer import OrbitRenderer

__all__ = [
    'Projection',
    'OrbitRenderer',
]
