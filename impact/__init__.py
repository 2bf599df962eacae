"""
Impact Module
=============

Asteroid impact energy and exposure estimate.
"""

from .estimator import (
    ImpactEstimator,
    ImpactParameters,
    ImpactResult,
    InvalidImpactParameters,
)
from .formatting import format_number, format_summary

__all__ = [
    'ImpactEstimator',
    'ImpactParameters',
    'ImpactResult',
    'InvalidImpactParameters',
    'format_number',
    'format_summary',
]
