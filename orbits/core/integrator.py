"""
Orbital Integrator
==================

Owns the Sun-Earth-asteroid state and advances it with fixed velocity-Verlet
steps.
"""

import logging
import numpy as np
from typing import Optional

from .config import OrbitalConfig, STEP_SIZE
from .state import Body, IntegratorState
from ..dynamics.gravity import GravityModel
from ..dynamics.integrators import VelocityVerletIntegrator

logger = logging.getLogger(__name__)


class OrbitalIntegrator:
    """
    Restricted three-body integrator.

    The Sun is fixed at the origin; Earth and the asteroid move under solar
    gravity plus their mutual perturbation. Close approaches are not
    guarded: a near-zero separation produces whatever the force law gives.
    """

    def __init__(self,
                 config: OrbitalConfig = None,
                 gravity: GravityModel = None,
                 step_size: float = STEP_SIZE):
        """
        Initialize integrator and its first state.

        Args:
            config: Asteroid orbit (default: OrbitalConfig())
            gravity: Force model (default: GravityModel())
            step_size: Fixed time step [years]

        Raises:
            InvalidConfig: if the configuration is not physical
        """
        if step_size <= 0:
            raise ValueError(f"Step size must be positive, got {step_size}")

        self.gravity = gravity or GravityModel()
        self.step_size = step_size
        self._verlet = VelocityVerletIntegrator(self.gravity.stacked_acceleration)

        self.config: OrbitalConfig = (config or OrbitalConfig()).validate()
        self._state: Optional[IntegratorState] = None
        self.initialize(self.config)

    def initialize(self, config: OrbitalConfig) -> IntegratorState:
        """
        Start a new run from the given configuration.

        Earth starts on a circular 1 AU orbit. The asteroid starts at
        perihelion with the circular speed for its semi-major axis.

        Args:
            config: Asteroid orbit

        Returns:
            Snapshot of the new state

        Raises:
            InvalidConfig: if the configuration is not physical
        """
        config.validate()

        a = config.semi_major_axis
        e = config.eccentricity

        earth = Body(
            name='Earth',
            position=[1.0, 0.0, 0.0],
            velocity=[0.0, 2 * np.pi, 0.0],
            mu=self.gravity.gm_earth,
        )
        asteroid = Body(
            name='Asteroid',
            position=[a * (1 - e), 0.0, config.inclination_offset],
            velocity=[0.0, np.sqrt(self.gravity.gm_sun / a), 0.1],
            mu=self.gravity.gm_perturber,
        )

        # Build completely before swapping in
        state = IntegratorState(earth=earth, asteroid=asteroid, step_size=self.step_size)
        self.config = config
        self._state = state

        logger.debug("Initialized orbit a=%.3f AU e=%.3f z0=%.3f AU",
                     a, e, config.inclination_offset)
        return self.snapshot()

    def configure(self, config: OrbitalConfig):
        """
        Replace the configuration used by the next reset().

        The running state is left untouched.

        Raises:
            InvalidConfig: if the configuration is not physical
        """
        self.config = config.validate()

    def reset(self) -> IntegratorState:
        """Re-initialize from the current configuration."""
        return self.initialize(self.config)

    def step(self) -> IntegratorState:
        """
        Advance the system by one time step.

        Returns:
            The live state (use snapshot() for an independent copy)
        """
        state = self._state
        h = state.step_size

        r = np.vstack([state.earth.position, state.asteroid.position])
        v = np.vstack([state.earth.velocity, state.asteroid.velocity])

        r_new, v_new = self._verlet.step(r, v, h)

        state.earth.position, state.asteroid.position = r_new[0], r_new[1]
        state.earth.velocity, state.asteroid.velocity = v_new[0], v_new[1]
        state.elapsed_time += h
        state.step_count += 1

        return state

    def advance(self, n_steps: int) -> IntegratorState:
        """Advance by n_steps time steps."""
        if n_steps < 0:
            raise ValueError(f"Number of steps must be non-negative, got {n_steps}")
        for _ in range(n_steps):
            self.step()
        return self._state

    def snapshot(self) -> IntegratorState:
        """Independent copy of the current state."""
        return self._state.copy()

    @property
    def elapsed_time(self) -> float:
        return self._state.elapsed_time

    def __repr__(self) -> str:
        return (f"OrbitalIntegrator(a={self.config.semi_major_axis}, "
                f"e={self.config.eccentricity}, t={self._state.elapsed_time:.3f}yr)")
