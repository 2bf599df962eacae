"""
Numerical Integrators
=====================

Fixed-step symplectic integration for the gravitational system.
"""

import numpy as np
from typing import Callable, Tuple


class VelocityVerletIntegrator:
    """
    Velocity-Verlet (kick-drift-kick leapfrog) integrator.

    Second order and symplectic: energy error stays bounded over long
    integrations instead of drifting.
    """

    def __init__(self, acceleration_func: Callable[[np.ndarray], np.ndarray]):
        """
        Initialize integrator.

        Args:
            acceleration_func: a = f(r), evaluated for all bodies at once
        """
        self.acceleration = acceleration_func

    def step(self,
             r: np.ndarray,
             v: np.ndarray,
             dt: float,
             a: np.ndarray = None) -> Tuple[np.ndarray, np.ndarray]:
        """
        Perform single velocity-Verlet step.

        All bodies are kicked and drifted before the accelerations are
        re-evaluated, so every body sees the others' new positions.

        Args:
            r: Positions, shape (n, 3)
            v: Velocities, shape (n, 3)
            dt: Time step
            a: Accelerations at r, computed if not given

        Returns:
            Tuple of (new_positions, new_velocities)
        """
        if a is None:
            a = self.acceleration(r)

        v_half = v + 0.5 * dt * a
        r_new = r + dt * v_half
        a_new = self.acceleration(r_new)
        v_new = v_half + 0.5 * dt * a_new

        return r_new, v_new

    def integrate(self,
                  r0: np.ndarray,
                  v0: np.ndarray,
                  dt: float,
                  n_steps: int) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """
        Integrate a fixed number of steps.

        Args:
            r0: Initial positions, shape (n, 3)
            v0: Initial velocities, shape (n, 3)
            dt: Time step
            n_steps: Number of steps

        Returns:
            Tuple of (times, positions, velocities) with n_steps + 1 samples
        """
        times = np.zeros(n_steps + 1)
        positions = np.zeros((n_steps + 1,) + np.shape(r0))
        velocities = np.zeros((n_steps + 1,) + np.shape(v0))

        positions[0] = r0
        velocities[0] = v0

        t = 0.0
        r = np.array(r0, dtype=float)
        v = np.array(v0, dtype=float)

        for i in range(1, n_steps + 1):
            r, v = self.step(r, v, dt)
            t += dt
            times[i] = t
            positions[i] = r
            velocities[i] = v

        return times, positions, velocities
