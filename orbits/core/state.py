"""
Integrator State
================

Body and system state containers for the Sun-Earth-asteroid integrator.
"""

import numpy as np
from dataclasses import dataclass, field


@dataclass
class Body:
    """A dynamic body orbiting the static Sun at the origin."""
    name: str
    position: np.ndarray = field(default_factory=lambda: np.zeros(3))  # AU
    velocity: np.ndarray = field(default_factory=lambda: np.zeros(3))  # AU/yr
    mu: float = 0.0  # G*m, AU³/yr²

    def __post_init__(self):
        self.position = np.array(self.position, dtype=float)
        self.velocity = np.array(self.velocity, dtype=float)
        if self.position.shape != (3,) or self.velocity.shape != (3,):
            raise ValueError("Position and velocity must be 3D vectors.")

    @property
    def radius(self) -> float:
        """Heliocentric distance."""
        return float(np.linalg.norm(self.position))

    @property
    def speed(self) -> float:
        """Speed magnitude."""
        return float(np.linalg.norm(self.velocity))

    def copy(self) -> 'Body':
        return Body(
            name=self.name,
            position=self.position.copy(),
            velocity=self.velocity.copy(),
            mu=self.mu,
        )


@dataclass
class IntegratorState:
    """Complete state of the two dynamic bodies."""
    earth: Body
    asteroid: Body
    step_size: float
    elapsed_time: float = 0.0  # years
    step_count: int = 0

    @property
    def separation(self) -> float:
        """Earth-asteroid distance in AU."""
        return float(np.linalg.norm(self.earth.position - self.asteroid.position))

    def copy(self) -> 'IntegratorState':
        return IntegratorState(
            earth=self.earth.copy(),
            asteroid=self.asteroid.copy(),
            step_size=self.step_size,
            elapsed_time=self.elapsed_time,
            step_count=self.step_count,
        )

    def to_dict(self) -> dict:
        """Plain representation for telemetry/JSON export."""
        return {
            'time_yr': self.elapsed_time,
            'step_count': self.step_count,
            'earth_position_au': self.earth.position.tolist(),
            'earth_velocity_au_yr': self.earth.velocity.tolist(),
            'asteroid_position_au': self.asteroid.position.tolist(),
            'asteroid_velocity_au_yr': self.asteroid.velocity.tolist(),
            'separation_au': self.separation,
        }
