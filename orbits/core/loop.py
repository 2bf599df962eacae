"""
Simulation Loop
===============

Frame-based driver around the orbital integrator.

Each frame advances a fixed number of integrator steps, takes one snapshot
and records bounded position trails for rendering.
"""

import logging
import numpy as np
from collections import deque
from dataclasses import dataclass
from typing import Callable, Deque, List

from .config import OrbitalConfig
from .integrator import OrbitalIntegrator
from .state import IntegratorState

logger = logging.getLogger(__name__)


@dataclass
class FrameInfo:
    """Readout shown after each frame."""
    time_yr: float
    distance_au: float  # Earth-asteroid
    asteroid_speed_au_yr: float
    state: IntegratorState


class SimulationLoop:
    """
    Explicit driving loop.

    Owns no scheduling primitive: the caller decides when frame() runs
    (timer, animation callback, plain for-loop).
    """

    def __init__(self,
                 integrator: OrbitalIntegrator = None,
                 steps_per_frame: int = 10,
                 max_trail_length: int = 500):
        """
        Initialize loop.

        Args:
            integrator: Integrator to drive (default: OrbitalIntegrator())
            steps_per_frame: Integrator steps per frame
            max_trail_length: Trail points kept per body
        """
        if steps_per_frame < 1:
            raise ValueError(f"steps_per_frame must be >= 1, got {steps_per_frame}")
        if max_trail_length < 1:
            raise ValueError(f"max_trail_length must be >= 1, got {max_trail_length}")

        self.integrator = integrator or OrbitalIntegrator()
        self.steps_per_frame = steps_per_frame
        self.max_trail_length = max_trail_length

        self.is_running = False
        self.frame_count = 0

        self.earth_trail: Deque[np.ndarray] = deque(maxlen=max_trail_length)
        self.asteroid_trail: Deque[np.ndarray] = deque(maxlen=max_trail_length)

        # Callbacks
        self.frame_callbacks: List[Callable] = []

    def _clear(self):
        self.earth_trail.clear()
        self.asteroid_trail.clear()
        self.frame_count = 0

    def configure(self, config: OrbitalConfig):
        """Set the orbit used by the next start()/reset()."""
        self.integrator.configure(config)

    def start(self):
        """Restart from the current configuration and begin running."""
        self.integrator.reset()
        self._clear()
        self.is_running = True
        logger.info("Simulation started: %r", self.integrator)

    def pause(self):
        """Stop advancing; state is kept."""
        self.is_running = False

    def resume(self):
        """Continue from the current state."""
        self.is_running = True

    def reset(self) -> IntegratorState:
        """Stop and restore the initial state."""
        self.is_running = False
        state = self.integrator.reset()
        self._clear()
        return state

    def frame(self) -> FrameInfo:
        """
        Advance one frame.

        Integrates only while running; the trail and readout are updated
        either way, as a redraw would.

        Returns:
            Frame readout
        """
        if self.is_running:
            self.integrator.advance(self.steps_per_frame)

        state = self.integrator.snapshot()

        self.earth_trail.append(state.earth.position.copy())
        self.asteroid_trail.append(state.asteroid.position.copy())
        self.frame_count += 1

        info = FrameInfo(
            time_yr=state.elapsed_time,
            distance_au=state.separation,
            asteroid_speed_au_yr=state.asteroid.speed,
            state=state,
        )

        for callback in self.frame_callbacks:
            callback(self, info)

        return info

    def run(self, n_frames: int) -> List[FrameInfo]:
        """
        Start and run up to n_frames frames.

        A callback may call pause() to stop early.

        Returns:
            Frame readouts
        """
        self.start()
        frames = []

        for _ in range(n_frames):
            if not self.is_running:
                break
            frames.append(self.frame())

        self.is_running = False
        logger.info("Simulation finished: %d frames, t=%.3f yr",
                    len(frames), self.integrator.elapsed_time)
        return frames

    def add_frame_callback(self, callback: Callable):
        """Add callback(loop, frame_info) called after each frame."""
        self.frame_callbacks.append(callback)

    def trails(self):
        """Return (earth_trail, asteroid_trail) as (n, 3) arrays."""
        return (np.array(self.earth_trail).reshape(-1, 3),
                np.array(self.asteroid_trail).reshape(-1, 3))
