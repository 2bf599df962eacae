"""
Orbit Renderer
==============

Draws Sun, trails and bodies with matplotlib. Reads snapshots only.
"""

from pathlib import Path
from typing import Optional, Tuple, Union

import matplotlib.pyplot as plt
import numpy as np

from .projection import Projection
from ..core.state import IntegratorState

EARTH_COLOR = '#1e90ff'
ASTEROID_COLOR = '#ff6b6b'
SUN_COLOR = '#ffd700'
BACKGROUND_COLOR = '#000000'


class OrbitRenderer:
    """
    Matplotlib renderer for the orbits view.

    Body sizes are given in canvas pixels, as on a 2D canvas.
    """

    def __init__(self, projection: Projection = None, dpi: int = 100):
        """
        Initialize renderer.

        Args:
            projection: Canvas projection (default: 800x600, 150 px/AU)
            dpi: Figure resolution; figure size is canvas size / dpi
        """
        self.projection = projection or Projection()
        self.dpi = dpi
        self.fig = None
        self.ax = None

    def _ensure_figure(self):
        if self.fig is None:
            size = (self.projection.width / self.dpi, self.projection.height / self.dpi)
            self.fig, self.ax = plt.subplots(figsize=size, dpi=self.dpi)
            self.fig.subplots_adjust(left=0, right=1, bottom=0, top=1)

    def draw(self,
             state: IntegratorState,
             trails: Optional[Tuple[np.ndarray, np.ndarray]] = None):
        """
        Draw one frame.

        Args:
            state: Snapshot to draw
            trails: Optional (earth_trail, asteroid_trail), each (n, 3)
        """
        self._ensure_figure()
        ax = self.ax
        ax.clear()

        ax.set_facecolor(BACKGROUND_COLOR)
        ax.set_xlim(0, self.projection.width)
        ax.set_ylim(self.projection.height, 0)
        ax.set_axis_off()
        self.fig.set_facecolor(BACKGROUND_COLOR)

        if trails is not None:
            earth_trail, asteroid_trail = trails
            self._draw_trail(earth_trail, EARTH_COLOR, 1.5)
            self._draw_trail(asteroid_trail, ASTEROID_COLOR, 1.0)

        sx, sy = self.projection.project(np.zeros(3))
        ax.plot(sx, sy, 'o', color=SUN_COLOR, markersize=16)

        self._draw_body(state.earth.position, EARTH_COLOR, 12, 'Earth')
        self._draw_body(state.asteroid.position, ASTEROID_COLOR, 6, 'Asteroid')

        ax.text(10, 20, f"t = {state.elapsed_time:.2f} yr   "
                        f"d = {state.separation:.3f} AU   "
                        f"v = {state.asteroid.speed:.3f} AU/yr",
                color='white', fontsize=9)

    def _draw_trail(self, trail: np.ndarray, color: str, linewidth: float):
        if len(trail) < 2:
            return
        pts = self.projection.project(trail)
        self.ax.plot(pts[:, 0], pts[:, 1], '-', color=color, linewidth=linewidth)

    def _draw_body(self, position: np.ndarray, color: str, size: float, label: str):
        x, y = self.projection.project(position)
        self.ax.plot(x, y, 'o', color=color, markersize=size)
        self.ax.text(x, y - size - 10, label, color='white', fontsize=9, ha='center')

    def save(self, path: Union[str, Path]):
        """Write the current frame to an image file."""
        self._ensure_figure()
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.fig.savefig(path, dpi=self.dpi, facecolor=self.fig.get_facecolor())

    def close(self):
        if self.fig is not None:
            plt.close(self.fig)
            self.fig = None
            self.ax = None


def plot_distance_history(times: np.ndarray,
                          distances: np.ndarray,
                          path: Union[str, Path],
                          title: str = "Earth-asteroid distance"):
    """Plot a separation time series to a PNG file."""
    fig, ax = plt.subplots(figsize=(12, 6))
    ax.plot(times, distances)
    ax.set_xlabel("Time (yr)")
    ax.set_ylabel("Distance (AU)")
    ax.set_title(title)
    ax.grid(True)
    fig.tight_layout()
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(path, dpi=160)
    plt.close(fig)
