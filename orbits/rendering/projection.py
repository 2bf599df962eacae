"""
Screen Projection
=================

Top-down projection of heliocentric positions onto a pixel canvas.
"""

import numpy as np
from dataclasses import dataclass


@dataclass
class Projection:
    """View from above the XY plane; z is discarded."""
    width: int = 800
    height: int = 600
    scale: float = 150.0  # pixels per AU

    @property
    def center(self) -> np.ndarray:
        return np.array([self.width / 2, self.height / 2])

    def project(self, points: np.ndarray) -> np.ndarray:
        """
        Project 3D points to canvas pixels.

        Args:
            points: (3,) or (n, 3) positions [AU]

        Returns:
            (2,) or (n, 2) pixel coordinates, y growing downwards
        """
        points = np.asarray(points, dtype=float)
        cx, cy = self.center
        x = cx + points[..., 0] * self.scale
        y = cy - points[..., 1] * self.scale
        return np.stack([x, y], axis=-1)
