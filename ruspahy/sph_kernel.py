"""Smoothing kernels used by the SPH solver."""

from __future__ import annotations

import math
from collections.abc import Sequence

Vector3 = tuple[float, float, float]


class SPHKernel:
    """Precomputed constants of the common SPH kernels for a smoothing length ``h``."""

    __slots__ = ("h", "h2", "poly6_coef", "spiky_grad_coef", "viscosity_lap_coef")

    def __init__(self, h: float) -> None:
        self.h = h
        self.h2 = h * h
        self.poly6_coef = 315.0 / (64.0 * math.pi * h**9)
        self.spiky_grad_coef = -45.0 / (math.pi * h**6)
        self.viscosity_lap_coef = 45.0 / (math.pi * h**6)

    def __repr__(self) -> str:
        return f"SPHKernel(h={self.h!r})"

    def w_poly6(self, r2: float) -> float:
        """Poly6 kernel for density estimation, taking the squared distance."""
        if r2 < self.h2:
            return self.poly6_coef * (self.h2 - r2) ** 3
        return 0.0

    def grad_w_spiky(self, r: float, direction: Sequence[float]) -> Vector3:
        """Gradient of the spiky kernel, used for the pressure term."""
        if 0.0 < r < self.h:
            coeff = self.spiky_grad_coef * (self.h - r) ** 2 / r
            x, y, z = direction
            return (x * coeff, y * coeff, z * coeff)
        return (0.0, 0.0, 0.0)

    def lap_w_viscosity(self, r: float) -> float:
        """Laplacian of the viscosity kernel."""
        if r < self.h:
            return self.viscosity_lap_coef * (self.h - r)
        return 0.0