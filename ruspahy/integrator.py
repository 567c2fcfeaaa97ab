"""Explicit Euler time integration of particle motion."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ruspahy.particle import ParticleSystem


def integrate(psys: ParticleSystem, dt: float) -> None:
    """Advance velocities and then positions of all particles by one step ``dt``."""
    for p in psys.particles:
        for k, f in enumerate(p.force):
            p.velocity[k] += dt * f / p.density
            p.position[k] += dt * p.velocity[k]