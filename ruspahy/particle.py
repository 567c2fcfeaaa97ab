"""SPH particles and the particle system that holds them."""

from __future__ import annotations

import itertools
import math
from dataclasses import dataclass, field

from ruspahy import force
from ruspahy.config import SimConfig, SphereConfig
from ruspahy.material import Interface, Material
from ruspahy.neighbor import build_neighbor_list
from ruspahy.sph_kernel import SPHKernel

DEFAULT_DENSITY = 1000.0


def _zero_vector() -> list[float]:
    return [0.0, 0.0, 0.0]


@dataclass
class Particle:
    """A single SPH particle."""

    position: list[float]
    velocity: list[float] = field(default_factory=_zero_vector)
    force: list[float] = field(default_factory=_zero_vector)
    density: float = DEFAULT_DENSITY
    pressure: float = 0.0
    # Von Mises stress or a simplified equivalent.
    stress: float = 0.0
    # Accumulated plastic strain.
    plastic_strain: float = 0.0
    # Damage variable in [0, 1].
    damage: float = 0.0
    material_id: int = 0


def _grid_particles(config: SimConfig) -> list[Particle]:
    gx, gy, gz = config.grid
    spacing = config.spacing
    return [
        Particle(position=[x * spacing, y * spacing, z * spacing])
        for z, y, x in itertools.product(range(gz), range(gy), range(gx))
    ]


def _sphere_particles(sphere: SphereConfig, spacing: float) -> list[Particle]:
    n = math.ceil(sphere.radius / spacing)
    r2 = sphere.radius * sphere.radius
    cx, cy, cz = sphere.center
    particles = []
    for ix, iy, iz in itertools.product(range(-n, n + 1), repeat=3):
        dx, dy, dz = ix * spacing, iy * spacing, iz * spacing
        if dx * dx + dy * dy + dz * dz <= r2:
            particles.append(
                Particle(
                    position=[cx + dx, cy + dy, cz + dz],
                    velocity=list(sphere.velocity),
                    material_id=sphere.material_id,
                )
            )
    return particles


class ParticleSystem:
    """The set of particles making up the simulated domain."""

    SMOOTHING_FACTOR = 1.5
    """Ratio of the smoothing length to the mean particle spacing."""

    def __init__(self, config: SimConfig) -> None:
        """Lay out particles as the configured spheres, or on a regular grid."""
        if config.spheres:
            self.particles: list[Particle] = [
                p for s in config.spheres for p in _sphere_particles(s, config.spacing)
            ]
        else:
            self.particles = _grid_particles(config)
        self.neighbors: list[list[int]] = [[] for _ in self.particles]
        self.materials: list[Material] = list(config.materials)
        self.interfaces: list[Interface] = list(config.interfaces)

    def __repr__(self) -> str:
        return (
            f"ParticleSystem(particles={len(self.particles)}, "
            f"materials={len(self.materials)}, interfaces={len(self.interfaces)})"
        )

    def build_neighbor_list(self) -> None:
        """Rebuild every particle's neighbour list using the smoothing length."""
        self.neighbors = build_neighbor_list(self.particles, self.smoothing_length())

    def compute_forces(self) -> None:
        """Update densities, pressures, forces and stresses of all particles."""
        kernel = SPHKernel(self.smoothing_length())
        force.compute_density_pressure(self, kernel)
        force.compute_forces(self, kernel)
        force.compute_stress(self)

    def find_interface(self, mat_a: int, mat_b: int) -> Interface | None:
        """Return the interface joining two materials, in either order."""
        return next(
            (
                iface
                for iface in self.interfaces
                if (iface.mat_a, iface.mat_b) in ((mat_a, mat_b), (mat_b, mat_a))
            ),
            None,
        )

    def _mean_spacing(self) -> float:
        if len(self.particles) < 2:
            return 0.1
        distances = (
            math.dist(a.position, b.position)
            for a, b in itertools.combinations(self.particles, 2)
        )
        min_dist = min((d for d in distances if not math.isnan(d)), default=math.inf)
        if not math.isfinite(min_dist):
            return 0.1
        if min_dist <= 0.0:
            return 0.001
        return min_dist

    def smoothing_length(self) -> float:
        """Smoothing length derived from the smallest particle spacing."""
        return self._mean_spacing() * self.SMOOTHING_FACTOR