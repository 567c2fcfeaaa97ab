"""Density, pressure, force and stress computations based on the SPH kernels."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TYPE_CHECKING

from ruspahy.material import Material
from ruspahy.sph_kernel import SPHKernel

if TYPE_CHECKING:
    from ruspahy.particle import ParticleSystem

_FALLBACK_REST_DENSITY = 1000.0
_STIFFNESS = 1000.0
_VISCOSITY = 0.1
_SPACING_RATIO = 1.5


def _material(materials: Sequence[Material], material_id: int) -> Material:
    if 0 <= material_id < len(materials):
        return materials[material_id]
    raise IndexError(f"no material with index {material_id}")


def _rest_density(materials: Sequence[Material], material_id: int) -> float:
    if 0 <= material_id < len(materials):
        return materials[material_id].density
    return _FALLBACK_REST_DENSITY


def _divide(numerator: float, denominator: float) -> float:
    """Floating-point division that yields inf or nan instead of raising."""
    if denominator != 0.0:
        return numerator / denominator
    if numerator == 0.0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def compute_density_pressure(psys: ParticleSystem, kernel: SPHKernel) -> None:
    """Compute every particle's density and pressure from its neighbours."""
    volume = (kernel.h / _SPACING_RATIO) ** 3
    materials = psys.materials
    positions = [tuple(p.position) for p in psys.particles]
    w_self = kernel.w_poly6(0.0)

    for p, neighbors in zip(psys.particles, psys.neighbors):
        rest = _rest_density(materials, p.material_id)
        density = rest * volume * w_self
        for j in neighbors:
            other = psys.particles[j]
            r2 = sum((a - b) ** 2 for a, b in zip(p.position, positions[j]))
            density += _rest_density(materials, other.material_id) * volume * kernel.w_poly6(r2)
        p.density = density
        p.pressure = _STIFFNESS * (density - rest)


def compute_forces(psys: ParticleSystem, kernel: SPHKernel) -> None:
    """Accumulate pressure, viscosity and interface bonding forces pairwise."""
    volume = (kernel.h / _SPACING_RATIO) ** 3
    particles = psys.particles

    for p in particles:
        p.force = [0.0, 0.0, 0.0]

    for i, neighbors in enumerate(psys.neighbors):
        pi = particles[i]
        for j in neighbors:
            if j <= i:
                continue
            pj = particles[j]
            interface = psys.find_interface(pi.material_id, pj.material_id)

            r_vec = [b - a for a, b in zip(pi.position, pj.position)]
            r = math.sqrt(sum(c * c for c in r_vec))

            # Symmetric pressure term so that momentum is conserved.
            grad_w = kernel.grad_w_spiky(r, r_vec)
            mass_j = _material(psys.materials, pj.material_id).density * volume
            pressure_term = mass_j * (
                pi.pressure / (pi.density * pi.density) + pj.pressure / (pj.density * pj.density)
            )
            pair_force = [-pressure_term * g for g in grad_w]

            lap_w = kernel.lap_w_viscosity(r)
            for k, (vi, vj) in enumerate(zip(pi.velocity, pj.velocity)):
                pair_force[k] += _VISCOSITY * mass_j * (vj - vi) / pj.density * lap_w

            if interface is not None and r < kernel.h:
                direction = [c / r for c in r_vec] if r > 0.0 else [0.0, 0.0, 0.0]
                coeff = interface.bond_strength * (kernel.h - r) / kernel.h
                for k, d in enumerate(direction):
                    pair_force[k] += coeff * d

            for k, f in enumerate(pair_force):
                pi.force[k] += f
                pj.force[k] -= f


def compute_stress(psys: ParticleSystem) -> None:
    """Derive a simplified equivalent stress from pressure, with yielding and damage."""
    for p in psys.particles:
        mat = _material(psys.materials, p.material_id)
        yield_strength = math.inf if mat.yield_strength is None else mat.yield_strength
        hardening = 0.0 if mat.hardening_modulus is None else mat.hardening_modulus
        damage_threshold = math.inf if mat.damage_threshold is None else mat.damage_threshold

        sigma = abs(p.pressure)
        yield_limit = yield_strength + hardening * p.plastic_strain

        if sigma > yield_limit:
            # Simple return mapping with linear hardening.
            delta_plastic = _divide(sigma - yield_limit, mat.youngs_modulus + hardening)
            p.plastic_strain += delta_plastic
            yield_limit += hardening * delta_plastic

            if p.plastic_strain > damage_threshold:
                excess = p.plastic_strain - damage_threshold
                p.damage += _divide(excess, damage_threshold)
                if p.damage > 1.0:
                    p.damage = 1.0

            sigma = yield_limit

        p.stress = sigma * (1.0 - p.damage)