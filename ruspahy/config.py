"""Loading simulation parameters from a TOML file."""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from ruspahy.material import Interface, Material

Vector3 = tuple[float, float, float]


def _require(data: Mapping[str, Any], key: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"missing field `{key}`") from None


def _number(value: Any, key: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"field `{key}` must be a number, got {value!r}")
    return float(value)


def _count(value: Any, key: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"field `{key}` must be a non-negative integer, got {value!r}")
    return value


def _triple(value: Any, key: str, convert) -> tuple:
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence) or len(value) != 3:
        raise ValueError(f"field `{key}` must hold exactly 3 values, got {value!r}")
    return tuple(convert(item, key) for item in value)


def _tables(data: Mapping[str, Any], key: str) -> list[Mapping[str, Any]]:
    value = data.get(key, [])
    if not isinstance(value, list) or not all(isinstance(v, Mapping) for v in value):
        raise ValueError(f"field `{key}` must be a list of tables")
    return value


@dataclass(frozen=True)
class SphereConfig:
    """An initial sphere of particles, e.g. for collision scenarios."""

    center: Vector3
    radius: float
    velocity: Vector3
    material_id: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SphereConfig:
        """Build a sphere from a parsed configuration table."""
        material_id = data.get("material_id")
        return cls(
            center=_triple(_require(data, "center"), "center", _number),
            radius=_number(_require(data, "radius"), "radius"),
            velocity=_triple(_require(data, "velocity"), "velocity", _number),
            material_id=0 if material_id is None else _count(material_id, "material_id"),
        )


@dataclass(frozen=True)
class SimConfig:
    """Parameters controlling an SPH simulation."""

    grid: tuple[int, int, int]
    spacing: float
    time_step: float
    num_steps: int
    output_interval: int
    materials: list[Material] = field(default_factory=list)
    interfaces: list[Interface] = field(default_factory=list)
    spheres: list[SphereConfig] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SimConfig:
        """Build a configuration from a parsed TOML document."""
        return cls(
            grid=_triple(_require(data, "grid"), "grid", _count),
            spacing=_number(_require(data, "spacing"), "spacing"),
            time_step=_number(_require(data, "time_step"), "time_step"),
            num_steps=_count(_require(data, "num_steps"), "num_steps"),
            output_interval=_count(_require(data, "output_interval"), "output_interval"),
            materials=[Material.from_dict(t) for t in _tables(data, "materials")],
            interfaces=[Interface.from_dict(t) for t in _tables(data, "interfaces")],
            spheres=[SphereConfig.from_dict(t) for t in _tables(data, "spheres")],
        )


def load_config(path: str | os.PathLike[str]) -> SimConfig:
    """Read and validate a :class:`SimConfig` from a TOML file.

    Raises ``OSError`` if the file cannot be read and ``ValueError`` if it is
    not valid TOML or does not describe a configuration.
    """
    with open(path, "rb") as handle:
        data = tomllib.load(handle)
    return SimConfig.from_dict(data)