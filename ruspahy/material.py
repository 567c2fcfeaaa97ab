"""Material definitions and the interfaces between materials.

Every particle carries a ``material_id`` pointing at one of these materials;
interfaces describe how two different materials interact.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any


def _require(data: Mapping[str, Any], key: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"missing field `{key}`") from None


def _as_float(value: Any, key: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"field `{key}` must be a number, got {value!r}")
    return float(value)


def _as_index(value: Any, key: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"field `{key}` must be a non-negative integer, got {value!r}")
    return value


def _optional_float(data: Mapping[str, Any], key: str) -> float | None:
    value = data.get(key)
    return None if value is None else _as_float(value, key)


class _SnakeCaseEnum(Enum):
    @classmethod
    def parse(cls, name: Any):
        """Look up a member by its snake_case name."""
        if isinstance(name, cls):
            return name
        if isinstance(name, str):
            for member in cls:
                if member.name.lower() == name:
                    return member
        choices = ", ".join(m.name.lower() for m in cls)
        raise ValueError(f"unknown {cls.__name__} {name!r}; expected one of {choices}")


class MaterialType(_SnakeCaseEnum):
    """Constitutive model of a solid."""

    ELASTIC = 0
    ELASTOPLASTIC = 1
    ELASTOPLASTIC_DAMAGE = 2
    BRITTLE = 3


class InterfaceType(_SnakeCaseEnum):
    """How two materials are joined."""

    STRONG = 0
    WEAK = 1
    VARIABLE = 2


@dataclass(frozen=True)
class Material:
    """Basic material properties."""

    id: int
    name: str
    material_type: MaterialType
    density: float
    youngs_modulus: float
    yield_strength: float | None = None
    hardening_modulus: float | None = None
    damage_threshold: float | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Material:
        """Build a material from a parsed configuration table."""
        name = _require(data, "name")
        if not isinstance(name, str):
            raise ValueError(f"field `name` must be a string, got {name!r}")
        return cls(
            id=_as_index(_require(data, "id"), "id"),
            name=name,
            material_type=MaterialType.parse(_require(data, "material_type")),
            density=_as_float(_require(data, "density"), "density"),
            youngs_modulus=_as_float(_require(data, "youngs_modulus"), "youngs_modulus"),
            yield_strength=_optional_float(data, "yield_strength"),
            hardening_modulus=_optional_float(data, "hardening_modulus"),
            damage_threshold=_optional_float(data, "damage_threshold"),
        )


DEFAULT_BOND_STRENGTH = 1.0


@dataclass(frozen=True)
class Interface:
    """Bond between two materials."""

    mat_a: int
    mat_b: int
    interface_type: InterfaceType
    bond_strength: float = DEFAULT_BOND_STRENGTH

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Interface:
        """Build an interface from a parsed configuration table."""
        bond = data.get("bond_strength")
        return cls(
            mat_a=_as_index(_require(data, "mat_a"), "mat_a"),
            mat_b=_as_index(_require(data, "mat_b"), "mat_b"),
            interface_type=InterfaceType.parse(_require(data, "interface_type")),
            bond_strength=(
                DEFAULT_BOND_STRENGTH if bond is None else _as_float(bond, "bond_strength")
            ),
        )