"""Canoe hull specification — geometry + material."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, field_validator


class Material(str, Enum):
    """Hull materials with a known durability rating.

    Anything not listed collapses to ``OTHER`` (default durability).
    """

    WOOD = "Wood"
    ALUMINIUM = "Aluminium"
    PLASTIC = "Plastic"
    FIBERGLASS = "Fiberglass"
    KEVLAR = "Kevlar"
    OTHER = "Other"

    @classmethod
    def parse(cls, value: Material | str) -> Material:
        """Map a free-form material name onto the enum, falling back to OTHER."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.OTHER


class CanoeSpec(BaseModel):
    """Fixed geometry and material of one canoe."""

    length: float = Field(default=5.0, gt=0, allow_inf_nan=False, description="Longer horizontal dimension (m)")
    width: float = Field(default=0.85, gt=0, allow_inf_nan=False, description="Shorter horizontal dimension (m)")
    depth: float = Field(default=0.35, gt=0, allow_inf_nan=False, description="Vertical dimension (m)")
    material: Material = Field(
        default=Material.WOOD,
        description="Hull material. Unrecognized names are accepted as 'Other'.",
    )

    @field_validator("material", mode="before")
    @classmethod
    def _coerce_material(cls, value: object) -> object:
        if isinstance(value, str):
            return Material.parse(value)
        return value

    @property
    def volume(self) -> float:
        """width × length × depth."""
        return self.width * self.length * self.depth
