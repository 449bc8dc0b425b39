"""Crash model constants.

threshold = floor(threshold_base + volume_factor × volume / (coefficient_scale × coeff))
A passenger dies while ``roll_faces × (1 − u)`` exceeds the threshold.
"""

from pydantic import BaseModel, Field


class CrashConfig(BaseModel):
    """Tunables of the crash formula. Defaults reproduce the reference model."""

    damage_per_death: float = Field(default=0.25, allow_inf_nan=False, gt=0, description="Hull damage added per passenger death")
    threshold_base: float = Field(default=5.0, allow_inf_nan=False, description="Constant term of the death-chance threshold")
    volume_factor: float = Field(default=2.0, allow_inf_nan=False, gt=0, description="Multiplier on hull volume")
    coefficient_scale: float = Field(default=0.5, allow_inf_nan=False, gt=0, description="Multiplier on the effective durability")
    roll_faces: float = Field(default=20.0, allow_inf_nan=False, gt=0, description="Upper bound of the crash roll (0, faces]")
