"""Passenger inputs for scenario files."""

from pydantic import BaseModel, Field


class PassengerSpec(BaseModel):
    """One person boarding the canoe at the start of a scenario."""

    name: str = Field(description="Cosmetic label")
    weight: float = Field(gt=0, allow_inf_nan=False, description="Body weight (typically pounds)")
