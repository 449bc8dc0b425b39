"""Person — a passenger that can board canoes and die in crashes."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field
from pydantic.dataclasses import dataclass


@dataclass(eq=False)
class Person:
    """A named passenger with a positive weight.

    Equality is identity: two people with the same name and weight are
    still two different passengers.

    Raises ``pydantic.ValidationError`` when ``weight`` is zero, negative or
    not finite.
    """

    name: str
    weight: Annotated[float, Field(gt=0, allow_inf_nan=False)]

    def __post_init__(self) -> None:
        self._dead = False

    @property
    def is_dead(self) -> bool:
        return self._dead

    def kill(self) -> None:
        """Mark the person dead. Calling it again has no further effect."""
        self._dead = True
