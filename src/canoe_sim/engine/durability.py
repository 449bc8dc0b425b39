"""Hull durability and the death-chance threshold.

  coeff     = durability(material) − damage
  volume    = width × length × depth
  threshold = floor(base + factor × volume / (scale × coeff))

With the default constants a fresh 5 × 0.85 × 0.35 wooden canoe gives
coeff = 1.5, volume = 1.4875 and threshold = floor(8.9667) = 8.

A hull so large that the formula overflows to infinity saturates at
``ceil(roll_faces)``: no roll can beat it, so nobody dies.

A hull whose effective coefficient has dropped to zero or below is
breached. The formula would divide by zero or flip sign there, so the
threshold is pinned to ``BREACHED_THRESHOLD`` instead: every roll in
(0, faces] beats it and nobody aboard survives the crash.
"""

from __future__ import annotations

import math

from canoe_sim.config.canoe import Material
from canoe_sim.config.crash import CrashConfig

BREACHED_THRESHOLD = 0

DURABILITY_COEFFICIENTS: dict[Material, float] = {
    Material.WOOD: 1.5,
    Material.ALUMINIUM: 4.0,
    Material.PLASTIC: 4.0,
    Material.FIBERGLASS: 0.75,
    Material.KEVLAR: 0.75,
}

DEFAULT_COEFFICIENT = 1.0


def durability_coefficient(material: Material | str) -> float:
    """Per-material durability. Higher is sturdier; unknown materials get 1.0."""
    return DURABILITY_COEFFICIENTS.get(Material.parse(material), DEFAULT_COEFFICIENT)


def is_breached(effective_coefficient: float) -> bool:
    return effective_coefficient <= 0.0


def crash_threshold(
    effective_coefficient: float,
    volume: float,
    config: CrashConfig | None = None,
) -> int:
    """Integer death-chance threshold for one crash event.

    Parameters
    ----------
    effective_coefficient : float
        Material durability minus accumulated damage.
    volume : float
        Hull volume (width × length × depth).
    config : CrashConfig | None
        Formula constants; defaults when omitted.

    Returns
    -------
    int
        ``BREACHED_THRESHOLD`` (0) for a breached hull, ``ceil(roll_faces)``
        when the formula overflows, otherwise the floored formula value.
    """
    if is_breached(effective_coefficient):
        return BREACHED_THRESHOLD

    cfg = config or CrashConfig()
    raw = cfg.threshold_base + cfg.volume_factor * volume / (cfg.coefficient_scale * effective_coefficient)
    if not math.isfinite(raw):
        return math.ceil(cfg.roll_faces)
    return math.floor(raw)
