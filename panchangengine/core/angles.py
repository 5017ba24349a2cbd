"""Angular utilities shared by the tithi and panchang calculators.

Moon–Sun elongations are compared against 12° tithi arcs. Doing so with
raw modulo arithmetic invites subtle bugs around the 0°/360° boundary, so
the normalisation lives here.
"""

from __future__ import annotations

from typing import Final

__all__ = [
    "EPSILON_DEG",
    "elongation",
    "normalize_degrees",
]


EPSILON_DEG: Final[float] = 1e-9


def normalize_degrees(angle: float) -> float:
    """Return ``angle`` normalised to the ``[0, 360)`` interval.

    Parameters
    ----------
    angle:
        Value in **degrees**. Inputs outside the canonical range are
        wrapped by multiples of 360°.

    Returns
    -------
    float
        A degree value in ``[0, 360)``. Values within ``1e-9`` of
        ``360`` are coerced to ``0`` so callers can rely on a consistent
        wrap-around contract.
    """

    wrapped = float(angle) % 360.0
    if wrapped >= 360.0 - EPSILON_DEG:
        wrapped = 0.0
    return wrapped if wrapped >= 0.0 else wrapped + 360.0


def elongation(moon_longitude: float, sun_longitude: float) -> float:
    """Return the forward Moon–Sun separation ``(moon - sun + 360) mod 360``."""

    return normalize_degrees(float(moon_longitude) - float(sun_longitude) + 360.0)
