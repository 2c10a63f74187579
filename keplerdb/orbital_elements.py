"""
Orbital elements representation for bodies orbiting a parent body.
"""
from typing import NamedTuple

from keplerdb.constants import (
    CONVERT_AU_TO_M,
    CONVERT_DEG_TO_RAD,
    CONVERT_KM_TO_M,
    TWO_PI,
)


def normalize_angle(angle: float) -> float:
    """Reduce an angle in radians into [0, 2π) with a single modulo."""
    angle = float(angle) % TWO_PI
    # -tiny % 2π rounds up to exactly 2π
    if angle >= TWO_PI:
        return 0.0
    return angle


class OrbitalElements(NamedTuple):
    """
    Keplerian elements that define an orbit around a parent body.

    Distances are stored in meters and angles in radians, normalized into
    [0, 2π). The builders accept convenient units and return a new tuple
    with one element replaced.

    Attributes:
        semimajor_axis: Semi-major axis, a (m)
        eccentricity: Eccentricity, e (0 ≤ e < 1)
        inclination: Inclination, i (rad)
        arg_of_periapsis: Argument of periapsis, ω (rad)
        time_of_periapsis_passage: Time of periapsis passage, T (s). Carried
            for completeness; nothing in keplerdb reads it.
        long_of_ascending_node: Longitude of the ascending node, Ω (rad)

    Note:
        Parabolic and hyperbolic orbits (e ≥ 1) are not supported.
    """
    semimajor_axis: float = 0.0  # m
    eccentricity: float = 0.0
    inclination: float = 0.0  # rad
    arg_of_periapsis: float = 0.0  # rad
    time_of_periapsis_passage: float = 0.0  # s
    long_of_ascending_node: float = 0.0  # rad

    def with_semimajor_axis_m(self, value: float) -> 'OrbitalElements':
        if value <= 0.0:
            raise ValueError(f"semimajor axis must be positive, got {value}")
        return self._replace(semimajor_axis=float(value))

    def with_semimajor_axis_km(self, value: float) -> 'OrbitalElements':
        return self.with_semimajor_axis_m(value * CONVERT_KM_TO_M)

    def with_semimajor_axis_au(self, value: float) -> 'OrbitalElements':
        return self.with_semimajor_axis_m(value * CONVERT_AU_TO_M)

    def with_eccentricity(self, value: float) -> 'OrbitalElements':
        if not (0.0 <= value < 1.0):
            raise ValueError(f"eccentricity must be in [0, 1), got {value}")
        return self._replace(eccentricity=float(value))

    def with_inclination_deg(self, value: float) -> 'OrbitalElements':
        return self._replace(inclination=normalize_angle(value * CONVERT_DEG_TO_RAD))

    def with_arg_of_periapsis_deg(self, value: float) -> 'OrbitalElements':
        return self._replace(arg_of_periapsis=normalize_angle(value * CONVERT_DEG_TO_RAD))

    def with_long_of_ascending_node_deg(self, value: float) -> 'OrbitalElements':
        return self._replace(long_of_ascending_node=normalize_angle(value * CONVERT_DEG_TO_RAD))

    def with_time_of_periapsis_passage(self, value: float) -> 'OrbitalElements':
        return self._replace(time_of_periapsis_passage=float(value))

    def periapsis(self) -> float:
        """Closest distance to the parent body (m)."""
        return self.semimajor_axis * (1.0 - self.eccentricity)

    def apoapsis(self) -> float:
        """Farthest distance from the parent body (m)."""
        return self.semimajor_axis * (1.0 + self.eccentricity)
