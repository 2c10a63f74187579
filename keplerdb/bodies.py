import numpy as np
import pydantic
from pydantic import ConfigDict, Field

from keplerdb.constants import (
    AXIAL_TILT_EARTH_DEG,
    CONVERT_DEG_TO_RAD,
    CONVERT_EARTH_MASS_TO_KG,
    CONVERT_KM_TO_M,
    CONVERT_M_TO_KM,
    FLATTENING_SUN,
    G,
    MASS_EARTH_KG,
    MASS_SUN_KG,
    RADIUS_EARTH_EQUATOR_KM,
    RADIUS_EARTH_POLAR_KM,
    RADIUS_SUN_M,
)


class Body(pydantic.BaseModel):
    """
    A body in space represented as an idealized sphere.

    Body is an immutable value. The ``with_*`` builders return a validated copy
    with one property replaced; nothing is ever changed in place.

    Attributes:
        mass_kg: Mass of the body (kg)
        radius_equator_km: Equatorial radius (km)
        radius_polar_km: Polar radius (km)
        axial_tilt_deg: Axial tilt relative to the body's orbital plane (deg)
    """
    model_config = ConfigDict(frozen=True)

    mass_kg: float = Field(default=0.0, ge=0.0)
    radius_equator_km: float = Field(default=0.0, ge=0.0)
    radius_polar_km: float = Field(default=0.0, ge=0.0)
    axial_tilt_deg: float = 0.0

    @classmethod
    def earth(cls) -> 'Body':
        """The planet Earth."""
        return cls(
            mass_kg=MASS_EARTH_KG,
            radius_equator_km=RADIUS_EARTH_EQUATOR_KM,
            radius_polar_km=RADIUS_EARTH_POLAR_KM,
            axial_tilt_deg=AXIAL_TILT_EARTH_DEG,
        )

    @classmethod
    def sun(cls) -> 'Body':
        """Our sun, slightly flattened at the poles."""
        radius_km = RADIUS_SUN_M * CONVERT_M_TO_KM
        return cls(
            mass_kg=MASS_SUN_KG,
            radius_equator_km=radius_km,
            radius_polar_km=radius_km * (1.0 - FLATTENING_SUN),
            axial_tilt_deg=0.0,
        )

    def _replace(self, **changes) -> 'Body':
        return type(self)(**{**dict(self), **changes})

    def with_mass_kg(self, mass: float) -> 'Body':
        return self._replace(mass_kg=mass)

    def with_mass_earths(self, mass: float) -> 'Body':
        return self._replace(mass_kg=mass * CONVERT_EARTH_MASS_TO_KG)

    def with_radius_km(self, radius: float) -> 'Body':
        """Sets both the polar and equatorial radius to the given value."""
        return self._replace(radius_equator_km=radius, radius_polar_km=radius)

    def with_radius_m(self, radius: float) -> 'Body':
        return self.with_radius_km(radius * CONVERT_M_TO_KM)

    def with_radii_km(self, equatorial: float, polar: float) -> 'Body':
        return self._replace(radius_equator_km=equatorial, radius_polar_km=polar)

    def with_axial_tilt_deg(self, axial_tilt: float) -> 'Body':
        return self._replace(axial_tilt_deg=axial_tilt)

    def radius_avg_km(self) -> float:
        return (self.radius_equator_km + self.radius_polar_km) / 2.0

    def radius_avg_m(self) -> float:
        return self.radius_avg_km() * CONVERT_KM_TO_M

    def radius_equator_m(self) -> float:
        return self.radius_equator_km * CONVERT_KM_TO_M

    def radius_polar_m(self) -> float:
        return self.radius_polar_km * CONVERT_KM_TO_M

    def axial_tilt_rad(self) -> float:
        return self.axial_tilt_deg * CONVERT_DEG_TO_RAD

    def gm(self) -> float:
        """The body's gravitational parameter, mass times G (m^3/s^2)."""
        return self.mass_kg * G

    def gravity_at_distance(self, distance: float) -> float:
        """
        Gravitational acceleration towards this body at the given distance.

        g = GM / d^2

        Args:
            distance: Distance from the body's center (m)

        Returns:
            Acceleration in m/s^2
        """
        if distance <= 0.0:
            raise ValueError(f"distance must be positive, got {distance}")
        return self.gm() / distance**2

    def distance_of_gravity(self, gravity: float) -> float:
        """
        Distance at which the pull of this body falls to the given acceleration.

        d = sqrt(GM / g), the inverse of ``gravity_at_distance``.

        Args:
            gravity: Gravitational acceleration (m/s^2)

        Returns:
            Distance from the body's center (m)
        """
        if gravity <= 0.0:
            raise ValueError(f"gravity must be positive, got {gravity}")
        return float(np.sqrt(self.gm() / gravity))

    def __str__(self) -> str:
        return f"Body(mass={self.mass_kg:.4e} kg, radius={self.radius_avg_km():.1f} km)"
