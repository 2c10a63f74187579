"""
Hierarchical database of orbiting bodies.

Bodies are stored by handle in a single mapping. The star → planet → moon
tree is expressed through the parent handle each entry carries, never
through object references. Every position query takes the simulation time
as an argument; the database holds no clock.
"""
import logging
from typing import Any, Dict, Hashable, Iterator, List, Optional, Tuple

import numpy as np
import pydantic
from pydantic import ConfigDict, Field, model_validator

from keplerdb.astrodynamics import (
    TRUE_ANOMALY_METHODS,
    mean_motion,
    orbit_direction,
    orbital_period,
    orbital_radius,
)
from keplerdb.bodies import Body
from keplerdb.config import DEFAULT_ENTRY_SCALE, DatabaseConfig, make_database_config
from keplerdb.constants import CONVERT_DEG_TO_RAD
from keplerdb.orbital_elements import OrbitalElements, normalize_angle

logger = logging.getLogger(__name__)


class UnknownBodyError(KeyError):
    """Raised when a handle (or name) is not present in the database."""


class FrozenDatabaseError(RuntimeError):
    """Raised when adding an entry to a frozen database."""


class HierarchyError(ValueError):
    """Raised when the parent/child structure of the database is malformed."""


class NoCommonAncestorError(HierarchyError):
    """Raised when two bodies do not share any ancestor."""


class DatabaseEntry(pydantic.BaseModel):
    """
    One node of the body hierarchy.

    Attributes:
        info: Physical properties of the body
        name: Display name
        parent: Handle of the body this one orbits, None for a root (a star)
        orbit: Orbital elements around the parent, None for a root
        mean_anomaly_at_epoch: Orbital phase at time zero (rad, in [0, 2π))
        scale: Display scale hint for renderers. Nothing in the database
            reads it; see ``keplerdb.render``.
    """
    model_config = ConfigDict(frozen=True)

    info: Body
    name: str = ""
    parent: Optional[Any] = None
    orbit: Optional[OrbitalElements] = None
    mean_anomaly_at_epoch: float = Field(default=0.0, ge=0.0)
    scale: float = DEFAULT_ENTRY_SCALE

    @model_validator(mode='after')
    def validate_parent_orbit(self):
        if (self.parent is None) != (self.orbit is None):
            raise ValueError("parent and orbit must be given together")
        return self

    @classmethod
    def new(cls, info: Body, name: Optional[str] = None) -> 'DatabaseEntry':
        return cls(info=info, name=name or "")

    def _replace(self, **changes) -> 'DatabaseEntry':
        return type(self)(**{**dict(self), **changes})

    def with_parent(self, parent_handle: Hashable, orbital_elements: OrbitalElements) -> 'DatabaseEntry':
        return self._replace(parent=parent_handle, orbit=orbital_elements)

    def with_mean_anomaly_deg(self, mean_anomaly: float) -> 'DatabaseEntry':
        return self._replace(mean_anomaly_at_epoch=normalize_angle(mean_anomaly * CONVERT_DEG_TO_RAD))

    def with_scale(self, scale: float) -> 'DatabaseEntry':
        return self._replace(scale=scale)

    def is_root(self) -> bool:
        return self.parent is None

    def gm(self) -> float:
        return self.info.gm()


class Database:
    """
    Holds the data for all the bodies being simulated.

    A host fills the database with ``add_entry`` (or ``with_solar_system``),
    optionally calls ``freeze``, and then only queries it. Queries never
    modify the database, so reading it from several threads after the last
    ``add_entry`` is safe; the database itself does no locking.

    Handles may be of any hashable, totally ordered type. Positions are
    returned in meters as float64 arrays of shape (3,).

    Parameters
    ----------
    config : DatabaseConfig, optional
        True-anomaly method and root sphere-of-influence settings.
    """

    def __init__(self, config: Optional[DatabaseConfig] = None):
        config = config or DatabaseConfig()
        self.config = make_database_config(config.true_anomaly_method, config.soi_edge_gravity)
        self._true_anomaly = TRUE_ANOMALY_METHODS[self.config.true_anomaly_method]
        self._bodies: Dict[Hashable, DatabaseEntry] = {}
        self._frozen = False

    # ------------------------------------------------------------------
    # Population
    # ------------------------------------------------------------------

    def add_entry(self, handle: Hashable, entry: DatabaseEntry) -> None:
        """Adds a new entry to the database, replacing any entry with the same handle."""
        if self._frozen:
            raise FrozenDatabaseError(f"Cannot add body {handle!r}: database is frozen")
        logger.debug("Adding body %r (%s) with parent %r", handle, entry.name, entry.parent)
        self._bodies[handle] = entry

    def with_solar_system(self) -> 'Database':
        """Populates the database with our solar system and returns it."""
        from keplerdb.solar_system import add_solar_system

        add_solar_system(self)
        return self

    def freeze(self) -> 'Database':
        """
        Validate the hierarchy and make the database read-only.

        Checks that every parent handle exists, that following parents never
        loops, and that the whole database forms a single tree.

        Returns:
            The database itself

        Raises:
            HierarchyError: If the bodies do not form exactly one tree
        """
        for handle, entry in self._bodies.items():
            if entry.parent is not None and entry.parent not in self._bodies:
                raise HierarchyError(f"Body {handle!r} has unknown parent {entry.parent!r}")

        for handle in self._bodies:
            seen = {handle}
            current = self._bodies[handle].parent
            while current is not None:
                if current in seen:
                    raise HierarchyError(f"Parent chain of body {handle!r} loops at {current!r}")
                seen.add(current)
                current = self._bodies[current].parent

        roots = self.roots()
        if len(roots) != 1:
            raise HierarchyError(f"Database must have exactly one root body, found {len(roots)}: {roots}")

        self._frozen = True
        logger.info("Froze database with %d bodies rooted at %r", len(self._bodies), roots[0])
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get_entry(self, handle: Hashable) -> DatabaseEntry:
        """Gets the entry with the given handle."""
        try:
            return self._bodies[handle]
        except KeyError:
            raise UnknownBodyError(handle) from None

    def find(self, name: str) -> Hashable:
        """Gets the handle of the first body with the given name."""
        for handle, entry in self._bodies.items():
            if entry.name == name:
                return handle
        raise UnknownBodyError(name)

    def roots(self) -> List[Hashable]:
        """Sorted handles of all bodies without a parent."""
        return sorted(handle for handle, entry in self._bodies.items() if entry.parent is None)

    def iter(self) -> Iterator[Tuple[Hashable, DatabaseEntry]]:
        """Iterates over all (handle, entry) pairs."""
        return iter(self._bodies.items())

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._bodies)

    def __len__(self) -> int:
        return len(self._bodies)

    def __contains__(self, handle) -> bool:
        return handle in self._bodies

    def __repr__(self) -> str:
        return f"Database(bodies={len(self._bodies)}, frozen={self._frozen})"

    # ------------------------------------------------------------------
    # Hierarchy
    # ------------------------------------------------------------------

    def get_satellites(self, handle: Hashable) -> List[Hashable]:
        """Handles of the bodies directly orbiting the given body, sorted ascending."""
        self.get_entry(handle)
        return sorted(h for h, entry in self._bodies.items() if entry.parent == handle)

    def get_parents(self, handle: Hashable) -> List[Hashable]:
        """
        The chain of bodies from the root down to the given body.

        The first element is the root and the last is ``handle`` itself, so a
        root body returns ``[handle]``.
        """
        entry = self.get_entry(handle)
        if entry.parent is None:
            return [handle]
        hierarchy = self.get_parents(entry.parent)
        hierarchy.append(handle)
        return hierarchy

    def get_combined_mass_kg(self, handle: Hashable) -> float:
        """Mass of a body plus the combined mass of all its satellites (kg)."""
        total_mass = self.get_entry(handle).info.mass_kg
        for satellite in self.get_satellites(handle):
            total_mass += self.get_combined_mass_kg(satellite)
        return total_mass

    def radius_soi(self, handle: Hashable) -> float:
        """
        Radius of the sphere of influence of a body (m).

        For an orbiting body this is the Laplace radius,

            r_soi = a * (m / M)^(2/5)

        where m is the combined mass of the body and its satellites and M is
        the mass of its parent. A root body has no parent to compare against,
        so its radius is the distance at which its own gravity falls to
        ``config.soi_edge_gravity``.
        """
        entry = self.get_entry(handle)
        if entry.orbit is None:
            return entry.info.distance_of_gravity(self.config.soi_edge_gravity)
        parent = self.get_entry(entry.parent)
        mass = self.get_combined_mass_kg(handle)
        return entry.orbit.semimajor_axis * (mass / parent.info.mass_kg) ** (2.0 / 5.0)

    # ------------------------------------------------------------------
    # Positions
    # ------------------------------------------------------------------

    def mean_anomaly_at_time(self, handle: Hashable, time: float) -> float:
        """
        Mean anomaly of a body at the given time since epoch (rad).

        M(t) = M0 + n*t, with the mean motion n taken from the parent's GM.
        Roots have no orbit and always return 0.
        """
        entry = self.get_entry(handle)
        if entry.orbit is None:
            return 0.0
        parent = self.get_entry(entry.parent)
        n = mean_motion(parent.gm(), entry.orbit.semimajor_axis)
        return entry.mean_anomaly_at_epoch + n * time

    def orbital_period(self, handle: Hashable) -> float:
        """Period of a body's orbit around its parent (s)."""
        entry = self.get_entry(handle)
        if entry.orbit is None:
            raise ValueError(f"Body {handle!r} is a root and has no orbit")
        parent = self.get_entry(entry.parent)
        return orbital_period(parent.gm(), entry.orbit.semimajor_axis)

    def position_at_mean_anomaly(self, handle: Hashable, mean_anomaly: float) -> np.ndarray:
        """
        Position of a body relative to its parent at the given mean anomaly (m).

        Roots are at the origin of their own frame and return the zero vector.
        """
        entry = self.get_entry(handle)
        orbit = entry.orbit
        if orbit is None:
            return np.zeros(3)
        parent = self.get_entry(entry.parent)

        nu = self._true_anomaly(mean_anomaly, orbit.eccentricity)
        radius = orbital_radius(orbit.semimajor_axis, orbit.eccentricity, nu)
        direction = orbit_direction(orbit, nu, parent.info.axial_tilt_rad())
        return direction * radius

    def orbit_path(self, handle: Hashable, segments: int = 100) -> np.ndarray:
        """
        Points evenly spaced in mean anomaly around a body's orbit, relative to its parent.

        Args:
            handle: Body to trace
            segments: Number of points; the first and last coincide

        Returns:
            Array of shape (segments, 3) in meters
        """
        if segments < 2:
            raise ValueError(f"segments must be at least 2, got {segments}")
        mean_anomalies = np.linspace(0.0, 2.0 * np.pi, segments)
        return np.stack([self.position_at_mean_anomaly(handle, M) for M in mean_anomalies])

    def position_at_time(self, handle: Hashable, time: float) -> np.ndarray:
        """Position of a body relative to its parent at the given time since epoch (m)."""
        if self.get_entry(handle).orbit is None:
            return np.zeros(3)
        return self.position_at_mean_anomaly(handle, self.mean_anomaly_at_time(handle, time))

    def absolute_position_at_time(self, handle: Hashable, time: float) -> np.ndarray:
        """Position of a body relative to the root of its tree (m)."""
        entry = self.get_entry(handle)
        if entry.parent is None:
            parent_position = np.zeros(3)
        else:
            parent_position = self.absolute_position_at_time(entry.parent, time)
        return self.position_at_time(handle, time) + parent_position

    def relative_position(self, origin: Hashable, relative: Hashable, time: float) -> np.ndarray:
        """
        Position of ``relative`` as seen from ``origin`` at the given time (m).

        Walks up from ``origin`` subtracting each orbital position until it
        reaches a body in the ancestry of ``relative``, then walks down that
        ancestry adding orbital positions until it reaches ``relative``. No
        absolute positions are computed along the way.

        Raises:
            NoCommonAncestorError: If the two bodies are in different trees
        """
        relative_hierarchy = self.get_parents(relative)
        hierarchy_index = {h: i for i, h in enumerate(relative_hierarchy)}

        position = np.zeros(3)
        position -= self.position_at_time(origin, time)
        handle = origin
        while True:
            index = hierarchy_index.get(handle)
            if index is not None:
                for h in relative_hierarchy[index:]:
                    position += self.position_at_time(h, time)
                return position
            parent = self.get_entry(handle).parent
            if parent is None:
                break
            handle = parent
            position -= self.position_at_time(handle, time)

        logger.error(
            "No common ancestor between %r (root %r) and %r (root %r)",
            origin, handle, relative, relative_hierarchy[0],
        )
        raise NoCommonAncestorError(f"Bodies {origin!r} and {relative!r} share no common ancestor")
