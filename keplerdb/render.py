"""
Conversions from database units to render space.

The database works in float64 meters. Renderers usually want single
precision and a display scale; both conversions happen here so that the
database never applies a view transform itself.
"""
from typing import Hashable

import numpy as np

from keplerdb.database import Database


def to_render_space(position_m, scale: float = 1.0) -> np.ndarray:
    """
    Scale a position and narrow it to single precision.

    Args:
        position_m: Position in meters, shape (3,) or (n, 3)
        scale: Render units per meter

    Returns:
        float32 array of the same shape
    """
    return (np.asarray(position_m, dtype=np.float64) * scale).astype(np.float32)


def entry_render_position(database: Database, origin: Hashable, handle: Hashable, time: float) -> np.ndarray:
    """
    Position of a body relative to ``origin`` in render units.

    Uses the ``scale`` hint stored on the origin's entry, since the origin is
    usually the body the camera is attached to.
    """
    scale = database.get_entry(origin).scale
    return to_render_space(database.relative_position(origin, handle, time), scale)


def render_radii(database: Database, handle: Hashable, scale: float) -> np.ndarray:
    """Equatorial, polar, equatorial radii of a body in render units, for scaling a unit sphere."""
    info = database.get_entry(handle).info
    radii_m = [info.radius_equator_m(), info.radius_polar_m(), info.radius_equator_m()]
    return to_render_space(radii_m, scale)
