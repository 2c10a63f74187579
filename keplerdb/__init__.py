from .orbital_elements import OrbitalElements, normalize_angle
from .bodies import Body

from .constants import (
    # Constants
    G,
    CONSTANT_OF_GRAVITATION,
    CONVERT_KM_TO_M,
    CONVERT_M_TO_KM,
    CONVERT_AU_TO_M,
    CONVERT_M_TO_AU,
    CONVERT_DEG_TO_RAD,
    CONVERT_RAD_TO_DEG,
    TWO_PI,
    DAY,
    YEAR,
    MASS_EARTH_KG,
    MASS_SUN_KG,
)

from .astrodynamics import (
    # Functions
    true_anomaly_series,
    true_anomaly_exact,
    solve_kepler,
    orbital_radius,
    mean_motion,
    orbital_period,
    orbit_direction,
)

from .config import (
    DatabaseConfig,
    make_database_config,
)

from .database import (
    # Database
    Database,
    DatabaseEntry,
    UnknownBodyError,
    FrozenDatabaseError,
    HierarchyError,
    NoCommonAncestorError,
)

from .solar_system import (
    add_solar_system,
    load_solar_system_entries,
)

from .render import (
    to_render_space,
    entry_render_position,
    render_radii,
)

__all__ = [
    # Constants
    "G",
    "CONSTANT_OF_GRAVITATION",
    "CONVERT_KM_TO_M",
    "CONVERT_M_TO_KM",
    "CONVERT_AU_TO_M",
    "CONVERT_M_TO_AU",
    "CONVERT_DEG_TO_RAD",
    "CONVERT_RAD_TO_DEG",
    "TWO_PI",
    "DAY",
    "YEAR",
    "MASS_EARTH_KG",
    "MASS_SUN_KG",

    # Value types
    "Body",
    "OrbitalElements",
    "normalize_angle",

    # Functions
    "true_anomaly_series",
    "true_anomaly_exact",
    "solve_kepler",
    "orbital_radius",
    "mean_motion",
    "orbital_period",
    "orbit_direction",

    # Configuration
    "DatabaseConfig",
    "make_database_config",

    # Database
    "Database",
    "DatabaseEntry",
    "UnknownBodyError",
    "FrozenDatabaseError",
    "HierarchyError",
    "NoCommonAncestorError",

    # Solar system
    "add_solar_system",
    "load_solar_system_entries",

    # Render boundary
    "to_render_space",
    "entry_render_position",
    "render_radii",
]
