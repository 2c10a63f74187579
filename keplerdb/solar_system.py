"""
Seed data for our solar system.

Bodies are read from ``data/solar_system.csv``: the Sun, the eight planets, a
selection of their moons, and the Eris and Haumea dwarf-planet systems.

Due to inconsistencies in the data sources, the orientations of the orbits
and the exact positions of bodies along them are not necessarily accurate to
real life, especially for the moons of the giant planets.
"""
import csv
import logging
from pathlib import Path
from typing import Dict

from keplerdb.bodies import Body
from keplerdb.database import Database, DatabaseEntry
from keplerdb.orbital_elements import OrbitalElements

logger = logging.getLogger(__name__)

HANDLE_SOL = 0
HANDLE_MERCURY = 1
HANDLE_VENUS = 2
HANDLE_EARTH = 3
HANDLE_LUNA = HANDLE_EARTH + 1
HANDLE_MARS = HANDLE_EARTH + 2
HANDLE_PHOBOS = HANDLE_MARS + 1
HANDLE_DEIMOS = HANDLE_MARS + 2
HANDLE_JUPITER = HANDLE_MARS + 3
HANDLE_IO = HANDLE_JUPITER + 1
HANDLE_EUROPA = HANDLE_JUPITER + 2
HANDLE_GANYMEDE = HANDLE_JUPITER + 3
HANDLE_CALLISTO = HANDLE_JUPITER + 4
HANDLE_AMALTHEA = HANDLE_JUPITER + 5
HANDLE_HIMALIA = HANDLE_JUPITER + 6
HANDLE_ELARA = HANDLE_JUPITER + 7
HANDLE_PASIPHAE = HANDLE_JUPITER + 8
HANDLE_SINOPE = HANDLE_JUPITER + 9
HANDLE_LYSITHEA = HANDLE_JUPITER + 10
HANDLE_CARME = HANDLE_JUPITER + 11
HANDLE_ANANKE = HANDLE_JUPITER + 12
HANDLE_LEDA = HANDLE_JUPITER + 13
HANDLE_SATURN = HANDLE_JUPITER + 97
HANDLE_MIMAS = HANDLE_SATURN + 1
HANDLE_ENCELADUS = HANDLE_SATURN + 2
HANDLE_TETHYS = HANDLE_SATURN + 3
HANDLE_DIONE = HANDLE_SATURN + 4
HANDLE_RHEA = HANDLE_SATURN + 5
HANDLE_TITAN = HANDLE_SATURN + 6
HANDLE_HYPERION = HANDLE_SATURN + 7
HANDLE_IAPETUS = HANDLE_SATURN + 8
HANDLE_PHOEBE = HANDLE_SATURN + 9
HANDLE_JANUS = HANDLE_SATURN + 10
HANDLE_URANUS = HANDLE_SATURN + 148
HANDLE_ARIEL = HANDLE_URANUS + 1
HANDLE_UMBRIEL = HANDLE_URANUS + 2
HANDLE_TITANIA = HANDLE_URANUS + 3
HANDLE_OBERON = HANDLE_URANUS + 4
HANDLE_MIRANDA = HANDLE_URANUS + 5
HANDLE_NEPTUNE = HANDLE_URANUS + 28
HANDLE_TRITON = HANDLE_NEPTUNE + 1
HANDLE_NEREID = HANDLE_NEPTUNE + 2
HANDLE_NAIAD = HANDLE_NEPTUNE + 3
HANDLE_THALASSA = HANDLE_NEPTUNE + 4
HANDLE_DESPINA = HANDLE_NEPTUNE + 5
HANDLE_GALATEA = HANDLE_NEPTUNE + 6
HANDLE_LARISSA = HANDLE_NEPTUNE + 7
HANDLE_PLUTO = HANDLE_NEPTUNE + 17
HANDLE_ERIS = HANDLE_PLUTO + 1
HANDLE_DYSNOMIA = HANDLE_ERIS + 1
HANDLE_HAUMEA = HANDLE_ERIS + 2
HANDLE_HIIAKA = HANDLE_HAUMEA + 1
HANDLE_NAMAKA = HANDLE_HAUMEA + 2

_SEMIMAJOR_AXIS_SETTERS = {
    'm': OrbitalElements.with_semimajor_axis_m,
    'km': OrbitalElements.with_semimajor_axis_km,
    'au': OrbitalElements.with_semimajor_axis_au,
}


def _row_to_entry(row: Dict[str, str]) -> DatabaseEntry:
    info = Body(
        mass_kg=float(row['Mass (kg)']),
        radius_equator_km=float(row['Equatorial Radius (km)']),
        radius_polar_km=float(row['Polar Radius (km)']),
        axial_tilt_deg=float(row['Axial Tilt (deg)']),
    )
    entry = DatabaseEntry.new(info, row['Name'])

    if row['Parent ID']:
        units = row['Semi-Major Axis Units'].lower()
        if units not in _SEMIMAJOR_AXIS_SETTERS:
            raise ValueError(f"Invalid semi-major axis units '{units}' for {row['Name']}")
        orbit = _SEMIMAJOR_AXIS_SETTERS[units](OrbitalElements(), float(row['Semi-Major Axis']))
        orbit = (
            orbit
            .with_eccentricity(float(row['Eccentricity ()']))
            .with_inclination_deg(float(row['Inclination (deg)']))
            .with_arg_of_periapsis_deg(float(row['Argument of Periapsis (deg)']))
            .with_long_of_ascending_node_deg(float(row['Longitude of the Ascending Node (deg)']))
        )
        entry = (
            entry
            .with_parent(int(row['Parent ID']), orbit)
            .with_mean_anomaly_deg(float(row['Mean Anomaly at t=0 (deg)']))
        )

    if row['Scale']:
        entry = entry.with_scale(float(row['Scale']))
    return entry


def load_solar_system_entries() -> Dict[int, DatabaseEntry]:
    """
    Load all solar system bodies from the bundled CSV file.

    Returns:
        Dictionary mapping body handle to DatabaseEntry
    """
    # Data directory sits beside this file
    filepath = Path(__file__).parent / 'data' / 'solar_system.csv'
    entries = {}

    with open(filepath, 'r', encoding='utf-8') as f:
        reader = csv.DictReader(f)
        for row in reader:
            handle = int(row['#Body ID'])
            entries[handle] = _row_to_entry(row)

    logger.debug("Loaded %d solar system bodies from %s", len(entries), filepath)
    return entries


def add_solar_system(database: Database) -> None:
    """Populates the database with celestial bodies from our solar system."""
    for handle, entry in load_solar_system_entries().items():
        database.add_entry(handle, entry)
