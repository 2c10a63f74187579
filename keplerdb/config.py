from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from keplerdb.astrodynamics import TRUE_ANOMALY_METHODS

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------
DEFAULT_TRUE_ANOMALY_METHOD = "series"
DEFAULT_SOI_EDGE_GRAVITY = 0.0000005  # m/s^2, puts the Sun's edge past the heliopause
DEFAULT_ENTRY_SCALE = 1.0 / 3_000_000.0  # display scale hint for new entries


@dataclass(frozen=True, slots=True)
class DatabaseConfig:
    true_anomaly_method: str = DEFAULT_TRUE_ANOMALY_METHOD
    soi_edge_gravity: float = DEFAULT_SOI_EDGE_GRAVITY


def make_database_config(
    true_anomaly_method: Optional[str] = None,
    soi_edge_gravity: Optional[float] = None,
) -> DatabaseConfig:
    method = (true_anomaly_method or DEFAULT_TRUE_ANOMALY_METHOD).lower()
    if method not in TRUE_ANOMALY_METHODS:
        raise ValueError(
            f"Invalid true_anomaly_method '{true_anomaly_method}'. "
            f"Must be one of: {', '.join(sorted(TRUE_ANOMALY_METHODS))}"
        )
    gravity = DEFAULT_SOI_EDGE_GRAVITY if soi_edge_gravity is None else float(soi_edge_gravity)
    if gravity <= 0.0:
        raise ValueError(f"soi_edge_gravity must be > 0, got {gravity}")
    return DatabaseConfig(true_anomaly_method=method, soi_edge_gravity=gravity)
