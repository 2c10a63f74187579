import numpy as np
from scipy.spatial.transform import Rotation

from keplerdb.orbital_elements import OrbitalElements

X_AXIS = np.array([1.0, 0.0, 0.0])
Y_AXIS = np.array([0.0, 1.0, 0.0])


def true_anomaly_series(M: float, e: float) -> float:
    """
    Approximate the true anomaly from the mean anomaly with the
    second-order equation of center.

        ν = M + 2e·sin(M) + 1.25e²·sin(2M)

    Accurate for low eccentricity only; see ``true_anomaly_exact`` for the
    iterative solution.
    """
    return M + 2.0 * e * np.sin(M) + 1.25 * e**2 * np.sin(2.0 * M)


def solve_kepler(M: float, e: float, tol: float = 1e-10, max_iter: int = 50) -> float:
    """
    Solve Kepler's equation M = E - e*sin(E) for eccentric anomaly E
    using Newton-Raphson iteration.
    """
    E = M if e < 0.8 else np.pi

    for _ in range(max_iter):
        f = E - e * np.sin(E) - M
        fp = 1.0 - e * np.cos(E)
        E = E - f / fp
        if abs(f) < tol:
            break
    return E


def true_anomaly_exact(M: float, e: float) -> float:
    """True anomaly from the mean anomaly through the eccentric anomaly."""
    E = solve_kepler(M, e)
    return 2.0 * np.arctan2(
        np.sqrt(1.0 + e) * np.sin(E / 2.0),
        np.sqrt(1.0 - e) * np.cos(E / 2.0)
    )


TRUE_ANOMALY_METHODS = {
    'series': true_anomaly_series,
    'kepler': true_anomaly_exact,
}


def orbital_radius(a: float, e: float, nu: float) -> float:
    """Distance from the focus at true anomaly nu: r = a(1 - e²) / (1 + e·cos ν)."""
    return a * (1.0 - e**2) / (1.0 + e * np.cos(nu))


def mean_motion(gm: float, a: float) -> float:
    """Mean motion n = sqrt(GM / a³) in rad/s."""
    return np.sqrt(gm / a**3)


def orbital_period(gm: float, a: float) -> float:
    """
    Orbital period from Kepler's third law.

    T = 2π√(a³/μ)

    Args:
        gm: Gravitational parameter of the parent body (m^3/s^2)
        a: Semi-major axis (m)

    Returns:
        Period in seconds
    """
    return 2.0 * np.pi * np.sqrt(a**3 / gm)


def orbit_direction(elements: OrbitalElements, nu: float, parent_axial_tilt: float) -> np.ndarray:
    """
    Unit direction from the parent body to the orbiting body.

    The orbital reference plane is the parent's equatorial plane: the
    reference up axis (+y) is tilted about the vernal direction (+x) by the
    parent's axial tilt. The vernal direction is then carried through the
    true anomaly, argument of periapsis and inclination rotations in turn.

    Args:
        elements: Orbital elements of the orbiting body
        nu: True anomaly (rad)
        parent_axial_tilt: Axial tilt of the parent body (rad)

    Returns:
        Direction vector of shape (3,)
    """
    parent_up = Rotation.from_rotvec(X_AXIS * parent_axial_tilt).apply(Y_AXIS)

    rot_true_anomaly = Rotation.from_rotvec(parent_up * nu)
    rot_long_of_ascending_node = Rotation.from_rotvec(parent_up * elements.long_of_ascending_node)
    dir_ascending_node = rot_long_of_ascending_node.apply(X_AXIS)
    # Not renormalized: the rotation angle below scales with |x × node|
    dir_normal = np.cross(X_AXIS, dir_ascending_node)
    rot_inclination = Rotation.from_rotvec(dir_ascending_node * elements.inclination)
    rot_arg_of_periapsis = Rotation.from_rotvec(dir_normal * elements.arg_of_periapsis)

    return (rot_inclination * rot_arg_of_periapsis * rot_true_anomaly).apply(X_AXIS)
