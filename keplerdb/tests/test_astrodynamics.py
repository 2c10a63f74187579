import unittest

import numpy as np
from numpy.testing import assert_allclose

from keplerdb import (
    OrbitalElements,
    mean_motion,
    orbit_direction,
    orbital_period,
    orbital_radius,
    solve_kepler,
    true_anomaly_exact,
    true_anomaly_series,
)


class TestTrueAnomaly(unittest.TestCase):

    def test_series_circular(self):
        for M in np.linspace(0.0, 2.0 * np.pi, 17):
            self.assertEqual(true_anomaly_series(M, 0.0), M)

    def test_series_formula(self):
        M, e = 0.7, 0.1
        expected = M + 2.0 * e * np.sin(M) + 1.25 * e**2 * np.sin(2.0 * M)
        self.assertEqual(true_anomaly_series(M, e), expected)

    def test_solve_kepler(self):
        for e in (0.0, 0.0167, 0.3, 0.9):
            for M in (0.1, 1.0, 2.5, 4.0):
                E = solve_kepler(M, e)
                assert_allclose(E - e * np.sin(E), M, atol=1e-9)

    def test_series_close_to_exact_for_low_eccentricity(self):
        e = 0.0167086
        for M in np.linspace(0.1, 3.0, 7):
            assert_allclose(true_anomaly_series(M, e), true_anomaly_exact(M, e), atol=1e-5)

    def test_apsides_agree(self):
        """Test that both methods put M=0 at periapsis and M=π at apoapsis."""
        e = 0.4
        assert_allclose(true_anomaly_series(0.0, e), 0.0, atol=1e-12)
        assert_allclose(true_anomaly_exact(0.0, e), 0.0, atol=1e-12)
        assert_allclose(true_anomaly_series(np.pi, e), np.pi, atol=1e-12)
        assert_allclose(true_anomaly_exact(np.pi, e), np.pi, atol=1e-9)


class TestOrbitGeometry(unittest.TestCase):

    def test_orbital_radius(self):
        a, e = 1000.0, 0.25
        assert_allclose(orbital_radius(a, e, 0.0), a * (1.0 - e))
        assert_allclose(orbital_radius(a, e, np.pi), a * (1.0 + e))
        assert_allclose(orbital_radius(a, 0.0, 1.234), a)

    def test_mean_motion_and_period(self):
        gm, a = 3.986004418e14, 7.0e6
        n = mean_motion(gm, a)
        assert_allclose(orbital_period(gm, a), 2.0 * np.pi / n)

    def test_direction_is_unit(self):
        elements = (
            OrbitalElements()
            .with_semimajor_axis_m(1.0)
            .with_inclination_deg(33.0)
            .with_arg_of_periapsis_deg(120.0)
            .with_long_of_ascending_node_deg(75.0)
        )
        for nu in np.linspace(0.0, 2.0 * np.pi, 9):
            for tilt in (0.0, 0.4, 1.7):
                assert_allclose(np.linalg.norm(orbit_direction(elements, nu, tilt)), 1.0, rtol=1e-12)

    def test_reference_direction(self):
        """Test that an untilted, unrotated orbit starts on +x and turns about +y."""
        elements = OrbitalElements().with_semimajor_axis_m(1.0)
        assert_allclose(orbit_direction(elements, 0.0, 0.0), [1.0, 0.0, 0.0], atol=1e-12)
        assert_allclose(orbit_direction(elements, np.pi / 2.0, 0.0), [0.0, 0.0, -1.0], atol=1e-12)

    def test_parent_tilt_moves_orbital_plane(self):
        """Test that the orbital plane follows the parent's equator."""
        elements = OrbitalElements().with_semimajor_axis_m(1.0)
        direction = orbit_direction(elements, np.pi / 2.0, np.pi / 2.0)
        assert_allclose(direction, [0.0, 1.0, 0.0], atol=1e-12)

    def test_inclination_lifts_out_of_plane(self):
        elements = OrbitalElements().with_semimajor_axis_m(1.0).with_inclination_deg(30.0)
        direction = orbit_direction(elements, np.pi / 2.0, 0.0)
        self.assertGreater(abs(direction[1]), 0.1)


if __name__ == '__main__':
    unittest.main()
