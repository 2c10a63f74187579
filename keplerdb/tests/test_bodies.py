"""Tests for the Body model and its gravity queries."""
import unittest

import numpy as np
from numpy.testing import assert_allclose
from pydantic import ValidationError

from keplerdb import Body, orbital_period
from keplerdb.constants import (
    CONVERT_KM_TO_M,
    CONVERT_M_TO_AU,
    MASS_EARTH_KG,
    RADIUS_EARTH_MEAN_KM,
)


class TestBody(unittest.TestCase):

    def test_default_is_empty(self):
        body = Body()
        self.assertEqual(body.mass_kg, 0.0)
        self.assertEqual(body.radius_equator_km, 0.0)
        self.assertEqual(body.radius_polar_km, 0.0)
        self.assertEqual(body.axial_tilt_deg, 0.0)

    def test_builders_return_copies(self):
        """Test that with_* builders never modify the original body."""
        body = Body()
        heavier = body.with_mass_kg(1.0e20)
        self.assertEqual(body.mass_kg, 0.0)
        self.assertEqual(heavier.mass_kg, 1.0e20)

    def test_frozen(self):
        body = Body.earth()
        with self.assertRaises(ValidationError):
            body.mass_kg = 1.0

    def test_negative_mass_rejected(self):
        with self.assertRaises(ValidationError):
            Body(mass_kg=-1.0)
        with self.assertRaises(ValidationError):
            Body().with_radius_km(-5.0)

    def test_radius_builders(self):
        body = Body().with_radius_km(1000.0)
        self.assertEqual(body.radius_equator_km, 1000.0)
        self.assertEqual(body.radius_polar_km, 1000.0)

        body = Body().with_radius_m(1565000.0)
        assert_allclose(body.radius_equator_km, 1565.0)
        assert_allclose(body.radius_polar_km, 1565.0)

        body = Body().with_radii_km(3396.2, 3376.2)
        assert_allclose(body.radius_avg_km(), 3386.2)
        assert_allclose(body.radius_avg_m(), 3386200.0)
        assert_allclose(body.radius_equator_m(), 3396200.0)
        assert_allclose(body.radius_polar_m(), 3376200.0)

    def test_mass_earths(self):
        body = Body().with_mass_earths(2.0)
        assert_allclose(body.mass_kg, 2.0 * MASS_EARTH_KG)

    def test_axial_tilt_rad(self):
        body = Body().with_axial_tilt_deg(90.0)
        assert_allclose(body.axial_tilt_rad(), np.pi / 2.0)

    def test_gm(self):
        assert_allclose(Body.earth().gm(), 3.986005e14, rtol=1e-6)

    def test_gravity(self):
        """Test that gravity_at_distance and distance_of_gravity are inverses."""
        earth = Body.earth()
        surface = RADIUS_EARTH_MEAN_KM * CONVERT_KM_TO_M
        self.assertAlmostEqual(earth.gravity_at_distance(surface), 9.81, delta=0.05)
        self.assertAlmostEqual(earth.distance_of_gravity(9.81), surface, delta=5000.0)

        g = earth.gravity_at_distance(4.2e7)
        assert_allclose(earth.distance_of_gravity(g), 4.2e7, rtol=1e-12)

    def test_gravity_rejects_non_positive(self):
        earth = Body.earth()
        with self.assertRaises(ValueError):
            earth.gravity_at_distance(0.0)
        with self.assertRaises(ValueError):
            earth.distance_of_gravity(-1.0)

    def test_sun_edge_of_influence(self):
        """Test that a tiny threshold gravity puts the Sun's edge past the heliopause."""
        sun = Body.sun()
        distance_au = sun.distance_of_gravity(0.0000005) * CONVERT_M_TO_AU
        self.assertGreater(distance_au, 100.0)

    def test_sun_flattening(self):
        sun = Body.sun()
        self.assertLess(sun.radius_polar_km, sun.radius_equator_km)
        assert_allclose(sun.radius_equator_km, 695700.0)


class TestPracticeProblems(unittest.TestCase):
    """
    Problems from Braeunig's Orbital Mechanics article, solved with Body.

    The article uses rounded constants, so tolerances are loose.
    """

    def setUp(self):
        self.earth = Body.earth()
        self.gm = self.earth.gm()

    def test_circular_velocity(self):
        """Problem 4.1: velocity of a circular orbit at 200 km altitude."""
        r = self.earth.radius_equator_m() + 200_000.0
        v = np.sqrt(self.gm / r)
        self.assertAlmostEqual(v, 7784.0, delta=2.0)

    def test_period(self):
        """Problem 4.2: period of a circular orbit at 200 km altitude."""
        r = self.earth.radius_equator_m() + 200_000.0
        self.assertAlmostEqual(orbital_period(self.gm, r), 5310.0, delta=2.0)

    def test_geosynchronous_radius(self):
        """Problem 4.3: radius of a geosynchronous orbit."""
        period_s = 86_164.1
        r = (period_s**2 * self.gm / (4.0 * np.pi**2)) ** (1.0 / 3.0)
        assert_allclose(r, 42_164_170.0, rtol=1e-4)

    def test_periapsis_apoapsis_velocity(self):
        """Problem 4.4: velocities at periapsis and apoapsis."""
        r_p = self.earth.radius_equator_m() + 250_000.0
        r_a = self.earth.radius_equator_m() + 500_000.0
        v_p = np.sqrt(2.0 * self.gm * r_a / (r_p * (r_a + r_p)))
        v_a = np.sqrt(2.0 * self.gm * r_p / (r_a * (r_a + r_p)))
        self.assertAlmostEqual(v_p, 7826.0, delta=2.0)
        self.assertAlmostEqual(v_a, 7542.0, delta=2.0)

    def test_eccentricity_from_periapsis(self):
        """Problem 4.6: eccentricity from periapsis radius and velocity."""
        r_p = 6_578_140.0
        v_p = 7_850.0
        e = r_p * v_p**2 / self.gm - 1.0
        self.assertAlmostEqual(e, 0.01696, delta=0.0001)


if __name__ == '__main__':
    unittest.main()
