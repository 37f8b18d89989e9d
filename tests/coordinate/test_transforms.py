import unittest

import numpy as np

from pyalign.coordinate.aer_transforms import aer2enu, enu2aer, lla2aer
from pyalign.coordinate.transforms import ecef2enu, ecef2llh, enu_rotation, lla2enu, llh2ecef
from pyalign.core.constants import FE_WGS84, RE_WGS84


class TestCoordinateTransforms(unittest.TestCase):

    def setUp(self):
        # Test points
        self.tokyo_llh = np.array([np.radians(35.6762), np.radians(139.6503), 40.0])  # Tokyo Tower
        self.newyork_llh = np.array([np.radians(40.7128), np.radians(-74.0060), 10.0])  # New York
        self.equator_llh = np.array([0.0, 0.0, 0.0])  # Equator, prime meridian

    def test_llh2ecef_equator(self):
        np.testing.assert_allclose(llh2ecef(self.equator_llh), [RE_WGS84, 0.0, 0.0], atol=1e-6)

    def test_llh2ecef_pole(self):
        ecef = llh2ecef(np.array([np.pi / 2, 0.0, 0.0]))
        polar_radius = RE_WGS84 * (1.0 - FE_WGS84)
        self.assertAlmostEqual(ecef[2], polar_radius, places=3)
        self.assertAlmostEqual(ecef[0], 0.0, places=3)

    def test_llh2ecef_ecef2llh_round_trip(self):
        test_points = [
            self.tokyo_llh,
            self.newyork_llh,
            self.equator_llh,
            np.array([np.radians(-35.0), np.radians(150.0), 100.0])  # Southern hemisphere
        ]

        for llh in test_points:
            recovered = ecef2llh(llh2ecef(llh))
            np.testing.assert_allclose(recovered[:2], llh[:2], atol=1e-9)
            self.assertAlmostEqual(recovered[2], llh[2], places=3)

    def test_enu_rotation_orthonormal(self):
        R = enu_rotation(self.tokyo_llh)
        np.testing.assert_allclose(R @ R.T, np.eye(3), atol=1e-12)

    def test_ecef2enu_origin(self):
        enu = ecef2enu(llh2ecef(self.newyork_llh), self.newyork_llh)
        np.testing.assert_allclose(enu, np.zeros(3), atol=1e-6)

    def test_lla2enu_up(self):
        above = self.tokyo_llh + np.array([0.0, 0.0, 25.0])
        np.testing.assert_allclose(lla2enu(above, self.tokyo_llh), [0.0, 0.0, 25.0], atol=1e-6)

    def test_lla2enu_north_east(self):
        north = self.equator_llh + np.array([np.radians(0.001), 0.0, 0.0])
        east = self.equator_llh + np.array([0.0, np.radians(0.001), 0.0])
        enu_n = lla2enu(north, self.equator_llh)
        enu_e = lla2enu(east, self.equator_llh)
        self.assertGreater(enu_n[1], 100.0)
        self.assertAlmostEqual(enu_n[0], 0.0, places=6)
        self.assertGreater(enu_e[0], 100.0)
        self.assertAlmostEqual(enu_e[1], 0.0, places=6)


class TestAERTransforms(unittest.TestCase):

    def test_enu2aer(self):
        aer = enu2aer(np.array([100.0, 100.0, 0.0]), np.zeros(3))
        self.assertAlmostEqual(aer[0], np.pi / 4)
        self.assertAlmostEqual(aer[1], 0.0)
        self.assertAlmostEqual(aer[2], np.sqrt(2.0) * 100.0)

    def test_enu2aer_west_is_positive(self):
        aer = enu2aer(np.array([-10.0, 0.0, 10.0]), np.zeros(3))
        self.assertAlmostEqual(aer[0], 1.5 * np.pi)
        self.assertAlmostEqual(aer[1], np.pi / 4)

    def test_enu2aer_vertical(self):
        aer = enu2aer(np.array([0.0, 0.0, 50.0]), np.zeros(3))
        np.testing.assert_allclose(aer, [0.0, 0.0, 50.0])

    def test_aer2enu_inverse(self):
        enu_r = np.array([5.0, -3.0, 1.0])
        enu_t = np.array([120.0, -40.0, 35.0])
        np.testing.assert_allclose(aer2enu(enu2aer(enu_t, enu_r), enu_r), enu_t, atol=1e-9)

    def test_lla2aer_north(self):
        lla_r = np.array([np.radians(37.7749), np.radians(-122.4194), 0.0])
        lla_t = np.array([np.radians(37.7849), np.radians(-122.4194), 30.0])
        az, el, rng = lla2aer(lla_t, lla_r)
        self.assertLess(min(az, 2 * np.pi - az), 1e-6)
        self.assertGreater(el, 0.0)
        self.assertAlmostEqual(rng, 1110.0, delta=5.0)


if __name__ == '__main__':
    unittest.main()
