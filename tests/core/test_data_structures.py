import dataclasses
import unittest

import numpy as np

from pyalign.attitude.quaternion import euler2quat
from pyalign.core.data_structures import (
    AlignmentResult,
    AlignmentStatus,
    GeoPoint,
    OrientationSample,
    alignment_status,
)
from pyalign.core.exceptions import InvalidCoordinateError, PyAlignError


class TestGeoPoint(unittest.TestCase):

    def test_defaults(self):
        p = GeoPoint(37.7749, -122.4194)
        self.assertEqual(p.altitude, 0.0)
        self.assertIsNone(p.name)

    def test_frozen(self):
        p = GeoPoint(1.0, 2.0)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            p.latitude = 3.0

    def test_equality_ignores_name(self):
        self.assertEqual(GeoPoint(1.0, 2.0, 3.0, "a"), GeoPoint(1.0, 2.0, 3.0, "b"))
        self.assertNotEqual(GeoPoint(1.0, 2.0, 3.0), GeoPoint(1.0, 2.0, 4.0))

    def test_is_valid(self):
        self.assertTrue(GeoPoint(90.0, 180.0).is_valid())
        self.assertTrue(GeoPoint(-90.0, -180.0).is_valid())
        self.assertFalse(GeoPoint(90.1, 0.0).is_valid())
        self.assertFalse(GeoPoint(0.0, -180.5).is_valid())
        self.assertFalse(GeoPoint(float('nan'), 0.0).is_valid())

    def test_to_llh(self):
        llh = GeoPoint(45.0, -90.0, 12.5).to_llh()
        np.testing.assert_allclose(llh, [np.pi / 4, -np.pi / 2, 12.5])


class TestGeoPointFromUserInput(unittest.TestCase):

    def test_parse(self):
        p = GeoPoint.from_user_input(" 37.7849 ", "-122.4194", "12", name="Tower 12")
        self.assertEqual(p, GeoPoint(37.7849, -122.4194, 12.0))
        self.assertEqual(p.name, "Tower 12")

    def test_blank_altitude(self):
        self.assertEqual(GeoPoint.from_user_input("1", "2", "").altitude, 0.0)
        self.assertEqual(GeoPoint.from_user_input("1", "2", "   ").altitude, 0.0)
        self.assertEqual(GeoPoint.from_user_input("1", "2").altitude, 0.0)

    def test_not_numeric(self):
        with self.assertRaises(InvalidCoordinateError):
            GeoPoint.from_user_input("north", "-122.4194")
        with self.assertRaises(InvalidCoordinateError):
            GeoPoint.from_user_input("37.7", "")
        with self.assertRaises(InvalidCoordinateError):
            GeoPoint.from_user_input("37.7", "-122.4", "tall")

    def test_out_of_range(self):
        with self.assertRaises(InvalidCoordinateError) as context:
            GeoPoint.from_user_input("91", "0")
        self.assertIn("out of range", str(context.exception))
        with self.assertRaises(InvalidCoordinateError):
            GeoPoint.from_user_input("0", "200")

    def test_error_hierarchy(self):
        with self.assertRaises(ValueError):
            GeoPoint.from_user_input("x", "y")
        with self.assertRaises(PyAlignError):
            GeoPoint.from_user_input("x", "y")


class TestOrientationSample(unittest.TestCase):

    def test_heading_wrapped(self):
        self.assertEqual(OrientationSample(-10.0).heading, 350.0)
        self.assertEqual(OrientationSample(360.0).heading, 0.0)
        self.assertAlmostEqual(OrientationSample(725.5).heading, 5.5)

    def test_pitch_roll_kept(self):
        s = OrientationSample(10.0, pitch=-5.0, roll=3.0, timestamp=12.0)
        self.assertEqual((s.pitch, s.roll, s.timestamp), (-5.0, 3.0, 12.0))

    def test_from_attitude(self):
        s = OrientationSample.from_attitude(-np.pi / 2, np.pi / 18, 0.0)
        self.assertAlmostEqual(s.heading, 270.0)
        self.assertAlmostEqual(s.pitch, 10.0)

    def test_from_quaternion(self):
        q = euler2quat(0.0, 0.0, np.radians(90.0))
        self.assertAlmostEqual(OrientationSample.from_quaternion(q).heading, 90.0)

        q = euler2quat(np.radians(5.0), np.radians(-20.0), np.radians(-45.0))
        s = OrientationSample.from_quaternion(q, timestamp=3.0)
        self.assertAlmostEqual(s.heading, 315.0)
        self.assertAlmostEqual(s.pitch, -20.0)
        self.assertAlmostEqual(s.roll, 5.0)
        self.assertEqual(s.timestamp, 3.0)

    def test_identity_quaternion(self):
        s = OrientationSample.from_quaternion([1.0, 0.0, 0.0, 0.0])
        self.assertEqual(s.heading, 0.0)

    def test_from_compass(self):
        self.assertEqual(OrientationSample.from_compass(42.0, 50.0).heading, 42.0)
        self.assertEqual(OrientationSample.from_compass(0.0, 50.0).heading, 0.0)
        # negative magnetic heading means invalid
        self.assertEqual(OrientationSample.from_compass(-1.0, 123.0).heading, 123.0)

    def test_from_compass_without_valid_heading(self):
        self.assertIsNone(OrientationSample.from_compass(-1.0))
        self.assertIsNone(OrientationSample.from_compass(-1.0, -1.0))
        self.assertIsNone(OrientationSample.from_compass(-5.0, -0.5, pitch=3.0))


class TestAlignmentResult(unittest.TestCase):

    def make(self, accuracy):
        return AlignmentResult(azimuth=45.0, elevation=1.0, distance=100.0,
                               accuracy_percent=accuracy, cardinal_direction="NE")

    def test_status_thresholds(self):
        self.assertEqual(self.make(95.0).status, AlignmentStatus.ALIGNED)
        self.assertEqual(self.make(90.0).status, AlignmentStatus.ALIGNED)
        self.assertEqual(self.make(89.9).status, AlignmentStatus.CLOSE)
        self.assertEqual(self.make(70.0).status, AlignmentStatus.CLOSE)
        self.assertEqual(self.make(69.9).status, AlignmentStatus.ADJUST)
        self.assertEqual(self.make(0.0).status, AlignmentStatus.ADJUST)

    def test_is_aligned(self):
        self.assertTrue(self.make(90.0).is_aligned)
        self.assertFalse(self.make(89.0).is_aligned)

    def test_unknown_cardinal(self):
        with self.assertRaises(ValueError):
            AlignmentResult(0.0, 0.0, 0.0, 0.0, "North")

    def test_to_dict(self):
        d = self.make(80.0).to_dict()
        self.assertEqual(d['cardinal_direction'], "NE")
        self.assertEqual(d['accuracy_percent'], 80.0)
        self.assertEqual(set(d), {'azimuth', 'elevation', 'distance',
                                  'accuracy_percent', 'cardinal_direction'})


class TestAlignmentStatus(unittest.TestCase):

    def test_custom_thresholds(self):
        self.assertEqual(alignment_status(95.0, 98.0, 80.0), AlignmentStatus.CLOSE)
        self.assertEqual(alignment_status(98.0, 98.0, 80.0), AlignmentStatus.ALIGNED)
        self.assertEqual(alignment_status(79.0, 98.0, 80.0), AlignmentStatus.ADJUST)


if __name__ == '__main__':
    unittest.main()
