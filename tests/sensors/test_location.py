import unittest

from pyalign.core.data_structures import GeoPoint
from pyalign.sensors.location import LocationData
from pyalign.sensors.sensor_base import SensorInterface, SensorType


class TestLocationData(unittest.TestCase):

    def setUp(self):
        self.fix = LocationData(
            latitude=37.7749,
            longitude=-122.4194,
            altitude=16.0,
            horizontal_accuracy=5.0,
            vertical_accuracy=8.0,
            heading=47.0,
            heading_accuracy=3.0,
            timestamp=1000.0
        )

    def test_is_valid(self):
        self.assertTrue(self.fix.is_valid())

    def test_negative_accuracy_invalid(self):
        fix = LocationData(37.7749, -122.4194, horizontal_accuracy=-1.0, timestamp=0.0)
        self.assertFalse(fix.is_valid())

    def test_out_of_range_invalid(self):
        self.assertFalse(LocationData(95.0, 0.0).is_valid())
        self.assertFalse(LocationData(0.0, float('inf')).is_valid())

    def test_to_geo_point(self):
        point = self.fix.to_geo_point(name="me")
        self.assertEqual(point, GeoPoint(37.7749, -122.4194, 16.0))
        self.assertEqual(point.name, "me")

    def test_age(self):
        self.assertEqual(self.fix.age(now=1004.5), 4.5)
        self.assertTrue(self.fix.is_fresh(now=1009.0))
        self.assertFalse(self.fix.is_fresh(now=1010.0))
        self.assertTrue(self.fix.is_fresh(now=1015.0, max_age=30.0))

    def test_default_timestamp_is_now(self):
        fix = LocationData(1.0, 2.0)
        self.assertTrue(fix.is_fresh())

    def test_compass_direction(self):
        self.assertEqual(self.fix.compass_direction, "NE")
        self.assertEqual(LocationData(1.0, 2.0).compass_direction, "Unknown")
        self.assertEqual(LocationData(1.0, 2.0, heading=350.0).compass_direction, "N")
        self.assertEqual(LocationData(1.0, 2.0, heading=-1.0).compass_direction, "Unknown")


class TestSensorInterface(unittest.TestCase):

    def test_abstract(self):
        with self.assertRaises(TypeError):
            SensorInterface("s0", SensorType.GNSS)

    def test_subclass(self):
        class FixedCompass(SensorInterface):
            def initialize(self):
                self._is_initialized = True
                return True

            def read(self):
                return 90.0

        compass = FixedCompass("compass_0", SensorType.COMPASS)
        self.assertFalse(compass.is_initialized)
        self.assertTrue(compass.initialize())
        self.assertTrue(compass.is_initialized)
        self.assertEqual(compass.sensor_type, SensorType.COMPASS)
        self.assertEqual(compass.read(), 90.0)


if __name__ == '__main__':
    unittest.main()
