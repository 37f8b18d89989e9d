import pytest

from pyalign.core.data_structures import AlignmentResult
from pyalign.utils.formatting import (
    format_altitude,
    format_angle,
    format_azimuth,
    format_distance,
    format_heading,
    format_horizontal_accuracy,
    format_latitude,
    format_longitude,
    format_result,
    format_tilt,
)


@pytest.mark.parametrize("meters, metric, expected", [
    (850.0, True, "850 m"),
    (0.0, True, "0 m"),
    (1234.0, True, "1.2 km"),
    (15500.0, True, "15.5 km"),
    (100.0, False, "328 ft"),
    (3218.688, False, "2.0 mi"),
])
def test_format_distance(meters, metric, expected):
    assert format_distance(meters, metric) == expected


def test_format_angle():
    assert format_angle(12.3456) == "12.3°"
    assert format_angle(12.3456, 2) == "12.35°"


def test_format_azimuth():
    assert format_azimuth(45.0) == "NE 45°"
    assert format_azimuth(0.0) == "N 0°"
    assert format_azimuth(268.6) == "W 269°"
    assert format_azimuth(359.7) == "N 0°"
    assert format_azimuth(359.4) == "N 359°"


def test_format_tilt():
    assert format_tilt(1.545) == "↑ 1.5°"
    assert format_tilt(-2.0) == "↓ 2.0°"
    assert format_tilt(0.0) == "↑ 0.0°"


def test_format_position():
    assert format_latitude(37.774929) == "37.774929°"
    assert format_longitude(-122.419416) == "-122.419416°"
    assert format_altitude(10.5) == "10.5 m"
    assert format_altitude(10.0, metric=False) == "32.8 ft"
    assert format_horizontal_accuracy(5.0) == "±5.0m"


def test_format_heading():
    assert format_heading(None) == "No heading"
    assert format_heading(45.66) == "45.7°"


def test_format_result():
    result = AlignmentResult(azimuth=0.0, elevation=1.545, distance=1111.95,
                             accuracy_percent=94.4, cardinal_direction="N")
    text = format_result(result)
    assert text.startswith("N 0°")
    assert "↑ 1.5°" in text
    assert "1.1 km" in text
    assert text.endswith("94% ALIGNED")
    assert "3648 ft" in format_result(result, metric=False)
