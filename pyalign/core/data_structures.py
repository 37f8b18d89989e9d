# Copyright 2024 inuex35
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Core value types for alignment processing"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

import numpy as np

from ..attitude.quaternion import quat2euler
from ..attitude.wrap import wrap_heading
from .constants import ALIGNED_THRESHOLD, CARDINAL_DIRECTIONS, CLOSE_THRESHOLD, D2R, R2D
from .exceptions import InvalidCoordinateError

__all__ = [
    "AlignmentStatus", "alignment_status",
    "GeoPoint", "OrientationSample", "AlignmentResult",
]


class AlignmentStatus(Enum):
    """Coarse alignment state derived from the accuracy score.

    Attributes
    ----------
    ALIGNED : str
        Device heading is within the aligned threshold of the target azimuth
    CLOSE : str
        Device heading is near the target azimuth but not aligned
    ADJUST : str
        Device needs to be turned toward the target
    """
    ALIGNED = "ALIGNED"
    CLOSE = "CLOSE"
    ADJUST = "ADJUST"


def alignment_status(accuracy: float,
                     aligned_threshold: float = ALIGNED_THRESHOLD,
                     close_threshold: float = CLOSE_THRESHOLD) -> AlignmentStatus:
    """Classify an accuracy percentage into an AlignmentStatus.

    Parameters
    ----------
    accuracy : float
        Alignment accuracy in percent [0, 100]
    aligned_threshold : float, optional
        Lowest accuracy counted as aligned (default: 90)
    close_threshold : float, optional
        Lowest accuracy counted as close (default: 70)

    Returns
    -------
    AlignmentStatus
        ALIGNED, CLOSE or ADJUST
    """
    if accuracy >= aligned_threshold:
        return AlignmentStatus.ALIGNED
    if accuracy >= close_threshold:
        return AlignmentStatus.CLOSE
    return AlignmentStatus.ADJUST


@dataclass(frozen=True)
class GeoPoint:
    """Geographic point in decimal degrees with altitude in meters.

    Attributes
    ----------
    latitude : float
        Latitude in degrees (-90 to 90)
    longitude : float
        Longitude in degrees (-180 to 180)
    altitude : float
        Altitude in meters, 0 when unknown
    name : str, optional
        Display label, ignored by equality

    Notes
    -----
    Range checking is left to the caller; use is_valid() or
    from_user_input() when the values come from manual entry.
    """
    latitude: float
    longitude: float
    altitude: float = 0.0
    name: Optional[str] = field(default=None, compare=False)

    def is_valid(self) -> bool:
        """Check that latitude and longitude are finite and within range.

        Returns
        -------
        bool
            True if -90 <= latitude <= 90 and -180 <= longitude <= 180
        """
        return (math.isfinite(self.latitude) and math.isfinite(self.longitude)
                and math.isfinite(self.altitude)
                and -90.0 <= self.latitude <= 90.0
                and -180.0 <= self.longitude <= 180.0)

    def to_llh(self) -> np.ndarray:
        """Geodetic array [lat, lon, height] in (rad, rad, m)"""
        return np.array([self.latitude * D2R, self.longitude * D2R, self.altitude])

    @classmethod
    def from_user_input(cls, latitude: str, longitude: str,
                        altitude: Optional[str] = None,
                        name: Optional[str] = None) -> 'GeoPoint':
        """Parse a point from manually entered text.

        Parameters
        ----------
        latitude : str
            Latitude text in decimal degrees
        longitude : str
            Longitude text in decimal degrees
        altitude : str, optional
            Altitude text in meters; blank or None means 0
        name : str, optional
            Display label

        Returns
        -------
        GeoPoint
            Parsed point

        Raises
        ------
        InvalidCoordinateError
            If a value is not numeric or latitude/longitude is out of range

        Examples
        --------
        >>> GeoPoint.from_user_input("37.7849", "-122.4194", "12")
        GeoPoint(latitude=37.7849, longitude=-122.4194, altitude=12.0, name=None)
        """
        try:
            lat = float(str(latitude).strip())
            lon = float(str(longitude).strip())
        except ValueError as e:
            raise InvalidCoordinateError(
                f"Latitude/longitude must be numeric: {latitude!r}, {longitude!r}") from e

        alt = 0.0
        if altitude is not None and str(altitude).strip():
            try:
                alt = float(str(altitude).strip())
            except ValueError as e:
                raise InvalidCoordinateError(f"Altitude must be numeric: {altitude!r}") from e

        point = cls(lat, lon, alt, name)
        if not point.is_valid():
            raise InvalidCoordinateError(
                f"Coordinate out of range: lat={lat}, lon={lon}, alt={alt}")
        return point


@dataclass(frozen=True)
class OrientationSample:
    """Device orientation reading.

    Attributes
    ----------
    heading : float
        Compass heading in degrees [0, 360), 0 = magnetic north
    pitch : float
        Forward/backward tilt in degrees
    roll : float
        Left/right tilt in degrees
    timestamp : float
        Sample time in seconds
    """
    heading: float
    pitch: float = 0.0
    roll: float = 0.0
    timestamp: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, 'heading', wrap_heading(self.heading))

    @classmethod
    def from_attitude(cls, yaw: float, pitch: float, roll: float,
                      timestamp: float = 0.0) -> 'OrientationSample':
        """Build a sample from attitude angles in radians"""
        return cls(yaw * R2D, pitch * R2D, roll * R2D, timestamp)

    @classmethod
    def from_quaternion(cls, q, timestamp: float = 0.0) -> 'OrientationSample':
        """Build a sample from an attitude quaternion.

        Parameters
        ----------
        q : array_like, shape (4,)
            Attitude quaternion [w, x, y, z], body to local NED
        timestamp : float, optional
            Sample time in seconds

        Returns
        -------
        OrientationSample
            Sample with heading taken from yaw
        """
        roll, pitch, yaw = quat2euler(np.asarray(q, dtype=np.double))
        return cls.from_attitude(float(yaw), float(pitch), float(roll), timestamp)

    @classmethod
    def from_compass(cls, magnetic_heading: float, true_heading: float = -1.0,
                     pitch: float = 0.0, roll: float = 0.0,
                     timestamp: float = 0.0) -> Optional['OrientationSample']:
        """Build a sample from a compass reading.

        The magnetic heading is used when valid (>= 0); otherwise the
        true heading is used. Returns None when neither is valid.
        """
        heading = magnetic_heading if magnetic_heading >= 0 else true_heading
        if heading < 0:
            return None
        return cls(heading, pitch, roll, timestamp)


@dataclass(frozen=True)
class AlignmentResult:
    """Result bundle of one alignment computation.

    Attributes
    ----------
    azimuth : float
        Bearing from current position to target in degrees [0, 360)
    elevation : float
        Tilt toward the target in degrees, positive upward
    distance : float
        Great-circle surface distance in meters
    accuracy_percent : float
        Heading-to-azimuth alignment score [0, 100]
    cardinal_direction : str
        Compass octant label of the azimuth
    """
    azimuth: float
    elevation: float
    distance: float
    accuracy_percent: float
    cardinal_direction: str

    def __post_init__(self):
        if self.cardinal_direction not in CARDINAL_DIRECTIONS:
            raise ValueError(f"Unknown cardinal direction: {self.cardinal_direction}")

    @property
    def status(self) -> AlignmentStatus:
        """Alignment status with the default thresholds"""
        return alignment_status(self.accuracy_percent)

    @property
    def is_aligned(self) -> bool:
        return self.status is AlignmentStatus.ALIGNED

    def to_dict(self) -> dict:
        return {
            'azimuth': self.azimuth,
            'elevation': self.elevation,
            'distance': self.distance,
            'accuracy_percent': self.accuracy_percent,
            'cardinal_direction': self.cardinal_direction,
        }
