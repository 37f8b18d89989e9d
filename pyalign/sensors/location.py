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

"""Position fix data from a location provider"""

import math
import time
from dataclasses import dataclass, field
from typing import Optional

from ..core.constants import LOCATION_MAX_AGE
from ..core.data_structures import GeoPoint
from ..geometry.alignment import cardinal_direction

__all__ = ['LocationData']


@dataclass(frozen=True)
class LocationData:
    """
    Position fix with accuracy estimates and an optional compass heading.

    Attributes:
        latitude (float): Latitude in degrees
        longitude (float): Longitude in degrees
        altitude (float): Altitude in meters
        horizontal_accuracy (float): Horizontal accuracy radius in meters
        vertical_accuracy (float): Vertical accuracy in meters
        heading (float, optional): Compass heading in degrees, 0 = magnetic north,
            negative when the provider has no valid heading
        heading_accuracy (float, optional): Heading accuracy in degrees
        timestamp (float): Unix time of the fix in seconds

    Examples:
        >>> fix = LocationData(37.7749, -122.4194, 10.0, 5.0, 10.0, heading=45.0)
        >>> fix.compass_direction
        'NE'
    """
    latitude: float
    longitude: float
    altitude: float = 0.0
    horizontal_accuracy: float = 0.0
    vertical_accuracy: float = 0.0
    heading: Optional[float] = None
    heading_accuracy: Optional[float] = None
    timestamp: float = field(default_factory=time.time)

    def is_valid(self) -> bool:
        """
        Check if the fix is usable.

        Returns:
        --------
        bool
            True if the position is in range and the horizontal accuracy
            is non-negative (location providers report a negative accuracy
            for an invalid fix)
        """
        return (self.to_geo_point().is_valid()
                and math.isfinite(self.horizontal_accuracy)
                and self.horizontal_accuracy >= 0)

    def to_geo_point(self, name: Optional[str] = None) -> GeoPoint:
        return GeoPoint(self.latitude, self.longitude, self.altitude, name)

    def age(self, now: Optional[float] = None) -> float:
        """Seconds elapsed since the fix; `now` defaults to the current time"""
        if now is None:
            now = time.time()
        return now - self.timestamp

    def is_fresh(self, now: Optional[float] = None,
                 max_age: float = LOCATION_MAX_AGE) -> bool:
        return self.age(now) < max_age

    @property
    def compass_direction(self) -> str:
        """Cardinal label of the heading, or "Unknown" without a valid heading"""
        if self.heading is None or self.heading < 0:
            return "Unknown"
        return cardinal_direction(self.heading)
