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

"""Base sensor classes and interfaces"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Optional

__all__ = ['SensorType', 'SensorInterface']


class SensorType(Enum):
    """Enumeration of live data sources feeding an alignment session.

    Attributes
    ----------
    GNSS : int
        Position fixes (latitude, longitude, altitude)
    COMPASS : int
        Magnetic or true heading
    MOTION : int
        Device attitude (pitch, roll, yaw)
    """
    GNSS = 1
    COMPASS = 2
    MOTION = 3


class SensorInterface(ABC):
    """Abstract base class for sensor interfaces.

    Platform integrations (location services, motion sensors) implement
    this to hand readings to an AlignmentSession. The library itself only
    ships replay sources.
    """

    def __init__(self, sensor_id: str, sensor_type: SensorType):
        self.sensor_id = sensor_id
        self.sensor_type = sensor_type
        self._is_initialized = False

    @abstractmethod
    def initialize(self) -> bool:
        """Initialize the sensor.

        Returns
        -------
        bool
            True if initialization was successful, False otherwise
        """
        pass

    @abstractmethod
    def read(self) -> Optional[Any]:
        """Read the next measurement.

        Returns
        -------
        Optional[Any]
            Latest reading (LocationData or OrientationSample), or None if
            no data is available
        """
        pass

    @property
    def is_initialized(self) -> bool:
        return self._is_initialized
