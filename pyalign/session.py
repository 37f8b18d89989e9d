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

"""Alignment session holding the latest readings and re-deriving results"""

import logging
from typing import Callable, Optional, Union

from .attitude.wrap import wrap_heading
from .core.config import AlignmentConfig
from .core.data_structures import (
    AlignmentResult,
    AlignmentStatus,
    GeoPoint,
    OrientationSample,
    alignment_status,
)
from .geometry.alignment import compute_alignment
from .logger import setup_logger_from_config
from .sensors.location import LocationData
from .sensors.sensor_base import SensorInterface
from .utils.formatting import format_result

logger = logging.getLogger(__name__)

__all__ = ['AlignmentSession']

ResultCallback = Callable[[AlignmentResult], None]


class AlignmentSession:
    """
    Owner of the mutable "current reading" state of an alignment.

    The session keeps the most recent position, orientation, target and
    target height. Every update re-derives an AlignmentResult through the
    pure geometry functions and passes it to the subscribed callbacks.
    No result exists until both a position and a target are known.

    Parameters
    ----------
    config : AlignmentConfig, optional
        Thresholds, default target height and update filtering

    Examples
    --------
    >>> session = AlignmentSession()
    >>> session.subscribe(lambda r: print(r.cardinal_direction))
    >>> session.set_target(GeoPoint(37.7849, -122.4194))
    >>> session.update_location(GeoPoint(37.7749, -122.4194))
    N
    """

    def __init__(self, config: Optional[AlignmentConfig] = None):
        self.config = config if config is not None else AlignmentConfig()
        if self.config.logging:
            setup_logger_from_config(self.config.logging)
        self.target_height = self.config.target_height

        self.current_location: Optional[LocationData] = None
        self.orientation: Optional[OrientationSample] = None
        self.target: Optional[GeoPoint] = None
        self.result: Optional[AlignmentResult] = None

        self._subscribers: list[ResultCallback] = []
        # newest reading time while draining a sensor; None means wall clock
        self._sensor_time: Optional[float] = None

    def subscribe(self, callback: ResultCallback) -> None:
        """Register a callback invoked with each new AlignmentResult"""
        self._subscribers.append(callback)

    def unsubscribe(self, callback: ResultCallback) -> None:
        self._subscribers.remove(callback)

    def set_target(self, target: GeoPoint) -> Optional[AlignmentResult]:
        """Select the target point and recompute"""
        self.target = target
        logger.info(f"Target set to ({target.latitude:.6f}, {target.longitude:.6f}, "
                    f"{target.altitude:.1f} m)" + (f" '{target.name}'" if target.name else ""))
        return self._recompute()

    def clear_target(self) -> None:
        """Forget the target; no result is available until a new one is set"""
        self.target = None
        self.result = None

    def set_target_height(self, height: float) -> Optional[AlignmentResult]:
        """Set the height of the aiming point above the target altitude (m)"""
        self.target_height = float(height)
        return self._recompute()

    def update_location(self, location: Union[LocationData, GeoPoint]) -> Optional[AlignmentResult]:
        """
        Accept a new position fix.

        Parameters
        ----------
        location : LocationData or GeoPoint
            New device position. A LocationData carrying a heading also
            updates the orientation.

        Returns
        -------
        AlignmentResult or None
            The recomputed result, None while no target is selected
        """
        if isinstance(location, GeoPoint):
            location = LocationData(location.latitude, location.longitude, location.altitude)

        if not location.is_valid():
            logger.warning(f"Ignoring invalid position fix: lat={location.latitude}, "
                           f"lon={location.longitude}, hacc={location.horizontal_accuracy}")
            return self.result

        self.current_location = location
        if location.heading is not None:
            sample = OrientationSample.from_compass(location.heading, timestamp=location.timestamp)
            if sample is not None and self._accept_heading(sample):
                self.orientation = sample
        return self._recompute()

    def update_orientation(self, sample: OrientationSample) -> Optional[AlignmentResult]:
        """
        Accept a new orientation sample.

        Heading changes smaller than config.heading_filter degrees are
        ignored and return the previous result.
        """
        if not self._accept_heading(sample):
            return self.result
        self.orientation = sample
        return self._recompute()

    def feed(self, reading: Union[LocationData, GeoPoint, OrientationSample]) -> Optional[AlignmentResult]:
        """Dispatch a reading from any sensor to the matching update method"""
        if isinstance(reading, OrientationSample):
            return self.update_orientation(reading)
        if isinstance(reading, (LocationData, GeoPoint)):
            return self.update_location(reading)
        raise TypeError(f"Unsupported reading type: {type(reading).__name__}")

    def run(self, sensor: SensorInterface) -> list[AlignmentResult]:
        """
        Drain a sensor into the session.

        Parameters
        ----------
        sensor : SensorInterface
            Source of readings; initialized here if needed

        Returns
        -------
        list[AlignmentResult]
            Results produced, one per reading that yielded a result

        Notes
        -----
        While draining, fix freshness is judged against the newest reading
        timestamp rather than the wall clock, so recorded tracks replay
        without stale-fix warnings unless the track itself has gaps.
        """
        if not sensor.is_initialized and not sensor.initialize():
            raise RuntimeError(f"Sensor '{sensor.sensor_id}' failed to initialize")

        results = []
        try:
            while True:
                reading = sensor.read()
                if reading is None:
                    break
                timestamp = getattr(reading, 'timestamp', None)
                if timestamp is not None:
                    self._sensor_time = (timestamp if self._sensor_time is None
                                         else max(self._sensor_time, timestamp))
                result = self.feed(reading)
                if result is not None:
                    results.append(result)
        finally:
            self._sensor_time = None
        return results

    def summary(self) -> Optional[str]:
        """One-line display of the current result in the configured units"""
        if self.result is None:
            return None
        return format_result(self.result, metric=self.config.use_metric_units)

    @property
    def status(self) -> Optional[AlignmentStatus]:
        """Alignment status using the configured thresholds"""
        if self.result is None:
            return None
        return alignment_status(self.result.accuracy_percent,
                                self.config.aligned_threshold,
                                self.config.close_threshold)

    @property
    def is_aligned(self) -> bool:
        return self.status is AlignmentStatus.ALIGNED

    def _accept_heading(self, sample: OrientationSample) -> bool:
        if self.orientation is None or self.config.heading_filter <= 0:
            return True
        delta = wrap_heading(sample.heading - self.orientation.heading)
        return min(delta, 360.0 - delta) >= self.config.heading_filter

    def _recompute(self) -> Optional[AlignmentResult]:
        if self.current_location is None or self.target is None:
            return None

        now = self._sensor_time
        if not self.current_location.is_fresh(now, max_age=self.config.location_max_age):
            logger.warning(f"Position fix is {self.current_location.age(now):.1f} s old")

        heading = self.orientation.heading if self.orientation is not None else None
        self.result = compute_alignment(
            self.current_location.to_geo_point(),
            self.target,
            device_heading=heading,
            target_height_offset=self.target_height,
        )

        if self.config.show_debug_info:
            logger.debug(f"az={self.result.azimuth:.1f} el={self.result.elevation:.2f} "
                         f"d={self.result.distance:.1f} acc={self.result.accuracy_percent:.1f}")

        for callback in self._subscribers:
            callback(self.result)
        return self.result
