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

"""
Alignment geometry between a device position and a target.

This module provides the pure functions used to aim a handheld device at a
target point such as a cell tower:

- bearing : spherical initial bearing (azimuth) from north
- distance : haversine great-circle surface distance
- elevation : tilt angle toward the target including a height offset
- alignment_accuracy : linear score of heading versus target azimuth
- cardinal_direction : eight-way compass label of a bearing
- compute_alignment : all of the above as one AlignmentResult
- line_of_sight : azimuth/elevation/range on the WGS84 ellipsoid

Notes
-----
Every function is total over finite numeric input. Degenerate geometry
(coincident points, zero horizontal distance) yields 0 rather than an
error. Range checking of latitude and longitude is the caller's job.

Array variants (suffix ``_array``) take numpy arrays of degrees and are
used for recorded tracks.
"""

import logging
import math
from typing import Optional

import numpy as np

from ..attitude.wrap import wrap_heading, wrapTo360
from ..coordinate.aer_transforms import lla2aer
from ..core.constants import (
    CARDINAL_DIRECTIONS,
    D2R,
    EARTH_RADIUS_M,
    FULL_CIRCLE,
    HALF_CIRCLE,
    OCTANT_WIDTH,
    R2D,
)
from ..core.data_structures import AlignmentResult, GeoPoint

logger = logging.getLogger(__name__)

__all__ = [
    'bearing', 'distance', 'elevation', 'alignment_accuracy',
    'cardinal_direction', 'compute_alignment', 'line_of_sight',
    'bearing_array', 'distance_array', 'elevation_array',
    'alignment_accuracy_array', 'cardinal_direction_array',
]


def bearing(origin: GeoPoint, target: GeoPoint) -> float:
    """
    Compute the initial great-circle bearing from origin to target.

    Parameters
    ----------
    origin : GeoPoint
        Observer position
    target : GeoPoint
        Target position

    Returns
    -------
    float
        Bearing in degrees clockwise from north, in [0, 360).
        Returns 0 when the points coincide.

    Examples
    --------
    >>> bearing(GeoPoint(37.7749, -122.4194), GeoPoint(37.7849, -122.4194))
    0.0
    """
    phi1 = origin.latitude * D2R
    phi2 = target.latitude * D2R
    dlam = (target.longitude - origin.longitude) * D2R

    x = math.sin(dlam) * math.cos(phi2)
    y = math.cos(phi1) * math.sin(phi2) - math.sin(phi1) * math.cos(phi2) * math.cos(dlam)

    # atan2(0, 0) is 0, which is the policy for coincident points
    return wrap_heading(math.atan2(x, y) * R2D)


def distance(origin: GeoPoint, target: GeoPoint) -> float:
    """
    Compute the haversine surface distance between two points.

    Altitude is ignored; this is the horizontal distance on a sphere of
    radius EARTH_RADIUS_M.

    Parameters
    ----------
    origin : GeoPoint
        Observer position
    target : GeoPoint
        Target position

    Returns
    -------
    float
        Distance in meters, >= 0
    """
    phi1 = origin.latitude * D2R
    phi2 = target.latitude * D2R
    dphi = phi2 - phi1
    dlam = (target.longitude - origin.longitude) * D2R

    a = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlam / 2) ** 2
    a = min(1.0, max(0.0, a))
    return 2.0 * EARTH_RADIUS_M * math.asin(math.sqrt(a))


def elevation(origin: GeoPoint, target: GeoPoint, target_height_offset: float = 0.0) -> float:
    """
    Compute the tilt angle from origin toward the target.

    Parameters
    ----------
    origin : GeoPoint
        Observer position
    target : GeoPoint
        Target position; its altitude is the target's ground altitude
    target_height_offset : float, optional
        Height of the aiming point above the target altitude in meters
        (e.g. antenna height on a tower), default 0

    Returns
    -------
    float
        Elevation in degrees, positive when the target is above the
        observer. Returns 0 when the horizontal distance is 0.

    Notes
    -----
    elevation = atan2((target.alt + offset) - origin.alt, horizontal_distance)
    """
    horizontal = distance(origin, target)
    if horizontal == 0.0:
        logger.debug("Zero horizontal distance to target, elevation set to 0")
        return 0.0

    vertical = (target.altitude + target_height_offset) - origin.altitude
    return math.atan2(vertical, horizontal) * R2D


def alignment_accuracy(device_heading: float, target_azimuth: float) -> float:
    """
    Score how closely the device heading matches the target azimuth.

    Parameters
    ----------
    device_heading : float
        Device compass heading in degrees
    target_azimuth : float
        Bearing to the target in degrees

    Returns
    -------
    float
        Accuracy percentage in [0, 100]: 100 at 0° difference, falling
        linearly to 0 at 180°.

    Examples
    --------
    >>> alignment_accuracy(0.0, 90.0)
    50.0
    """
    diff = wrap_heading(device_heading - target_azimuth)
    normalized = min(diff, FULL_CIRCLE - diff)
    accuracy = 100.0 - normalized / HALF_CIRCLE * 100.0
    return min(100.0, max(0.0, accuracy))


def cardinal_direction(bearing_deg: float) -> str:
    """
    Map a bearing to one of eight compass octant labels.

    Parameters
    ----------
    bearing_deg : float
        Bearing in degrees; values outside [0, 360) wrap around

    Returns
    -------
    str
        One of N, NE, E, SE, S, SW, W, NW
    """
    index = int(math.floor((bearing_deg + OCTANT_WIDTH / 2) / OCTANT_WIDTH)) % len(CARDINAL_DIRECTIONS)
    return CARDINAL_DIRECTIONS[index]


def compute_alignment(current: GeoPoint, target: GeoPoint,
                      device_heading: Optional[float] = None,
                      target_height_offset: float = 0.0) -> AlignmentResult:
    """
    Compute the full alignment bundle for one set of inputs.

    Parameters
    ----------
    current : GeoPoint
        Device position
    target : GeoPoint
        Target position
    device_heading : float, optional
        Device compass heading in degrees. When None, accuracy is 0.
    target_height_offset : float, optional
        Height of the aiming point above the target altitude in meters

    Returns
    -------
    AlignmentResult
        Azimuth, elevation, distance, accuracy and cardinal direction

    Examples
    --------
    >>> here = GeoPoint(37.7749, -122.4194)
    >>> tower = GeoPoint(37.7849, -122.4194)
    >>> result = compute_alignment(here, tower, device_heading=10.0, target_height_offset=30.0)
    >>> result.cardinal_direction
    'N'
    """
    azimuth = bearing(current, target)
    accuracy = 0.0 if device_heading is None else alignment_accuracy(device_heading, azimuth)

    return AlignmentResult(
        azimuth=azimuth,
        elevation=elevation(current, target, target_height_offset),
        distance=distance(current, target),
        accuracy_percent=accuracy,
        cardinal_direction=cardinal_direction(azimuth),
    )


def line_of_sight(origin: GeoPoint, target: GeoPoint,
                  target_height_offset: float = 0.0) -> tuple[float, float, float]:
    """
    Compute look angles to the target on the WGS84 ellipsoid.

    Unlike elevation(), the target is placed in the observer's local ENU
    frame, so the result includes the drop of the target below the local
    horizon due to earth curvature. Useful as a cross-check at ranges of
    tens of kilometers.

    Parameters
    ----------
    origin : GeoPoint
        Observer position
    target : GeoPoint
        Target position
    target_height_offset : float, optional
        Height of the aiming point above the target altitude in meters

    Returns
    -------
    tuple[float, float, float]
        (azimuth in degrees [0, 360), elevation in degrees, slant range in meters).
        Horizontally coincident points give azimuth and elevation 0.
    """
    lla_t = target.to_llh()
    lla_t[2] += target_height_offset
    az, el, rng = lla2aer(lla_t, origin.to_llh())
    return wrap_heading(float(az) * R2D), float(el) * R2D, float(rng)


def bearing_array(lat1, lon1, lat2, lon2) -> np.ndarray:
    """Vectorized bearing() over arrays of degrees"""
    phi1 = np.asarray(lat1, dtype=np.double) * D2R
    phi2 = np.asarray(lat2, dtype=np.double) * D2R
    dlam = (np.asarray(lon2, dtype=np.double) - np.asarray(lon1, dtype=np.double)) * D2R

    x = np.sin(dlam) * np.cos(phi2)
    y = np.cos(phi1) * np.sin(phi2) - np.sin(phi1) * np.cos(phi2) * np.cos(dlam)
    return wrapTo360(np.atleast_1d(np.arctan2(x, y) * R2D))


def distance_array(lat1, lon1, lat2, lon2) -> np.ndarray:
    """Vectorized distance() over arrays of degrees"""
    phi1 = np.asarray(lat1, dtype=np.double) * D2R
    phi2 = np.asarray(lat2, dtype=np.double) * D2R
    dphi = phi2 - phi1
    dlam = (np.asarray(lon2, dtype=np.double) - np.asarray(lon1, dtype=np.double)) * D2R

    a = np.sin(dphi / 2) ** 2 + np.cos(phi1) * np.cos(phi2) * np.sin(dlam / 2) ** 2
    return np.atleast_1d(2.0 * EARTH_RADIUS_M * np.arcsin(np.sqrt(np.clip(a, 0.0, 1.0))))


def elevation_array(horizontal, vertical) -> np.ndarray:
    """Elevation in degrees from horizontal and vertical offsets; 0 where horizontal is 0"""
    horizontal = np.atleast_1d(np.asarray(horizontal, dtype=np.double))
    vertical = np.atleast_1d(np.asarray(vertical, dtype=np.double))
    el = np.arctan2(vertical, horizontal) * R2D
    return np.where(horizontal == 0.0, 0.0, el)


def alignment_accuracy_array(device_heading, target_azimuth) -> np.ndarray:
    """Vectorized alignment_accuracy()"""
    diff = wrapTo360(np.atleast_1d(np.asarray(device_heading, dtype=np.double)
                                   - np.asarray(target_azimuth, dtype=np.double)))
    normalized = np.minimum(diff, FULL_CIRCLE - diff)
    return np.clip(100.0 - normalized / HALF_CIRCLE * 100.0, 0.0, 100.0)


def cardinal_direction_array(bearing_deg) -> np.ndarray:
    """Vectorized cardinal_direction(), returns an array of labels"""
    idx = np.floor((np.atleast_1d(np.asarray(bearing_deg, dtype=np.double)) + OCTANT_WIDTH / 2)
                   / OCTANT_WIDTH).astype(int) % len(CARDINAL_DIRECTIONS)
    return np.array(CARDINAL_DIRECTIONS)[idx]
