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

"""WGS84 coordinate transformation utilities"""


import numpy as np

from ..core.constants import FE_WGS84, RE_WGS84

# first eccentricity squared
E2_WGS84 = FE_WGS84 * (2.0 - FE_WGS84)


def ecef2llh(xyz: np.ndarray) -> np.ndarray:
    """Convert ECEF coordinates to geodetic coordinates

    Parameters
    ----------
    xyz : np.ndarray
        ECEF coordinates [x, y, z] in meters

    Returns
    -------
    np.ndarray
        Geodetic coordinates [lat, lon, height] where:
        - lat: latitude in radians (-π/2 to π/2)
        - lon: longitude in radians (-π to π)
        - height: height above WGS84 ellipsoid in meters

    Notes
    -----
    Iterative solution on the WGS84 ellipsoid; converges in 3-4 iterations
    away from the poles.
    """
    x, y, z = xyz[0], xyz[1], xyz[2]

    lon = np.arctan2(y, x)

    p = np.sqrt(x**2 + y**2)
    lat = np.arctan2(z, p * (1.0 - E2_WGS84))
    h = 0.0

    for _ in range(5):
        N = RE_WGS84 / np.sqrt(1.0 - E2_WGS84 * np.sin(lat)**2)
        h = p / np.cos(lat) - N
        lat = np.arctan2(z, p * (1.0 - E2_WGS84 * N / (N + h)))

    return np.array([lat, lon, h])


def llh2ecef(llh: np.ndarray) -> np.ndarray:
    """Convert geodetic coordinates to ECEF coordinates

    Parameters
    ----------
    llh : np.ndarray
        Geodetic coordinates [lat, lon, height] where:
        - lat: latitude in radians
        - lon: longitude in radians
        - height: height above WGS84 ellipsoid in meters

    Returns
    -------
    np.ndarray
        ECEF coordinates [x, y, z] in meters

    Examples
    --------
    >>> import numpy as np
    >>> llh = np.array([np.radians(37.7749), np.radians(-122.4194), 16.0])  # San Francisco
    >>> ecef = llh2ecef(llh)
    """
    lat, lon, h = llh[0], llh[1], llh[2]

    sin_lat = np.sin(lat)
    cos_lat = np.cos(lat)

    N = RE_WGS84 / np.sqrt(1.0 - E2_WGS84 * sin_lat**2)

    x = (N + h) * cos_lat * np.cos(lon)
    y = (N + h) * cos_lat * np.sin(lon)
    z = (N * (1.0 - E2_WGS84) + h) * sin_lat

    return np.array([x, y, z])


def enu_rotation(org_llh: np.ndarray) -> np.ndarray:
    """Rotation matrix from ECEF to the local ENU frame at org_llh (rad, rad, m)"""
    lat, lon = org_llh[0], org_llh[1]
    sin_lat = np.sin(lat)
    cos_lat = np.cos(lat)
    sin_lon = np.sin(lon)
    cos_lon = np.cos(lon)

    return np.array([
        [-sin_lon, cos_lon, 0.0],
        [-sin_lat * cos_lon, -sin_lat * sin_lon, cos_lat],
        [cos_lat * cos_lon, cos_lat * sin_lon, sin_lat]
    ])


def ecef2enu(xyz: np.ndarray, org_llh: np.ndarray) -> np.ndarray:
    """Convert ECEF to local ENU coordinates

    Parameters
    ----------
    xyz : np.ndarray
        ECEF coordinates [x, y, z] in meters
    org_llh : np.ndarray
        Origin geodetic coordinates [lat, lon, height] where:
        - lat, lon: in radians
        - height: in meters above ellipsoid

    Returns
    -------
    np.ndarray
        Local ENU coordinates [e, n, u] in meters relative to the origin
    """
    dx = np.asarray(xyz) - llh2ecef(org_llh)
    return enu_rotation(org_llh) @ dx


def lla2enu(lla: np.ndarray, lla0: np.ndarray) -> np.ndarray:
    """
    Convert geodetic coordinates to local ENU coordinates

    Parameters:
    -----------
    lla : np.ndarray
        Geodetic coordinates [lat, lon, height] (rad, rad, m)
    lla0 : np.ndarray
        Origin geodetic coordinates [lat, lon, height] (rad, rad, m)

    Returns:
    --------
    enu : np.ndarray
        Local ENU coordinates [e, n, u] (m)
    """
    return ecef2enu(llh2ecef(lla), lla0)
