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

"""Azimuth-Elevation-Range (AER) coordinate transformations"""


import numpy as np

from .transforms import lla2enu

# horizontal offsets below this are ECEF round-off (m)
MIN_HORIZONTAL_RANGE = 1e-6


def enu2aer(enu_t: np.ndarray, enu_r: np.ndarray) -> np.ndarray:
    """Convert ENU to Azimuth-Elevation-Range coordinates

    Parameters
    ----------
    enu_t : np.ndarray
        Target ENU coordinates [e, n, u] in meters
    enu_r : np.ndarray
        Reference ENU coordinates [e, n, u] in meters

    Returns
    -------
    np.ndarray
        Relative AER coordinates [azimuth, elevation, range] where:
        - azimuth: angle from north towards east (0-2π rad)
        - elevation: angle above horizontal plane (-π/2 to π/2 rad)
        - range: slant distance between points (m)

    Notes
    -----
    Azimuth is measured clockwise from north. When the horizontal offset
    is below MIN_HORIZONTAL_RANGE both azimuth and elevation are
    reported as 0.
    """
    de, dn, du = np.asarray(enu_t) - np.asarray(enu_r)

    r = np.hypot(de, dn)
    rng = np.hypot(r, du)
    if r < MIN_HORIZONTAL_RANGE:
        return np.array([0.0, 0.0, rng])

    az = np.mod(np.arctan2(de, dn), 2 * np.pi)
    if az >= 2 * np.pi:
        az = 0.0
    el = np.arctan2(du, r)

    return np.array([az, el, rng])


def aer2enu(aer: np.ndarray, enu_r: np.ndarray) -> np.ndarray:
    """Convert Azimuth-Elevation-Range to ENU coordinates

    Parameters
    ----------
    aer : np.ndarray
        AER coordinates [azimuth, elevation, range] (rad, rad, m)
    enu_r : np.ndarray
        Reference ENU coordinates [e, n, u] in meters

    Returns
    -------
    np.ndarray
        Target ENU coordinates [e, n, u] in meters
    """
    az, el, rng = aer

    r = rng * np.cos(el)

    de = r * np.sin(az)
    dn = r * np.cos(az)
    du = rng * np.sin(el)

    return np.asarray(enu_r) + np.array([de, dn, du])


def lla2aer(lla_t: np.ndarray, lla_r: np.ndarray) -> np.ndarray:
    """Convert geodetic coordinates to Azimuth-Elevation-Range

    Parameters
    ----------
    lla_t : np.ndarray
        Target geodetic coordinates [lat, lon, height] (rad, rad, m)
    lla_r : np.ndarray
        Reference geodetic coordinates [lat, lon, height] (rad, rad, m)

    Returns
    -------
    np.ndarray
        Relative AER coordinates [azimuth, elevation, range] (rad, rad, m)

    Notes
    -----
    The target is expressed in the ENU frame centered at the reference,
    so elevation includes the drop of the target below the local horizon
    due to earth curvature.

    Examples
    --------
    >>> import numpy as np
    >>> lla_ref = np.array([np.radians(37.7749), np.radians(-122.4194), 0])
    >>> lla_target = np.array([np.radians(37.7849), np.radians(-122.4194), 30])
    >>> aer = lla2aer(lla_target, lla_ref)
    """
    enu_t = lla2enu(lla_t, lla_r)
    return enu2aer(enu_t, np.zeros(3))
