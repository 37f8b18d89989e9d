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
Compass angle wrapping utilities.

This module provides functions for wrapping angles in degrees to the ranges
used for headings and bearings. Scalar helpers are plain Python; the array
kernels are compiled with Numba for use on recorded tracks.

Headings and azimuths are wrapped to [0, 360); signed angle differences
are wrapped to [-180, 180).
"""

import math

import numpy as np
from numba import njit

from ..core.constants import FULL_CIRCLE, HALF_CIRCLE


def wrap_heading(angle: float) -> float:
    """
    Wrap an angle in degrees to [0, 360).

    Parameters
    ----------
    angle : float
        Angle in degrees

    Returns
    -------
    float
        Equivalent angle in [0, 360)

    Examples
    --------
    >>> wrap_heading(-10.0)
    350.0
    >>> wrap_heading(360.0)
    0.0
    """
    wrapped = math.fmod(angle, FULL_CIRCLE)
    if wrapped < 0.0:
        wrapped += FULL_CIRCLE
    # tiny negative inputs round up to exactly 360
    if wrapped >= FULL_CIRCLE:
        wrapped = 0.0
    return wrapped + 0.0


def wrap_angle(angle: float) -> float:
    """
    Wrap an angle in degrees to [-180, 180).

    Parameters
    ----------
    angle : float
        Angle in degrees

    Returns
    -------
    float
        Equivalent signed angle in [-180, 180)
    """
    return wrap_heading(angle + HALF_CIRCLE) - HALF_CIRCLE


@njit(cache=True)
def wrapTo360(v1):
    """
    Wrap angles to [0, 360) range.

    Parameters
    ----------
    v1 : array_like
        Vector of angles in degrees

    Returns
    -------
    v2 : ndarray
        Vector of normalized angles in degrees [0, 360)
    """
    v2 = np.mod(v1, FULL_CIRCLE)
    v2[v2 >= FULL_CIRCLE] = 0.0
    return v2


@njit(cache=True)
def wrapTo180(v1):
    """
    Wrap angles to [-180, 180) range.

    Parameters
    ----------
    v1 : array_like
        Vector of angles in degrees

    Returns
    -------
    v2 : ndarray
        Vector of normalized angles in degrees [-180, 180)
    """
    return wrapTo360(v1 + HALF_CIRCLE) - HALF_CIRCLE
