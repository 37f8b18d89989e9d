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
Device attitude from quaternions.

Motion sensors usually report attitude as a unit quaternion. This module
extracts roll-pitch-yaw euler angles (ZYX sequence) from it so a compass
heading and device tilt can be read off directly.

References:
    Principles of GNSS, Inertial, and Multisensor Integrated Navigation Systems
    - (2013) Paul D. Groves
"""

import numpy as np
from numba import njit


@njit(cache=True)
def quat2euler(q):
    """
    Convert quaternion to corresponding euler angles (roll-pitch-yaw).

    Parameters
    ----------
    q : array_like, shape (4,)
        Quaternion [w, x, y, z], normalized before use

    Returns
    -------
    e : ndarray, shape (3,)
        RPY euler angles [roll, pitch, yaw] in radians
    """
    n = np.sqrt(q[0]*q[0] + q[1]*q[1] + q[2]*q[2] + q[3]*q[3])
    w = q[0] / n
    x = q[1] / n
    y = q[2] / n
    z = q[3] / n
    # clip guards asin against rounding just past +-1 at gimbal lock
    s = min(1.0, max(-1.0, -2.0*(-w*y + x*z)))
    e = np.array([np.arctan2(2.0*(w*x + y*z), (w*w - x*x - y*y + z*z)),
                  np.arcsin(s),
                  np.arctan2(2.0*(w*z + x*y), (w*w + x*x - y*y - z*z))],
                 dtype=np.double)
    return e


def euler2quat(roll: float, pitch: float, yaw: float) -> np.ndarray:
    """
    Convert roll-pitch-yaw euler angles to a quaternion.

    Parameters
    ----------
    roll, pitch, yaw : float
        Euler angles in radians

    Returns
    -------
    np.ndarray, shape (4,)
        Quaternion [w, x, y, z]
    """
    cr, sr = np.cos(roll / 2), np.sin(roll / 2)
    cp, sp = np.cos(pitch / 2), np.sin(pitch / 2)
    cy, sy = np.cos(yaw / 2), np.sin(yaw / 2)
    return np.array([cr*cp*cy + sr*sp*sy,
                     sr*cp*cy - cr*sp*sy,
                     cr*sp*cy + sr*cp*sy,
                     cr*cp*sy - sr*sp*cy])
