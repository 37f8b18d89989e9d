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
Attitude module for device orientation and compass angles.

This module provides:
- Heading and bearing wrapping to [0, 360) and [-180, 180)
- Numba array kernels for wrapping recorded tracks
- Quaternion to roll-pitch-yaw conversion for device attitude

All euler angles are in the order 'roll-pitch-yaw' with the 'ZYX' sequence.
"""

from .quaternion import euler2quat, quat2euler
from .wrap import wrap_angle, wrap_heading, wrapTo180, wrapTo360

__all__ = [
    'quat2euler', 'euler2quat',
    'wrap_heading', 'wrap_angle', 'wrapTo360', 'wrapTo180'
]
