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

"""Coordinate transformation utilities

This module provides WGS84 coordinate transformations used for
ellipsoidal line-of-sight checks:
- Basic transforms (ECEF, LLH, ENU)
- AER (Azimuth-Elevation-Range) transforms
"""

from .aer_transforms import aer2enu, enu2aer, lla2aer
from .transforms import ecef2enu, ecef2llh, enu_rotation, lla2enu, llh2ecef

__all__ = [
    'ecef2llh', 'llh2ecef', 'ecef2enu', 'lla2enu', 'enu_rotation',
    'enu2aer', 'aer2enu', 'lla2aer'
]
