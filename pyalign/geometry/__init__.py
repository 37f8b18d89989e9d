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
Alignment geometry.

This package provides the geodesic computations used to point a device at
a target: azimuth (bearing), elevation (tilt), great-circle distance, the
heading-to-target accuracy score and the eight-way cardinal direction.

Modules
-------
alignment : module
    Pure alignment functions and their vectorized variants

Examples
--------
>>> from pyalign.core import GeoPoint
>>> from pyalign.geometry import compute_alignment
>>> here = GeoPoint(37.7749, -122.4194, 0.0)
>>> tower = GeoPoint(37.7849, -122.4194, 0.0)
>>> result = compute_alignment(here, tower, device_heading=10.0, target_height_offset=30.0)
>>> round(result.distance)
1112
"""

from .alignment import *
