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

"""Earth model, angle and alignment constants"""

import numpy as np

# Earth Parameters
EARTH_RADIUS_M = 6371000.0     # mean earth radius for great-circle distance (m)
RE_WGS84 = 6378137.0           # earth semimajor axis (m)
FE_WGS84 = 1.0 / 298.257223563 # earth flattening

# Angle conversion
D2R = np.pi / 180.0            # degrees to radians
R2D = 180.0 / np.pi            # radians to degrees
FULL_CIRCLE = 360.0            # degrees
HALF_CIRCLE = 180.0            # degrees

# Compass octants, clockwise from north
CARDINAL_DIRECTIONS = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")
OCTANT_WIDTH = FULL_CIRCLE / len(CARDINAL_DIRECTIONS)  # 45 degrees per octant

# Alignment defaults
DEFAULT_TARGET_HEIGHT = 30.0   # typical cell tower antenna height (m)
ALIGNED_THRESHOLD = 90.0       # accuracy (%) at or above which the device is aligned
CLOSE_THRESHOLD = 70.0         # accuracy (%) at or above which the device is close
DEFAULT_HEADING_FILTER = 0.0   # minimum heading change (deg) that triggers a recompute
LOCATION_MAX_AGE = 10.0        # a fix older than this (s) is stale

# Unit conversion
M2FT = 3.280839895             # metres to feet
M_PER_MILE = 1609.344          # metres per statute mile
