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

"""Core Alignment Module.

This module provides the fundamental pieces shared by the rest of pyalign:

- **Constants**: earth model, angle conversion factors, compass octant labels
  and alignment thresholds
- **Data Structures**: immutable value types for geographic points, device
  orientation samples and alignment results
- **Configuration**: the AlignmentConfig dataclass and a YAML/JSON loader
- **Exceptions**: the PyAlignError hierarchy

Example Usage:
    >>> from pyalign.core import GeoPoint, OrientationSample
    >>>
    >>> here = GeoPoint(37.7749, -122.4194)
    >>> tower = GeoPoint(37.7849, -122.4194, name="Tower 12")
    >>> sample = OrientationSample(heading=-10.0)
    >>> sample.heading
    350.0
"""

from .config import *
from .constants import *
from .data_structures import *
from .exceptions import *
