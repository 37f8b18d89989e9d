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
Sensor boundary for the pyalign alignment system.

Platform location and motion providers live outside this library. This
package defines the seam they plug into:

Classes:
    SensorType: Kind of live data source
    SensorInterface: Abstract base class for position/heading providers
    LocationData: Position fix with accuracy estimates and optional heading

Examples:
    >>> from pyalign.sensors import LocationData
    >>> fix = LocationData(37.7749, -122.4194, 10.0, horizontal_accuracy=5.0)
    >>> fix.is_valid()
    True
"""

from .location import *
from .sensor_base import *
