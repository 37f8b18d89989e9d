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
PyAlign - Device-to-Target Alignment Library

A Python library for aiming a handheld device at a geographic target such
as a cell tower: bearing (azimuth), tilt (elevation), great-circle
distance, heading-to-target accuracy and cardinal direction from live
position and compass readings.
"""

__version__ = "1.0.0"
__author__ = "PyAlign Development Team"
__title__ = "pyalign"
__description__ = "Antenna and device alignment geometry library"

from .core import *
from .attitude import *
from .coordinate import *
from .geometry import *
from .sensors import *
from .io import *
from .session import *
from .utils import *
