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

"""Exception types raised by pyalign"""

__all__ = ["PyAlignError", "InvalidCoordinateError", "TrackFormatError", "ConfigError"]


class PyAlignError(Exception):
    """Base class for all pyalign errors"""


class InvalidCoordinateError(PyAlignError, ValueError):
    """Raised when a coordinate cannot be parsed or is out of range"""


class TrackFormatError(PyAlignError, ValueError):
    """Raised when a recorded track file lacks required columns"""


class ConfigError(PyAlignError, ValueError):
    """Raised for unreadable or invalid configuration"""
