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

"""Display strings for alignment values"""

from typing import Optional

from ..attitude.wrap import wrap_heading
from ..core.constants import M2FT, M_PER_MILE
from ..core.data_structures import AlignmentResult
from ..geometry.alignment import cardinal_direction

__all__ = [
    'format_angle', 'format_distance', 'format_azimuth', 'format_tilt',
    'format_latitude', 'format_longitude', 'format_altitude',
    'format_heading', 'format_horizontal_accuracy', 'format_result',
]


def format_angle(angle: float, decimals: int = 1) -> str:
    """Angle in degrees, e.g. "12.3°" """
    return f"{angle:.{decimals}f}°"


def format_distance(distance: float, metric: bool = True) -> str:
    """
    Format a distance for display.

    Parameters
    ----------
    distance : float
        Distance in meters
    metric : bool, optional
        Metric ("850 m", "1.2 km") or imperial ("2789 ft", "1.4 mi")

    Returns
    -------
    str
        Formatted distance
    """
    if metric:
        if distance < 1000:
            return f"{distance:.0f} m"
        return f"{distance / 1000:.1f} km"

    if distance < M_PER_MILE:
        return f"{distance * M2FT:.0f} ft"
    return f"{distance / M_PER_MILE:.1f} mi"


def format_azimuth(azimuth: float) -> str:
    """Cardinal direction and whole degrees, e.g. "NE 45°" """
    return f"{cardinal_direction(azimuth)} {wrap_heading(round(azimuth)):.0f}°"


def format_tilt(tilt: float) -> str:
    """Arrow for the tilt direction and magnitude, e.g. "↑ 1.5°" """
    arrow = "↑" if tilt >= 0 else "↓"
    return f"{arrow} {abs(tilt):.1f}°"


def format_latitude(latitude: float) -> str:
    return f"{latitude:.6f}°"


def format_longitude(longitude: float) -> str:
    return f"{longitude:.6f}°"


def format_altitude(altitude: float, metric: bool = True) -> str:
    if metric:
        return f"{altitude:.1f} m"
    return f"{altitude * M2FT:.1f} ft"


def format_heading(heading: Optional[float]) -> str:
    if heading is None:
        return "No heading"
    return f"{heading:.1f}°"


def format_horizontal_accuracy(accuracy: float) -> str:
    return f"±{accuracy:.1f}m"


def format_result(result: AlignmentResult, metric: bool = True) -> str:
    """One-line summary of an alignment result"""
    return (f"{format_azimuth(result.azimuth)}  {format_tilt(result.elevation)}  "
            f"{format_distance(result.distance, metric)}  "
            f"{result.accuracy_percent:.0f}% {result.status.value}")
