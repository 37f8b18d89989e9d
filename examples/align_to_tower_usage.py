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

"""Example usage of the alignment library: aiming a phone at a cell tower"""

import os
import tempfile

import numpy as np
import pandas as pd

from pyalign import (
    AlignmentConfig,
    AlignmentSession,
    GeoPoint,
    OrientationSample,
    compute_alignment,
    line_of_sight,
    load_config,
)
from pyalign.io import ReplaySensor, TrackReader, compute_alignment_track
from pyalign.logger import setup_logger
from pyalign.utils import format_distance, format_result


# Example 1: One-shot alignment
def example_basic_usage():
    """Compute the alignment bundle for one position and heading"""
    print("=== Example 1: Basic Alignment ===\n")

    here = GeoPoint(37.7749, -122.4194, 0.0)
    tower = GeoPoint.from_user_input("37.7849", "-122.4194", "0", name="Tower 12")

    result = compute_alignment(here, tower, device_heading=10.0, target_height_offset=30.0)
    print(f"Azimuth:   {result.azimuth:.1f}° ({result.cardinal_direction})")
    print(f"Elevation: {result.elevation:.2f}°")
    print(f"Distance:  {format_distance(result.distance)}")
    print(f"Accuracy:  {result.accuracy_percent:.1f}% -> {result.status.value}")

    az, el, rng = line_of_sight(here, tower, target_height_offset=30.0)
    print(f"WGS84 line of sight: az={az:.3f}° el={el:.3f}° range={rng:.1f} m\n")


# Example 2: Live session driven by sensor callbacks
def example_session():
    """Feed position and compass updates into a session"""
    print("=== Example 2: Alignment Session ===\n")

    session = AlignmentSession(AlignmentConfig(target_height=30.0, heading_filter=1.0))
    session.subscribe(lambda r: print(f"  {format_result(r)}"))

    session.set_target(GeoPoint(37.7849, -122.4194, name="Tower 12"))
    session.update_location(GeoPoint(37.7749, -122.4194))

    # user turns the phone from east toward north
    for heading in [90.0, 60.0, 30.0, 30.5, 5.0]:
        session.update_orientation(OrientationSample(heading=heading))
    print(f"Aligned: {session.is_aligned}\n")


# Example 3: Configuration file and recorded track
def example_recorded_track():
    """Replay a recorded walk toward the tower"""
    print("=== Example 3: Recorded Track ===\n")

    tmp_dir = tempfile.mkdtemp()
    config_file = os.path.join(tmp_dir, "alignment.yaml")
    track_file = os.path.join(tmp_dir, "walk.csv")

    with open(config_file, 'w') as f:
        f.write("target_height: 25.0\n"
                "aligned_threshold: 95.0\n"
                "close_threshold: 75.0\n"
                "use_metric_units: false\n")

    n = 20
    pd.DataFrame({
        'timestamp': np.arange(n, dtype=float),
        'latitude': np.linspace(37.7749, 37.7840, n),
        'longitude': np.full(n, -122.4194),
        'altitude': np.full(n, 5.0),
        'heading': np.linspace(40.0, 0.0, n),
    }).to_csv(track_file, index=False)

    config = load_config(config_file)
    tower = GeoPoint(37.7849, -122.4194, 0.0)

    track = TrackReader(track_file).read()
    aligned = compute_alignment_track(track, tower, config.target_height)
    print(aligned[['time', 'distance', 'elevation', 'cardinal', 'accuracy']].iloc[::5].to_string(index=False))

    session = AlignmentSession(config)
    session.set_target(tower)
    results = session.run(ReplaySensor(track))
    print(f"\nReplayed {len(results)} fixes, final: {session.summary()}\n")


if __name__ == "__main__":
    setup_logger("pyalign", "WARNING")

    example_basic_usage()
    example_session()
    example_recorded_track()
