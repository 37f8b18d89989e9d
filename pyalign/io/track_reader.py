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

"""Recorded position/heading track reading and batch alignment"""

import logging
from pathlib import Path
from typing import Iterator, Optional, Union

import numpy as np
import pandas as pd

from ..core.data_structures import GeoPoint
from ..core.exceptions import TrackFormatError
from ..geometry.alignment import (
    alignment_accuracy_array,
    bearing_array,
    cardinal_direction_array,
    distance_array,
    elevation_array,
)
from ..sensors.location import LocationData
from ..sensors.sensor_base import SensorInterface, SensorType

logger = logging.getLogger(__name__)

__all__ = ['TrackReader', 'ReplaySensor', 'compute_alignment_track', 'iter_location_data']

REQUIRED_COLUMNS = ['time', 'lat', 'lon']
OPTIONAL_COLUMNS = ['alt', 'heading', 'pitch', 'roll', 'horizontal_accuracy', 'vertical_accuracy']
TXT_COLUMNS = ['time', 'lat', 'lon', 'alt', 'heading']

ALT_MAPPING = {
    'timestamp': 'time', 't': 'time',
    'latitude': 'lat', 'longitude': 'lon', 'lng': 'lon',
    'altitude': 'alt', 'height': 'alt',
    'yaw': 'heading', 'magnetic_heading': 'heading',
    'hacc': 'horizontal_accuracy', 'vacc': 'vertical_accuracy',
}


class TrackReader:
    """Reader for recorded device tracks (position fixes with optional heading)"""

    def __init__(self, file_path: Union[str, Path], format: str = 'csv'):
        """
        Initialize track reader

        Parameters:
        -----------
        file_path : str or Path
            Path to track file
        format : str
            File format ('csv' with a header row, or 'txt' whitespace
            separated "time lat lon alt heading")
        """
        self.file_path = Path(file_path)
        self.format = format.lower()
        self.logger = logging.getLogger(__name__)

        if not self.file_path.exists():
            raise FileNotFoundError(f"Track file not found: {file_path}")

    def read(self, start_time: Optional[float] = None,
             duration: Optional[float] = None) -> pd.DataFrame:
        """
        Read the track, optionally restricted to a time window

        Parameters:
        -----------
        start_time : float, optional
            Start time in seconds
        duration : float, optional
            Duration in seconds to load (requires start_time)

        Returns:
        --------
        pd.DataFrame
            Track sorted by time with columns: time, lat, lon, alt and any
            of heading, pitch, roll, horizontal_accuracy, vertical_accuracy
        """
        if self.format == 'csv':
            df = self._read_csv()
        elif self.format == 'txt':
            df = self._read_txt()
        else:
            raise ValueError(f"Unsupported format: {self.format}")

        if 'alt' not in df.columns:
            df['alt'] = 0.0
        df = df.dropna(subset=REQUIRED_COLUMNS).sort_values('time').reset_index(drop=True)

        if start_time is not None:
            df = df[df['time'] >= start_time]
            if duration is not None:
                df = df[df['time'] <= start_time + duration]
            df = df.reset_index(drop=True)

        self.logger.info(f"Loaded {len(df)} track points from {self.file_path}")
        return df

    def _read_csv(self) -> pd.DataFrame:
        """
        Read a CSV track with automatic column mapping.

        Notes
        -----
        Column names are matched case-insensitively. Supported alternative
        names: timestamp/t -> time, latitude -> lat, longitude/lng -> lon,
        altitude/height -> alt, yaw/magnetic_heading -> heading,
        hacc/vacc -> horizontal_accuracy/vertical_accuracy.

        Raises
        ------
        TrackFormatError
            If required columns are missing after column mapping
        """
        df = pd.read_csv(self.file_path)
        df.columns = [str(c).strip().lower() for c in df.columns]
        df = df.rename(columns={k: v for k, v in ALT_MAPPING.items() if v not in df.columns})

        missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
        if missing:
            raise TrackFormatError(f"Missing required track columns: {missing}")

        keep = REQUIRED_COLUMNS + [c for c in OPTIONAL_COLUMNS if c in df.columns]
        return df[keep].copy()

    def _read_txt(self) -> pd.DataFrame:
        """
        Read a whitespace separated track.

        Lines starting with '#' are comments. Rows carry
        "time lat lon alt heading"; trailing columns may be absent.
        """
        try:
            df = pd.read_csv(
                self.file_path,
                sep=r'\s+',
                names=TXT_COLUMNS,
                comment='#',
                header=None
            )
        except pd.errors.ParserError as e:
            raise TrackFormatError(f"Failed to parse track file {self.file_path}: {e}") from e

        return df.dropna(axis=1, how='all')


def iter_location_data(df: pd.DataFrame) -> Iterator[LocationData]:
    """Yield a LocationData per track row"""
    has_heading = 'heading' in df.columns
    for row in df.itertuples(index=False):
        heading = getattr(row, 'heading') if has_heading else None
        if heading is not None and np.isnan(heading):
            heading = None
        yield LocationData(
            latitude=float(row.lat),
            longitude=float(row.lon),
            altitude=float(getattr(row, 'alt', 0.0)),
            horizontal_accuracy=float(getattr(row, 'horizontal_accuracy', 0.0)),
            vertical_accuracy=float(getattr(row, 'vertical_accuracy', 0.0)),
            heading=None if heading is None else float(heading),
            timestamp=float(row.time),
        )


def compute_alignment_track(df: pd.DataFrame, target: GeoPoint,
                            target_height_offset: float = 0.0) -> pd.DataFrame:
    """
    Compute alignment toward a target for every row of a track.

    Parameters
    ----------
    df : pd.DataFrame
        Track as returned by TrackReader.read()
    target : GeoPoint
        Target position
    target_height_offset : float, optional
        Height of the aiming point above the target altitude in meters

    Returns
    -------
    pd.DataFrame
        Copy of the track with added columns azimuth, elevation, distance,
        cardinal and, when a heading column exists, accuracy
    """
    out = df.copy()
    n = len(out)
    if n == 0:
        for col in ['azimuth', 'elevation', 'distance', 'cardinal']:
            out[col] = pd.Series(dtype=object if col == 'cardinal' else float)
        return out

    lat = out['lat'].to_numpy(dtype=np.double)
    lon = out['lon'].to_numpy(dtype=np.double)
    alt = out['alt'].to_numpy(dtype=np.double) if 'alt' in out.columns else np.zeros(n)

    tlat = np.full(n, target.latitude)
    tlon = np.full(n, target.longitude)

    out['azimuth'] = bearing_array(lat, lon, tlat, tlon)
    out['distance'] = distance_array(lat, lon, tlat, tlon)
    out['elevation'] = elevation_array(out['distance'].to_numpy(),
                                       target.altitude + target_height_offset - alt)
    out['cardinal'] = cardinal_direction_array(out['azimuth'].to_numpy())

    if 'heading' in out.columns:
        heading = out['heading'].to_numpy(dtype=np.double)
        accuracy = alignment_accuracy_array(np.nan_to_num(heading), out['azimuth'].to_numpy())
        out['accuracy'] = np.where(np.isnan(heading), np.nan, accuracy)

    logger.debug(f"Computed alignment for {n} track points toward "
                 f"({target.latitude:.6f}, {target.longitude:.6f})")
    return out


class ReplaySensor(SensorInterface):
    """Position source that replays a recorded track one fix at a time.

    Examples
    --------
    >>> sensor = ReplaySensor(TrackReader('walk.csv').read())
    >>> sensor.initialize()
    True
    >>> fix = sensor.read()
    """

    def __init__(self, track: pd.DataFrame, sensor_id: str = 'replay'):
        super().__init__(sensor_id, SensorType.GNSS)
        self.track = track
        self._rows: Optional[Iterator[LocationData]] = None

    def initialize(self) -> bool:
        self._rows = iter_location_data(self.track)
        self._is_initialized = True
        logger.info(f"Replay sensor '{self.sensor_id}' ready with {len(self.track)} fixes")
        return True

    def read(self) -> Optional[LocationData]:
        """Next recorded fix, or None when the track is exhausted"""
        if not self._is_initialized:
            raise RuntimeError(f"Sensor '{self.sensor_id}' is not initialized")
        return next(self._rows, None)
