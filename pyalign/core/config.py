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

"""Alignment configuration loaded from YAML or JSON"""

import json
import logging
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Union

import yaml

from .constants import (
    ALIGNED_THRESHOLD,
    CLOSE_THRESHOLD,
    DEFAULT_HEADING_FILTER,
    DEFAULT_TARGET_HEIGHT,
    LOCATION_MAX_AGE,
)
from .exceptions import ConfigError

__all__ = ["AlignmentConfig", "load_config"]

logger = logging.getLogger(__name__)


@dataclass
class AlignmentConfig:
    """Alignment configuration parameters.

    Attributes
    ----------
    target_height : float
        Height of the target above its ground altitude in meters
    aligned_threshold : float
        Accuracy (%) at or above which the device counts as aligned
    close_threshold : float
        Accuracy (%) at or above which the device counts as close
    use_metric_units : bool
        Display units of AlignmentSession.summary(): metric (True) or imperial
    heading_filter : float
        Minimum heading change in degrees that triggers a recompute
    location_max_age : float
        Age in seconds after which a position fix is considered stale
    show_debug_info : bool
        Log every recomputed result at DEBUG level
    logging : dict
        Logger configuration passed to setup_logger_from_config
    """
    target_height: float = DEFAULT_TARGET_HEIGHT
    aligned_threshold: float = ALIGNED_THRESHOLD
    close_threshold: float = CLOSE_THRESHOLD
    use_metric_units: bool = True
    heading_filter: float = DEFAULT_HEADING_FILTER
    location_max_age: float = LOCATION_MAX_AGE
    show_debug_info: bool = False
    logging: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if not 0.0 <= self.close_threshold <= self.aligned_threshold <= 100.0:
            raise ConfigError(
                "Thresholds must satisfy 0 <= close_threshold <= aligned_threshold <= 100, "
                f"got close={self.close_threshold}, aligned={self.aligned_threshold}")
        if self.heading_filter < 0:
            raise ConfigError(f"heading_filter must be non-negative, got {self.heading_filter}")
        if self.location_max_age <= 0:
            raise ConfigError(f"location_max_age must be positive, got {self.location_max_age}")

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> 'AlignmentConfig':
        """
        Create a configuration from dictionary data.

        Parameters:
        -----------
        data : dict
            Mapping of field names to values; missing fields keep defaults

        Returns:
        --------
        AlignmentConfig
            New configuration instance

        Raises:
            ConfigError: If the dictionary contains unknown keys
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {sorted(unknown)}")
        return cls(**data)


def load_config(filepath: Union[str, Path]) -> AlignmentConfig:
    """
    Load alignment configuration from file.

    Supports both YAML and JSON formats. The file format is determined
    automatically from the file extension.

    Parameters:
    -----------
    filepath : str or Path
        Path to configuration file (.yaml, .yml, or .json)

    Returns:
    --------
    AlignmentConfig
        Parsed configuration

    Raises:
        FileNotFoundError: If the specified file doesn't exist
        ConfigError: If the format is unsupported or the content is invalid

    Examples:
        >>> config = load_config('alignment.yaml')
        >>> config.target_height
        30.0
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"Config file not found: {filepath}")

    try:
        if filepath.suffix in ['.yaml', '.yml']:
            with open(filepath) as f:
                data = yaml.safe_load(f)
        elif filepath.suffix == '.json':
            with open(filepath) as f:
                data = json.load(f)
        else:
            raise ConfigError(f"Unsupported file format: {filepath.suffix}")
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigError(f"Failed to parse {filepath}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Top level of {filepath} must be a mapping")

    config = AlignmentConfig.from_dict(data)
    logger.debug(f"Loaded configuration from {filepath}")
    return config
