"""
CLI Utilities

Configuration file loading for NodeKit commands.
"""

from pathlib import Path
from typing import Any, Dict, Union

import yaml

from nodekit.exceptions import ConfigurationError


def load_config_file(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a service configuration file.

    Args:
        path: YAML file whose top-level mapping is the service record

    Returns:
        Parsed mapping (empty dict for an empty file)

    Raises:
        FileNotFoundError: If the file does not exist
        ConfigurationError: If the file is not valid YAML or not a mapping
    """
    config_path = Path(path)

    with open(config_path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in {config_path}", context=str(e)
            ) from e

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Configuration in {config_path} must be a mapping",
            context=f"Got {type(data).__name__}",
        )

    return data
