"""
YAML option files

An option file is a mapping with any of these keys:

    colors: true
    subtitle: "IMPOSSIBLE IS JUST A CHALLENGE YET TO BE SOLVED"
    line_length: 80
"""

from pathlib import Path
from typing import Any, Dict, Union

import yaml

from incredifont.models.banner import BannerBuilder
from incredifont.utils.exceptions import ConfigFileError
from incredifont.utils.logger import get_logger

logger = get_logger(__name__)

OPTION_TYPES = {
    "colors": bool,
    "subtitle": str,
    "line_length": int,
}


def load_options(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load banner options from a YAML file

    Args:
        path: Path to the option file

    Returns:
        dict of options; empty when the file is empty

    Raises:
        ConfigFileError: If the file is missing, malformed, or holds
            unknown options or options of the wrong type
    """
    config_path = Path(path)
    if not config_path.exists() or not config_path.is_file():
        raise ConfigFileError(f"Config file not found at {config_path}")

    with open(config_path, encoding="utf-8") as stream:
        try:
            d_config = yaml.safe_load(stream)
        except yaml.YAMLError as exc:
            raise ConfigFileError(f"Invalid YAML in {config_path}: {exc}") from exc

    if d_config is None:
        return {}
    if not isinstance(d_config, dict):
        raise ConfigFileError(f"Config file {config_path} must contain a mapping")

    for key, value in d_config.items():
        if key not in OPTION_TYPES:
            raise ConfigFileError(
                f"Unknown option '{key}'. "
                f"Must be one of: {', '.join(OPTION_TYPES)}"
            )
        expected = OPTION_TYPES[key]
        # bool is a subclass of int
        if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
            raise ConfigFileError(
                f"Option '{key}' must be of type {expected.__name__}, "
                f"got {type(value).__name__}"
            )

    logger.debug(f"Loaded options from {config_path}: {d_config}")
    return d_config


def apply_options(builder: BannerBuilder, options: Dict[str, Any]) -> BannerBuilder:
    """Apply loaded options to a builder and return it"""
    if "colors" in options:
        builder.colors = options["colors"]
    if "subtitle" in options:
        builder.with_subtitle(options["subtitle"])
    if "line_length" in options:
        builder.with_line_length(options["line_length"])
    return builder
