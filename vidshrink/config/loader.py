import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from vidshrink.config.models import AppConfig
from vidshrink.domain.errors import ConfigError

DEFAULT_CONFIG_PATH = Path("conf/vidshrink.yaml")

logger = logging.getLogger(__name__)

def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """
    Load configuration from conf/vidshrink.yaml or a provided path.
    Returns defaults if the file doesn't exist.
    """
    config_file = Path(config_path) if config_path else DEFAULT_CONFIG_PATH

    if not config_file.exists():
        logger.debug(f"Config file {config_file} not found, using defaults")
        return AppConfig()

    try:
        with open(config_file, 'r') as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot read config {config_file}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config {config_file} must be a mapping, got {type(data).__name__}")

    try:
        return AppConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config {config_file}: {e}") from e
