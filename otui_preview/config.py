# otui_preview/config.py
import logging
import os
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import BaseModel

logger = logging.getLogger(__name__)

# === CONFIGURATION ===
DEFAULT_CONFIG_PATH = Path("otui_preview.yaml")
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 1112

ENV_OVERRIDES = {
    "OTUI_PREVIEW_HOST": "host",
    "OTUI_PREVIEW_PORT": "port",
    "OTUI_PREVIEW_LOG_LEVEL": "log_level",
}


class PreviewConfig(BaseModel):
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    reload: bool = False
    log_level: str = "INFO"
    daemon_url: str = f"http://{DEFAULT_HOST}:{DEFAULT_PORT}"
    request_timeout: float = 10.0
    page_title: str = "OTUI Preview"


def load_config(config_file_path: Optional[Union[str, Path]] = None) -> PreviewConfig:
    """
    Loads the preview configuration from a YAML file, then applies environment overrides.

    A missing file is not an error: defaults are used instead.
    """
    target_path = Path(config_file_path) if config_file_path else DEFAULT_CONFIG_PATH

    values = {}
    if target_path.exists():
        logger.info("[CONFIG] Loading configuration from: %s", target_path.resolve())
        with open(target_path, "r", encoding="utf-8") as f:
            values = yaml.safe_load(f) or {}
        if not isinstance(values, dict):
            raise ValueError(f"Configuration file '{target_path}' must contain a mapping")
    else:
        logger.debug("[CONFIG] No configuration file at '%s', using defaults", target_path)

    for env_name, field_name in ENV_OVERRIDES.items():
        if env_name in os.environ:
            values[field_name] = os.environ[env_name]

    return PreviewConfig(**values)
