"""User configuration for ansible-logs-view.

Preferences live in ~/.ansible-logs-view/config.json. Command-line
options override whatever is stored there.
"""

import json
import logging
from pathlib import Path

from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

CONFIG_DIR_NAME = ".ansible-logs-view"
CONFIG_FILE_NAME = "config.json"


class LayoutConfig(BaseModel):
    """Row and column sizes used to split the screen."""

    header_height: int = 2
    help_height: int = 1
    vertical_padding: int = 4
    details_min_height: int = 15
    list_min_height: int = 3
    details_floor_height: int = 3
    horizontal_padding: int = 4
    # Title row plus border and padding inside the details panel
    details_chrome_height: int = 4


class ViewerConfig(BaseModel):
    """Viewer preferences."""

    fuzzy: bool = False
    full_content_search: bool = False
    wrap_details: bool = True
    detail_rows: int = 4
    debug_log: str = "debug.log"
    layout: LayoutConfig = LayoutConfig()


def get_config_dir() -> Path:
    """Get the configuration directory (not created)."""
    return Path.home() / CONFIG_DIR_NAME


def load_config() -> ViewerConfig:
    """Load stored preferences, falling back to defaults."""
    config_file = get_config_dir() / CONFIG_FILE_NAME
    if not config_file.exists():
        return ViewerConfig()
    try:
        data = json.loads(config_file.read_text(encoding="utf-8"))
        return ViewerConfig(**data)
    except (json.JSONDecodeError, ValidationError, TypeError) as e:
        logger.warning(f"Ignoring invalid config {config_file}: {e}")
    except OSError as e:
        logger.warning(f"Cannot read config {config_file}: {e}")
    return ViewerConfig()


def save_config(config: ViewerConfig) -> Path:
    """Write preferences to the config file and return its path."""
    config_dir = get_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    config_file = config_dir / CONFIG_FILE_NAME
    config_file.write_text(
        json.dumps(config.model_dump(), indent=2),
        encoding="utf-8",
    )
    return config_file
