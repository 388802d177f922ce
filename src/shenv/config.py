"""User configuration for shenv."""

import logging
import os
from pathlib import Path

from pydantic import ValidationError

from shenv.models import ShenvConfig

log = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".shenv"
CONFIG_FILE = CONFIG_DIR / "config.json"


def config_path() -> Path:
    """Return the config file location, honouring SHENV_CONFIG."""
    override = os.environ.get("SHENV_CONFIG", "").strip()
    if override:
        return Path(override).expanduser()
    return CONFIG_FILE


def load_config(path: Path | None = None) -> ShenvConfig:
    """Load config from disk, falling back to defaults when absent or invalid."""
    path = path or config_path()
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        log.debug("no config at %s, using defaults", path)
        return ShenvConfig()
    except OSError as e:
        log.warning("Cannot read config %s: %s", path, e)
        return ShenvConfig()

    try:
        config = ShenvConfig.model_validate_json(raw)
    except ValidationError as e:
        log.warning("Ignoring invalid config %s: %s", path, e)
        return ShenvConfig()
    log.debug("loaded config from %s", path)
    return config


def save_config(config: ShenvConfig, path: Path | None = None) -> Path:
    """Write config to disk and return where it went."""
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(config.model_dump_json(indent=2) + "\n", encoding="utf-8")
    return path
