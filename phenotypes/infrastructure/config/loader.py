"""Configuration loading from YAML files."""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from phenotypes.infrastructure.config.models import PhenotypesConfig
from phenotypes.infrastructure.constants import CONFIG_ENV_VAR, CONFIG_FILE, LOG_LEVEL_ENV_VAR

logger = logging.getLogger(__name__)


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file and return as dict."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    # An empty file means "all defaults"
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected YAML dict in {path}, got {type(data)}")

    return data


def _resolve_path(path: Path | None) -> tuple[Path, bool]:
    """Return (path, explicit). Explicit paths must exist; the default one may be absent."""
    if path is not None:
        return Path(path), True
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path), True
    return CONFIG_FILE, False


def load_config(path: Path | None = None) -> PhenotypesConfig:
    """
    Load settings and construct a fully-resolved PhenotypesConfig.

    Resolution order for the file: `path` argument, then the PHENOTYPES_CONFIG
    environment variable, then configs/phenotypes.yaml (skipped if missing).
    PHENOTYPES_LOG_LEVEL overrides `logging.console_level`.

    Raises:
        FileNotFoundError: If an explicitly requested file does not exist
        ValueError: If the YAML document is not a mapping
        pydantic.ValidationError: If settings have invalid values
    """
    cfg_path, explicit = _resolve_path(path)

    if explicit or cfg_path.exists():
        data = _load_yaml(cfg_path)
        source = str(cfg_path)
    else:
        data = {}
        source = "defaults"

    level = os.environ.get(LOG_LEVEL_ENV_VAR)
    if level:
        logging_block = dict(data.get("logging") or {})
        logging_block["console_level"] = level
        data = {**data, "logging": logging_block}

    cfg = PhenotypesConfig.model_validate(data)
    logger.debug("Loaded configuration from %s", source)
    return cfg
