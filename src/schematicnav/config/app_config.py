"""Site configuration loading.

Reads the symbolic configuration (base URL, named pages, named
elements) from a JSON or YAML settings file.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Optional, Union

import yaml

from schematicnav.domains.navigation.aggregates import SymbolicConfiguration
from schematicnav.domains.navigation.errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "appsettings.json"
CONFIG_PATH_ENV = "SCHEMATICNAV_CONFIG"


def resolve_config_path(path: Optional[Union[str, Path]] = None) -> Path:
    """Pick the settings file: explicit path, then env var, then the default."""
    if path:
        return Path(path)
    env_path = os.environ.get(CONFIG_PATH_ENV, "").strip()
    if env_path:
        return Path(env_path)
    return Path.cwd() / DEFAULT_CONFIG_FILE


def load_symbolic_configuration(
    path: Optional[Union[str, Path]] = None,
) -> SymbolicConfiguration:
    """Load and validate a SymbolicConfiguration.

    ``.json`` files are read with ``json``; anything else goes through
    ``yaml.safe_load``. The settings may sit at the top level or under an
    ``App`` section.

    Raises:
        ConfigurationError: If the file is missing, unparsable or invalid
    """
    config_path = resolve_config_path(path)
    if not config_path.is_file():
        raise ConfigurationError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            if config_path.suffix.lower() == ".json":
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Could not parse {config_path}: {exc}") from exc
    except (UnicodeDecodeError, OSError) as exc:
        raise ConfigurationError(f"Could not read {config_path}: {exc}") from exc

    if isinstance(data, dict) and isinstance(data.get("App"), dict):
        data = data["App"]

    config = SymbolicConfiguration.from_dict(data or {})
    logger.info(
        "Loaded %d pages and %d elements from %s",
        len(config.pages),
        len(config.elements),
        config_path,
    )
    return config
