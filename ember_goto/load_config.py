"""Logic for loading and merging configuration files."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from ember_goto.deep_merge import deep_merge

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".ember-goto.yml"

DEFAULT_CONFIG: dict[str, Any] = {
    "projectRoot": None,
    "extraAddonSources": ["lib"],
    "addonNameAliases": {},
    "appNamespace": "",
    "appHosts": [],
    "addonSubtrees": ["addon", "addon-test-support", "app"],
    "relatedSubtrees": ["addon", "app"],
    "scriptExtensions": [".js"],
    "templateExtensions": [".hbs"],
}


def load_config(
    path: str | Path | None = None, workspace_root: str | Path | None = None
) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults.

    Without an explicit path, ``.ember-goto.yml`` in the workspace root is used
    when present.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path is None and workspace_root is not None:
        path = Path(workspace_root) / CONFIG_FILE_NAME
    if path:
        p = Path(path)
        if p.exists():
            try:
                user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            except (OSError, yaml.YAMLError):
                logger.warning("Could not read config %s, using defaults", p)
                return config
            if not isinstance(user_config, dict):
                logger.warning("Ignoring config %s: not a mapping", p)
                return config
            config = deep_merge(config, user_config)
    return config
