"""Lookup of namespaces already mapped by the project's jsconfig.json."""

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

JSCONFIG_FILE_NAME = "jsconfig.json"


def load_path_mappings(project_root: str | Path) -> dict[str, list[str]]:
    """Return ``compilerOptions.paths`` of jsconfig.json, or {} if unavailable."""
    path = Path(project_root) / JSCONFIG_FILE_NAME
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("Could not read %s: %s", path, e)
        return {}
    options = data.get("compilerOptions") if isinstance(data, dict) else None
    if not isinstance(options, dict):
        return {}
    paths = options.get("paths") or {}
    return paths if isinstance(paths, dict) else {}


def is_mapped_by_jsconfig(project_root: str | Path, namespace: str) -> bool:
    """Whether jsconfig.json maps ``{namespace}/*`` itself."""
    if not namespace:
        return False
    return f"{namespace}/*" in load_path_mappings(project_root)
