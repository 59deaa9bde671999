"""Enumeration of every place a resolved module could live on disk."""

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from ember_goto.file_kind import FileKind
from ember_goto.models import PathCandidate, ResolvedModuleName
from ember_goto.root_configuration import RootConfiguration

logger = logging.getLogger(__name__)

COMPONENT_TEMPLATE_MODULE_RE = re.compile(r"^templates/components/")
APP_DIR = "app"
ENTRY_MODULE = "index"


@dataclass(frozen=True)
class Sibling:
    """One representation a module may take on disk."""

    label: str
    module_path: str
    kind: FileKind


def sibling_representations(resolved: ResolvedModuleName) -> list[Sibling]:
    """List the representations of a module, most literal first.

    A ``{{my-thing}}`` invocation may be backed by a component template, the
    component's class, a plain helper, or a template co-located with the class.
    """
    module_path = resolved.module_path or ENTRY_MODULE
    label = "Template" if resolved.implied_kind is FileKind.TEMPLATE else "JavaScript"
    siblings = [Sibling(label, module_path, resolved.implied_kind)]

    if COMPONENT_TEMPLATE_MODULE_RE.match(module_path):
        siblings.extend(
            [
                Sibling(
                    "JavaScript",
                    module_path.replace("templates/", "", 1),
                    FileKind.SCRIPT,
                ),
                Sibling(
                    "Helper",
                    COMPONENT_TEMPLATE_MODULE_RE.sub("helpers/", module_path),
                    FileKind.SCRIPT,
                ),
                Sibling(
                    "Component",
                    COMPONENT_TEMPLATE_MODULE_RE.sub("components/", module_path),
                    FileKind.TEMPLATE,
                ),
            ]
        )
    return siblings


def _search_roots(config: RootConfiguration, resolved: ResolvedModuleName) -> list[str]:
    """Directories, relative to the project root, that may hold the module."""
    if config.is_app_namespace(resolved.namespace):
        roots = [APP_DIR]
        roots.extend(f"{host.strip('/')}/{APP_DIR}" for host in config.app_hosts)
        if not resolved.namespace and resolved.context_namespace:
            # Last resort for bare references: the app tree of the current addon
            roots.extend(
                f"{source.strip('/')}/{resolved.context_namespace}/{APP_DIR}"
                for source in config.extra_addon_sources
            )
        return roots

    return [
        f"{source.strip('/')}/{resolved.namespace}/{subtree}"
        for source in config.extra_addon_sources
        for subtree in config.addon_subtrees
    ]


def _extensions(config: RootConfiguration, kind: FileKind) -> tuple[str, ...]:
    if kind is FileKind.TEMPLATE:
        return config.template_extensions
    return config.script_extensions


def generate_candidates(
    config: RootConfiguration, resolved: ResolvedModuleName
) -> list[PathCandidate]:
    """Generate candidate paths in search order, without touching the disk."""
    project_root = Path(config.project_root)
    siblings = sibling_representations(resolved)
    candidates: list[PathCandidate] = []
    seen: set[str] = set()

    for root in _search_roots(config, resolved):
        for sibling in siblings:
            for extension in _extensions(config, sibling.kind):
                relative = f"{root}/{sibling.module_path}{extension}"
                path = str(project_root / relative)
                if path in seen:
                    continue
                seen.add(path)
                candidates.append(PathCandidate(path, f"{sibling.label}: {relative}"))

    logger.debug(
        "Generated %d candidates for %s:%s",
        len(candidates),
        resolved.namespace,
        resolved.module_path,
    )
    return candidates
