"""Mapping of raw references onto addon namespaces and module paths."""

import re

from ember_goto.file_kind import FileKind
from ember_goto.models import ResolvedModuleName
from ember_goto.root_configuration import RootConfiguration

NAMESPACE_SEPARATOR = "::"
COMPONENT_TEMPLATE_DIR = "templates/components"
SUBTREE_BOUNDARY_RE = re.compile(r"addon(-test-support)?|app")


def _segments(path: str) -> list[str]:
    return [s for s in path.replace("\\", "/").split("/") if s]


def infer_namespace(file_path: str, config: RootConfiguration | None = None) -> str:
    """Infer the namespace a file belongs to from its place in the tree.

    Walking up from the file, the first ``addon``, ``addon-test-support`` or
    ``app`` directory names the subtree, and the directory holding it is the
    namespace. Files of the primary app or of an app host get "".
    """
    segments = _segments(file_path)
    for i in range(len(segments) - 2, 0, -1):
        if SUBTREE_BOUNDARY_RE.fullmatch(segments[i]):
            if config is not None and "/".join(segments[:i]) in _app_host_dirs(config):
                return ""
            return segments[i - 1]
    return ""


def _app_host_dirs(config: RootConfiguration) -> set[str]:
    return {"/".join(_segments(host)) for host in config.app_hosts}


def _split_script_specifier(specifier: str) -> tuple[str, str]:
    """Split "ns/foo/bar" into ("ns", "foo/bar"); bare names have no namespace."""
    segments = _segments(specifier)
    if len(segments) < 2:
        return "", "/".join(segments)
    # Scoped packages: @scope/name/...
    if segments[0].startswith("@") and len(segments) > 2:
        return "/".join(segments[:2]), "/".join(segments[2:])
    return segments[0], "/".join(segments[1:])


def implied_kind_of(module_path: str) -> FileKind:
    """Template if the module lives under a templates directory."""
    if "templates" in _segments(module_path):
        return FileKind.TEMPLATE
    return FileKind.SCRIPT


def resolve_namespace(
    raw_specifier: str,
    current_file_path: str,
    file_kind: FileKind,
    config: RootConfiguration,
) -> ResolvedModuleName:
    """Resolve a raw reference to a namespace and a namespace-stripped path.

    Template references name components or helpers (``ns::my-thing`` or
    ``my-thing``), script references are module specifiers (``ns/foo/bar``).
    An unqualified template reference takes the namespace of the current file.
    """
    context_namespace = infer_namespace(current_file_path, config)

    if file_kind is FileKind.TEMPLATE:
        if NAMESPACE_SEPARATOR in raw_specifier:
            namespace, name = raw_specifier.split(NAMESPACE_SEPARATOR, 1)
        else:
            namespace, name = context_namespace, raw_specifier
        module_path = f"{COMPONENT_TEMPLATE_DIR}/{name.strip('/')}"
    else:
        namespace, module_path = _split_script_specifier(raw_specifier)

    return ResolvedModuleName(
        namespace=config.alias(namespace),
        module_path=module_path,
        implied_kind=implied_kind_of(module_path),
        context_namespace=config.alias(context_namespace),
    )
