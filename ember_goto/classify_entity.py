"""Classification of project files into entity kinds by path convention."""

import re
from dataclasses import dataclass
from enum import Enum


class EntityKind(Enum):
    """The role a file plays in the project layout."""

    COMPONENT_TEMPLATE = "componentTemplate"
    COMPONENT_JAVASCRIPT = "componentJavascript"
    COMPONENT_SCSS = "componentScss"
    COMPONENT_INTEGRATION_TEST = "componentIntegrationTest"
    ROUTE = "route"
    ROUTE_TEMPLATE = "routeTemplate"
    ROUTE_ACCEPTANCE_TEST = "routeAcceptanceTest"
    CONTROLLER = "controller"
    ACCEPTANCE_TEST = "acceptanceTest"
    UTIL = "util"
    UNIT_TEST = "unitTest"


# First match wins: test locations are checked before the generic
# components/routes/... rules, so test files are never taken for modules.
CLASSIFICATION_RULES: list[tuple[EntityKind, re.Pattern[str]]] = [
    (
        EntityKind.COMPONENT_INTEGRATION_TEST,
        re.compile(
            r"(?:^|/)tests/(?:.*/)?integration/components/"
            r"(?P<name>.+?)(?:-test)?\.[jt]s$"
        ),
    ),
    (
        EntityKind.ROUTE_ACCEPTANCE_TEST,
        re.compile(r"(?:^|/)tests/acceptance/(?P<name>.+?)-test\.[jt]s$"),
    ),
    (
        EntityKind.ACCEPTANCE_TEST,
        re.compile(r"(?:^|/)tests/acceptance/(?P<name>.+?)\.[jt]s$"),
    ),
    (
        EntityKind.UNIT_TEST,
        re.compile(r"(?:^|/)tests/unit/(?P<name>.+?)-test\.[jt]s$"),
    ),
    (
        EntityKind.COMPONENT_SCSS,
        re.compile(r"(?:^|/)(?:styles/)?components/(?P<name>.+?)\.s?css$"),
    ),
    (
        EntityKind.COMPONENT_TEMPLATE,
        re.compile(r"(?:^|/)components/(?P<name>.+?)\.hbs$"),
    ),
    (
        EntityKind.COMPONENT_INTEGRATION_TEST,
        re.compile(r"(?:^|/)components/(?P<name>.+?)-test\.[jt]s$"),
    ),
    (
        EntityKind.COMPONENT_JAVASCRIPT,
        re.compile(r"(?:^|/)components/(?P<name>.+?)\.[jt]s$"),
    ),
    (
        EntityKind.ROUTE,
        re.compile(r"(?:^|/)routes/(?P<name>.+?)\.[jt]s$"),
    ),
    (
        EntityKind.ROUTE_TEMPLATE,
        re.compile(r"(?:^|/)templates/(?!components/)(?P<name>.+?)\.hbs$"),
    ),
    (
        EntityKind.CONTROLLER,
        re.compile(r"(?:^|/)controllers/(?P<name>.+?)\.[jt]s$"),
    ),
    (
        EntityKind.UTIL,
        re.compile(r"(?:^|/)utils/(?P<name>.+?)\.[jt]s$"),
    ),
]

SUBTREE_RE = re.compile(r"(?:^|/)(addon|app|tests)(?=/)")


@dataclass(frozen=True)
class ClassifiedPath:
    """A project-relative path with its entity kind, name and owning subtree."""

    relative_path: str
    kind: EntityKind
    entity_name: str
    subtree: str  # "addon", "app", "tests" or ""
    path_root: str  # everything before the subtree, e.g. "lib/ui/"


def _normalize(relative_path: str) -> str:
    return relative_path.replace("\\", "/").lstrip("/")


def classify(relative_path: str) -> EntityKind | None:
    """Return the entity kind of a path, or None if no convention matches."""
    classified = classify_path(relative_path)
    return classified.kind if classified else None


def classify_path(relative_path: str) -> ClassifiedPath | None:
    """Classify a path and extract its entity name and subtree."""
    path = _normalize(relative_path)
    for kind, pattern in CLASSIFICATION_RULES:
        match = pattern.search(path)
        if match:
            subtree, path_root = entity_subtree(path, match.start("name"))
            return ClassifiedPath(
                relative_path=path,
                kind=kind,
                entity_name=match.group("name"),
                subtree=subtree,
                path_root=path_root,
            )
    return None


def entity_subtree(relative_path: str, before: int | None = None) -> tuple[str, str]:
    """Return the owning subtree of a path and the prefix in front of it.

    The innermost subtree wins, so a dummy app under tests/ counts as "app".
    Only subtrees starting before ``before`` count, which keeps directories
    inside the entity name (app/components/app/header.js) out of the search.
    """
    path = _normalize(relative_path)
    matches = [
        m for m in SUBTREE_RE.finditer(path) if before is None or m.start(1) < before
    ]
    if not matches:
        return "", ""
    match = matches[-1]
    return match.group(1), path[: match.start(1)]
