"""Related files of a classified entity (component -> template, test, ...)."""

import logging
from collections.abc import Callable
from pathlib import Path

from ember_goto.classify_entity import ClassifiedPath, EntityKind, classify_path
from ember_goto.filter_existing import ExistsPredicate, disambiguate, path_exists
from ember_goto.models import PathCandidate, RelatedFile
from ember_goto.outcomes import NotFound, Outcome
from ember_goto.root_configuration import RootConfiguration

logger = logging.getLogger(__name__)

NOT_FOUND = "not found"

RELATED_SETS: dict[EntityKind, list[tuple[str, EntityKind]]] = {
    EntityKind.COMPONENT_TEMPLATE: [
        ("JavaScript", EntityKind.COMPONENT_JAVASCRIPT),
        ("Integration test", EntityKind.COMPONENT_INTEGRATION_TEST),
    ],
    EntityKind.COMPONENT_JAVASCRIPT: [
        ("Template", EntityKind.COMPONENT_TEMPLATE),
        ("Integration test", EntityKind.COMPONENT_INTEGRATION_TEST),
    ],
    EntityKind.ROUTE: [
        ("Template", EntityKind.ROUTE_TEMPLATE),
        ("Controller", EntityKind.CONTROLLER),
        ("Acceptance test", EntityKind.ROUTE_ACCEPTANCE_TEST),
    ],
    EntityKind.ROUTE_TEMPLATE: [
        ("Route", EntityKind.ROUTE),
        ("Controller", EntityKind.CONTROLLER),
        ("Acceptance test", EntityKind.ROUTE_ACCEPTANCE_TEST),
    ],
    EntityKind.CONTROLLER: [
        ("Template", EntityKind.ROUTE_TEMPLATE),
        ("Route", EntityKind.ROUTE),
        ("Acceptance test", EntityKind.ROUTE_ACCEPTANCE_TEST),
    ],
    EntityKind.COMPONENT_INTEGRATION_TEST: [
        ("Template", EntityKind.COMPONENT_TEMPLATE),
        ("JavaScript", EntityKind.COMPONENT_JAVASCRIPT),
    ],
    EntityKind.ROUTE_ACCEPTANCE_TEST: [
        ("Route", EntityKind.ROUTE),
        ("Controller", EntityKind.CONTROLLER),
        ("Template", EntityKind.ROUTE_TEMPLATE),
    ],
}


class PathBuilder:
    """Builds the paths of an entity's relatives from its own classified path."""

    def __init__(
        self,
        config: RootConfiguration,
        classified: ClassifiedPath,
        exists: ExistsPredicate = path_exists,
    ) -> None:
        """Initialize the builder for one classified path."""
        self.config = config
        self.classified = classified
        self.exists = exists
        self.root = classified.path_root
        self.name = classified.entity_name

    def build(self, kind: EntityKind) -> tuple[str, PathCandidate | None]:
        """Locate the file of an entity kind.

        Returns the path that was (or would have been) used, and the candidate
        if it exists.
        """
        if kind is EntityKind.COMPONENT_JAVASCRIPT:
            return self._check(lambda sub: self._scripts(sub, "components"))
        if kind is EntityKind.ROUTE:
            return self._check(lambda sub: self._scripts(sub, "routes"))
        if kind is EntityKind.CONTROLLER:
            return self._check(lambda sub: self._scripts(sub, "controllers"))
        if kind is EntityKind.COMPONENT_TEMPLATE:
            return self._check(
                lambda sub: [
                    f"{self._base(sub)}templates/components/{self.name}{ext}"
                    for ext in self.config.template_extensions
                ]
                + [
                    # Co-located template next to the component class
                    f"{self._base(sub)}components/{self.name}{ext}"
                    for ext in self.config.template_extensions
                ]
            )
        if kind is EntityKind.ROUTE_TEMPLATE:
            return self._check(
                lambda sub: [
                    f"{self._base(sub)}templates/{self.name}{ext}"
                    for ext in self.config.template_extensions
                ]
            )
        if kind is EntityKind.COMPONENT_INTEGRATION_TEST:
            return self._check(lambda _sub: self._tests("integration/components"))
        if kind is EntityKind.ROUTE_ACCEPTANCE_TEST:
            return self._check(lambda _sub: self._tests("acceptance"))
        msg = f"No path convention for {kind.value}"
        raise ValueError(msg)

    def _base(self, subtree: str) -> str:
        """Directory prefix of a subtree; a path without one stays relative."""
        if not subtree:
            return self.root
        return f"{self.root}{subtree}/"

    def _scripts(self, subtree: str, folder: str) -> list[str]:
        return [
            f"{self._base(subtree)}{folder}/{self.name}{ext}"
            for ext in self.config.script_extensions
        ]

    def _tests(self, folder: str) -> list[str]:
        return [
            f"{self.root}tests/{folder}/{self.name}-test{ext}"
            for ext in self.config.script_extensions
        ]

    def _subtrees(self) -> list[str]:
        """Subtrees to search, in priority order.

        Test files do not say whether the entity under test lives in the addon
        or in the app, so the configured priority order is tried first.
        """
        own = self.classified.subtree
        if own == "tests":
            return [*self.config.related_subtrees, own]
        return [own]

    def _check(
        self, build_paths: Callable[[str], list[str]]
    ) -> tuple[str, PathCandidate | None]:
        tried: list[str] = []
        for subtree in self._subtrees():
            for relative in build_paths(subtree):
                if relative in tried:
                    continue
                tried.append(relative)
                absolute = str(Path(self.config.project_root) / relative)
                if self.exists(absolute):
                    return relative, PathCandidate(absolute, relative)
        return (tried[0] if tried else ""), None


def related_files(
    relative_path: str,
    config: RootConfiguration,
    exists: ExistsPredicate = path_exists,
) -> list[RelatedFile] | None:
    """List the related files of a path, or None if its kind has none."""
    classified = classify_path(relative_path)
    if classified is None or classified.kind not in RELATED_SETS:
        return None

    builder = PathBuilder(config, classified, exists)
    related = []
    for label, kind in RELATED_SETS[classified.kind]:
        relative, candidate = builder.build(kind)
        if candidate is not None:
            candidate = PathCandidate(candidate.path, f"{label}: {relative}")
        related.append(RelatedFile(label, relative, candidate))
    logger.debug(
        "%s is a %s named %r",
        relative_path,
        classified.kind.value,
        classified.entity_name,
    )
    return related


def find_related(
    relative_path: str,
    config: RootConfiguration,
    exists: ExistsPredicate = path_exists,
) -> Outcome:
    """Resolve the related files of a path into a navigation outcome."""
    related = related_files(relative_path, config, exists)
    if related is None:
        return NotFound(namespace="", module_path=f"related files of {relative_path}")
    existing = [r.candidate for r in related if r.candidate is not None]
    return disambiguate(existing, "", f"related files of {relative_path}")
