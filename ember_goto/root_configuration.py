"""Immutable view of the configuration threaded through every resolver call."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any

ADDON_SUBTREES = ("addon", "addon-test-support", "app")
RELATED_SUBTREES = ("addon", "app")
SCRIPT_EXTENSIONS = (".js",)
TEMPLATE_EXTENSIONS = (".hbs",)


def _tuple_or(value: Any, default: tuple[str, ...]) -> tuple[str, ...]:
    """Freeze a configured list, keeping the default when it is missing or empty."""
    return tuple(value) if value else default


@dataclass(frozen=True)
class RootConfiguration:
    """Where to look for modules: the app, extra app hosts and addon sources."""

    project_root: str
    extra_addon_sources: tuple[str, ...] = ()
    addon_name_aliases: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({})
    )
    app_namespace: str = ""
    app_hosts: tuple[str, ...] = ()
    addon_subtrees: tuple[str, ...] = ADDON_SUBTREES
    related_subtrees: tuple[str, ...] = RELATED_SUBTREES
    script_extensions: tuple[str, ...] = SCRIPT_EXTENSIONS
    template_extensions: tuple[str, ...] = TEMPLATE_EXTENSIONS

    @classmethod
    def from_config(
        cls, config: dict[str, Any], workspace_root: str | Path
    ) -> "RootConfiguration":
        """Freeze a merged configuration dictionary."""
        project_root = config.get("projectRoot") or str(workspace_root)
        root = Path(workspace_root) / project_root
        return cls(
            project_root=str(root),
            extra_addon_sources=tuple(config.get("extraAddonSources") or ()),
            addon_name_aliases=MappingProxyType(
                dict(config.get("addonNameAliases") or {})
            ),
            app_namespace=config.get("appNamespace") or "",
            app_hosts=tuple(config.get("appHosts") or ()),
            addon_subtrees=_tuple_or(config.get("addonSubtrees"), ADDON_SUBTREES),
            related_subtrees=_tuple_or(
                config.get("relatedSubtrees"), RELATED_SUBTREES
            ),
            script_extensions=_tuple_or(
                config.get("scriptExtensions"), SCRIPT_EXTENSIONS
            ),
            template_extensions=_tuple_or(
                config.get("templateExtensions"), TEMPLATE_EXTENSIONS
            ),
        )

    def alias(self, namespace: str) -> str:
        """Return the on-disk name of a namespace; identity if not aliased."""
        return self.addon_name_aliases.get(namespace, namespace)

    def is_app_namespace(self, namespace: str) -> bool:
        """Whether a namespace points at the primary app tree."""
        return not namespace or namespace == self.app_namespace
