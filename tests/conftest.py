"""Shared fixtures for the resolver tests."""

from collections.abc import Callable
from pathlib import Path
from types import MappingProxyType

import pytest

from ember_goto.root_configuration import RootConfiguration


@pytest.fixture
def config() -> RootConfiguration:
    """A configuration rooted at /p with two addon sources and one app host."""
    return RootConfiguration(
        project_root=str(Path("/p")),
        extra_addon_sources=("lib", "packages"),
        addon_name_aliases=MappingProxyType({"shared": "s-base"}),
        app_namespace="my-app",
        app_hosts=("hosts/admin",),
    )


@pytest.fixture
def project(tmp_path: Path) -> RootConfiguration:
    """A configuration rooted at an empty temporary project."""
    return RootConfiguration(
        project_root=str(tmp_path),
        extra_addon_sources=("lib",),
        app_namespace="my-app",
    )


@pytest.fixture
def touch(tmp_path: Path) -> Callable[..., None]:
    """Return a helper creating files below the temporary project."""

    def _touch(*relative_paths: str, content: str = "export default {};\n") -> None:
        for relative in relative_paths:
            path = tmp_path / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")

    return _touch
