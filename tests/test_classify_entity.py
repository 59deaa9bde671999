"""Tests for entity classification by path convention."""

import pytest

from ember_goto.classify_entity import (
    EntityKind,
    classify,
    classify_path,
    entity_subtree,
)


@pytest.mark.parametrize(
    ("path", "kind", "name"),
    [
        ("app/components/my-thing.hbs", EntityKind.COMPONENT_TEMPLATE, "my-thing"),
        (
            "app/templates/components/my-thing.hbs",
            EntityKind.COMPONENT_TEMPLATE,
            "my-thing",
        ),
        (
            "lib/ui/addon/components/my-thing.js",
            EntityKind.COMPONENT_JAVASCRIPT,
            "my-thing",
        ),
        ("app/styles/components/my-thing.scss", EntityKind.COMPONENT_SCSS, "my-thing"),
        (
            "tests/integration/components/my-thing-test.js",
            EntityKind.COMPONENT_INTEGRATION_TEST,
            "my-thing",
        ),
        ("app/routes/settings/index.js", EntityKind.ROUTE, "settings/index"),
        (
            "app/templates/settings/index.hbs",
            EntityKind.ROUTE_TEMPLATE,
            "settings/index",
        ),
        (
            "tests/acceptance/settings-test.js",
            EntityKind.ROUTE_ACCEPTANCE_TEST,
            "settings",
        ),
        (
            "tests/acceptance/helpers/login.js",
            EntityKind.ACCEPTANCE_TEST,
            "helpers/login",
        ),
        ("app/controllers/settings.js", EntityKind.CONTROLLER, "settings"),
        ("app/utils/format-date.js", EntityKind.UTIL, "format-date"),
        (
            "tests/unit/utils/format-date-test.js",
            EntityKind.UNIT_TEST,
            "utils/format-date",
        ),
    ],
)
def test_canonical_paths(path: str, kind: EntityKind, name: str) -> None:
    """Verify that each convention classifies back to its kind and name."""
    classified = classify_path(path)
    assert classified is not None
    assert classified.kind is kind
    assert classified.entity_name == name


def test_every_kind_is_reachable() -> None:
    """Verify that no entity kind is shadowed by an earlier rule."""
    paths = [
        "app/components/a.hbs",
        "app/components/a.js",
        "app/styles/components/a.scss",
        "tests/integration/components/a-test.js",
        "app/routes/a.js",
        "app/templates/a.hbs",
        "tests/acceptance/a-test.js",
        "app/controllers/a.js",
        "tests/acceptance/a.js",
        "app/utils/a.js",
        "tests/unit/a-test.js",
    ]
    assert {classify(p) for p in paths} == set(EntityKind)


def test_integration_tests_win_over_components() -> None:
    """Verify that component tests are never taken for component scripts."""
    assert (
        classify("lib/ui/tests/integration/components/nested/card-test.js")
        is EntityKind.COMPONENT_INTEGRATION_TEST
    )
    kind = classify("app/components/card-test.js")
    assert kind is EntityKind.COMPONENT_INTEGRATION_TEST


def test_unmatched_paths() -> None:
    """Verify that files outside every convention have no kind."""
    assert classify("README.md") is None
    assert classify("app/app.js") is None
    assert classify("config/environment.js") is None


def test_windows_separators() -> None:
    """Verify that backslash-separated paths classify the same."""
    assert classify("app\\routes\\settings.js") is EntityKind.ROUTE


def test_entity_subtree() -> None:
    """Verify the owning subtree and the prefix in front of it."""
    assert entity_subtree("lib/ui/addon/components/x.js") == ("addon", "lib/ui/")
    assert entity_subtree("app/routes/x.js") == ("app", "")
    assert entity_subtree("lib/ui/tests/integration/components/x-test.js") == (
        "tests",
        "lib/ui/",
    )
    assert entity_subtree("tests/dummy/app/routes/x.js") == ("app", "tests/dummy/")
    assert entity_subtree("README.md") == ("", "")


def test_subtree_named_entity_directory() -> None:
    """Verify that directories inside the entity name are not taken as subtrees."""
    classified = classify_path("app/components/app/header.js")
    assert classified is not None
    assert classified.entity_name == "app/header"
    assert (classified.subtree, classified.path_root) == ("app", "")

    classified = classify_path("tests/dummy/app/components/tests/row.js")
    assert classified is not None
    assert classified.entity_name == "tests/row"
    assert (classified.subtree, classified.path_root) == ("app", "tests/dummy/")
