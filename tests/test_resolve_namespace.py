"""Tests for namespace resolution."""

from types import MappingProxyType

from ember_goto.file_kind import FileKind
from ember_goto.resolve_namespace import infer_namespace, resolve_namespace
from ember_goto.root_configuration import RootConfiguration


def test_script_specifier(config: RootConfiguration) -> None:
    """Verify that the first segment of a specifier is its namespace."""
    res = resolve_namespace(
        "ns/foo/bar", "app/components/page.js", FileKind.SCRIPT, config
    )
    assert res.namespace == "ns"
    assert res.module_path == "foo/bar"
    assert res.implied_kind is FileKind.SCRIPT


def test_script_alias(config: RootConfiguration) -> None:
    """Verify that aliased namespaces are renamed."""
    res = resolve_namespace(
        "shared/utils/x", "app/components/page.js", FileKind.SCRIPT, config
    )
    assert res.namespace == "s-base"
    assert res.module_path == "utils/x"


def test_script_template_module(config: RootConfiguration) -> None:
    """Verify that modules under templates imply the template kind."""
    res = resolve_namespace(
        "ui/templates/components/card", "app/app.js", FileKind.SCRIPT, config
    )
    assert res.implied_kind is FileKind.TEMPLATE


def test_scoped_package(config: RootConfiguration) -> None:
    """Verify that scoped package names are kept whole."""
    res = resolve_namespace(
        "@acme/ui/utils/x", "app/app.js", FileKind.SCRIPT, config
    )
    assert res.namespace == "@acme/ui"
    assert res.module_path == "utils/x"


def test_bare_script_reference(config: RootConfiguration) -> None:
    """Verify that bare names carry no namespace but keep the file's own."""
    res = resolve_namespace(
        "format-date", "lib/ui/addon/components/card.js", FileKind.SCRIPT, config
    )
    assert res.namespace == ""
    assert res.module_path == "format-date"
    assert res.context_namespace == "ui"


def test_template_qualified(config: RootConfiguration) -> None:
    """Verify that ns::name references use the explicit namespace."""
    res = resolve_namespace(
        "ui::my-thing",
        "lib/other/addon/templates/components/page.hbs",
        FileKind.TEMPLATE,
        config,
    )
    assert res.namespace == "ui"
    assert res.module_path == "templates/components/my-thing"
    assert res.implied_kind is FileKind.TEMPLATE
    assert res.context_namespace == "other"


def test_template_unqualified_uses_current_addon(config: RootConfiguration) -> None:
    """Verify that unqualified invocations take the namespace of the file."""
    res = resolve_namespace(
        "shared-widget",
        "packages/ui/addon/templates/components/page.hbs",
        FileKind.TEMPLATE,
        config,
    )
    assert res.namespace == "ui"
    assert res.module_path == "templates/components/shared-widget"


def test_alias_is_forward_only() -> None:
    """Verify that an alias target is never mapped back to its source."""
    config = RootConfiguration(
        project_root="/p", addon_name_aliases=MappingProxyType({"legacy": "ui"})
    )
    direct = resolve_namespace("ui::x", "app/t.hbs", FileKind.TEMPLATE, config)
    aliased = resolve_namespace("legacy::x", "app/t.hbs", FileKind.TEMPLATE, config)
    plain = resolve_namespace(
        "ui::x", "app/t.hbs", FileKind.TEMPLATE, RootConfiguration(project_root="/p")
    )
    assert direct == plain
    assert direct.namespace == "ui"
    assert aliased.namespace == "ui"


def test_no_boundary_yields_empty_namespace(config: RootConfiguration) -> None:
    """Verify that files outside any addon/app tree infer no namespace."""
    res = resolve_namespace(
        "my-thing", "src/components/page.hbs", FileKind.TEMPLATE, config
    )
    assert res.namespace == ""
    assert res.context_namespace == ""


def test_infer_namespace(config: RootConfiguration) -> None:
    """Verify namespace inference from the file's position."""
    assert infer_namespace("lib/ui/addon/components/x.js") == "ui"
    assert infer_namespace("lib/ui/addon-test-support/helpers/x.js") == "ui"
    assert infer_namespace("lib/ui/app/components/x.js") == "ui"
    assert infer_namespace("app/templates/application.hbs") == ""
    assert infer_namespace("src/index.js") == ""
    assert infer_namespace("lib\\ui\\addon\\utils\\x.js") == "ui"


def test_app_host_is_not_a_namespace(config: RootConfiguration) -> None:
    """Verify that app hosts count as the app, not as an addon."""
    assert infer_namespace("hosts/admin/app/templates/x.hbs", config) == ""
    assert infer_namespace("hosts/admin/app/templates/x.hbs") == "admin"
