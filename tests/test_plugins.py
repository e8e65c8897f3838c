import pytest

from plugins import (
    PluginName,
    PluginWithOptions,
    declare,
    declare_all,
    find_plugin,
    has_plugin,
    plugin_names,
    plugin_options,
)


def test_declare_bare_name():
    plugin = declare("catch-links")
    assert plugin == PluginName("catch-links")
    assert dict(plugin.options) == {}


def test_declare_resolve_mapping():
    plugin = declare({"resolve": "nprogress", "options": {"color": "tomato"}})
    assert isinstance(plugin, PluginWithOptions)
    assert plugin.name == "nprogress"
    assert plugin.options["color"] == "tomato"


def test_declare_mapping_without_options():
    plugin = declare({"resolve": "offline"})
    assert dict(plugin.options) == {}


def test_declare_passes_variants_through():
    plugin = PluginName("sass")
    assert declare(plugin) is plugin


def test_options_are_read_only():
    plugin = PluginWithOptions("manifest", {"name": "Site"})
    with pytest.raises(TypeError):
        plugin.options["name"] = "Other"


def test_declare_all_keeps_order():
    plugins = declare_all(["b", {"resolve": "a", "options": {}}, "c"])
    assert plugin_names(plugins) == ["b", "a", "c"]


def test_lookup_helpers():
    plugins = declare_all(["sass", {"resolve": "manifest", "options": {"name": "Site"}}])
    assert find_plugin(plugins, "sass") == PluginName("sass")
    assert find_plugin(plugins, "missing") is None
    assert has_plugin(plugins, "manifest")
    assert plugin_options(plugins, "manifest") == {"name": "Site"}
    assert plugin_options(plugins, "sass") == {}
    assert plugin_options(plugins, "missing") == {}

