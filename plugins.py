"""
Plugin declarations for the site configuration.

A declaration is either a bare plugin name or a name with options. Both
variants answer ``.name`` and ``.options`` so callers never have to check
which shape they were handed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union


@dataclass(frozen=True)
class PluginName:
    name: str

    @property
    def options(self) -> Mapping[str, Any]:
        return MappingProxyType({})


@dataclass(frozen=True)
class PluginWithOptions:
    name: str
    options: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "options", MappingProxyType(dict(self.options)))


Plugin = Union[PluginName, PluginWithOptions]


def declare(entry: Union[str, Mapping[str, Any], Plugin]) -> Plugin:
    """Turn a bare name or a ``{"resolve", "options"}`` mapping into a Plugin."""
    if isinstance(entry, (PluginName, PluginWithOptions)):
        return entry
    if isinstance(entry, str):
        return PluginName(entry)
    return PluginWithOptions(entry["resolve"], entry.get("options") or {})


def declare_all(entries: Iterable[Union[str, Mapping[str, Any], Plugin]]) -> tuple:
    return tuple(declare(entry) for entry in entries)


def plugin_names(plugins: Iterable[Plugin]) -> List[str]:
    return [plugin.name for plugin in plugins]


def find_plugin(plugins: Iterable[Plugin], name: str) -> Optional[Plugin]:
    for plugin in plugins:
        if plugin.name == name:
            return plugin
    return None


def has_plugin(plugins: Iterable[Plugin], name: str) -> bool:
    return find_plugin(plugins, name) is not None


def plugin_options(plugins: Iterable[Plugin], name: str) -> Dict[str, Any]:
    plugin = find_plugin(plugins, name)
    if plugin is None:
        return {}
    return dict(plugin.options)
