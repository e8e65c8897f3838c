from pathlib import Path

import pytest

import config
from app import app as flask_app
from plugins import PluginWithOptions


POSTS = {
    "posts/hello-world.md": """---
title: Hello World
subTitle: The first one
date: 2021-01-02
---

Hello *there*.
""",
    "posts/older.md": """---
title: Older Post
date: 2020-01-01
---

Old news.
""",
    "projects/side-project.md": """---
title: Side Project
subTitle: Weekend hacking
date: 2021-06-01
---

Built a thing.
""",
}


def write_content(root: Path, files: dict) -> Path:
    for relative, text in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    return root


def with_content_path(plugins, path: Path) -> tuple:
    return tuple(
        PluginWithOptions("source-filesystem", {"name": "src", "path": str(path)})
        if plugin.name == "source-filesystem"
        else plugin
        for plugin in plugins
    )


def with_options(plugins, name: str, **overrides) -> tuple:
    return tuple(
        PluginWithOptions(name, {**plugin.options, **overrides})
        if plugin.name == name
        else plugin
        for plugin in plugins
    )


@pytest.fixture
def content_root(tmp_path):
    return write_content(tmp_path / "src", POSTS)


@pytest.fixture
def app(content_root, tmp_path, monkeypatch):
    icon = tmp_path / "favicon.ico"
    icon.write_bytes(b"\x00\x00\x01\x00")
    plugins = with_content_path(config.PLUGINS, content_root)
    plugins = with_options(plugins, "manifest", icon=str(icon))
    monkeypatch.setitem(flask_app.config, "TESTING", True)
    monkeypatch.setitem(flask_app.config, "PLUGINS", plugins)
    return flask_app


@pytest.fixture
def client(app):
    return app.test_client()
