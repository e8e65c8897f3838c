from __future__ import annotations

import logging
import mimetypes
from pathlib import Path
from typing import Dict, List, Optional

from flask import Flask, abort, jsonify, render_template, request, url_for
from markupsafe import Markup

import config
from content import Post, get_post, load_posts, to_props
from plugins import has_plugin, plugin_options
from post_template import collect_seo, render_post, seo_tags, to_html


logger = logging.getLogger(__name__)

app = Flask(
    __name__,
    static_folder=str(config.STATIC_DIR),
    template_folder=str(config.TEMPLATES_DIR),
)
app.config["SITE_METADATA"] = config.SITE_METADATA
app.config["PLUGINS"] = config.PLUGINS

GOOGLE_FONTS_URL = "https://fonts.googleapis.com/css"


def content_dir() -> Path:
    options = plugin_options(app.config["PLUGINS"], "source-filesystem")
    return Path(options.get("path") or config.CONTENT_DIR)


def site_posts() -> List[Post]:
    path = content_dir()
    if not path.is_dir():
        logger.warning("Content directory %s does not exist", path)
        return []
    return load_posts(path)


def google_fonts_href(options: Dict) -> Optional[str]:
    fonts = options.get("fonts") or []
    if not fonts:
        return None
    href = f"{GOOGLE_FONTS_URL}?family={'|'.join(fonts)}"
    if options.get("display"):
        href += f"&display={options['display']}"
    return href


def build_manifest(options: Dict) -> Dict:
    manifest = {
        key: options[key]
        for key in (
            "name",
            "short_name",
            "description",
            "start_url",
            "background_color",
            "theme_color",
            "display",
        )
        if key in options
    }
    icon = options.get("icon")
    if icon and not Path(icon).is_file():
        logger.warning("Manifest icon %s does not exist, leaving out icons", icon)
    elif icon:
        name = Path(icon).name
        manifest["icons"] = [
            {
                "src": url_for("static", filename=name),
                "sizes": "any",
                "type": mimetypes.guess_type(name)[0] or "image/x-icon",
            }
        ]
    return manifest


@app.context_processor
def inject_globals():
    plugins = app.config["PLUGINS"]
    return {
        "site": app.config["SITE_METADATA"],
        "seo_tags": seo_tags,
        "fonts_href": google_fonts_href(plugin_options(plugins, "google-fonts")),
        "preload_crossorigin": has_plugin(plugins, "preload-link-crossorigin"),
        "has_manifest": has_plugin(plugins, "manifest"),
        "theme_color": plugin_options(plugins, "manifest").get("theme_color"),
    }


@app.route("/")
def blog_index():
    posts = site_posts()
    return render_template(
        "blog_index.html",
        posts=[p for p in posts if not p.is_project],
        projects=[p for p in posts if p.is_project],
    )


@app.route("/about")
def about():
    return render_template("about.html")


@app.route("/manifest.webmanifest")
def manifest():
    plugins = app.config["PLUGINS"]
    if not has_plugin(plugins, "manifest"):
        abort(404)
    response = jsonify(build_manifest(plugin_options(plugins, "manifest")))
    response.mimetype = "application/manifest+json"
    return response


def render_page(post: Optional[Post], is_project: bool):
    if not post or post.is_project != is_project:
        abort(404)
    tree = render_post(to_props(post))
    seo = collect_seo(tree)
    return render_template(
        "blog_post.html",
        head=seo_tags(seo[0] if seo else None, app.config["SITE_METADATA"], request.path),
        body=Markup(to_html(tree)),
    )


@app.route("/projects/<slug>")
def project(slug: str):
    return render_page(get_post(site_posts(), slug), is_project=True)


@app.route("/<slug>")
def blog_post(slug: str):
    return render_page(get_post(site_posts(), slug), is_project=False)


if __name__ == "__main__":
    logging.basicConfig(
        level=config.LOG_LEVEL, format="%(asctime)s %(levelname)s: %(message)s"
    )
    app.run(debug=True, port=8000)
