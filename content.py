"""
Markdown content sourced from the ``src/`` directory.

Every ``*.md`` file may start with a YAML front matter block:

    ---
    title: Hello
    subTitle: A first post
    date: 2020-05-01
    ---

Files below a ``projects/`` directory (or with ``project: true``) are
projects, everything else is a post.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import yaml
from markdown import markdown
from markupsafe import Markup
from slugify import slugify

from post_template import PostTemplateProps


logger = logging.getLogger(__name__)

FRONT_MATTER_RE = re.compile(r"\A---\s*\n(.*?)\n---\s*(?:\n|\Z)", re.DOTALL)
PROJECTS_DIR = "projects"

# Top-level routes a post slug would shadow
RESERVED_SLUGS = frozenset({"about", "manifest.webmanifest", PROJECTS_DIR, "static"})


class ContentError(ValueError):
    def __init__(self, path: Path, message: str):
        super().__init__(f"{path}: {message}")
        self.path = path


@dataclass
class Post:
    slug: str
    title: str
    sub_title: str
    date: Optional[datetime]
    excerpt: str
    html: str
    is_project: bool
    path: Path

    @property
    def url(self) -> str:
        if self.is_project:
            return f"/{PROJECTS_DIR}/{self.slug}"
        return f"/{self.slug}"


def parse_front_matter(text: str, path: Optional[Path] = None) -> Tuple[Dict, str]:
    match = FRONT_MATTER_RE.match(text)
    if not match:
        return {}, text
    try:
        meta = yaml.safe_load(match.group(1)) or {}
    except yaml.YAMLError as exc:
        raise ContentError(path or Path("<string>"), f"invalid front matter: {exc}") from exc
    if not isinstance(meta, dict):
        raise ContentError(path or Path("<string>"), "front matter must be a mapping")
    return meta, text[match.end():]


def render_markdown(md_text: str) -> str:
    return markdown(
        md_text or "",
        extensions=["fenced_code", "codehilite", "tables", "sane_lists"],
        output_format="html5",
    )


def build_excerpt(html: str, length: int = 220) -> str:
    text = Markup(html or "").striptags()
    if len(text) <= length:
        return text
    return f"{text[:length].rstrip()}…"


def parse_date(value) -> Optional[datetime]:
    if isinstance(value, datetime):
        return value.replace(tzinfo=None)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not value:
        return None
    try:
        return datetime.fromisoformat(str(value)).replace(tzinfo=None)
    except ValueError:
        return None


def load_post(path: Path, content_dir: Path) -> Post:
    meta, body = parse_front_matter(path.read_text(encoding="utf-8"), path)
    html = render_markdown(body)
    title = str(meta.get("title") or path.stem.replace("-", " ").title())
    relative = path.relative_to(content_dir)
    is_project = meta.get("project")
    if not isinstance(is_project, bool):
        is_project = PROJECTS_DIR in relative.parts[:-1]
    return Post(
        slug=slugify(str(meta.get("slug") or title)),
        title=title,
        sub_title=str(meta.get("subTitle") or ""),
        date=parse_date(meta.get("date")),
        excerpt=str(meta.get("excerpt") or build_excerpt(html)),
        html=html,
        is_project=is_project,
        path=path,
    )


def load_posts(content_dir: Path) -> List[Post]:
    """Load every markdown file under ``content_dir``, newest first."""
    posts = [load_post(path, content_dir) for path in sorted(content_dir.rglob("*.md"))]
    check_slugs(posts)
    logger.debug("Loaded %d markdown files from %s", len(posts), content_dir)
    return sorted(posts, key=lambda p: p.date or datetime.min, reverse=True)


def check_slugs(posts: List[Post]) -> None:
    seen: Dict[str, Path] = {}
    for post in posts:
        if not post.is_project and post.slug in RESERVED_SLUGS:
            raise ContentError(post.path, f"slug '{post.slug}' is reserved")
        if post.slug in seen:
            raise ContentError(
                post.path, f"slug '{post.slug}' already used by {seen[post.slug]}"
            )
        seen[post.slug] = post.path


def get_post(posts: List[Post], slug: str) -> Optional[Post]:
    for post in posts:
        if post.slug == slug:
            return post
    return None


def to_props(post: Post) -> PostTemplateProps:
    return PostTemplateProps(
        title=post.title,
        excerpt=post.excerpt,
        html=post.html,
        sub_title=post.sub_title or None,
        is_project=post.is_project,
    )
