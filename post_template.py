"""
Post and project page template.

``render_post`` builds a small markup tree: a page layout holding SEO data,
the page title, the sub title and the post body. The body is pre-rendered
HTML and goes in through ``inject_trusted_html`` untouched; whoever produced
it is responsible for making it safe.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple, Union

from markupsafe import Markup, escape

from config import SiteMetadata


@dataclass
class Element:
    tag: str
    attrs: Dict[str, str] = field(default_factory=dict)
    children: Tuple["Node", ...] = ()

    @property
    def classes(self) -> List[str]:
        return self.attrs.get("class", "").split()


@dataclass
class RawHtml:
    markup: str = ""


@dataclass
class Seo:
    title: str = ""
    description: str = ""


Node = Union[Element, RawHtml, Seo, str]


@dataclass
class PostTemplateProps:
    title: str = ""
    excerpt: str = ""
    html: str = ""
    sub_title: Optional[Node] = None
    is_project: bool = False


def inject_trusted_html(markup: Optional[str]) -> RawHtml:
    """Wrap already-sanitized HTML so it is emitted byte for byte.

    Nothing here escapes or cleans ``markup``. Only pass output of a
    pipeline you control, such as the markdown renderer in ``content``.
    """
    return RawHtml(markup or "")


def _children(nodes) -> Tuple[Node, ...]:
    return tuple(node for node in nodes if node is not None)


def page_layout(*children: Node) -> Element:
    return Element("main", {"class": "page-layout"}, _children(children))


def page_title(title: Optional[str]) -> Element:
    return Element("h1", {"class": "page-title"}, _children([title or ""]))


def container(*children: Node, class_name: str = "", fluid: bool = False) -> Element:
    base = "container-fluid" if fluid else "container"
    css = f"{base} {class_name}".strip()
    return Element("div", {"class": css}, _children(children))


def content_class(is_project: bool) -> str:
    return "text-center" if is_project else "text-justify"


def render_post(props: PostTemplateProps) -> Element:
    return page_layout(
        Seo(title=props.title or "", description=props.excerpt or ""),
        container(
            page_title(props.title),
            props.sub_title,
            container(
                Element("div", {"class": "post-body"}, (inject_trusted_html(props.html),)),
                class_name=content_class(props.is_project),
            ),
            class_name="text-center",
            fluid=True,
        ),
    )


def _walk(node: Node) -> Iterator[Node]:
    yield node
    if isinstance(node, Element):
        for child in node.children:
            yield from _walk(child)


def collect_seo(tree: Node) -> List[Seo]:
    return [node for node in _walk(tree) if isinstance(node, Seo)]


def to_html(node: Optional[Node]) -> str:
    if node is None or isinstance(node, Seo):
        return ""
    if isinstance(node, RawHtml):
        return node.markup
    if isinstance(node, Element):
        attrs = "".join(
            f' {key}="{escape(value)}"' for key, value in node.attrs.items() if value is not None
        )
        inner = "".join(to_html(child) for child in node.children)
        return f"<{node.tag}{attrs}>{inner}</{node.tag}>"
    return str(escape(node))


def seo_tags(seo: Optional[Seo], site: SiteMetadata, path: str = "") -> Markup:
    """Head tags for a page: title, description, keywords, Open Graph, Twitter."""
    seo = seo or Seo()
    title = f"{seo.title} | {site.title}" if seo.title else site.title
    description = seo.description or site.description
    url = site.site_url.rstrip("/") + "/" + path.lstrip("/")

    def meta(attr: str, key: str, value: str) -> str:
        return f'<meta {attr}="{escape(key)}" content="{escape(value)}">'

    tags = [
        f"<title>{escape(title)}</title>",
        meta("name", "description", description),
        meta("name", "keywords", ", ".join(site.keywords)),
        meta("name", "author", site.author),
        meta("property", "og:title", title),
        meta("property", "og:description", description),
        meta("property", "og:type", "website"),
        meta("property", "og:url", url),
        meta("name", "twitter:card", "summary"),
        meta("name", "twitter:creator", site.author),
        meta("name", "twitter:title", title),
        meta("name", "twitter:description", description),
        f'<link rel="canonical" href="{escape(url)}">',
    ]
    return Markup("\n".join(tags))
