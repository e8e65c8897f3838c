import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Sequence, Tuple

from plugins import declare_all

# Paths
BASE_DIR = Path(__file__).parent
CONTENT_DIR = BASE_DIR / "src"
STATIC_DIR = BASE_DIR / "static"
TEMPLATES_DIR = BASE_DIR / "templates"
PUBLIC_DIR = Path(os.getenv("PUBLIC_DIR", str(BASE_DIR / "public")))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Site URL, first set variable wins
SITE_URL_SOURCES = ("DEPLOY_URL", "URL")
DEFAULT_SITE_URL = "http://localhost:8000"


@dataclass(frozen=True)
class BookOrShowEntry:
    title: str
    author: str
    link: str


@dataclass(frozen=True)
class SiteMetadata:
    title: str
    author: str
    first_name: str
    last_name: str
    description: str
    occupation: str
    keywords: Tuple[str, ...]
    site_url: str
    unemployed: bool
    designations: Tuple[str, ...]
    reading_list: Tuple[BookOrShowEntry, ...]
    shows_list: Tuple[BookOrShowEntry, ...]


def resolve_env(
    sources: Sequence[str],
    default: str,
    environ: Optional[Mapping[str, str]] = None,
) -> str:
    """Return the first non-empty variable in ``sources``, else ``default``."""
    env = os.environ if environ is None else environ
    for name in sources:
        value = env.get(name)
        if value:
            return value
    return default


def resolve_site_url(environ: Optional[Mapping[str, str]] = None) -> str:
    return resolve_env(SITE_URL_SOURCES, DEFAULT_SITE_URL, environ)


READING_LIST = (
    BookOrShowEntry(
        title="Straight and Crooked Thinking",
        author="Robert H. Thouless",
        link="https://www.goodreads.com/book/show/11577463-straight-and-crooked-thinking",
    ),
    BookOrShowEntry(
        title="The Art of Insight in Science and Engineering: Mastering Complexity",
        author="Sanjoy Mahan",
        link="https://www.goodreads.com/book/show/22050657-the-art-of-insight-in-science-and-engineering",
    ),
    BookOrShowEntry(
        title="The Art of Doing Science and Engineering",
        author="Richard Hamming",
        link="https://www.goodreads.com/book/show/530415.The_Art_of_Doing_Science_and_Engineering",
    ),
)

SHOWS_LIST = (
    BookOrShowEntry(
        title="Boston Legal",
        author="David E. Kelley",
        link="https://www.imdb.com/title/tt0402711/",
    ),
    BookOrShowEntry(
        title="Love, Death & Robots",
        author="Tim Miller",
        link="https://www.imdb.com/title/tt9561862/",
    ),
    BookOrShowEntry(
        title="True Detective",
        author="Nic Pizzolatto",
        link="https://www.imdb.com/title/tt2356777/",
    ),
)


def load_site_metadata(environ: Optional[Mapping[str, str]] = None) -> SiteMetadata:
    return SiteMetadata(
        title="John Paul Mulongo",
        author="John Paul Mulongo",
        first_name="John",
        last_name="Mulongo",
        description="John Paul's personal site",
        occupation="Software Engineer",
        keywords=("John", "Mulongo", "Personal", "Blog", "Projects", "Work"),
        site_url=resolve_site_url(environ),
        unemployed=False,
        designations=("Coding Monkey", "Jedi Master"),
        reading_list=READING_LIST,
        shows_list=SHOWS_LIST,
    )


# Site metadata
SITE_METADATA = load_site_metadata()

# Plugins, in build order
PLUGINS = declare_all(
    [
        "preload-link-crossorigin",
        "catch-links",
        {
            "resolve": "source-filesystem",
            "options": {"name": "src", "path": f"{BASE_DIR}/src/"},
        },
        "sass",
        "transformer-remark",
        "transformer-sharp",
        "sharp",
        {
            "resolve": "manifest",
            "options": {
                "name": "John Doe's Personal Site",
                "short_name": "J.Doe",
                "description": "This is my personal site.",
                "start_url": "/",
                "background_color": "#fff",
                "theme_color": "#fff",
                "display": "standalone",
                "icon": f"{BASE_DIR}/static/favicon.ico",
            },
        },
        "offline",
        "head-tags",
        {
            "resolve": "google-fonts",
            "options": {"fonts": ["Raleway:300,400"], "display": "swap"},
        },
        {
            "resolve": "nprogress",
            "options": {"color": "tomato", "showSpinner": True},
        },
    ]
)
