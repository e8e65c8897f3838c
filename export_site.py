"""
Freeze the site into static files.

Usage:
    python export_site.py [--out public] [--clean]
"""

import argparse
import logging
import shutil
from pathlib import Path
from typing import List

import config
from app import app, content_dir, site_posts
from content import ContentError


logger = logging.getLogger(__name__)


def site_routes() -> List[str]:
    routes = ["/", "/about"]
    routes.extend(post.url for post in site_posts())
    return routes


def output_path(out_dir: Path, route: str) -> Path:
    return out_dir / route.strip("/") / "index.html"


def build(out_dir: Path, clean: bool = False) -> List[Path]:
    source = content_dir()
    if not source.is_dir():
        raise SystemExit(f"Content directory not found: {source}")
    try:
        routes = site_routes()
    except ContentError as exc:
        raise SystemExit(f"Invalid content: {exc}") from exc

    if clean and out_dir.exists():
        shutil.rmtree(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    written: List[Path] = []
    client = app.test_client()
    for route in routes:
        response = client.get(route)
        if response.status_code != 200:
            raise SystemExit(f"Rendering {route} failed with status {response.status_code}")
        path = output_path(out_dir, route)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(response.data)
        written.append(path)
        logger.debug("Wrote %s", path)

    response = client.get("/manifest.webmanifest")
    if response.status_code == 200:
        path = out_dir / "manifest.webmanifest"
        path.write_bytes(response.data)
        written.append(path)

    if config.STATIC_DIR.is_dir():
        shutil.copytree(config.STATIC_DIR, out_dir / "static", dirs_exist_ok=True)

    logger.info("Wrote %d files to %s", len(written), out_dir)
    return written


def main():
    parser = argparse.ArgumentParser(description="Build the static site")
    parser.add_argument(
        "--out",
        default=str(config.PUBLIC_DIR),
        help="Output directory",
    )
    parser.add_argument(
        "--clean",
        action="store_true",
        help="Remove the output directory first",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=config.LOG_LEVEL, format="%(asctime)s %(levelname)s: %(message)s"
    )
    written = build(Path(args.out), clean=args.clean)
    print(f"Built {len(written)} files into {args.out}")


if __name__ == "__main__":
    main()
