"""Site generation: renders the configuration into the output file set."""

from __future__ import annotations

import logging
import random
import re
import string
import time
import zipfile
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Mapping, Optional

from jinja2 import DictLoader, Environment, select_autoescape
from markupsafe import Markup

from .colors import adjust_color
from .models import Page, SiteConfig
from .templates import HTACCESS_TEMPLATE, TEMPLATES

logger = logging.getLogger(__name__)

PAGE_EXTENSION = "php"
STYLESHEET_FILENAME = "style.css"
SCRIPT_FILENAME = "script.js"
HTACCESS_FILENAME = ".htaccess"
SCROLL_THRESHOLD = 100

LANGUAGES = {
    ".php": "php",
    ".html": "html",
    ".css": "css",
    ".js": "javascript",
    ".htaccess": "apache",
}


def _php_str(value: str) -> Markup:
    """Escape a value for a single-quoted PHP string literal."""
    return Markup(str(value).replace("\\", "\\\\").replace("'", "\\'"))


def _font_family(value: str) -> str:
    return value.strip().replace(" ", "+")


@lru_cache(maxsize=1)
def _env() -> Environment:
    env = Environment(
        loader=DictLoader(TEMPLATES),
        autoescape=select_autoescape(["html.j2", "php.j2"], default_for_string=False),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.filters["shade"] = adjust_color
    env.filters["php_str"] = _php_str
    env.filters["font_family"] = _font_family
    return env


def _base_context(config: SiteConfig) -> dict:
    return {
        "project": config.project,
        "menu": config.menu,
        "colors": config.colors,
        "single_page": len(config.pages) == 1,
    }


def _nav(config: SiteConfig, page: Page, ext: str) -> List[dict]:
    return [
        {"name": p.name, "href": p.filename(ext), "active": p.id == page.id}
        for p in config.pages
    ]


def image_source(page: Page) -> str:
    """Image URL as referenced from the generated document."""
    if page.has_external_image:
        return page.image_path
    return f"./{page.image_path}"


def generate_page(config: SiteConfig, page: Page, ext: str = PAGE_EXTENSION) -> str:
    tpl = _env().get_template("page.php.j2")
    return tpl.render(
        **_base_context(config),
        page=page,
        nav=_nav(config, page, ext),
        image_prefix="" if page.has_external_image else "./",
        stylesheet=STYLESHEET_FILENAME,
        script=SCRIPT_FILENAME,
    )


def generate_css(config: SiteConfig) -> str:
    return _env().get_template("style.css.j2").render(**_base_context(config))


def generate_js(config: SiteConfig) -> str:
    tpl = _env().get_template("script.js.j2")
    return tpl.render(**_base_context(config), scroll_threshold=SCROLL_THRESHOLD)


def generate_htaccess() -> str:
    """Server cache/compression/security rules. Independent of the model."""
    return HTACCESS_TEMPLATE


def preview_cache_buster() -> str:
    alphabet = string.ascii_lowercase + string.digits
    token = "".join(random.choices(alphabet, k=9))
    return f"v={int(time.time() * 1000)}&r={token}"


def generate_preview(
    config: SiteConfig,
    page: Optional[Page] = None,
    cache_buster: Optional[str] = None,
) -> str:
    """Self-contained HTML for the in-app preview pane.

    Stylesheet and script are inlined and links point nowhere. When
    ``cache_buster`` is omitted a fresh time/random token is used.
    """
    page = page or config.current_page()
    tpl = _env().get_template("preview.html.j2")
    return tpl.render(
        **_base_context(config),
        page=page,
        nav=_nav(config, page, PAGE_EXTENSION),
        image_src=image_source(page),
        cache_buster=cache_buster if cache_buster is not None else preview_cache_buster(),
        css=Markup(generate_css(config)),
        js=Markup(generate_js(config)),
    )


def generate_all(config: SiteConfig, ext: str = PAGE_EXTENSION) -> Dict[str, str]:
    """Render every output file, keyed by filename."""
    files: Dict[str, str] = {}
    for page in config.pages:
        files[page.filename(ext)] = generate_page(config, page, ext)
    files[STYLESHEET_FILENAME] = generate_css(config)
    files[SCRIPT_FILENAME] = generate_js(config)
    files[HTACCESS_FILENAME] = generate_htaccess()
    logger.debug("Generated %d file(s) for %r", len(files), config.project.site_name)
    return files


# ---------------------------------------------------------------- Export --
def language_for(filename: str) -> str:
    """Syntax name used by the code view for ``filename``."""
    if filename.endswith(HTACCESS_FILENAME):
        return LANGUAGES[HTACCESS_FILENAME]
    return LANGUAGES.get(Path(filename).suffix.lower(), "plaintext")


def archive_name(site_name: str) -> str:
    stem = re.sub(r"\s+", "-", site_name.strip().lower()) or "site"
    return f"{stem}-template.zip"


def _safe_target(output_dir: Path, filename: str) -> Path:
    target = (output_dir / filename).resolve()
    if target.parent != output_dir.resolve():
        raise ValueError(f"Refusing to write outside the output folder: {filename}")
    return target


def build_archive(files: Mapping[str, str], destination: str | Path) -> Path:
    for filename in files:
        if "/" in filename or "\\" in filename or filename in {"", ".", ".."}:
            raise ValueError(f"Invalid file name in output set: {filename!r}")

    destination = Path(destination)
    destination.parent.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(destination, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        for filename, content in files.items():
            zf.writestr(filename, content)
    logger.info("Wrote archive %s (%d file(s))", destination, len(files))
    return destination


def render_site(config: SiteConfig, output_dir: str | Path, ext: str = PAGE_EXTENSION) -> List[Path]:
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    written: List[Path] = []
    for filename, content in generate_all(config, ext).items():
        target = _safe_target(output_dir, filename)
        target.write_text(content, encoding="utf-8")
        written.append(target)
    logger.info("Exported %d file(s) to %s", len(written), output_dir)
    return written
