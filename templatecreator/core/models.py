"""Configuration model for the template creator."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .colors import normalize_hex
from .errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

MENU_POSITIONS = ("fixed", "static")
MENU_STYLES = ("pills", "underline", "buttons")

DEFAULT_SITE_NAME = "My Presentation"
DEFAULT_FONT = "Geist"
DEFAULT_MENU_COLOR = "#666666"
DEFAULT_MENU_FONT_SIZE = 12
DEFAULT_PRIMARY = "#347419"
DEFAULT_SECONDARY = "#0dac76"
DEFAULT_BG = "#ffffff"
DEFAULT_CURRENT_FILE = "index.php"

DEFAULT_PAGES = (("Home", "index"), ("About", "about"), ("Contact", "contact"))


def slugify(text: str) -> str:
    """Suggest a filename-safe slug for a page name."""

    return re.sub(r"[^a-z0-9]+", "-", text.lower()).strip("-")


def _text(data: Mapping[str, Any], key: str, default: str) -> str:
    value = data.get(key)
    return value if isinstance(value, str) else default


def _flag(data: Mapping[str, Any], key: str, default: bool) -> bool:
    value = data.get(key)
    return value if isinstance(value, bool) else default


def _positive_int(value: Any, default: int) -> int:
    if isinstance(value, bool):
        return default
    try:
        number = int(value)
    except (TypeError, ValueError, OverflowError):
        return default
    return number if number > 0 else default


@dataclass
class ProjectSettings:
    site_name: str = DEFAULT_SITE_NAME
    base_url: str = ""
    font: str = DEFAULT_FONT

    def to_dict(self) -> dict:
        return {
            "siteName": self.site_name,
            "baseUrl": self.base_url,
            "font": self.font,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ProjectSettings":
        return cls(
            site_name=_text(data, "siteName", DEFAULT_SITE_NAME),
            base_url=_text(data, "baseUrl", ""),
            font=_text(data, "font", "").strip() or DEFAULT_FONT,
        )


@dataclass
class Page:
    id: int
    name: str
    slug: str
    image_name: str = ""
    title: str = ""
    meta_desc: str = ""

    @property
    def image_path(self) -> str:
        """Image filename or URL, defaulting to ``<slug>.jpg``."""
        return self.image_name or f"{self.slug}.jpg"

    @property
    def has_external_image(self) -> bool:
        return self.image_path.startswith(("http://", "https://"))

    @property
    def display_title(self) -> str:
        return self.title or self.name

    def filename(self, ext: str = "php") -> str:
        return f"{self.slug}.{ext}"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "slug": self.slug,
            "imageName": self.image_name,
            "title": self.title,
            "metaDesc": self.meta_desc,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], fallback_id: int) -> "Page":
        raw_id = data.get("id")
        page_id = _positive_int(raw_id, 0) or fallback_id
        name = _text(data, "name", "").strip()
        slug = _text(data, "slug", "").strip() or slugify(name) or f"page-{page_id}"
        name = name or slug
        title = data.get("title")
        image_name = data.get("imageName")
        return cls(
            id=page_id,
            name=name,
            slug=slug,
            image_name=image_name if isinstance(image_name, str) else f"{slug}.jpg",
            title=title if isinstance(title, str) else name,
            meta_desc=_text(data, "metaDesc", ""),
        )


@dataclass
class MenuSettings:
    position: str = "fixed"
    style: str = "pills"
    auto_hide: bool = True
    back_to_top: bool = True
    font_size: int = DEFAULT_MENU_FONT_SIZE
    color: str = DEFAULT_MENU_COLOR

    def to_dict(self) -> dict:
        return {
            "position": self.position,
            "style": self.style,
            "autoHide": self.auto_hide,
            "backToTop": self.back_to_top,
            "fontSize": self.font_size,
            "color": self.color,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MenuSettings":
        position = data.get("position")
        style = data.get("style")
        return cls(
            position=position if position in MENU_POSITIONS else "fixed",
            style=style if style in MENU_STYLES else "pills",
            auto_hide=_flag(data, "autoHide", True),
            back_to_top=_flag(data, "backToTop", True),
            font_size=_positive_int(data.get("fontSize"), DEFAULT_MENU_FONT_SIZE),
            color=normalize_hex(data.get("color"), DEFAULT_MENU_COLOR),
        )


@dataclass
class ColorPalette:
    primary: str = DEFAULT_PRIMARY
    secondary: str = DEFAULT_SECONDARY
    bg: str = DEFAULT_BG

    def to_dict(self) -> dict:
        return {"primary": self.primary, "secondary": self.secondary, "bg": self.bg}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ColorPalette":
        return cls(
            primary=normalize_hex(data.get("primary"), DEFAULT_PRIMARY),
            secondary=normalize_hex(data.get("secondary"), DEFAULT_SECONDARY),
            bg=normalize_hex(data.get("bg"), DEFAULT_BG),
        )


def default_pages() -> List[Page]:
    return [
        Page(id=index, name=name, slug=slug, image_name=f"{slug}.jpg", title=name)
        for index, (name, slug) in enumerate(DEFAULT_PAGES, start=1)
    ]


def _parse_pages(items: Iterable[Any]) -> List[Page]:
    entries = [item for item in items if isinstance(item, Mapping)]
    known_ids = [_positive_int(item.get("id"), 0) for item in entries]
    spare_id = max(known_ids, default=0) + 1

    pages: List[Page] = []
    seen_ids: set[int] = set()
    seen_slugs: set[str] = set()
    for item in entries:
        page = Page.from_dict(item, spare_id)
        if page.id == spare_id:
            spare_id += 1
        if page.slug in seen_slugs:
            logger.warning("Skipping page %r: duplicate slug %r", page.name, page.slug)
            continue
        if page.id in seen_ids:
            page.id = spare_id
            spare_id += 1
        seen_ids.add(page.id)
        seen_slugs.add(page.slug)
        pages.append(page)
    return pages


@dataclass
class SiteConfig:
    """The editable site configuration plus the editor's selection state."""

    project: ProjectSettings = field(default_factory=ProjectSettings)
    pages: List[Page] = field(default_factory=default_pages)
    menu: MenuSettings = field(default_factory=MenuSettings)
    colors: ColorPalette = field(default_factory=ColorPalette)
    current_page_id: Optional[int] = None
    current_file: str = DEFAULT_CURRENT_FILE
    next_page_id: int = 0

    def __post_init__(self) -> None:
        self.next_page_id = max(self.next_page_id, self._max_page_id() + 1)

    def _max_page_id(self) -> int:
        return max((page.id for page in self.pages), default=0)

    # ------------------------------------------------------------- Pages --
    def get_page(self, page_id: int) -> Page:
        for page in self.pages:
            if page.id == page_id:
                return page
        raise NotFoundError(f"No page with id {page_id}")

    def page_by_slug(self, slug: str) -> Optional[Page]:
        return next((page for page in self.pages if page.slug == slug), None)

    def current_page(self) -> Page:
        """The selected page, or the first page when nothing is selected."""
        if self.current_page_id is not None:
            for page in self.pages:
                if page.id == self.current_page_id:
                    return page
        return self.pages[0]

    def select_page(self, page_id: int) -> Page:
        page = self.get_page(page_id)
        self.current_page_id = page.id
        return page

    def add_page(self, name: str, slug: str) -> Page:
        name = (name or "").strip()
        slug = (slug or "").strip()
        if not name or not slug:
            raise ValidationError("Please enter both page name and slug")
        if self.page_by_slug(slug) is not None:
            raise ValidationError("A page with this slug already exists")

        page = Page(
            id=self.next_page_id,
            name=name,
            slug=slug,
            image_name=f"{slug}.jpg",
            title=name,
            meta_desc="",
        )
        self.next_page_id += 1
        self.pages.append(page)
        return page

    def delete_page(self, page_id: int) -> None:
        if len(self.pages) <= 1:
            raise ValidationError("You must have at least one page")
        page = self.get_page(page_id)
        self.pages.remove(page)
        if self.current_page_id == page_id:
            self.current_page_id = None

    def update_page(
        self,
        page_id: int,
        *,
        title: Optional[str] = None,
        meta_desc: Optional[str] = None,
        image_name: Optional[str] = None,
    ) -> Page:
        page = self.get_page(page_id)
        if title is not None:
            page.title = title
        if meta_desc is not None:
            page.meta_desc = meta_desc
        if image_name is not None:
            page.image_name = image_name
        return page

    # ------------------------------------------------------ Serialization --
    def to_dict(self, include_state: bool = True) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "project": self.project.to_dict(),
            "pages": [page.to_dict() for page in self.pages],
            "menu": self.menu.to_dict(),
            "colors": self.colors.to_dict(),
        }
        if include_state:
            data["currentPageId"] = self.current_page_id
            data["currentFile"] = self.current_file
        return data

    def load_from(self, raw: Mapping[str, Any]) -> None:
        """Merge an external structure section by section.

        Each of ``project``, ``pages``, ``menu`` and ``colors`` replaces the
        matching section when present; missing fields take their defaults.
        Nothing is assigned until every section has been parsed.
        """
        if not isinstance(raw, Mapping):
            raise TypeError("Configuration must be a JSON object")

        project = self.project
        pages = self.pages
        menu = self.menu
        colors = self.colors

        if isinstance(raw.get("project"), Mapping):
            project = ProjectSettings.from_dict(raw["project"])
        if isinstance(raw.get("pages"), list):
            parsed = _parse_pages(raw["pages"])
            if parsed:
                pages = parsed
            else:
                logger.warning("Ignoring empty page list; keeping %d page(s)", len(pages))
        if isinstance(raw.get("menu"), Mapping):
            menu = MenuSettings.from_dict(raw["menu"])
        if isinstance(raw.get("colors"), Mapping):
            colors = ColorPalette.from_dict(raw["colors"])

        pages_replaced = pages is not self.pages
        self.project = project
        self.pages = pages
        self.menu = menu
        self.colors = colors
        if pages_replaced:
            self.next_page_id = self._max_page_id() + 1

        if "currentPageId" in raw:
            selected = raw["currentPageId"]
            known = {page.id for page in self.pages}
            valid = isinstance(selected, int) and not isinstance(selected, bool)
            self.current_page_id = selected if valid and selected in known else None
        elif pages_replaced and self.current_page_id not in {page.id for page in self.pages}:
            self.current_page_id = None
        if isinstance(raw.get("currentFile"), str) and raw["currentFile"]:
            self.current_file = raw["currentFile"]

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "SiteConfig":
        config = cls()
        config.load_from(raw)
        return config
