from __future__ import annotations

import re
import sys
import zipfile
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from templatecreator.core import generator
from templatecreator.core.models import MENU_STYLES, SiteConfig
from templatecreator.core.templates import HTACCESS_TEMPLATE


def _single_page_config() -> SiteConfig:
    config = SiteConfig()
    config.delete_page(2)
    config.delete_page(3)
    return config


def _split_nav_block(css: str) -> tuple[str, str, str]:
    start = css.index("\nul li a {")
    end = css.index("\nul li.active a {")
    return css[:start], css[start:end], css[end:]


# ------------------------------------------------------------ Orchestrator --
def test_generate_all_emits_one_file_per_page_plus_shared_files() -> None:
    config = SiteConfig()
    config.add_page("Blog", "blog")
    files = generator.generate_all(config)
    assert len(files) == len(config.pages) + 3
    assert list(files) == [
        "index.php",
        "about.php",
        "contact.php",
        "blog.php",
        "style.css",
        "script.js",
        ".htaccess",
    ]


def test_generate_all_is_deterministic() -> None:
    config = SiteConfig()
    assert generator.generate_all(config) == generator.generate_all(config)


def test_generate_all_honours_extension() -> None:
    files = generator.generate_all(_single_page_config(), ext="html")
    assert set(files) == {"index.html", "style.css", "script.js", ".htaccess"}


# ------------------------------------------------------------ Page document --
def test_page_navigation_lists_pages_in_order_with_one_active() -> None:
    config = SiteConfig()
    about = config.get_page(2)
    html = generator.generate_page(config, about)

    assert html.count('class="active"') == 1
    assert '<li class="active"><a href="./about.php">About</a></li>' in html
    assert '<li><a href="./index.php">Home</a></li>' in html
    positions = [html.index(f'href="./{slug}.php"') for slug in ("index", "about", "contact")]
    assert positions == sorted(positions)
    assert 'class="hamburger"' in html
    assert 'class="single-page"' not in html


def test_single_page_document_omits_navigation() -> None:
    config = _single_page_config()
    html = generator.generate_page(config, config.pages[0])
    assert 'id="site-header"' not in html
    assert "hamburger" not in html
    assert '<body id="body" class="single-page">' in html


def test_page_back_to_top_is_optional() -> None:
    config = SiteConfig()
    assert 'href="#body"' in generator.generate_page(config, config.pages[0])
    config.menu.back_to_top = False
    assert 'href="#body"' not in generator.generate_page(config, config.pages[0])


def test_page_head_and_cache_contract() -> None:
    config = SiteConfig()
    html = generator.generate_page(config, config.pages[0])

    assert html.startswith("<?php")
    assert '<meta charset="UTF-8">' in html
    assert '<meta name="viewport" content="width=device-width, initial-scale=1.0">' in html
    assert '<meta http-equiv="Cache-Control" content="no-cache, no-store, must-revalidate">' in html
    assert 'header("CF-Cache-Status: BYPASS");' in html
    assert 'header("Vary: *");' in html
    assert "event.persisted" in html
    assert "<title>Home | My Presentation</title>" in html
    assert "family=Geist:wght@100..900" in html
    assert 'href="./style.css?<?php echo $cacheBuster; ?>"' in html
    assert 'src="./script.js?<?php echo $cacheBuster; ?>"' in html
    assert "$imagePath = 'index.jpg';" in html
    assert "filemtime($imagePath)" in html
    assert 'name="description"' not in html


def test_page_debug_overlay_uses_primary_color() -> None:
    config = SiteConfig()
    config.colors.primary = "#123abc"
    html = generator.generate_page(config, config.pages[0])
    assert "<?php if (isset($_GET['debug'])): ?>" in html
    assert '<strong style="color: #123abc;">DEBUG MODE</strong>' in html


def test_page_meta_description_and_names_are_escaped() -> None:
    config = SiteConfig()
    config.update_page(1, meta_desc='Fish & "chips"')
    config.add_page("Q&A", "qa")
    html = generator.generate_page(config, config.pages[0])
    assert '<meta name="description" content="Fish &amp; &#34;chips&#34;">' in html
    assert '<a href="./qa.php">Q&amp;A</a>' in html


def test_page_image_relative_and_absolute() -> None:
    config = SiteConfig()
    html = generator.generate_page(config, config.pages[0])
    assert '<img src="./<?php echo $imagePath; ?>?<?php echo $cacheBuster; ?>"' in html

    config.update_page(1, image_name="https://cdn.example.com/hero.jpg")
    html = generator.generate_page(config, config.pages[0])
    assert "$imagePath = 'https://cdn.example.com/hero.jpg';" in html
    assert '<img src="<?php echo $imagePath; ?>?<?php echo $cacheBuster; ?>"' in html


def test_page_image_name_is_quoted_for_php() -> None:
    config = SiteConfig()
    config.update_page(1, image_name="it's.jpg")
    html = generator.generate_page(config, config.pages[0])
    assert "$imagePath = 'it\\'s.jpg';" in html


def test_font_with_spaces_is_encoded_for_google_fonts() -> None:
    config = SiteConfig()
    config.project.font = "Open Sans"
    assert "family=Open+Sans:wght" in generator.generate_page(config, config.pages[0])
    assert 'font-family: "Open Sans", sans-serif;' in generator.generate_css(config)


# -------------------------------------------------------------- Stylesheet --
def test_css_menu_style_changes_only_navigation_block() -> None:
    config = SiteConfig()
    parts = {}
    for style in MENU_STYLES:
        config.menu.style = style
        parts[style] = _split_nav_block(generator.generate_css(config))

    prefixes = {prefix for prefix, _, _ in parts.values()}
    suffixes = {suffix for _, _, suffix in parts.values()}
    blocks = {block for _, block, _ in parts.values()}
    assert len(prefixes) == 1
    assert len(suffixes) == 1
    assert len(blocks) == len(MENU_STYLES)


def test_css_menu_style_blocks_use_derived_shades() -> None:
    config = SiteConfig()
    config.menu.style = "pills"
    _, pills, _ = _split_nav_block(generator.generate_css(config))
    assert "border-radius: 50px;" in pills
    assert "background-color: #e6e6e6;" in pills
    assert "background-color: #cccccc;" in pills
    assert "translateY(-2px)" in pills

    config.menu.style = "underline"
    _, underline, _ = _split_nav_block(generator.generate_css(config))
    assert "background-color: transparent;" in underline
    assert "border-bottom-color: #347419;" in underline

    config.menu.style = "buttons"
    _, buttons, _ = _split_nav_block(generator.generate_css(config))
    assert "background-color: #f2f2f2;" in buttons
    assert "border: 1px solid #cccccc;" in buttons
    assert "background-color: #d9d9d9;" in buttons


def test_css_active_link_gradient_and_position() -> None:
    config = SiteConfig()
    config.menu.position = "static"
    css = generator.generate_css(config)
    assert "linear-gradient(0deg, #347419, #0dac76)" in css
    assert "position: static;" in css
    assert "--header-height: 58px;" in css
    assert "box-sizing: border-box;" in css
    assert "@media (max-width: 768px)" in css
    assert "@media (max-width: 480px)" in css


def test_css_single_page_hides_navigation_unconditionally() -> None:
    css = generator.generate_css(_single_page_config())
    assert "#site-header,\n.hamburger {\n    display: none !important;\n}" in css

    multi = generator.generate_css(SiteConfig())
    assert "#site-header,\n.hamburger {" not in multi
    assert "body.single-page #site-header" in multi


@pytest.mark.parametrize("size,tablet,phone", [(12, 11, 10), (10, 10, 9), (8, 10, 9), (20, 19, 18)])
def test_css_responsive_font_sizes_have_floors(size: int, tablet: int, phone: int) -> None:
    config = SiteConfig()
    config.menu.font_size = size
    css = generator.generate_css(config)
    tablet_block = css[css.index("@media (max-width: 768px)"):css.index("@media (max-width: 480px)")]
    phone_block = css[css.index("@media (max-width: 480px)"):]
    assert f"font-size: {tablet}px;" in tablet_block
    assert f"font-size: {phone}px;" in phone_block


# ------------------------------------------------------------------ Script --
def test_js_always_wires_hamburger() -> None:
    config = SiteConfig()
    config.menu.auto_hide = False
    js = generator.generate_js(config)
    assert "classList.toggle('mobile-open')" in js
    assert "classList.toggle('active')" in js
    assert "'scroll'" not in js


def test_js_auto_hide_adds_scroll_listener() -> None:
    js = generator.generate_js(SiteConfig())
    assert "window.addEventListener('scroll'" in js
    assert "const scrollThreshold = 100;" in js
    assert "header.classList.add('hide')" in js


# ---------------------------------------------------------------- htaccess --
def test_htaccess_is_constant() -> None:
    assert generator.generate_htaccess() == HTACCESS_TEMPLATE
    config = SiteConfig()
    config.colors.primary = "#000000"
    assert generator.generate_all(config)[".htaccess"] == HTACCESS_TEMPLATE
    assert "<IfModule mod_deflate.c>" in HTACCESS_TEMPLATE
    assert r'<FilesMatch "\.php$">' in HTACCESS_TEMPLATE


def test_htaccess_keeps_every_boilerplate_section() -> None:
    text = generator.generate_htaccess()
    for marker in (
        "# LITESPEED CACHE CONFIGURATION",
        "# CACHE-CONTROL HEADERS (All Servers)",
        '# Header set Access-Control-Allow-Origin "*"',
        "# NGINX COMPATIBILITY (via .htaccess)",
        "# RewriteCond %{HTTPS} off",
        r"# RewriteCond %{HTTP_HOST} !^www\.",
        "# IIS COMPATIBILITY NOTES",
        "# PERFORMANCE OPTIMIZATIONS",
        "# Header unset ETag",
        "# FileETag None",
        "LimitRequestBody 10485760",
        "# 7. Verify .htaccess is being read (add syntax error to test)",
    ):
        assert marker in text
    assert text.index("# IIS COMPATIBILITY NOTES") < text.index("# TROUBLESHOOTING")
    assert text.endswith("(add syntax error to test)\n")


# ----------------------------------------------------------------- Preview --
def test_preview_inlines_assets_and_uses_given_cache_buster() -> None:
    config = SiteConfig()
    html = generator.generate_preview(config, cache_buster="v=1")
    assert '<img src="./index.jpg?v=1"' in html
    assert 'font-family: "Geist", sans-serif;' in html
    assert "classList.toggle('mobile-open')" in html
    assert '<li class="active"><a href="#">Home</a></li>' in html
    assert "padding-top: var(--header-height);\">" in html
    assert "<?php" not in html


def test_preview_renders_selected_page_and_single_page_image() -> None:
    config = SiteConfig()
    config.select_page(3)
    assert '<li class="active"><a href="#">Contact</a></li>' in generator.generate_preview(config)

    single = _single_page_config()
    html = generator.generate_preview(single, cache_buster="v=1")
    assert 'style="max-width: 100%; height: auto; ">' in html
    assert 'id="site-header"' not in html


def test_preview_default_cache_buster_is_time_and_random() -> None:
    html = generator.generate_preview(SiteConfig())
    assert re.search(r'src="\./index\.jpg\?v=\d+&amp;r=[a-z0-9]{9}"', html)


def test_preview_absolute_image_is_not_prefixed() -> None:
    config = SiteConfig()
    config.update_page(1, image_name="http://example.com/a.jpg")
    html = generator.generate_preview(config, cache_buster="v=1")
    assert '<img src="http://example.com/a.jpg?v=1"' in html


# ------------------------------------------------------------------ Export --
def test_archive_name_is_lowercase_and_hyphenated() -> None:
    assert generator.archive_name("My Cool  Site") == "my-cool-site-template.zip"
    assert generator.archive_name("   ") == "site-template.zip"


def test_build_archive_contains_every_file(tmp_path: Path) -> None:
    files = generator.generate_all(SiteConfig())
    target = generator.build_archive(files, tmp_path / "out" / "site.zip")
    with zipfile.ZipFile(target) as zf:
        assert sorted(zf.namelist()) == sorted(files)
        assert zf.read("style.css").decode("utf-8") == files["style.css"]


def test_build_archive_rejects_nested_names_before_writing(tmp_path: Path) -> None:
    config = SiteConfig()
    config.add_page("Nested", "a/b")
    files = generator.generate_all(config)
    target = tmp_path / "site.zip"
    with pytest.raises(ValueError):
        generator.build_archive(files, target)
    assert not target.exists()


def test_render_site_writes_files(tmp_path: Path) -> None:
    written = generator.render_site(SiteConfig(), tmp_path / "site")
    assert {p.name for p in written} == {
        "index.php",
        "about.php",
        "contact.php",
        "style.css",
        "script.js",
        ".htaccess",
    }
    assert (tmp_path / "site" / ".htaccess").read_text(encoding="utf-8") == HTACCESS_TEMPLATE


def test_render_site_refuses_paths_outside_output(tmp_path: Path) -> None:
    config = SiteConfig()
    config.add_page("Escape", "../escape")
    with pytest.raises(ValueError):
        generator.render_site(config, tmp_path / "site")
    assert not (tmp_path / "escape.php").exists()


@pytest.mark.parametrize(
    "filename,language",
    [
        ("index.php", "php"),
        ("style.css", "css"),
        ("script.js", "javascript"),
        (".htaccess", "apache"),
        ("notes.txt", "plaintext"),
    ],
)
def test_language_for(filename: str, language: str) -> None:
    assert generator.language_for(filename) == language
