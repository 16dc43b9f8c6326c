from pathlib import Path

import pytest

from bookpress.theme import Theme, load_theme

FILES = [
    "index.hbs",
    "head.hbs",
    "redirect.hbs",
    "header.hbs",
    "favicon.png",
    "favicon.svg",
    "css/chrome.css",
    "css/fonts.css",
    "css/general.css",
    "css/print.css",
    "css/variables.css",
    "book.js",
    "highlight.js",
    "tomorrow-night.css",
    "highlight.css",
    "ayu-highlight.css",
    "clipboard.min.js",
]


@pytest.fixture
def defaults():
    return Theme(
        index=b"index",
        head=b"head",
        redirect=b"redirect",
        header=b"header",
        chrome_css=b"chrome",
        general_css=b"general",
        print_css=b"print",
        variables_css=b"variables",
        favicon_png=b"png",
        favicon_svg=b"svg",
        js=b"js",
        highlight_css=b"hlcss",
        tomorrow_night_css=b"tn",
        ayu_highlight_css=b"ayu",
        highlight_js=b"hljs",
        clipboard_js=b"clip",
    )


def test_theme_uses_defaults_with_nonexistent_src_dir(defaults, tmp_path):
    missing = tmp_path / "non" / "existent" / "directory"
    assert not missing.exists()
    assert load_theme(missing, defaults) == defaults


def test_theme_uses_defaults_when_path_is_a_file(defaults, tmp_path):
    afile = tmp_path / "file"
    afile.write_bytes(b"x")
    assert load_theme(afile, defaults) == defaults


def test_theme_dir_overrides_defaults(defaults, tmp_path):
    (tmp_path / "css").mkdir()
    for name in FILES:
        (tmp_path / name).touch()

    got = load_theme(tmp_path, defaults)

    assert got == Theme(
        index=b"",
        head=b"",
        redirect=b"",
        header=b"",
        chrome_css=b"",
        general_css=b"",
        print_css=b"",
        variables_css=b"",
        favicon_png=b"",
        favicon_svg=b"",
        js=b"",
        highlight_css=b"",
        tomorrow_night_css=b"",
        ayu_highlight_css=b"",
        highlight_js=b"",
        clipboard_js=b"",
    )


def test_partial_override_keeps_other_defaults(defaults, tmp_path):
    (tmp_path / "book.js").write_bytes(b"custom")
    got = load_theme(tmp_path, defaults)
    assert got.js == b"custom"
    assert got.index == b"index"
    assert got.favicon_png == b"png"
    assert got.favicon_svg == b"svg"


def test_defaults_are_not_mutated(defaults, tmp_path):
    (tmp_path / "index.hbs").write_bytes(b"new")
    load_theme(tmp_path, defaults)
    assert defaults.index == b"index"


def test_favicon_png_override(defaults, tmp_path):
    (tmp_path / "favicon.png").write_bytes(b"1234")
    got = load_theme(tmp_path, defaults)
    assert got.favicon_png == b"1234"
    assert got.favicon_svg is None


def test_favicon_svg_override(defaults, tmp_path: Path):
    (tmp_path / "favicon.svg").write_bytes(b"4567")
    got = load_theme(tmp_path, defaults)
    assert got.favicon_png is None
    assert got.favicon_svg == b"4567"