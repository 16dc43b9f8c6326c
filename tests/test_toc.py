import pytest

from bookpress.toc import RenderToc, TocError


def page(chapters, path="one.md", **extra):
    data = {
        "chapters": chapters,
        "path": path,
        "fold_enable": False,
        "fold_level": 0,
    }
    data.update(extra)
    return data


ONE = {"name": "One", "path": "one.md", "section": "1.", "has_sub_items": "false"}


def test_single_chapter_full_output():
    got = RenderToc().render(page([ONE]))
    assert got == (
        '<ol class="chapter"><li class="chapter-item expanded ">'
        '<a href="one.html" class="active">'
        '<strong aria-hidden="true">1.</strong> One</a></li></ol>'
    )


def test_no_section_label_hides_number():
    got = RenderToc(no_section_label=True).render(page([ONE]))
    assert '<strong aria-hidden="true">' not in got
    assert ">One</a>" in got


def test_nested_sections_balance_lists():
    chapters = [
        {"name": "One", "path": "one.md", "section": "1.", "has_sub_items": "true"},
        {"name": "Sub", "path": "one/sub.md", "section": "1.1.", "has_sub_items": "false"},
        {"name": "Deep", "path": "one/sub/deep.md", "section": "1.1.1.", "has_sub_items": "false"},
    ]
    got = RenderToc().render(page(chapters))
    assert got.count("<ol") == got.count("</ol>")
    assert got.count('<ol class="section">') == 2
    assert got.startswith('<ol class="chapter">')
    assert got.endswith("</ol>")


def test_links_are_relative_to_current_page():
    chapters = [ONE, {"name": "Sub", "path": "one/sub.md", "section": "1.1."}]
    got = RenderToc().render(page(chapters, path="one/sub.md"))
    assert 'href="../one.html"' in got
    assert 'href="../one/sub.html" class="active"' in got
    assert 'href="../one.html" class="active"' not in got


def test_spacer_and_part_title():
    chapters = [{"part": "Part <I>"}, ONE, {"spacer": "_spacer_"}]
    got = RenderToc().render(page(chapters))
    assert '<li class="spacer"></li>' in got
    assert '<li class="part-title">Part &lt;I&gt;</li>' in got


def test_chapter_without_section_is_affix():
    chapters = [{"name": "Intro", "path": "intro.md"}]
    got = RenderToc().render(page(chapters, path="intro.md"))
    assert '<li class="chapter-item expanded affix ">' in got


def test_chapter_without_path_uses_div():
    chapters = [{"name": "Draft", "section": "1."}]
    got = RenderToc().render(page(chapters))
    assert "<div>" in got
    assert "<a href" not in got


def test_inline_code_in_name_is_escaped():
    chapters = [{"name": "`Code` title", "path": "code.md"}]
    got = RenderToc().render(page(chapters))
    assert "&lt;code&gt;Code&lt;/code&gt; title" in got


def test_folding_collapses_deep_levels():
    chapters = [
        {"name": "One", "path": "one.md", "section": "1.", "has_sub_items": "true"},
        {"name": "Sub", "path": "one/sub.md", "section": "1.1."},
        {"name": "Two", "path": "two.md", "section": "2.", "has_sub_items": "true"},
        {"name": "Other", "path": "two/other.md", "section": "2.1."},
    ]
    got = RenderToc().render(
        page(chapters, path="one/sub.md", section="1.1.", fold_enable=True, fold_level=0)
    )
    assert got.count('<a class="toggle"><div>\u2771</div></a>') == 2
    # 2.1. is neither current nor an ancestor, so it stays folded.
    assert got.count('<li class="chapter-item ">') == 1
    assert got.count('<li class="chapter-item expanded ">') == 3


def test_toggle_absent_without_folding():
    chapters = [{"name": "One", "path": "one.md", "section": "1.", "has_sub_items": "true"}]
    got = RenderToc().render(page(chapters))
    assert "toggle" not in got


@pytest.mark.parametrize(
    "override",
    [
        {"chapters": None},
        {"chapters": [{"name": 1}]},
        {"path": 3},
        {"fold_enable": "yes"},
        {"fold_level": "1"},
        {"fold_level": -1},
    ],
)
def test_bad_data_raises(override):
    data = page([ONE])
    data.update(override)
    with pytest.raises(TocError):
        RenderToc().render(data)