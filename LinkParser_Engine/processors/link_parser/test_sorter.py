"""
Tests for deduplication and link-map shaping.
"""

from LinkParser_Engine.processors.link_parser.sorter import (
    LinkMapBuilder,
    dedupe_links,
    is_duplicate,
    sort_mapping_keys,
)


def test_trailing_slash_is_a_duplicate():
    assert is_duplicate("https://ex.com/a/", ["https://ex.com/a"])
    assert is_duplicate("https://ex.com/a", ["https://ex.com/a/"])
    assert is_duplicate("https://ex.com/a", ["https://ex.com/a"])
    assert not is_duplicate("https://ex.com/a//", ["https://ex.com/a"])
    assert not is_duplicate("https://ex.com/ab", ["https://ex.com/a"])


def test_dedupe_keeps_first_seen_and_is_idempotent():
    links = ["https://ex.com/a/", "https://ex.com/b", "https://ex.com/a", "https://ex.com/b"]
    once = dedupe_links(links)
    assert once == ["https://ex.com/a/", "https://ex.com/b"]
    assert dedupe_links(once) == once


def test_pinned_keys_sort_last():
    ordered = sort_mapping_keys({"other": 1, "img": 2, "extendsUrl": 3, "font": 4})
    assert list(ordered) == ["font", "img", "extendsUrl", "other"]


def test_empty_builder_reports_absence():
    assert LinkMapBuilder().build() is None


def test_single_extension_category_is_flattened_and_sorted():
    builder = LinkMapBuilder()
    builder.add("img", "https://ex.com/b.png")
    builder.add("img", "https://ex.com/a.png")
    assert builder.build() == {"img": ["https://ex.com/a.png", "https://ex.com/b.png"]}


def test_mixed_extensions_are_nested():
    builder = LinkMapBuilder()
    builder.add("script", "https://ex.com/c.weird")
    builder.add("script", "https://ex.com/b.json")
    builder.add("script", "https://ex.com/a.js")
    builder.add("script", "https://ex.com/z.js")

    result = builder.build()
    assert result == {
        "script": {
            "js": ["https://ex.com/a.js", "https://ex.com/z.js"],
            "json": ["https://ex.com/b.json"],
            "other": ["https://ex.com/c.weird"],
        }
    }
    assert list(result["script"]) == ["js", "json", "other"]


def test_unknown_extensions_share_one_bucket():
    builder = LinkMapBuilder()
    builder.add("extendsUrl", "https://ex.com/about")
    builder.add("extendsUrl", "https://ex.com/post.html#top")
    assert builder.build() == {
        "extendsUrl": ["https://ex.com/about", "https://ex.com/post.html#top"],
    }


def test_duplicates_only_collapse_within_a_category():
    builder = LinkMapBuilder()
    assert builder.add("other", "https://ex.com/a")
    assert not builder.add("other", "https://ex.com/a/")
    assert builder.add("extendsUrl", "https://ex.com/a/")
    assert len(builder) == 2
    assert list(builder.build()) == ["extendsUrl", "other"]


def test_large_category_dedupes_against_every_earlier_link():
    builder = LinkMapBuilder()
    links = [f"https://ex.com/p{i}" for i in range(5000)]
    for link in links:
        assert builder.add("extendsUrl", link)
    for link in links:
        assert not builder.add("extendsUrl", link + "/")

    result = builder.build()
    assert len(builder) == 5000
    assert result == {"extendsUrl": sorted(links)}


def test_dedupe_links_on_large_input():
    links = [f"https://ex.com/p{i}" for i in range(5000)]
    doubled = links + [link + "/" for link in links]
    assert dedupe_links(doubled) == links
