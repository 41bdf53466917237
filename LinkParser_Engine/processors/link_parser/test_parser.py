"""
End-to-end tests: markup + page address in, sorted link map out.
"""

from LinkParser_Engine.processors.link_parser import (
    ClassifiedLink,
    ExtensionTaxonomy,
    LinkParser,
    parse_links,
)


PAGE = "https://ex.com/blog/post.html"

SAMPLE_PAGE = """<html><head>
<link rel="stylesheet" href="/css/main.css">
<link rel="shortcut icon" href="/favicon.ico">
<script src="https://cdn.ex.org/lib.js"></script>
</head><body>
<img src="img/a.png"><img src="img/b.gif">
<a href="https://other.org/page">elsewhere</a>
<a href="docs/guide.pdf">guide</a>
</body></html>
"""


def test_single_image():
    assert parse_links('<img src="/logo.png">', PAGE) == {"img": ["https://ex.com/logo.png"]}


def test_no_markers_returns_none():
    assert parse_links("<p>Hello, world.</p>", PAGE) is None
    assert parse_links("", PAGE) is None


def test_fragment_links_extend_the_page():
    assert parse_links('<a href="#top">top</a>', PAGE) == {
        "extendsUrl": ["https://ex.com/blog/post.html#top"],
    }


def test_trailing_slash_variants_collapse():
    markup = '<a href="/about">x</a><a href="/about/">y</a>'
    assert parse_links(markup, "https://ex.com") == {"extendsUrl": ["https://ex.com/about"]}


def test_sample_page():
    result = parse_links(SAMPLE_PAGE, PAGE)
    assert result == {
        "img": {
            "gif": ["https://ex.com/blog/img/b.gif"],
            "ico": ["https://ex.com/favicon.ico"],
            "png": ["https://ex.com/blog/img/a.png"],
        },
        "script": ["https://cdn.ex.org/lib.js"],
        "style": ["https://ex.com/css/main.css"],
        "text": ["https://ex.com/blog/docs/guide.pdf"],
        "other": ["https://other.org/page"],
    }
    assert list(result) == ["img", "script", "style", "text", "other"]


def test_parsing_is_deterministic():
    assert parse_links(SAMPLE_PAGE, PAGE) == parse_links(SAMPLE_PAGE, PAGE)


def test_script_string_link():
    markup = "<script>load('https://cdn.ex.org/app.js?v=3');</script>"
    assert parse_links(markup, PAGE) == {"script": ["https://cdn.ex.org/app.js?v=3"]}


def test_percent_encoded_script_string_link():
    markup = "<script>var u = 'https%3A%2F%2Fex.com%2Fa.png';</script>"
    assert parse_links(markup, PAGE) == {"img": ["https://ex.com/a.png"]}


def test_concatenated_link_is_counted_once():
    markup = 'html += \'<a href="+\n"\'https://github.com/jrandleman\'">\';'
    assert parse_links(markup, "https://ex.com") == {"other": ["https://github.com/jrandleman"]}


def test_classified_links_keep_scan_order_and_duplicates():
    markup = '<a href="/x.css">a</a><a href="/x.css">b</a>'
    assert LinkParser().classified_links(markup, PAGE) == [
        ClassifiedLink("https://ex.com/x.css", "style"),
        ClassifiedLink("https://ex.com/x.css", "style"),
    ]


def test_custom_taxonomy():
    parser = LinkParser(ExtensionTaxonomy({"custom": {"weird": ("wrd",)}}))
    assert parser.parse('<a href="/f.wrd">f</a>', PAGE) == {"weird": ["https://ex.com/f.wrd"]}
