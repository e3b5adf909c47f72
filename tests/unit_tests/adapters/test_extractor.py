"""Unit tests for the style/script extractor."""

from __future__ import annotations

import logging

import pytest

from html_splitter.adapters import extractor
from html_splitter.adapters.extractor import (
    SCRIPT_TAG,
    STYLESHEET_TAG,
    extract_assets,
    parse_attributes,
    scan_document,
)

SCENARIO_HTML = (
    "<html><head><style>body{color:red}</style></head>"
    "<body><script>console.log(1)</script></body></html>"
)


def test_scenario_document_is_split() -> None:
    """Move the single style and script out and inject references in their place."""
    assets = extract_assets(SCENARIO_HTML)

    assert assets.style_text == "body{color:red}"
    assert assets.script_text == "console.log(1)"
    assert assets.markup == (
        '<html><head><link rel="stylesheet" href="style.css"></head>'
        '<body><script src="renderer.js"></script></body></html>'
    )
    assert assets.style_blocks == 1
    assert assets.script_blocks == 1


def test_multiline_document_keeps_indentation() -> None:
    """Remove whole lines occupied by blocks and indent injected tags."""
    text = (
        "<!DOCTYPE html>\n"
        "<html>\n"
        "<head>\n"
        "    <title>Test</title>\n"
        "    <style>\n"
        "        body { background: red; }\n"
        "    </style>\n"
        "</head>\n"
        "<body>\n"
        "    <h1>Test</h1>\n"
        "    <script>\n"
        "        console.log('Hello World');\n"
        "    </script>\n"
        "</body>\n"
        "</html>\n"
    )

    assets = extract_assets(text)

    assert assets.style_text == "\n        body { background: red; }\n    "
    assert assets.script_text == "\n        console.log('Hello World');\n    "
    assert assets.markup == (
        "<!DOCTYPE html>\n"
        "<html>\n"
        "<head>\n"
        "    <title>Test</title>\n"
        '    <link rel="stylesheet" href="style.css">\n'
        "</head>\n"
        "<body>\n"
        "    <h1>Test</h1>\n"
        '    <script src="renderer.js"></script>\n'
        "</body>\n"
        "</html>\n"
    )


def test_document_without_blocks_passes_through() -> None:
    """Leave asset-less markup byte-identical."""
    text = "<html><head><title>x</title></head><body><p>hi</p></body></html>"
    assets = extract_assets(text)

    assert assets.markup == text
    assert assets.style_text is None
    assert assets.script_text is None


def test_tag_matching_is_case_insensitive() -> None:
    """Match upper-case tags and landmarks."""
    text = "<HTML><HEAD><STYLE>p{}</STYLE></HEAD><BODY><SCRIPT>x()</SCRIPT></BODY></HTML>"
    assets = extract_assets(text)

    assert assets.style_text == "p{}"
    assert assets.script_text == "x()"
    assert assets.markup == (
        f"<HTML><HEAD>{STYLESHEET_TAG}</HEAD><BODY>{SCRIPT_TAG}</BODY></HTML>"
    )


def test_only_first_block_extracted_by_default(caplog: pytest.LogCaptureFixture) -> None:
    """Keep later blocks inline and warn about them."""
    text = "<html><head><style>a{}</style><style>b{}</style></head></html>"

    with caplog.at_level(logging.WARNING, logger=extractor.__name__):
        assets = extract_assets(text)

    assert assets.style_text == "a{}"
    assert assets.style_blocks == 2
    assert "<style>b{}</style>" in assets.markup
    assert "<style>a{}</style>" not in assets.markup
    assert "1 left inline" in caplog.text


def test_extract_all_concatenates_blocks_with_banners() -> None:
    """Move every block and label each one in the combined file."""
    text = (
        "<html><head><style>a{}</style><style>b{}</style></head>"
        "<body><script>one()</script><p>x</p><script>two()</script></body></html>"
    )

    assets = extract_assets(text, extract_all=True)

    assert assets.style_text == "/* Style block 1 */\na{}\n\n/* Style block 2 */\nb{}\n"
    assert assets.script_text == "// Script block 1\none()\n\n// Script block 2\ntwo()\n"
    assert assets.markup == (
        f"<html><head>{STYLESHEET_TAG}</head><body><p>x</p>{SCRIPT_TAG}</body></html>"
    )


def test_external_and_data_scripts_stay_inline() -> None:
    """Skip scripts with ``src`` or a non-classic ``type``."""
    text = (
        '<body><script src="lib.js"></script>'
        '<script type="application/json">{"a": 1}</script>'
        "<script>run()</script></body>"
    )

    assets = extract_assets(text)

    assert assets.script_text == "run()"
    assert assets.script_blocks == 1
    assert assets.markup == (
        '<body><script src="lib.js"></script>'
        '<script type="application/json">{"a": 1}</script>'
        f"{SCRIPT_TAG}</body>"
    )


def test_module_script_is_not_extracted() -> None:
    """Leave module scripts untouched."""
    text = '<body><script type="module">import "x";</script></body>'
    assets = extract_assets(text)

    assert assets.script_text is None
    assert assets.markup == text


def test_missing_head_and_body_fall_back_to_document_edges() -> None:
    """Inject at document start and end when no landmarks exist."""
    text = "<style>p{}</style><p>x</p><script>go()</script>"
    assets = extract_assets(text)

    assert assets.markup == f"{STYLESHEET_TAG}<p>x</p>{SCRIPT_TAG}"


def test_stylesheet_goes_after_doctype_without_head() -> None:
    """Never place the stylesheet link before the doctype."""
    text = "<!DOCTYPE html><style>p{}</style><p>x</p>"
    assets = extract_assets(text)

    assert assets.markup == f"<!DOCTYPE html>{STYLESHEET_TAG}<p>x</p>"


def test_stylesheet_goes_before_body_without_head() -> None:
    """Use the opening body tag when there is no closing head tag."""
    text = "<html><style>p{}</style><body>x</body></html>"
    assets = extract_assets(text)

    assert assets.markup == f"<html>{STYLESHEET_TAG}<body>x</body></html>"


def test_unclosed_style_is_treated_as_absent(caplog: pytest.LogCaptureFixture) -> None:
    """Skip only the unterminated element and keep extracting after it."""
    text = "<head><style>p{}</head><body><script>x()</script></body>"

    with caplog.at_level(logging.WARNING, logger=extractor.__name__):
        assets = extract_assets(text)

    assert assets.style_text is None
    assert assets.script_text == "x()"
    assert assets.markup == f"<head><style>p{{}}</head><body>{SCRIPT_TAG}</body>"
    assert "Unterminated <style>" in caplog.text


def test_unclosed_script_keeps_earlier_style() -> None:
    """Keep regions found before the malformed element."""
    text = "<head><style>p{}</style></head><body><script>x()"
    assets = extract_assets(text)

    assert assets.style_text == "p{}"
    assert assets.script_text is None
    assert assets.markup == f"<head>{STYLESHEET_TAG}</head><body><script>x()"


def test_commented_out_blocks_are_ignored() -> None:
    """Skip style tags inside HTML comments."""
    text = "<!-- <style>hidden{}</style> --><head><style>real{}</style></head>"
    assets = extract_assets(text)

    assert assets.style_text == "real{}"
    assert assets.markup.startswith("<!-- <style>hidden{}</style> -->")


def test_closing_tag_requires_name_boundary() -> None:
    """Do not end a script at ``</scripts>``."""
    text = '<body><script>var s = "</scripts>";</script></body>'
    assets = extract_assets(text)

    assert assets.script_text == 'var s = "</scripts>";'


def test_quoted_attribute_may_contain_angle_bracket() -> None:
    """Find the end of an opening tag past quoted ``>`` characters."""
    text = '<head><style data-x="a>b">p{}</style></head>'
    assets = extract_assets(text)

    assert assets.style_text == "p{}"


def test_extraction_is_deterministic() -> None:
    """Produce identical output for identical input."""
    assert extract_assets(SCENARIO_HTML) == extract_assets(SCENARIO_HTML)


@pytest.mark.parametrize(
    ("tag", "expected"),
    [
        ("<script>", {}),
        ('<script type="module" defer>', {"type": "module", "defer": ""}),
        ("<script SRC='a.js'>", {"src": "a.js"}),
        ("<style media=print>", {"media": "print"}),
    ],
)
def test_parse_attributes(tag: str, expected: dict[str, str]) -> None:
    """Parse quoted, unquoted and bare attributes with lower-cased names."""
    assert parse_attributes(tag) == expected


def test_scan_document_records_landmarks() -> None:
    """Record the landmark positions used for injection."""
    text = "<!DOCTYPE html><html><head></head><body></body></html>"
    marks = scan_document(text)

    assert marks.doctype_end == len("<!DOCTYPE html>")
    assert marks.head_close == text.index("</head>")
    assert marks.body_open == text.index("<body>")
    assert marks.body_close == text.index("</body>")
    assert marks.html_close == text.index("</html>")
    assert marks.regions == []


def test_unclosed_script_does_not_hide_later_style() -> None:
    text = "<body><script>x()<style>a{}</style></body>"
    assets = extract_assets(text)

    assert assets.style_text == "a{}"
    assert assets.script_text is None
    assert assets.markup == f"{STYLESHEET_TAG}<body><script>x()</body>"
