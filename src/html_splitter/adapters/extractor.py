"""Style/script extraction over raw HTML text.

The scanner walks the document once, left to right. It skips comments and
declarations, treats ``<style>`` and ``<script>`` as raw-text elements (their
content ends at the first matching closing tag), and records the landmarks
used for reference injection (``</head>``, ``<body>``, ``</body>``, ...).
Rewriting is then a single pass of non-overlapping edits over the original
text.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field

from html_splitter.application.results import ExtractedAssets
from html_splitter.types import AssetKind

logger = logging.getLogger(__name__)

STYLESHEET_FILENAME = "style.css"
SCRIPT_FILENAME = "renderer.js"

STYLESHEET_TAG = f'<link rel="stylesheet" href="{STYLESHEET_FILENAME}">'
SCRIPT_TAG = f'<script src="{SCRIPT_FILENAME}"></script>'

INDENT_UNIT = "    "

CLASSIC_SCRIPT_TYPES = frozenset(
    {
        "",
        "text/javascript",
        "application/javascript",
        "application/x-javascript",
        "text/x-javascript",
        "text/ecmascript",
        "application/ecmascript",
        "text/jscript",
        "text/livescript",
    }
)

_ATTRIBUTE_RE = re.compile(
    r"""([^\s"'>/=]+)(?:\s*=\s*(?:"([^"]*)"|'([^']*)'|([^\s"'=<>`]+)))?"""
)
_TAG_NAME_END = frozenset(" \t\n\r\f/>")


@dataclass(frozen=True)
class TagRegion:
    """A complete ``<style>``/``<script>`` element located in the document."""

    kind: AssetKind
    start: int
    content_start: int
    content_end: int
    end: int
    attributes: Mapping[str, str]

    def inner_text(self, text: str) -> str:
        return text[self.content_start : self.content_end]

    @property
    def extractable(self) -> bool:
        """Whether this element's content can be moved to an external file."""
        if self.kind == "style":
            return True
        if "src" in self.attributes:
            return False
        script_type = self.attributes.get("type", "").split(";", 1)[0].strip()
        return script_type.lower() in CLASSIC_SCRIPT_TYPES


@dataclass
class DocumentLandmarks:
    """Tag positions (outside raw text and comments) used for injection."""

    doctype_end: int | None = None
    html_open_end: int | None = None
    head_close: int | None = None
    body_open: int | None = None
    body_close: int | None = None
    html_close: int | None = None
    regions: list[TagRegion] = field(default_factory=list)
    malformed: AssetKind | None = None


def _is_tag(lower: str, pos: int, name: str) -> bool:
    """Check for ``name`` at ``pos`` followed by a tag-name boundary."""
    if not lower.startswith(name, pos):
        return False
    end = pos + len(name)
    return end >= len(lower) or lower[end] in _TAG_NAME_END


def _find_tag_end(text: str, pos: int) -> int:
    """Return the index of the ``>`` closing the tag opened at ``pos``, or -1.

    Quoted attribute values may contain ``>``.
    """
    quote: str | None = None
    for index in range(pos + 1, len(text)):
        char = text[index]
        if quote is not None:
            if char == quote:
                quote = None
        elif char in "\"'":
            quote = char
        elif char == ">":
            return index
    return -1


def _find_closing_tag(lower: str, name: str, pos: int) -> int:
    """Return the start of the first ``</name`` at or after ``pos``, or -1."""
    needle = f"</{name}"
    index = lower.find(needle, pos)
    while index != -1 and not _is_tag(lower, index + 2, name):
        index = lower.find(needle, index + 1)
    return index


def parse_attributes(tag_text: str) -> dict[str, str]:
    """Parse attributes of an opening tag such as ``<script type="x" defer>``."""
    body = tag_text.strip("<>").rstrip("/")
    # drop the tag name
    parts = body.split(None, 1)
    if len(parts) < 2:
        return {}
    attributes: dict[str, str] = {}
    for match in _ATTRIBUTE_RE.finditer(parts[1]):
        name = match.group(1).lower()
        value = next((g for g in match.groups()[1:] if g is not None), "")
        attributes.setdefault(name, value)
    return attributes


def scan_document(text: str) -> DocumentLandmarks:
    """Locate style/script regions and injection landmarks in one pass.

    An opening tag without ``>`` or a raw-text element without its closing
    tag is skipped as absent and scanning resumes right after it.
    """
    lower = text.lower()
    marks = DocumentLandmarks()
    pos = 0
    while True:
        lt = text.find("<", pos)
        if lt == -1:
            break

        if lower.startswith("<!--", lt):
            comment_end = text.find("-->", lt + 4)
            if comment_end == -1:
                break
            pos = comment_end + 3
            continue

        if lower.startswith("<!", lt) or lower.startswith("<?", lt):
            decl_end = text.find(">", lt)
            if decl_end == -1:
                break
            if marks.doctype_end is None and _is_tag(lower, lt + 2, "doctype"):
                marks.doctype_end = decl_end + 1
            pos = decl_end + 1
            continue

        kind: AssetKind | None = None
        if _is_tag(lower, lt + 1, "style"):
            kind = "style"
        elif _is_tag(lower, lt + 1, "script"):
            kind = "script"

        if kind is not None:
            open_end = _find_tag_end(text, lt)
            if open_end == -1:
                marks.malformed = kind
                pos = lt + 1
                continue
            close_start = _find_closing_tag(lower, kind, open_end + 1)
            close_end = -1 if close_start == -1 else text.find(">", close_start)
            if close_end == -1:
                marks.malformed = kind
                pos = open_end + 1
                continue
            marks.regions.append(
                TagRegion(
                    kind=kind,
                    start=lt,
                    content_start=open_end + 1,
                    content_end=close_start,
                    end=close_end + 1,
                    attributes=parse_attributes(text[lt : open_end + 1]),
                )
            )
            pos = close_end + 1
            continue

        if _is_tag(lower, lt + 1, "html"):
            tag_end = _find_tag_end(text, lt)
            if marks.html_open_end is None and tag_end != -1:
                marks.html_open_end = tag_end + 1
        elif _is_tag(lower, lt + 1, "body"):
            if marks.body_open is None:
                marks.body_open = lt
        elif _is_tag(lower, lt + 2, "head") and lower.startswith("</", lt):
            if marks.head_close is None:
                marks.head_close = lt
        elif _is_tag(lower, lt + 2, "body") and lower.startswith("</", lt):
            marks.body_close = lt
        elif _is_tag(lower, lt + 2, "html") and lower.startswith("</", lt):
            marks.html_close = lt
        pos = lt + 1

    return marks


def _line_span(text: str, start: int, end: int) -> tuple[int, int]:
    """Widen ``[start, end)`` to whole lines when it is alone on its line(s)."""
    line_start = text.rfind("\n", 0, start) + 1
    line_end = text.find("\n", end)
    line_end = len(text) if line_end == -1 else line_end + 1
    if text[line_start:start].strip() or text[end:line_end].strip():
        return start, end
    return line_start, line_end


def _indented_insert(text: str, position: int, tag: str) -> str:
    """Build the injected text so that it lines up with the tag at ``position``."""
    if position >= len(text):
        return f"{tag}\n" if text.endswith("\n") else tag
    line_start = text.rfind("\n", 0, position) + 1
    indent = text[line_start:position]
    if line_start == 0 or indent.strip():
        return tag
    return f"{INDENT_UNIT}{tag}\n{indent}"


def _stylesheet_position(marks: DocumentLandmarks) -> int:
    for candidate in (
        marks.head_close,
        marks.body_open,
        marks.html_open_end,
        marks.doctype_end,
    ):
        if candidate is not None:
            return candidate
    return 0


def _script_position(marks: DocumentLandmarks, text: str) -> int:
    if marks.body_close is not None:
        return marks.body_close
    if marks.html_close is not None:
        return marks.html_close
    return len(text)


def _join_blocks(blocks: list[str], kind: AssetKind) -> str:
    parts = []
    for number, block in enumerate(blocks, start=1):
        banner = (
            f"/* Style block {number} */"
            if kind == "style"
            else f"// Script block {number}"
        )
        body = block.strip("\n")
        parts.append(f"{banner}\n{body}")
    return "\n\n".join(parts) + "\n"


def _select(regions: list[TagRegion], extract_all: bool) -> list[TagRegion]:
    return regions if extract_all else regions[:1]


def _apply_edits(text: str, edits: list[tuple[int, int, str]]) -> str:
    """Apply ``(start, end, replacement)`` edits; spans never overlap."""
    pieces: list[str] = []
    cursor = 0
    for start, end, replacement in sorted(edits, key=lambda edit: (edit[0], edit[1])):
        pieces.append(text[cursor:start])
        pieces.append(replacement)
        cursor = max(cursor, end)
    pieces.append(text[cursor:])
    return "".join(pieces)


def iter_extractable(marks: DocumentLandmarks, kind: AssetKind) -> Iterator[TagRegion]:
    """Yield extractable regions of ``kind`` in document order."""
    for region in marks.regions:
        if region.kind == kind and region.extractable:
            yield region


def extract_assets(text: str, *, extract_all: bool = False) -> ExtractedAssets:
    """Move inline style/script content out of ``text``.

    Parameters
    ----------
    text : str
        Raw HTML document.
    extract_all : bool, default=False
        Extract every extractable block instead of only the first of each kind.

    Returns
    -------
    ExtractedAssets
        Extracted texts (``None`` when absent) and the rewritten markup.
        Never raises on malformed markup.
    """
    marks = scan_document(text)
    if marks.malformed is not None:
        logger.warning(
            "Unterminated <%s> element left in place.",
            marks.malformed,
        )

    styles = list(iter_extractable(marks, "style"))
    scripts = list(iter_extractable(marks, "script"))
    chosen_styles = _select(styles, extract_all)
    chosen_scripts = _select(scripts, extract_all)

    for kind, found, chosen in (
        ("style", styles, chosen_styles),
        ("script", scripts, chosen_scripts),
    ):
        if len(found) > len(chosen):
            logger.warning(
                "Found %d inline <%s> blocks; only the first was extracted, "
                "%d left inline.",
                len(found),
                kind,
                len(found) - len(chosen),
            )

    edits: list[tuple[int, int, str]] = []
    for region in (*chosen_styles, *chosen_scripts):
        start, end = _line_span(text, region.start, region.end)
        edits.append((start, end, ""))

    style_text: str | None = None
    script_text: str | None = None
    if chosen_styles:
        inner = [region.inner_text(text) for region in chosen_styles]
        style_text = _join_blocks(inner, "style") if extract_all else inner[0]
        position = _stylesheet_position(marks)
        edits.append((position, position, _indented_insert(text, position, STYLESHEET_TAG)))
    if chosen_scripts:
        inner = [region.inner_text(text) for region in chosen_scripts]
        script_text = _join_blocks(inner, "script") if extract_all else inner[0]
        position = _script_position(marks, text)
        edits.append((position, position, _indented_insert(text, position, SCRIPT_TAG)))

    return ExtractedAssets(
        markup=_apply_edits(text, edits) if edits else text,
        style_text=style_text,
        script_text=script_text,
        style_blocks=len(styles),
        script_blocks=len(scripts),
    )


class TagScanExtractor:
    """Default extractor backed by :func:`extract_assets`."""

    def extract(self, text: str, *, extract_all: bool = False) -> ExtractedAssets:
        """Extract inline assets from raw document text."""
        return extract_assets(text, extract_all=extract_all)
