"""Pure function for stripping editor cruft from Help Center article bodies.

The cleanup is an ordered pipeline of regular-expression rewrites. Each step
assumes the previous ones already ran:

1. Remove tag pairs whose only content is whitespace. The closing tag must
   carry the same name as the opening one (case-insensitive). Repeated until
   nothing matches, so ``<div><p> </p></div>`` disappears entirely.
2. Strip ``style``, ``id``, ``class``, ``target`` and ``border`` attributes
   (single- or double-quoted values) from every tag.
3. Unwrap ``span`` and ``font`` tags, keeping their content verbatim.
4. Collapse a line break followed by whitespace-only lines into one line break.
5. Turn ``<td><p>X</p></td>`` into ``<td>X</td>`` when the cell holds a
   single paragraph.

This is lexical cleanup, not an HTML parser. No DOM is built; malformed
markup, ``>`` inside attribute values and nested same-named tags are handled
on a best-effort basis only.
"""

import re

_EMPTY_TAG_PAIR = re.compile(r"<([a-z][a-z0-9]*)\b[^>]*>\s*</\1\s*>", re.IGNORECASE)
_OPENING_TAG = re.compile(r"<[a-z][^>]*>", re.IGNORECASE)
_PRESENTATION_ATTRIBUTE = re.compile(
    r"""\s+(?:style|id|class|target|border)\s*=\s*(?:"[^"]*"|'[^']*')""",
    re.IGNORECASE,
)
_WRAPPER_TAG = re.compile(r"</?(?:span|font)\b[^>]*>", re.IGNORECASE)
_BLANK_LINES = re.compile(r"\n(?:[^\S\n]*\n)+")
_CELL_PARAGRAPH = re.compile(
    r"<td(\s[^>]*)?>\s*<p(?:\s[^>]*)?>((?:(?!</?p[\s>]).)*)</p>\s*</td>",
    re.IGNORECASE | re.DOTALL,
)


def normalize_html(html: str | None) -> str | None:
    """Remove empty tags, presentation attributes and wrapper tags from ``html``."""
    if not html:
        return html
    html = _remove_empty_tag_pairs(html)
    html = _OPENING_TAG.sub(_strip_presentation_attributes, html)
    html = _WRAPPER_TAG.sub("", html)
    html = _BLANK_LINES.sub("\n", html)
    return _CELL_PARAGRAPH.sub(r"<td\1>\2</td>", html)


def _remove_empty_tag_pairs(html: str) -> str:
    previous = None
    while previous != html:
        previous = html
        html = _EMPTY_TAG_PAIR.sub("", html)
    return html


def _strip_presentation_attributes(match: re.Match[str]) -> str:
    return _PRESENTATION_ATTRIBUTE.sub("", match.group(0))
