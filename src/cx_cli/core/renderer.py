"""Structured rendering of normalized API documents.

Documents are serialized to block-style YAML and highlighted line by
line into a :class:`rich.text.Text`.  Styles are referenced by theme name
(``cx.key``, ``cx.number`` …) so that colours are decided once, in the
CLI console theme, and this module stays free of terminal concerns.
Document text is never parsed as console markup.

Highlight classes
-----------------
* ``cx.key`` — mapping key including its colon.
* ``cx.marker`` — the ``-`` list-item indicator.
* ``cx.number`` / ``cx.boolean`` / ``cx.timestamp`` / ``cx.string`` —
  value classes, tried in that order.
"""

from __future__ import annotations

import logging
import re

import yaml
from rich.text import Text

from cx_cli.core.models import Document, InvocationContext, ResourceType
from cx_cli.core.reorganizer import reorganize
from cx_cli.core.timestamps import normalize_document

logger = logging.getLogger(__name__)

NO_INFORMATION: str = "No information available"

TITLE_STYLE = "cx.title"
KEY_STYLE = "cx.key"
MARKER_STYLE = "cx.marker"
NUMBER_STYLE = "cx.number"
BOOLEAN_STYLE = "cx.boolean"
TIMESTAMP_STYLE = "cx.timestamp"
STRING_STYLE = "cx.string"

_LINE_WIDTH = 1 << 30
_LINE_BREAKS = frozenset("\n\x85\u2028\u2029")

_KEY = re.compile(
    r"""^(?P<key>'(?:[^']|'')*'|"(?:[^"\\]|\\.)*"|[^\s'"][^\n]*?):(?=\s|$)"""
)
_NUMBER = re.compile(r"-?\d+(\.\d+)?")
_BOOLEAN = re.compile(r"true|false")
_TIMESTAMP = re.compile(r"\d{4}-\d{2}-\d{2}T[\d:.Z+-]+")
_QUOTED = re.compile(r"""(["']).*\1""")


class _BlockDumper(yaml.SafeDumper):
    """Safe dumper that indents sequences under their parent key."""

    def increase_indent(self, flow: bool = False, indentless: bool = False) -> None:
        return super().increase_indent(flow, False)


def _represent_str(dumper: yaml.SafeDumper, data: str) -> yaml.ScalarNode:
    # One YAML line per document line: line breaks are escaped in double quotes.
    if _LINE_BREAKS.intersection(data):
        return dumper.represent_scalar("tag:yaml.org,2002:str", data, style='"')
    return dumper.represent_str(data)


_BlockDumper.add_representer(str, _represent_str)


# ---------------------------------------------------------------------------
# Titles
# ---------------------------------------------------------------------------

def session_title(document: Document) -> str:
    """Title for a call-session view, distinguishing the log-only view."""
    if isinstance(document, dict) and list(document) == ["log"]:
        return "Call Session Log"
    return "Call Session Information"


def resource_title(
    domain: str,
    resource_type: ResourceType | None = None,
    resource_id: str | None = None,
) -> str:
    """Title for a domain, a resource collection, or a single resource."""
    if resource_type is None:
        return f"Domain Information for {domain}"
    if resource_id:
        return f"{resource_type.noun} Information for {resource_id}"
    return f"All {resource_type.plural} for Domain {domain}"


# ---------------------------------------------------------------------------
# Serialization and highlighting
# ---------------------------------------------------------------------------

def highlight_value(value: str) -> Text:
    """Highlight the first value-class match found in *value*."""
    text = Text(value)
    stripped = value.strip()
    if not stripped or stripped in ("null", "~"):
        return text

    start = len(value) - len(value.lstrip())
    end = start + len(stripped)
    if _NUMBER.fullmatch(stripped):
        text.stylize(NUMBER_STYLE, start, end)
        return text
    if _BOOLEAN.fullmatch(stripped):
        text.stylize(BOOLEAN_STYLE, start, end)
        return text
    timestamp = _TIMESTAMP.search(value)
    if timestamp is not None:
        text.stylize(TIMESTAMP_STYLE, *timestamp.span())
        return text
    if _QUOTED.fullmatch(stripped):
        text.stylize(STRING_STYLE, start, end)
    return text


def highlight_line(line: str) -> Text:
    """Apply marker, key and value highlighting to one YAML line."""
    body = line.lstrip(" ")
    text = Text(line[: len(line) - len(body)])

    while body == "-" or body.startswith("- "):
        text.append("-", style=MARKER_STYLE)
        text.append(body[1:2])
        body = body[2:]

    key = _KEY.match(body)
    if key is not None:
        text.append(f"{key.group('key')}:", style=KEY_STYLE)
        body = body[key.end():]

    text.append_text(highlight_value(body))
    return text


def to_yaml(document: Document) -> str:
    """Serialize *document* as block-style YAML, preserving key order.

    Strings containing line breaks are emitted double-quoted with escaped
    breaks, so every output line holds one key or list item.
    """
    text = yaml.dump(
        document,
        Dumper=_BlockDumper,
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
        width=_LINE_WIDTH,
    )
    lines = text.rstrip("\n").split("\n")
    if lines and lines[-1] == "...":
        lines.pop()
    return "\n".join(lines)


def render_document(document: Document, title: str) -> Text:
    """Render *document* under *title* as highlighted text.

    An absent or empty document yields :data:`NO_INFORMATION` instead of
    an empty structure.
    """
    if document is None or (isinstance(document, (dict, list)) and not document):
        return Text(NO_INFORMATION)

    rendered = Text()
    rendered.append(f"=== {title} ===", style=TITLE_STYLE)
    rendered.append("\n\n")
    lines = [highlight_line(line) for line in to_yaml(document).split("\n")]
    rendered.append_text(Text("\n").join(lines))
    return rendered


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------

def prepare_document(document: Document) -> Document:
    """Repair timestamps, then reorder keys for reading."""
    return reorganize(normalize_document(document))


def present(document: Document, title: str, context: InvocationContext) -> Text:
    """Run the full normalize → reorganize → render pipeline."""
    prepared = prepare_document(document)
    if context.debug:
        logger.debug("Normalized document for %r: %r", title, prepared)
    return render_document(prepared, title)
