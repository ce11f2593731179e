"""Element and value normalization helpers for KML conversion.

Responsibilities:
- Namespace-agnostic child lookup on lxml elements
- Text extraction that treats plain and wrapped text nodes alike
- ISO 8601 instant normalization
- Image lookup keys from ``Icon/href`` references
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import unquote

from lxml import etree  # type: ignore[attr-defined]

from kml_czml.conversion._constants import BARE_DATETIME_PATTERN

if TYPE_CHECKING:
    from lxml.etree import _Element

# ---------------------------------------------------------------------------
# Element lookup
# ---------------------------------------------------------------------------


def local_name(elem: _Element) -> str:
    """Return the tag of *elem* without its namespace.

    Comments and processing instructions have no string tag and yield ``""``.
    """
    if not isinstance(elem.tag, str):
        return ""
    return etree.QName(elem).localname


def find_children(parent: _Element, name: str) -> list[_Element]:
    """Direct children of *parent* named *name* in any (or no) namespace."""
    return parent.findall(f"{{*}}{name}")


def find_child(parent: _Element | None, name: str) -> _Element | None:
    """First direct child of *parent* named *name*, or ``None``."""
    if parent is None:
        return None
    return parent.find(f"{{*}}{name}")


# ---------------------------------------------------------------------------
# Text extraction
# ---------------------------------------------------------------------------


def element_text(elem: _Element | None) -> str | None:
    """Return the stripped text content of *elem*, or ``None`` if blank.

    Text nested in child elements or CDATA sections is included, so a
    bare ``<name>A</name>`` and a wrapped ``<name><![CDATA[A]]></name>``
    resolve to the same value.  Comment bodies are not text.
    """
    if elem is None:
        return None
    text = "".join(elem.xpath("descendant::text()")).strip()
    return text or None


def child_text(parent: _Element | None, name: str) -> str | None:
    """Stripped text of the first child *name* of *parent*, or ``None``."""
    return element_text(find_child(parent, name))


# ---------------------------------------------------------------------------
# Instants
# ---------------------------------------------------------------------------


def normalize_iso8601(value: str) -> str:
    """Normalize a KML instant to a full ``YYYY-MM-DDTHH:MM:SSZ`` form.

    Values already containing a ``T`` separator pass through unchanged.
    A date run straight into a time (``2020-01-0112:00:00``) gets the
    ``T`` separator and a UTC ``Z`` suffix.  Anything else is returned
    as-is; malformed instants are not rejected here.
    """
    if "T" in value:
        return value
    return BARE_DATETIME_PATTERN.sub(r"\1T\2Z", value)


# ---------------------------------------------------------------------------
# Image references
# ---------------------------------------------------------------------------


def image_lookup_keys(href: str) -> list[str]:
    """Candidate upload file names for an ``Icon/href`` reference.

    Only the final path segment is significant; query strings and
    fragments are dropped.  The percent-decoded segment is offered as a
    second candidate when it differs.
    """
    path = href.strip().split("?", 1)[0].split("#", 1)[0]
    segment = path.replace("\\", "/").rpartition("/")[2]
    keys = [segment]
    decoded = unquote(segment)
    if decoded != segment:
        keys.append(decoded)
    return keys
