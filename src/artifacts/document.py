"""HTML entry point mutation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bs4 import BeautifulSoup, Declaration, Doctype, NavigableString

from contract.artifacts import IMPORT_LINK_REL, IMPORT_LINK_TAG

if TYPE_CHECKING:
    from collections.abc import Iterable

    from bs4 import Tag


def parse_document(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def serialize_document(doc: BeautifulSoup) -> str:
    return str(doc)


def _ensure_head(doc: BeautifulSoup) -> Tag:
    """Return the document head, creating it when the source has none."""
    head = doc.head
    if head is not None:
        return head

    head = doc.new_tag("head")
    html = doc.html
    if html is not None:
        html.insert(0, head)
    else:
        # Keep the doctype first when <html> is omitted.
        index = 0
        for position, node in enumerate(doc.contents):
            if isinstance(node, (Doctype, Declaration)):
                index = position + 1
            elif not (isinstance(node, NavigableString) and not node.strip()):
                break
        doc.insert(index, head)
    return head


def append_html_imports(doc: BeautifulSoup, import_paths: Iterable[str]) -> None:
    """Append one ``<link rel="import">`` per distinct path to the head.

    Links are appended in iteration order; existing head content is kept as
    is.
    """
    head = _ensure_head(doc)
    seen: set[str] = set()
    for import_path in import_paths:
        if import_path in seen:
            continue
        seen.add(import_path)
        link = doc.new_tag(
            IMPORT_LINK_TAG, attrs={"rel": IMPORT_LINK_REL, "href": import_path}
        )
        head.append(link)


__all__ = ["append_html_imports", "parse_document", "serialize_document"]
