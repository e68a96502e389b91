from __future__ import annotations

import itertools

from artifacts.document import append_html_imports, parse_document, serialize_document

_HTML = (
    "<!DOCTYPE html>\n<html><head><title>app</title>"
    '<link rel="stylesheet" href="app.css"></head>'
    "<body><p>hi</p></body></html>"
)


def _import_hrefs(html: str) -> list[str]:
    doc = parse_document(html)
    return [link["href"] for link in doc.head.find_all("link", rel="import")]


def test_links_are_appended_after_existing_head_content() -> None:
    doc = parse_document(_HTML)

    append_html_imports(doc, ["packages/a/foo.html", "bar.html"])

    head_children = [child.name for child in doc.head.find_all(recursive=False)]
    assert head_children == ["title", "link", "link", "link"]
    assert doc.head.find("link")["href"] == "app.css"
    assert _import_hrefs(serialize_document(doc)) == ["packages/a/foo.html", "bar.html"]
    assert doc.body.p.string == "hi"


def test_duplicate_paths_produce_one_link() -> None:
    doc = parse_document(_HTML)

    append_html_imports(doc, ["bar.html", "bar.html"])

    assert _import_hrefs(serialize_document(doc)) == ["bar.html"]


def test_empty_path_set_leaves_document_unchanged() -> None:
    doc = parse_document(_HTML)

    append_html_imports(doc, [])

    assert serialize_document(doc) == str(parse_document(_HTML))


def test_missing_head_is_created() -> None:
    doc = parse_document("<html><body></body></html>")

    append_html_imports(doc, ["bar.html"])

    assert doc.html.contents[0].name == "head"
    assert _import_hrefs(serialize_document(doc)) == ["bar.html"]


def test_injection_order_does_not_change_the_set_of_links() -> None:
    paths = ["packages/a/foo.html", "bar.html", "packages/b/baz.html"]
    results = set()
    for permutation in itertools.permutations(paths):
        doc = parse_document(_HTML)
        append_html_imports(doc, permutation)
        results.add(frozenset(_import_hrefs(serialize_document(doc))))

    assert results == {frozenset(paths)}


def test_missing_html_and_head_keeps_doctype_first() -> None:
    doc = parse_document("<!DOCTYPE html>\n<title>x</title><body></body>")

    append_html_imports(doc, ["bar.html"])

    serialized = serialize_document(doc)
    assert serialized.startswith("<!DOCTYPE html>")
    assert serialized.index("<head>") < serialized.index("<title>")
    assert _import_hrefs(serialized) == ["bar.html"]
