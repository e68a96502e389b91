"""Shared URL-style path utilities."""

from __future__ import annotations

import posixpath


def url_join(*parts: str) -> str:
    """Join path segments with forward slashes.

    Empty parts are skipped, so a missing sub directory does not introduce a
    leading or doubled separator.

    Examples:
        >>> url_join("packages/", "a", "", "bar.html")
        'packages/a/bar.html'
        >>> url_join("", "bar.html")
        'bar.html'
    """
    non_empty = [part for part in parts if part]
    if not non_empty:
        return ""
    return posixpath.join(*non_empty)


def url_normalize(path: str) -> str:
    """Collapse ``.``/``..`` segments and redundant separators.

    Examples:
        >>> url_normalize("packages/a/./sub/../bar.html")
        'packages/a/bar.html'
        >>> url_normalize("a//b/")
        'a/b'
    """
    normalized = posixpath.normpath(path.replace("\\", "/"))
    # normpath preserves a leading "//" (POSIX implementation-defined root).
    if normalized.startswith("//"):
        normalized = "/" + normalized.lstrip("/")
    return normalized


def url_dir_segments(file_path: str) -> list[str]:
    """Return the segments of the parent directory of ``file_path``.

    A file at the top level has a single ``"."`` segment.

    Examples:
        >>> url_dir_segments("lib/src/foo.dart")
        ['lib', 'src']
        >>> url_dir_segments("foo.dart")
        ['.']
    """
    directory = posixpath.dirname(file_path) or "."
    segments = [segment for segment in directory.split("/") if segment]
    return segments or ["/"]
