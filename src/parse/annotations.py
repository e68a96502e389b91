"""Regex-based HtmlImport initializer extraction for bootstrap scripts.

The bootstrap generator registers every ``@HtmlImport`` annotation as an
initializer entry of the form::

    new InitEntry(const i2.HtmlImport('bar.html'), const LibraryIdentifier(#a.foo, null, 'lib/foo.dart')),

Two grammars are applied. The strict grammar only accepts a raw string
import path plus a literal library identifier; these entries are removed from
the script and turned into ``<link rel="import">`` tags. The loose grammar
accepts any argument and is run over what the strict grammar left behind to
report entries that could not be inlined.
"""

from __future__ import annotations

import re

from contract.models import AnnotationMatch, ExtractionResult, parse_declaring_package

# Groups: import path, declaring package (quoted name or bare null), module path.
_HTML_IMPORT_WITH_RAW_STRING = re.compile(
    r"\n\s*new InitEntry\(const i\d*\.HtmlImport\('([\w/.:]*\.html)'\),"
    r"\sconst\sLibraryIdentifier\(#[\w.]*, '?(\w*)'?, '([\w/.]*)'\)\)"
    r",",
    re.ASCII,
)

_HTML_IMPORT_GENERAL = re.compile(
    r"\n\s*new InitEntry\(const i\d*\.HtmlImport\('([\w.].*)'\),\s.*\),",
    re.ASCII,
)


def match_raw_string_imports(script: str) -> list[AnnotationMatch]:
    """Return every strict-grammar entry in source order, duplicates included."""
    return [
        AnnotationMatch(
            import_path=match.group(1),
            declaring_package=parse_declaring_package(match.group(2)),
            module_path=match.group(3),
        )
        for match in _HTML_IMPORT_WITH_RAW_STRING.finditer(script)
    ]


def match_any_imports(script: str) -> list[str]:
    """Return the raw text of every loose-grammar entry in source order."""
    return [match.group(0) for match in _HTML_IMPORT_GENERAL.finditer(script)]


def remove_annotations(script: str) -> str:
    """Remove every strict-grammar entry, leaving all other text untouched."""
    return _HTML_IMPORT_WITH_RAW_STRING.sub("", script)


def extract_annotations(script: str) -> ExtractionResult:
    """Extract inlinable imports and report entries supplied an expression.

    Args:
        script: Full text of the bootstrap script.

    Returns:
        ExtractionResult whose ``imports`` is the deduplicated set of strict
        matches and whose ``leftover_warnings`` holds the text of loose matches
        found after the strict ones were removed.
    """
    imports = frozenset(match_raw_string_imports(script))
    leftovers = tuple(
        snippet.strip() for snippet in match_any_imports(remove_annotations(script))
    )
    return ExtractionResult(imports=imports, leftover_warnings=leftovers)


__all__ = [
    "extract_annotations",
    "match_any_imports",
    "match_raw_string_imports",
    "remove_annotations",
]
