"""Artifact contract definitions.

This module defines the stable identifiers and literals shared with the
upstream compiler stage that generates the bootstrap script.
"""

from __future__ import annotations

from dataclasses import dataclass

# Literals emitted by the bootstrap generator (stable wire contract).
PACKAGE_URL_PREFIX = "package:"
PACKAGES_DIR_PREFIX = "packages/"
LIB_DIR = "lib"
SAME_PACKAGE_SENTINEL = "null"

SCRIPT_EXTENSION = ".dart"
DOCUMENT_EXTENSION = ".html"

IMPORT_LINK_TAG = "link"
IMPORT_LINK_REL = "import"

CONFIG_FILENAME = "html_imports.toml"

_ID_SEPARATOR = "|"


@dataclass(frozen=True)
class ArtifactId:
    """Identifier of a build artifact: owning package plus package-relative path.

    Comparison is exact equality on both fields. The string form is
    ``package|path``.
    """

    package: str
    path: str

    @classmethod
    def parse(cls, value: str) -> ArtifactId:
        package, sep, path = value.partition(_ID_SEPARATOR)
        if not sep or not package or not path:
            msg = f"Artifact id must look like 'package|path', got {value!r}"
            raise ValueError(msg)
        return cls(package=package, path=path)

    def __str__(self) -> str:
        return f"{self.package}{_ID_SEPARATOR}{self.path}"
