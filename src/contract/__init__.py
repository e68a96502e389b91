"""Stable contract surface for html-import-inliner.

This module exposes the identifiers and value types shared by the parser,
the path normalizer and the artifact pipeline.
"""

from contract.artifacts import (
    CONFIG_FILENAME,
    DOCUMENT_EXTENSION,
    LIB_DIR,
    PACKAGE_URL_PREFIX,
    PACKAGES_DIR_PREFIX,
    SAME_PACKAGE_SENTINEL,
    SCRIPT_EXTENSION,
    ArtifactId,
)
from contract.models import (
    AnnotationMatch,
    DeclaringPackage,
    ExplicitPackage,
    ExtractionResult,
    SamePackageAsEntryPoint,
    parse_declaring_package,
)

__all__ = [
    "CONFIG_FILENAME",
    "DOCUMENT_EXTENSION",
    "LIB_DIR",
    "PACKAGE_URL_PREFIX",
    "PACKAGES_DIR_PREFIX",
    "SAME_PACKAGE_SENTINEL",
    "SCRIPT_EXTENSION",
    "AnnotationMatch",
    "ArtifactId",
    "DeclaringPackage",
    "ExplicitPackage",
    "ExtractionResult",
    "SamePackageAsEntryPoint",
    "parse_declaring_package",
]
