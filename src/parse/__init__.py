"""Parsing utilities for bootstrap scripts."""

from parse.annotations import (
    extract_annotations,
    match_any_imports,
    match_raw_string_imports,
    remove_annotations,
)
from parse.paths import ImportPolicyError, normalize_import_path

__all__ = [
    "ImportPolicyError",
    "extract_annotations",
    "match_any_imports",
    "match_raw_string_imports",
    "normalize_import_path",
    "remove_annotations",
]
