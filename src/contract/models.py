"""Value types extracted from bootstrap scripts."""

from __future__ import annotations

from dataclasses import dataclass, field

from contract.artifacts import SAME_PACKAGE_SENTINEL


@dataclass(frozen=True)
class ExplicitPackage:
    """A declaring library that lives in a named package."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class SamePackageAsEntryPoint:
    """A declaring library that lives in the entry point's own package."""

    def __str__(self) -> str:
        return SAME_PACKAGE_SENTINEL


DeclaringPackage = ExplicitPackage | SamePackageAsEntryPoint


def parse_declaring_package(raw: str) -> DeclaringPackage:
    """Map the generator's package literal onto a ``DeclaringPackage``."""
    if raw == SAME_PACKAGE_SENTINEL:
        return SamePackageAsEntryPoint()
    return ExplicitPackage(raw)


@dataclass(frozen=True)
class AnnotationMatch:
    """One ``HtmlImport`` initializer captured from a bootstrap script."""

    import_path: str
    declaring_package: DeclaringPackage
    module_path: str


@dataclass(frozen=True)
class ExtractionResult:
    imports: frozenset[AnnotationMatch] = field(default_factory=frozenset)
    leftover_warnings: tuple[str, ...] = field(default_factory=tuple)


__all__ = [
    "AnnotationMatch",
    "DeclaringPackage",
    "ExplicitPackage",
    "ExtractionResult",
    "SamePackageAsEntryPoint",
    "parse_declaring_package",
]
