"""Moves HtmlImport initializers out of a bootstrap script into its html entry point.

Given an html entry point with a single bootstrap script generated by the
initializer stage, the inliner removes every ``HtmlImport`` initializer from
the script and appends a matching ``<link rel="import">`` tag to the head of
the html entry point. It does not inline the imported documents themselves.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from artifacts.document import append_html_imports, parse_document, serialize_document
from parse.annotations import extract_annotations, remove_annotations
from parse.paths import ImportPolicyError, normalize_import_path
from rules.config import InlinerConfig, validate_config

if TYPE_CHECKING:
    from collections.abc import AsyncIterable

    from artifacts.store import Artifact, ArtifactSink
    from contract.artifacts import ArtifactId
    from contract.models import AnnotationMatch

logger = logging.getLogger(__name__)


class MissingInputError(LookupError):
    """Raised when a configured artifact never shows up among the inputs."""

    def __init__(self, missing: list[str]) -> None:
        super().__init__(f"Missing expected input(s): {', '.join(missing)}")
        self.missing = missing


@dataclass(frozen=True)
class InlineResult:
    script_id: ArtifactId
    document_id: ArtifactId
    import_paths: tuple[str, ...] = field(default_factory=tuple)
    warnings: tuple[str, ...] = field(default_factory=tuple)
    violations: tuple[str, ...] = field(default_factory=tuple)


class HtmlImportInliner:
    """Binds one bootstrap script and one html entry point and rewrites both."""

    def __init__(
        self, config: InlinerConfig, log: logging.Logger | None = None
    ) -> None:
        self._config = config
        self._logger = log or logger

    @classmethod
    def from_settings(
        cls, settings: dict[str, Any], log: logging.Logger | None = None
    ) -> HtmlImportInliner:
        """Build an inliner from raw settings, raising ``ConfigError`` if invalid."""
        return cls(validate_config(settings).unwrap(), log=log)

    @property
    def config(self) -> InlinerConfig:
        return self._config

    def classify_primary(self, artifact_id: ArtifactId) -> bool:
        return artifact_id.path in (
            self._config.bootstrap_file,
            self._config.html_entry_point,
        )

    async def _collect(
        self, inputs: AsyncIterable[Artifact]
    ) -> tuple[Artifact, Artifact]:
        script: Artifact | None = None
        document: Artifact | None = None
        async for artifact in inputs:
            if artifact.id.path == self._config.bootstrap_file:
                script = artifact
            elif artifact.id.path == self._config.html_entry_point:
                document = artifact
            if script is not None and document is not None:
                return script, document

        missing = [
            path
            for path, found in (
                (self._config.bootstrap_file, script),
                (self._config.html_entry_point, document),
            )
            if found is None
        ]
        raise MissingInputError(missing)

    def _normalize_all(
        self, imports: frozenset[AnnotationMatch], root_package: str
    ) -> tuple[set[str], list[ImportPolicyError]]:
        import_paths: set[str] = set()
        violations: list[ImportPolicyError] = []
        for annotation in sorted(
            imports,
            key=lambda a: (a.module_path, str(a.declaring_package), a.import_path),
        ):
            try:
                import_paths.add(
                    normalize_import_path(
                        annotation.import_path,
                        annotation.declaring_package,
                        annotation.module_path,
                        root_package,
                    )
                )
            except ImportPolicyError as exc:
                self._logger.error("%s", exc)
                violations.append(exc)
        return import_paths, violations

    async def apply(
        self, inputs: AsyncIterable[Artifact], sink: ArtifactSink
    ) -> InlineResult:
        """Run one collect/emit cycle.

        Raises:
            MissingInputError: If either configured artifact is absent.
            ImportPolicyError: In strict mode, if any import violates the
                cross-package policy. Nothing is emitted in that case.
        """
        script, document = await self._collect(inputs)
        script_text, html = await asyncio.gather(
            script.read_as_string(), document.read_as_string()
        )

        extraction = extract_annotations(script_text)
        for snippet in extraction.leftover_warnings:
            self._logger.warning(
                "Found HtmlImport constructor which was supplied an expression. "
                "Only raw strings are currently supported: %s",
                snippet,
            )

        import_paths, violations = self._normalize_all(
            extraction.imports, document.id.package
        )
        if violations and self._config.strict_policy:
            first = violations[0]
            msg = (
                f"{len(violations)} HtmlImport policy violation(s) in {script.id}: "
                + "; ".join(str(violation) for violation in violations)
            )
            raise ImportPolicyError(first.declaring_package, first.module_path, msg)

        await sink.add_output(script.id, remove_annotations(script_text))

        doc = parse_document(html)
        ordered_paths = tuple(sorted(import_paths))
        append_html_imports(doc, ordered_paths)
        await sink.add_output(document.id, serialize_document(doc))

        self._logger.debug(
            "Inlined %d html import(s) from %s into %s",
            len(ordered_paths),
            script.id,
            document.id,
        )
        return InlineResult(
            script_id=script.id,
            document_id=document.id,
            import_paths=ordered_paths,
            warnings=extraction.leftover_warnings,
            violations=tuple(str(violation) for violation in violations),
        )


__all__ = ["HtmlImportInliner", "InlineResult", "MissingInputError"]
