"""Idempotence verification for inlined html import artifacts."""

from __future__ import annotations

import filecmp
import shutil
import tempfile
from dataclasses import dataclass, field
from pathlib import Path

from artifacts.write import inline_html_imports
from rules.config import InlinerConfig


@dataclass(frozen=True)
class IdempotenceResult:
    ok: bool
    mismatches: tuple[str, ...] = field(default_factory=tuple)


def verify_inlined(*, root: Path, config: InlinerConfig) -> IdempotenceResult:
    """Verify that an already-inlined artifact pair is a fixed point.

    Copies the configured bootstrap script and html entry point into a
    temporary directory, runs the inliner on the copies and compares them
    byte-for-byte against the originals. A raw-string HtmlImport initializer
    still present in the script shows up as a mismatch on both files.

    Args:
        root: Directory holding the package's build output.
        config: Inliner configuration naming the two artifacts.

    Returns:
        IdempotenceResult with ok status and the sorted relative paths that
        changed on the second run.

    Raises:
        FileNotFoundError: If either configured artifact does not exist.
    """
    relative_paths = sorted({config.bootstrap_file, config.html_entry_point})
    for rel_path in relative_paths:
        if not (root / rel_path).is_file():
            msg = f"Artifact does not exist: {root / rel_path}"
            raise FileNotFoundError(msg)

    with tempfile.TemporaryDirectory() as temp_dir:
        temp_path = Path(temp_dir)
        for rel_path in relative_paths:
            target = temp_path / rel_path
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(root / rel_path, target)

        inline_html_imports(root=temp_path, config=config)

        mismatches = [
            rel_path
            for rel_path in relative_paths
            if not filecmp.cmp(root / rel_path, temp_path / rel_path, shallow=False)
        ]

    return IdempotenceResult(ok=not mismatches, mismatches=tuple(mismatches))
