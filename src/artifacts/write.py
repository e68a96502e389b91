from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from artifacts.inliner import HtmlImportInliner
from artifacts.store import FileSystemArtifactStore
from rules.config import ConfigError, load_config

if TYPE_CHECKING:
    import logging
    from pathlib import Path

    from rules.config import InlinerConfig


def inline_html_imports(
    *,
    root: Path,
    config: InlinerConfig | None = None,
    log: logging.Logger | None = None,
) -> dict[str, object]:
    """Rewrite the configured bootstrap script and html entry point in place.

    Args:
        root: Directory holding the package's build output
        config: Optional configuration; loaded from ``root`` when omitted
        log: Optional logger for warnings and policy violations

    Returns:
        Dictionary with the injected import paths, warning and violation
        counts, and the rewritten artifact paths.

    Raises:
        ConfigError: If the configuration does not name the owning package.
    """
    if config is None:
        config = load_config(root)

    if config.package is None:
        msg = "`package` is required to inline html imports from a directory"
        raise ConfigError(msg)

    inliner = HtmlImportInliner(config, log=log)
    store = FileSystemArtifactStore(root, config.package)
    result = asyncio.run(
        inliner.apply(store.primary_inputs(inliner.classify_primary), store)
    )

    return {
        "import_paths": list(result.import_paths),
        "warning_count": len(result.warnings),
        "violation_count": len(result.violations),
        "artifacts": [
            str(root / result.script_id.path),
            str(root / result.document_id.path),
        ],
    }
