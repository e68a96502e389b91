"""Artifact rewriting entry points."""

from __future__ import annotations

from typing import TYPE_CHECKING

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
    """Inline html imports via lazy import to avoid package import cycles."""
    from artifacts.write import inline_html_imports as _inline_html_imports

    return _inline_html_imports(root=root, config=config, log=log)


__all__ = ["inline_html_imports"]
