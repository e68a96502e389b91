"""Canonical path resolution for HtmlImport paths."""

from __future__ import annotations

from contract.artifacts import LIB_DIR, PACKAGE_URL_PREFIX, PACKAGES_DIR_PREFIX
from contract.models import DeclaringPackage, SamePackageAsEntryPoint
from utils import url_dir_segments, url_join, url_normalize


class ImportPolicyError(ValueError):
    """Raised when a relative import cannot be resolved from outside lib/."""

    def __init__(
        self, declaring_package: DeclaringPackage, module_path: str, message: str
    ) -> None:
        super().__init__(message)
        self.declaring_package = declaring_package
        self.module_path = module_path


def normalize_import_path(
    import_path: str,
    declaring_package: DeclaringPackage,
    module_path: str,
    root_package: str,
) -> str:
    """Resolve an HtmlImport path to the href used by the html entry point.

    Args:
        import_path: Path literal passed to ``HtmlImport``.
        declaring_package: Package of the library carrying the annotation.
        module_path: Package-relative path of that library.
        root_package: Package owning the html entry point.

    Returns:
        Forward-slash path, either ``packages/<pkg>/...`` or relative to the
        entry point's directory.

    Raises:
        ImportPolicyError: If a library outside ``lib/`` in another package
            uses a relative import.

    Examples:
        >>> normalize_import_path("package:b/bar.html", SamePackageAsEntryPoint(), "web/a.dart", "a")
        'packages/b/bar.html'
        >>> normalize_import_path("bar.html", SamePackageAsEntryPoint(), "lib/foo.dart", "a")
        'packages/a/bar.html'
    """
    # Already a packages path.
    if import_path.startswith(PACKAGE_URL_PREFIX):
        return PACKAGES_DIR_PREFIX + import_path[len(PACKAGE_URL_PREFIX) :]

    dir_segments = url_dir_segments(module_path)
    in_lib_dir = dir_segments[0] == LIB_DIR
    # The module directory without its leading (lib/, web/, ...) segment.
    sub_dir = url_join(*dir_segments[1:])
    same_package = isinstance(declaring_package, SamePackageAsEntryPoint)

    if same_package and not in_lib_dir:
        return url_normalize(url_join(sub_dir, import_path))

    if not in_lib_dir:
        msg = (
            "Can only import assets from a folder other than `lib` if they are "
            f"in the same package as the entry point. Found "
            f"{declaring_package}:{module_path}"
        )
        raise ImportPolicyError(declaring_package, module_path, msg)

    package = root_package if same_package else str(declaring_package)
    return url_normalize(url_join(PACKAGES_DIR_PREFIX, package, sub_dir, import_path))
