from __future__ import annotations

import pytest

from contract.models import ExplicitPackage, SamePackageAsEntryPoint
from parse.paths import ImportPolicyError, normalize_import_path
from utils import url_dir_segments, url_join, url_normalize

SAME = SamePackageAsEntryPoint()


@pytest.mark.parametrize(
    ("declaring_package", "module_path"),
    [
        (SAME, "web/index.dart"),
        (ExplicitPackage("c"), "web/c.dart"),
        (ExplicitPackage("c"), "lib/src/c.dart"),
    ],
)
def test_package_url_passes_through(declaring_package, module_path) -> None:
    assert (
        normalize_import_path("package:b/bar.html", declaring_package, module_path, "a")
        == "packages/b/bar.html"
    )


def test_same_package_lib_import_resolves_under_root_package() -> None:
    assert normalize_import_path("bar.html", SAME, "lib/foo.dart", "a") == (
        "packages/a/bar.html"
    )


def test_lib_sub_directory_is_kept() -> None:
    assert normalize_import_path("../bar.html", SAME, "lib/src/deep/foo.dart", "a") == (
        "packages/a/src/bar.html"
    )


def test_explicit_package_lib_import_resolves_under_that_package() -> None:
    assert normalize_import_path(
        "bar.html", ExplicitPackage("b"), "lib/src/foo.dart", "a"
    ) == ("packages/b/src/bar.html")


def test_same_package_non_lib_import_stays_relative() -> None:
    assert normalize_import_path("bar.html", SAME, "web/index.dart", "a") == "bar.html"
    assert normalize_import_path("./x/../bar.html", SAME, "web/sub/index.dart", "a") == (
        "sub/bar.html"
    )


def test_top_level_module_resolves_relative_to_entry_point() -> None:
    assert normalize_import_path("bar.html", SAME, "index.dart", "a") == "bar.html"


def test_cross_package_non_lib_import_is_a_policy_violation() -> None:
    with pytest.raises(ImportPolicyError, match="b:web/foo.dart") as exc_info:
        normalize_import_path("bar.html", ExplicitPackage("b"), "web/foo.dart", "a")

    assert exc_info.value.declaring_package == ExplicitPackage("b")
    assert exc_info.value.module_path == "web/foo.dart"


def test_normalization_is_deterministic() -> None:
    results = {
        normalize_import_path("bar.html", SAME, "lib/foo.dart", "a") for _ in range(5)
    }
    assert results == {"packages/a/bar.html"}


def test_url_helpers() -> None:
    assert url_join("packages/", "a", "", "bar.html") == "packages/a/bar.html"
    assert url_join("", "") == ""
    assert url_normalize("a//b/./c/../d.html") == "a/b/d.html"
    assert url_dir_segments("lib/src/foo.dart") == ["lib", "src"]
    assert url_dir_segments("foo.dart") == ["."]
