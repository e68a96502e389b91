from __future__ import annotations

from pathlib import Path

import pytest

from rules.config import ConfigError, ConfigMessage, load_config, validate_config


def _write_config(root: Path, toml_content: str) -> None:
    (root / "html_imports.toml").write_text(toml_content, encoding="utf-8")


_VALID = """
bootstrap_file = "web/index.bootstrap.dart"
html_entry_point = "web/index.html"
""".strip()


def test_valid_config_accepted(tmp_path: Path) -> None:
    _write_config(tmp_path, _VALID)

    config = load_config(tmp_path)

    assert config.bootstrap_file == "web/index.bootstrap.dart"
    assert config.html_entry_point == "web/index.html"
    assert config.package is None
    assert config.strict_policy is False


def test_bootstrap_file_must_be_a_dart_file(tmp_path: Path) -> None:
    _write_config(tmp_path, _VALID.replace("index.bootstrap.dart", "index.js"))

    with pytest.raises(ConfigError, match="bootstrap_file"):
        load_config(tmp_path)


def test_html_entry_point_must_be_a_string(tmp_path: Path) -> None:
    _write_config(
        tmp_path,
        'bootstrap_file = "web/index.bootstrap.dart"\nhtml_entry_point = 3',
    )

    with pytest.raises(ConfigError, match="html_entry_point"):
        load_config(tmp_path)


def test_unknown_top_level_key_rejected(tmp_path: Path) -> None:
    _write_config(tmp_path, _VALID + "\nbogus_key = true")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_invalid_toml_rejected(tmp_path: Path) -> None:
    _write_config(tmp_path, "bootstrap_file = ")

    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_config(tmp_path)


def test_missing_config_file_requires_overrides(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_config(tmp_path)

    config = load_config(
        tmp_path,
        overrides={
            "bootstrap_file": "web/main.bootstrap.dart",
            "html_entry_point": "web/main.html",
            "package": None,
        },
    )
    assert config.bootstrap_file == "web/main.bootstrap.dart"
    assert config.package is None


def test_overrides_take_precedence_over_file(tmp_path: Path) -> None:
    _write_config(tmp_path, _VALID + '\npackage = "a"')

    config = load_config(tmp_path, overrides={"package": "b", "strict_policy": True})

    assert config.package == "b"
    assert config.strict_policy is True


def test_validate_config_collects_every_error() -> None:
    result = validate_config({"bootstrap_file": "x.js", "html_entry_point": "x.txt"})

    assert not result.ok
    assert result.config is None
    assert {error.key for error in result.errors} == {
        "bootstrap_file",
        "html_entry_point",
    }


def test_validate_config_rejects_non_mapping() -> None:
    result = validate_config(["bootstrap_file"])

    assert result.errors == (ConfigMessage("<root>", "configuration must be a mapping"),)
    with pytest.raises(ConfigError):
        result.unwrap()


def test_package_must_be_a_bare_name() -> None:
    result = validate_config(
        {
            "bootstrap_file": "web/index.bootstrap.dart",
            "html_entry_point": "web/index.html",
            "package": "a|b",
        }
    )

    assert [error.key for error in result.errors] == ["package"]
