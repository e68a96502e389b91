from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from contract.artifacts import CONFIG_FILENAME, DOCUMENT_EXTENSION, SCRIPT_EXTENSION


class InlinerConfig(BaseModel):
    """Configuration for one bootstrap script / html entry point pair."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    bootstrap_file: str = Field(
        description="Path of the generated bootstrap script (e.g. web/index.bootstrap.dart)",
    )
    html_entry_point: str = Field(
        description="Path of the html entry point that receives the import links",
    )
    package: str | None = Field(
        default=None,
        description=(
            "Package owning the entry point; required when reading from a directory"
        ),
    )
    strict_policy: bool = Field(
        default=False,
        description=(
            "Fail the run instead of skipping imports that cross packages "
            "outside a lib directory"
        ),
    )

    @field_validator("bootstrap_file", mode="before")
    @classmethod
    def validate_bootstrap_file(cls, v: Any) -> Any:
        if not isinstance(v, str) or not v.endswith(SCRIPT_EXTENSION):
            msg = f"`bootstrap_file` should be a string path to a {SCRIPT_EXTENSION} file"
            raise ValueError(msg)
        return v

    @field_validator("html_entry_point", mode="before")
    @classmethod
    def validate_html_entry_point(cls, v: Any) -> Any:
        if not isinstance(v, str) or not v.endswith(DOCUMENT_EXTENSION):
            msg = (
                f"`html_entry_point` should be a string path to a "
                f"{DOCUMENT_EXTENSION} file"
            )
            raise ValueError(msg)
        return v

    @field_validator("package")
    @classmethod
    def validate_package(cls, v: str | None) -> str | None:
        if v is None:
            return v
        if not v or "|" in v or "/" in v:
            msg = f"`package` must be a bare package name, got {v!r}"
            raise ValueError(msg)
        return v


class ConfigError(Exception):
    """Raised when configuration is missing, unreadable or invalid."""


@dataclass(frozen=True)
class ConfigMessage:
    key: str
    message: str

    def __str__(self) -> str:
        return f"{self.key}: {self.message}"


@dataclass(frozen=True)
class ConfigResult:
    """Outcome of validating raw settings: a config or the list of problems."""

    config: InlinerConfig | None = None
    errors: tuple[ConfigMessage, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return self.config is not None and not self.errors

    def unwrap(self) -> InlinerConfig:
        """Return the config or raise ``ConfigError`` listing every problem."""
        if self.config is None or self.errors:
            details = "; ".join(str(error) for error in self.errors)
            msg = f"Invalid html import configuration: {details}"
            raise ConfigError(msg)
        return self.config


def validate_config(settings: Any) -> ConfigResult:
    """Validate raw settings without raising."""
    if not isinstance(settings, dict):
        return ConfigResult(
            errors=(ConfigMessage("<root>", "configuration must be a mapping"),)
        )

    try:
        config = InlinerConfig.model_validate(settings)
    except ValidationError as exc:
        errors = tuple(
            ConfigMessage(
                key=".".join(str(part) for part in error["loc"]) or "<root>",
                message=error["msg"],
            )
            for error in exc.errors()
        )
        return ConfigResult(errors=errors)

    return ConfigResult(config=config)


def load_config(root: Path, overrides: dict[str, Any] | None = None) -> InlinerConfig:
    """Load configuration from html_imports.toml, applying ``overrides`` on top.

    Override values of None are ignored so unset CLI flags fall back to the
    file.
    """
    config_path = Path(root) / CONFIG_FILENAME

    data: dict[str, Any] = {}
    if config_path.is_file():
        try:
            with config_path.open("rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in {config_path}: {e}"
            raise ConfigError(msg) from e

    if overrides:
        data.update({key: value for key, value in overrides.items() if value is not None})

    return validate_config(data).unwrap()
