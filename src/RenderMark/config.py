from __future__ import annotations

import codecs
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigError

OUTPUT_FORMATS = ("html", "docx")


@dataclass(frozen=True)
class RenderConfig:
    output_format: str = "html"
    standalone: bool = False
    title: str | None = None
    encoding: str = "utf-8"
    font_name: str = "Times New Roman"
    font_size_pt: int = 12
    quote_indent_cm: float = 1.0

    @property
    def suffix(self) -> str:
        return f".{self.output_format}"

    def with_overrides(self, **overrides: Any) -> "RenderConfig":
        """Return a copy with every non-None override applied."""
        values = {key: value for key, value in overrides.items() if value is not None}
        if not values:
            return self
        return config_from_dict({**_as_dict(self), **values})


def load_config(path: str | Path) -> RenderConfig:
    """Read a YAML config file; an empty file yields the defaults."""
    path = Path(path)
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML: {exc}", source_file=str(path)) from exc
    if data is None:
        return RenderConfig()
    try:
        return config_from_dict(data)
    except ConfigError as exc:
        raise ConfigError(exc.message, source_file=str(path)) from exc


def config_from_dict(data: Any) -> RenderConfig:
    if not isinstance(data, dict):
        raise ConfigError("Config root must be a mapping of option names to values.")

    known = {f.name for f in fields(RenderConfig)}
    unknown = sorted(str(key) for key in data if key not in known)
    if unknown:
        raise ConfigError(f"Unknown config option(s): {', '.join(unknown)}")

    config = replace(RenderConfig(), **data)
    _validate(config)
    return config


def _validate(config: RenderConfig) -> None:
    if config.output_format not in OUTPUT_FORMATS:
        raise ConfigError(
            f"output_format must be one of {', '.join(OUTPUT_FORMATS)}, got {config.output_format!r}"
        )
    if not isinstance(config.standalone, bool):
        raise ConfigError("standalone must be true or false")
    if config.title is not None and not isinstance(config.title, str):
        raise ConfigError("title must be a string")
    for name in ("encoding", "font_name"):
        value = getattr(config, name)
        if not isinstance(value, str) or not value:
            raise ConfigError(f"{name} must be a non-empty string")
    try:
        codecs.lookup(config.encoding)
    except LookupError as exc:
        raise ConfigError(f"Unknown encoding: {config.encoding!r}") from exc
    if isinstance(config.font_size_pt, bool) or not isinstance(config.font_size_pt, int) or config.font_size_pt <= 0:
        raise ConfigError("font_size_pt must be a positive integer")
    if isinstance(config.quote_indent_cm, bool) or not isinstance(config.quote_indent_cm, (int, float)):
        raise ConfigError("quote_indent_cm must be a number")
    if config.quote_indent_cm < 0:
        raise ConfigError("quote_indent_cm must not be negative")


def _as_dict(config: RenderConfig) -> dict[str, Any]:
    return {f.name: getattr(config, f.name) for f in fields(RenderConfig)}
