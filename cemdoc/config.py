"""Configuration loading for cemdoc (.cemdoc.yml) and per-render options."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

CONFIG_FILENAME = ".cemdoc.yml"

PRIVACY_HIDDEN = "hidden"
PRIVACY_DETAILS = "details"
PRIVACY_MODES = (PRIVACY_HIDDEN, PRIVACY_DETAILS)


class ConfigError(RuntimeError):
    """Raised when configuration or render options are invalid."""


@dataclass(frozen=True)
class RenderOptions:
    """Options threaded through every table and heading the renderer builds.

    ``private`` selects how members marked protected/private are handled:
    ``"hidden"`` drops private members, ``"details"`` moves protected and
    private members into a collapsible appendix, ``None`` lists everything.
    """

    heading_offset: int = 0
    private: Optional[str] = None

    def __post_init__(self) -> None:
        if self.private is not None and self.private not in PRIVACY_MODES:
            raise ConfigError(
                f"Unknown privacy mode {self.private!r}; expected one of {', '.join(PRIVACY_MODES)}"
            )
        if isinstance(self.heading_offset, bool) or not isinstance(self.heading_offset, int):
            raise ConfigError("heading_offset must be an integer")


@dataclass
class CemDocConfig:
    """Represents the settings defined in .cemdoc.yml."""

    root: Path
    render: RenderOptions = field(default_factory=RenderOptions)
    output: Optional[Path] = None

    def with_overrides(
        self,
        *,
        heading_offset: Optional[int] = None,
        private: Optional[str] = None,
        output: Optional[Path] = None,
    ) -> "CemDocConfig":
        """Return a copy where explicitly supplied values win over the file."""
        render = self.render
        if heading_offset is not None:
            render = replace(render, heading_offset=heading_offset)
        if private is not None:
            render = replace(render, private=private)
        return CemDocConfig(
            root=self.root,
            render=render,
            output=output if output is not None else self.output,
        )


def load_config(config_path: Path) -> CemDocConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return CemDocConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    heading_offset = _as_int(data.get("heading_offset"))
    if data.get("heading_offset") is not None and heading_offset is None:
        raise ConfigError("heading_offset must be an integer")

    render = RenderOptions(
        heading_offset=heading_offset or 0,
        private=_as_str(data.get("private")),
    )

    output_str = _as_str(data.get("output"))
    output = root / output_str if output_str else None

    return CemDocConfig(root=root, render=render, output=output)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


__all__ = [
    "CONFIG_FILENAME",
    "CemDocConfig",
    "ConfigError",
    "PRIVACY_DETAILS",
    "PRIVACY_HIDDEN",
    "PRIVACY_MODES",
    "RenderOptions",
    "load_config",
]
