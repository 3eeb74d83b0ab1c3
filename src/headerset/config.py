"""
TOML-based config file loading for headerset.

Searches for `.headerset.toml`, `headerset.toml`, or `pyproject.toml [tool.headerset]`
walking up from the current directory. Config values are merged with CLI flags
using three-way precedence: explicit CLI flags > config file > built-in defaults.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, TypeVar, cast

if sys.version_info >= (3, 11):
    import tomllib  # pyright: ignore[reportUnreachable]
else:
    import tomli as tomllib  # type: ignore[no-redef]  # pyright: ignore[reportUnreachable]

from wcmatch import glob as wcglob

from headerset.resolution.globs import is_glob
from headerset.resolution.types import VisibilityClass


@dataclass
class HeadersetConfig:
    """
    Parsed config from a TOML file. Fields are `None` when not set in the config,
    allowing the merge logic to distinguish "not configured" from "explicitly set
    to an empty value".
    """

    # Extra headers (defaults that an explicit CLI flag replaces)
    extra_public_header: list[str] | None = None
    extra_private_header: list[str] | None = None
    extra_project_header: list[str] | None = None
    # Exclusions
    exclude_public_header: list[str] | None = None
    exclude_private_header: list[str] | None = None
    exclude_project_header: list[str] | None = None
    # Umbrella headers
    public_umbrella_header: str | None = None
    private_umbrella_header: str | None = None
    project_umbrella_header: str | None = None
    # Library identity
    install_name: str | None = None
    dynamiclib: bool | None = None

    def extra_headers(self) -> dict[VisibilityClass, list[str]]:
        """Configured extra headers per class; unset classes are absent."""
        configured = {
            VisibilityClass.public: self.extra_public_header,
            VisibilityClass.private: self.extra_private_header,
            VisibilityClass.project: self.extra_project_header,
        }
        return {k: v for k, v in configured.items() if v is not None}


# Config file search order (first match wins within each directory level)
_CONFIG_FILENAMES = [".headerset.toml", "headerset.toml", "pyproject.toml"]

_VALID_FIELDS = {f.name for f in fields(HeadersetConfig)}

# Declared types as strings (annotations are postponed)
_FIELD_TYPES = {f.name: str(f.type) for f in fields(HeadersetConfig)}

# Path lists resolved against the directory holding the config file
_PATH_FIELDS = (
    "extra_public_header",
    "extra_private_header",
    "extra_project_header",
    "exclude_public_header",
    "exclude_private_header",
    "exclude_project_header",
)


def find_config_file(start_dir: Path) -> Path | None:
    """
    Walk up from `start_dir` looking for a config file. Returns the first
    found, or `None`. Search order per directory: `.headerset.toml` >
    `headerset.toml` > `pyproject.toml` (only if it has `[tool.headerset]`).
    """
    current = start_dir.resolve()
    while True:
        for filename in _CONFIG_FILENAMES:
            candidate = current / filename
            if candidate.is_file():
                if filename == "pyproject.toml":
                    if _pyproject_has_headerset_section(candidate):
                        return candidate
                else:
                    return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


def _pyproject_has_headerset_section(path: Path) -> bool:
    try:
        data = tomllib.loads(path.read_text())
        return "headerset" in data.get("tool", {})
    except (tomllib.TOMLDecodeError, OSError):
        return False


def load_config(config_path: Path) -> HeadersetConfig:
    """
    Load a `HeadersetConfig` from a TOML file. Supports both standalone
    `headerset.toml` / `.headerset.toml` and `pyproject.toml` (extracts
    `[tool.headerset]`). Malformed TOML yields an empty config with a warning.
    Relative header paths are resolved against the config file's directory.
    """
    try:
        data = tomllib.loads(config_path.read_text())
    except tomllib.TOMLDecodeError as e:
        print(f"Warning: ignoring malformed config {config_path}: {e}", file=sys.stderr)
        return HeadersetConfig()

    if config_path.name == "pyproject.toml":
        data = data.get("tool", {}).get("headerset", {})

    config = _parse_config_data(data, config_path)
    _rebase_paths(config, config_path.parent)
    return config


def _rebase_path(path: str, base_dir: Path) -> str:
    """
    Resolve a relative config path against `base_dir`. Globs without a `/`
    match file names anywhere and are left alone.
    """
    if Path(path).is_absolute():
        return path
    if is_glob(path):
        if "/" not in path:
            return path
        return f"{wcglob.escape(str(base_dir))}/{path}"
    return str(base_dir / path)


def _rebase_paths(config: HeadersetConfig, base_dir: Path) -> None:
    for name in _PATH_FIELDS:
        paths = getattr(config, name)
        if paths is not None:
            setattr(config, name, [_rebase_path(p, base_dir) for p in paths])


def _has_declared_type(field_type: str, value: Any) -> bool:
    if field_type.startswith("list[str]"):
        items = cast(list[Any], value) if isinstance(value, list) else None
        return items is not None and all(isinstance(item, str) for item in items)
    if field_type.startswith("bool"):
        return isinstance(value, bool)
    return isinstance(value, str)


def _parse_config_data(data: dict[str, Any], source: Path | None = None) -> HeadersetConfig:
    """Parse a flat or sectioned TOML dict into HeadersetConfig."""
    # Flatten sections: [headers], [umbrella] etc. merge into top level
    flat: dict[str, Any] = {}
    for key, value in data.items():
        if isinstance(value, dict):
            for sub_key, sub_value in cast(dict[str, Any], value).items():
                flat[sub_key] = sub_value
        else:
            flat[key] = value

    mapped: dict[str, Any] = {}
    for key, value in flat.items():
        snake_key = key.replace("-", "_")
        where = f" in {source}" if source else ""
        if snake_key not in _VALID_FIELDS:
            print(f"Warning: unrecognized config key {key!r}{where}", file=sys.stderr)
        elif not _has_declared_type(_FIELD_TYPES[snake_key], value):
            expected = _FIELD_TYPES[snake_key].removesuffix(" | None")
            print(
                f"Warning: ignoring config key {key!r}{where}: expected {expected}",
                file=sys.stderr,
            )
        else:
            mapped[snake_key] = value

    return HeadersetConfig(**mapped)


_T = TypeVar("_T")

# Extra header lists are not merged here: they seed the builder's defaults.
_NOT_MERGED = {"extra_public_header", "extra_private_header", "extra_project_header"}


def merge_cli_with_config(
    cli_opts: _T,
    config: HeadersetConfig | None,
    explicit_flags: set[str],
) -> _T:
    """
    Merge CLI options with config file settings.

    Precedence: explicit CLI flags > config file > built-in defaults.
    """
    if config is None:
        return cli_opts

    for cfg_field in fields(HeadersetConfig):
        if cfg_field.name in _NOT_MERGED:
            continue
        cfg_value = getattr(config, cfg_field.name)
        if cfg_value is None:
            continue  # Not set in config

        if cfg_field.name in explicit_flags:
            continue

        if hasattr(cli_opts, cfg_field.name):
            setattr(cli_opts, cfg_field.name, cfg_value)

    return cli_opts
