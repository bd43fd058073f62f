"""Config loading."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from downsync.contracts.config import DownsyncConfig
from downsync.contracts.exceptions import ConfigError

DEFAULT_CONFIG_NAME = "downsync.json"


def _resolve_path(value: Path, *, base_dir: Path) -> Path:
    if value.is_absolute():
        return value
    return (base_dir / value).resolve()


def find_config(start: Path | None = None) -> Path | None:
    candidate = (start or Path.cwd()) / DEFAULT_CONFIG_NAME
    return candidate if candidate.is_file() else None


def load_config(path: str | Path | None = None) -> DownsyncConfig:
    """Load and validate config from JSON, resolving ``root`` against the config directory.

    With no path, ``./downsync.json`` is used when present and built-in
    defaults otherwise.
    """
    if path is None:
        found = find_config()
        if found is None:
            return DownsyncConfig(root=Path.cwd())
        path = found

    config_path = Path(path).expanduser().resolve()
    try:
        raw_payload: Any = json.loads(config_path.read_text(encoding="utf-8"))
        parsed = DownsyncConfig.model_validate(raw_payload)
    except OSError as exc:
        raise ConfigError(f"failed reading config file: {config_path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in config file: {config_path}") from exc
    except ValidationError as exc:
        raise ConfigError(f"invalid config: {exc}") from exc

    return parsed.model_copy(update={"root": _resolve_path(parsed.root, base_dir=config_path.parent)})
