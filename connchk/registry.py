from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import tomli
import yaml
from pydantic import ValidationError

from connchk.models import NetworkResources

logger = logging.getLogger(__name__)


class ConfigError(RuntimeError):
    pass


def _parse(path: Path, text: str) -> Any:
    suffix = path.suffix.lower()
    if suffix == ".toml":
        return tomli.loads(text)
    if suffix in (".yml", ".yaml"):
        return yaml.safe_load(text)
    if suffix == ".json":
        return json.loads(text)
    raise ConfigError(f"Unsupported config format {suffix or '(none)'} for {path}; use .toml, .yaml or .json")


def load_resources(path: str | Path) -> NetworkResources:
    path = Path(path).expanduser()
    try:
        exists = path.is_file()
    except OSError as exc:
        raise ConfigError(f"Unable to read {path}: {exc}") from exc
    if not exists:
        raise ConfigError(f"Missing config file at {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Unable to read {path}: {exc}") from exc

    try:
        data = _parse(path, text)
    except (tomli.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Malformed config {path}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Malformed config {path}: top level must be a table/mapping")

    try:
        resources = NetworkResources.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config {path}:\n{exc}") from exc

    logger.debug("loaded %d targets from %s", len(resources.target), path)
    return resources
