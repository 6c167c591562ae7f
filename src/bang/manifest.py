"""Resolve the targets of a run from positionals or a project descriptor."""

from __future__ import annotations

import json
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import jsonschema
import yaml

from .core.context import RunContext
from .core.logging import log_event
from .errors import ScriptError
from .exit_codes import ERR_CONFIG, ERR_USAGE

DEFAULT_DESCRIPTOR = "package.json"
FIELD = "bang"
SCHEMA_PATH = Path(__file__).resolve().parent / "schemas" / "bang-field.schema.json"


@dataclass(frozen=True)
class Target:
    path: str
    command: str


def descriptor_path(ctx: RunContext) -> Path:
    if ctx.manifest_path is None:
        return ctx.cwd / DEFAULT_DESCRIPTOR
    return ctx.resolve(ctx.manifest_path)


def _parse(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    suffix = path.suffix.lower()
    if suffix in {".yaml", ".yml"}:
        return yaml.safe_load(text)
    if suffix == ".toml":
        return tomllib.loads(text)
    return json.loads(text)


def load_descriptor(path: Path) -> Any:
    try:
        return _parse(path)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        raise ScriptError(f"Could not read {path.name}", ERR_CONFIG, kind="manifest_unreadable") from exc


def _field(payload: Any, path: Path) -> Any:
    if not isinstance(payload, dict):
        return None
    if path.suffix.lower() == ".toml":
        tool = payload.get("tool")
        return tool.get(FIELD) if isinstance(tool, dict) else None
    return payload.get(FIELD)


def validate_field(config: Any, name: str) -> None:
    schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
    try:
        jsonschema.validate(config, schema)
    except jsonschema.ValidationError as exc:
        where = "/".join(str(part) for part in exc.absolute_path)
        detail = f"entry '{where}': {exc.message}" if where else exc.message
        raise ScriptError(
            f'Invalid "{FIELD}" configuration in {name}: {detail}', ERR_CONFIG, kind="manifest_invalid"
        ) from exc


def load_manifest_targets(ctx: RunContext) -> list[Target]:
    """Read the ``bang`` mapping from the run's descriptor.

    Every failure surfaces before any target file is opened.
    """
    path = descriptor_path(ctx)
    payload = load_descriptor(path)
    config = _field(payload, path)
    if config is None:
        raise ScriptError(
            f'No "{FIELD}" configuration found in {path.name}\n'
            f'Add a "{FIELD}" field with file -> executable mappings',
            ERR_CONFIG,
            kind="manifest_field_missing",
        )
    validate_field(config, path.name)
    log_event(ctx, "debug", "manifest", "load", descriptor=str(path), entries=len(config))
    return [Target(file_path, command) for file_path, command in config.items()]


def resolve_targets(ctx: RunContext, positional: list[str]) -> list[Target]:
    if len(positional) == 2:
        return [Target(positional[0], positional[1])]
    if not positional:
        return load_manifest_targets(ctx)
    raise ScriptError("Invalid number of arguments", ERR_USAGE, kind="usage")
