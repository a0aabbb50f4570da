from __future__ import annotations
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Optional
import logging
import yaml

from warp_client.core.enums import OutputFormat
from warp_client.core.types import RunOptions

logger = logging.getLogger(__name__)

DEFAULT_BINARY = "warp"

_LIST_FIELDS = ("share", "mcp_servers")

@dataclass(frozen=True)
class ClientConfig:
    binary: str = DEFAULT_BINARY
    defaults: RunOptions = field(default_factory=RunOptions)
    log_level: str = "INFO"
    log_file: Optional[str] = None

def _parse_defaults(raw: dict[str, Any], config_path: Path) -> RunOptions:
    known = {f.name for f in fields(RunOptions)}
    unknown = set(raw.keys()) - known
    if unknown:
        raise ValueError(f"Unknown default option(s) in {config_path}: {', '.join(sorted(unknown))}")

    values = dict(raw)
    for name in _LIST_FIELDS:
        items = values.get(name)
        if items is None:
            continue
        if not isinstance(items, list) or not all(isinstance(item, str) for item in items):
            raise ValueError(f"Default option '{name}' must be a list of strings.")

    if values.get("output_format") is not None:
        try:
            values["output_format"] = OutputFormat(values["output_format"])
        except ValueError:
            allowed = ", ".join(f.value for f in OutputFormat)
            raise ValueError(f"Default option 'output_format' must be one of: {allowed}")

    if values.get("cwd") is not None:
        cwd = Path(values["cwd"])
        if not cwd.is_absolute():
            # Resolve relative to config file location
            cwd = config_path.parent / cwd
        values["cwd"] = str(cwd)

    return RunOptions(**values)

def load_config(config_path: str) -> ClientConfig:
    """
    Loads client configuration from a YAML file.

    Args:
        config_path (str): Path to the configuration file.

    Returns:
        ClientConfig: The parsed configuration.

    Raises:
        ValueError: If the file is missing or contains invalid settings.
    """
    path = Path(config_path)
    if not path.exists():
        raise ValueError(f"Config file not found: {path}")
    with open(path, "r") as file:
        raw = yaml.safe_load(file) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Config file {path} must contain a mapping.")

    defaults = raw.get("defaults") or {}
    if not isinstance(defaults, dict):
        raise ValueError("'defaults' must be a mapping.")
    logging_section = raw.get("logging") or {}

    config = ClientConfig(
        binary=raw.get("binary", DEFAULT_BINARY),
        defaults=_parse_defaults(defaults, path),
        log_level=logging_section.get("level", "INFO"),
        log_file=logging_section.get("file"),
    )
    logger.info(f"Loaded client configuration from {path}", extra={"binary": config.binary})
    return config
