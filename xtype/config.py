"""Engine configuration with JSON/YAML loading."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Union

import yaml

logger = logging.getLogger(__name__)


@dataclass
class EngineConfig:
    """Behaviour switches for a Manager and the nodes it registers."""
    # Raise XTypeError subclasses instead of logging warnings
    strict: bool = False
    # Ignore render() on a node that already has a backing element
    guard_rerender: bool = True
    # Builtin tag table names ("svg", "html") or YAML paths installed on startup
    tag_tables: list[str] = field(default_factory=list)
    log_level: str = "WARNING"

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: dict) -> "EngineConfig":
        if not isinstance(d, dict):
            return cls()
        known = {f.name for f in cls.__dataclass_fields__.values()}
        unknown = set(d) - known
        if unknown:
            logger.warning("Ignoring unknown config keys: %s", ", ".join(sorted(unknown)))
        values = {k: v for k, v in d.items() if k in known}
        if "tag_tables" in values:
            tables = values["tag_tables"]
            values["tag_tables"] = [tables] if isinstance(tables, str) else list(tables or [])
        return cls(**values)


def read_document(path: Union[str, Path]) -> object:
    """Parse a ``.json``, ``.yaml`` or ``.yml`` file."""
    path = Path(path)
    text = path.read_text()
    if path.suffix == ".json":
        return json.loads(text)
    return yaml.safe_load(text)


def load_config(path: Union[str, Path, None]) -> EngineConfig:
    """Load an EngineConfig from disk, falling back to defaults."""
    if path is None or not Path(path).exists():
        return EngineConfig()
    try:
        data = read_document(path)
    except (json.JSONDecodeError, yaml.YAMLError, OSError) as e:
        logger.warning("Failed to load config %s: %s", path, e)
        return EngineConfig()
    return EngineConfig.from_dict(data or {})


def save_config(config: EngineConfig, path: Union[str, Path]) -> None:
    """Write ``config`` as JSON, replacing the file atomically."""
    path = Path(path)
    temp = path.with_suffix(".tmp")
    temp.write_text(json.dumps(config.to_dict(), indent=2))
    temp.replace(path)
