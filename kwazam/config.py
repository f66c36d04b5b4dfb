from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml


class ConfigError(ValueError):
    pass


@dataclass
class KwazamConfig:
    save_dir: str = "savefiles"
    save_suffix: str = ".txt"
    log_level: str = "INFO"
    log_file: Optional[str] = None
    show_history: int = 10

    def resolve_save_path(self, name: Union[str, Path]) -> Path:
        """Bare names go into ``save_dir``; anything with a directory part is used as given."""
        path = Path(name)
        if not path.suffix:
            path = path.with_suffix(self.save_suffix)
        if path.parent == Path("."):
            path = Path(self.save_dir) / path
        return path

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "KwazamConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")
        return cls(**data)


def load_yaml_config(path_str: Union[str, Path]) -> Dict[str, Any]:
    path = Path(path_str)
    if not path.exists():
        return {}
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping.")
    return data


def load_config(path_str: Optional[Union[str, Path]] = None) -> KwazamConfig:
    if path_str is None:
        return KwazamConfig()
    return KwazamConfig.from_dict(load_yaml_config(path_str))
