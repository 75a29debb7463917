"""Configuration for Hugo Sync.

Settings mirror the Obsidian plugin's settings. They can be written in
snake_case YAML or taken straight from the plugin's camelCase data.json.
"""

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import inflection
import yaml

from hugo_sync.core.models import ConfigError

DEFAULT_IMAGE_SEARCH_PATHS = ["assets", "images", "attachments", "media", "files"]

_LIST_FIELDS = ("filtered_headers", "image_search_paths")


@dataclass
class SyncConfig:
    """Settings for converting notes into a Hugo site."""
    hugo_path: str = ""
    content_path: str = "content/posts"
    static_path: str = "static"
    image_sub_path: str = "images"
    filtered_headers: List[str] = field(default_factory=list)
    image_search_paths: List[str] = field(
        default_factory=lambda: list(DEFAULT_IMAGE_SEARCH_PATHS)
    )

    @property
    def content_dir(self) -> Path:
        return Path(self.hugo_path) / self.content_path

    def image_dir(self, document_base_name: str) -> Path:
        """Destination directory for the images of one document."""
        return Path(self.hugo_path) / self.static_path / self.image_sub_path / document_base_name

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SyncConfig":
        """Build a config from a settings mapping.

        Keys may be snake_case or camelCase. Unknown keys are ignored.
        List settings may also be given as one entry per line.
        """
        known = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}

        for key, value in data.items():
            name = inflection.underscore(str(key))
            if name not in known or value is None:
                continue
            if name in _LIST_FIELDS:
                value = _as_list(value)
            else:
                value = str(value)
            kwargs[name] = value

        return cls(**kwargs)


def _as_list(value: Union[str, List[Any]]) -> List[str]:
    if isinstance(value, str):
        value = value.split('\n')
    return [str(v).strip() for v in value if str(v).strip()]


def load_config(path: Optional[Union[str, Path]] = None, **overrides: Any) -> SyncConfig:
    """Load settings from a YAML (or JSON) file.

    Args:
        path: Settings file. When None, defaults are used.
        overrides: Settings applied on top of the file, skipped when None

    Returns:
        SyncConfig
    """
    data: Dict[str, Any] = {}

    if path is not None:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                loaded = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to load config {path}: {e}") from e

        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ConfigError(f"Config {path} must contain a mapping")
        data.update(loaded)

    data.update({k: v for k, v in overrides.items() if v is not None})
    return SyncConfig.from_dict(data)
