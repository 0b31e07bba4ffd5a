"""
Type-safe YAML loader for oomi settings files.
Provides a validated ruamel.yaml instance with proper type hints.
"""

from pathlib import Path
from typing import Protocol, TextIO, Union, cast

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from oomi_generator.core.errors import ValidationError

# Recursive type for nested YAML structures
ConfigValue = Union[str, int, float, bool, None, 'ConfigDict', list['ConfigValue']]
ConfigDict = dict[str, ConfigValue]


class YAMLLoader(Protocol):
    """Protocol for the subset of the ruamel YAML interface we use."""

    def load(self, stream: TextIO) -> ConfigValue:
        """Load YAML from stream."""
        ...


def _create_yaml_loader() -> YAMLLoader:
    """Create a safe ruamel.yaml loader (plain dicts, lists and scalars only)."""
    yaml_obj = YAML(typ="safe", pure=True)
    if not callable(getattr(yaml_obj, "load", None)):
        raise TypeError("YAML.load is not callable")
    return cast(YAMLLoader, yaml_obj)


yaml: YAMLLoader = _create_yaml_loader()


def load_yaml_file(file_path: Path) -> ConfigDict:
    """Load a YAML mapping from ``file_path``.

    An empty file yields an empty dict.

    Raises:
        FileNotFoundError: If file does not exist
        ValidationError: If the file is not valid YAML or not a mapping
    """
    if not file_path.exists():
        raise FileNotFoundError(f"YAML file not found: {file_path}")

    try:
        with file_path.open(encoding="utf-8") as f:
            raw: ConfigValue = yaml.load(f)
    except YAMLError as exc:
        raise ValidationError(f"Invalid YAML in {file_path}: {exc}") from exc

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ValidationError(f"Expected a mapping at the top of {file_path}")
    return cast(ConfigDict, raw)
