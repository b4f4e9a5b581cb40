"""Generator settings, optionally read from a YAML file.

Example config.yaml:
    indent_width: 2
    java_inline_utilities: true
"""

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigError

CONFIG_ENV_VAR = "BLOCKCODE_CONFIG"


class GeneratorConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    indent_width: int = Field(4, ge=1)
    # Legacy JVM output: utility methods are written where they are used
    # instead of once at class level.
    java_inline_utilities: bool = False

    @property
    def indent(self) -> str:
        return " " * self.indent_width


def load_config(path: str | Path) -> GeneratorConfig:
    path = Path(path)
    try:
        data = yaml.safe_load(path.read_text())
    except OSError as e:
        raise ConfigError(f"{path}: cannot read config: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"{path}: malformed config: {e}") from e

    if data is None:
        return GeneratorConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: config must be a mapping")
    try:
        return GeneratorConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"{path}: invalid config: {e}") from e


def config_from_env() -> GeneratorConfig:
    """Config named by $BLOCKCODE_CONFIG, or the defaults when unset."""
    path = os.environ.get(CONFIG_ENV_VAR)
    if not path:
        return GeneratorConfig()
    return load_config(path)
