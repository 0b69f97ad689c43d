"""tmpsweep configuration file.

This module provides the configuration model and I/O functions for the
optional ``config.toml``. Every setting has a default, so a missing
file simply yields ``SweepConfig()``.

Configuration is stored in ~/.config/tmpsweep/config.toml
"""

import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from tmpsweep.core.paths import DEFAULT_TMP_ROOT, get_config_path
from tmpsweep.sweep.errors import ConfigurationError
from tmpsweep.sweep.rules import MatchRules


class SweepConfig(BaseModel):
    """Settings for a sweep run.

    Attributes:
        tmp_root: Directory whose children are swept.
        du_timeout_seconds: Limit for each ``du`` invocation (None = no limit).
        rules: Name rules. Keys left out of the ``[rules]`` table keep
            their built-in defaults.
    """

    model_config = ConfigDict(extra="forbid")

    tmp_root: Annotated[
        str,
        Field(min_length=1, description="Directory to sweep"),
    ] = DEFAULT_TMP_ROOT
    du_timeout_seconds: Annotated[
        float | None,
        Field(gt=0, description="Timeout for each du call in seconds"),
    ] = None
    rules: Annotated[
        MatchRules,
        Field(default_factory=MatchRules, description="Name rules"),
    ]


def load_config(path: Path | None = None) -> SweepConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated SweepConfig. Defaults if the file does not exist.

    Raises:
        ConfigurationError: If the file cannot be read, is not valid TOML,
            or does not match the schema.
    """
    config_path = path or get_config_path()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return SweepConfig()
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Failed to read config {config_path}: {e}") from e

    try:
        return SweepConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid config content in {config_path}: {e}") from e


def save_config(config: SweepConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The SweepConfig to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigurationError: If the file cannot be written.
    """
    config_path = path or get_config_path()
    data = config.model_dump(mode="json", exclude_none=True)

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(tmp_path, config_path)
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigurationError(f"Failed to write config {config_path}: {e}") from e

    return config_path
