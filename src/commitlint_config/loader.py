import json
import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .config import LintConfiguration
from .converters import config_file_to_configuration, configuration_to_config_file
from .errors import ConfigurationError
from .models import LintConfigFile

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = Path(".commitlint.toml")
TOOL_SECTION = "commitlint"


def load_config(path: Path = DEFAULT_CONFIG_FILE) -> LintConfiguration:
    """Load a configuration from a .toml or .json file.

    TOML files may keep the keys at the top level or under
    ``[tool.commitlint]`` (so the policy can live in pyproject.toml).
    Every failure surfaces as ConfigurationError naming the file.
    """
    path = Path(path)
    if not path.is_file():
        raise ConfigurationError("Configuration file not found", source=str(path))

    logger.debug("Loading commit lint configuration from %s", path)
    data = _read_data(path)

    try:
        model = LintConfigFile.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration:\n{e}", source=str(path)) from e

    try:
        return config_file_to_configuration(model)
    except ConfigurationError as e:
        raise ConfigurationError(str(e), source=str(path)) from e


def dumps_config(config: LintConfiguration) -> str:
    """Render a configuration as the JSON text dump_config writes"""
    return configuration_to_config_file(config).model_dump_json(indent=2, exclude_none=True)


def dump_config(config: LintConfiguration, path: Path):
    """Write a configuration as JSON; load_config reads it back"""
    Path(path).write_text(dumps_config(config) + "\n", encoding="utf-8")


def _read_data(path: Path) -> dict[str, Any]:
    try:
        if path.suffix == ".json":
            data = json.loads(path.read_text(encoding="utf-8"))
        else:
            with open(path, "rb") as f:
                data = tomllib.load(f)
            tool = data.get("tool")
            if isinstance(tool, dict) and TOOL_SECTION in tool:
                data = tool[TOOL_SECTION]
    except (tomllib.TOMLDecodeError, json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Malformed configuration file: {e}", source=str(path)) from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read configuration file: {e}", source=str(path)) from e

    if not isinstance(data, dict):
        raise ConfigurationError("Configuration must be a table/object", source=str(path))
    return data
