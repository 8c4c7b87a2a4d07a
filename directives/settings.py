# directives/settings.py
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict

import commentjson
from dotenv import load_dotenv

from directives.entities import Configuration

load_dotenv()

logger = logging.getLogger("directive_composer")


def _load_defaults_file(path: str | None) -> Dict[str, Any]:
    """
    Load default Configuration fields from a JSON-with-comments file.
    No path means no file defaults; a path that does not exist fails fast.
    """
    if not path:
        return {}

    cfg_path = Path(path)
    if not cfg_path.exists():
        raise FileNotFoundError(
            f"Directives config file not found at '{cfg_path}'. "
        )

    with cfg_path.open("r", encoding="utf-8") as f:
        data = commentjson.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Directives config at '{cfg_path}' must be a JSON object")

    return data


def load_default_configuration() -> Configuration:
    """
    Caller-side defaults for composition requests.

    DIRECTIVES_CONFIG_PATH     -> JSON-with-comments file of Configuration fields
    DIRECTIVES_WORKING_DIRECTORY -> overrides the working directory from the file
    """
    data = _load_defaults_file(os.getenv("DIRECTIVES_CONFIG_PATH"))

    cwd = os.getenv("DIRECTIVES_WORKING_DIRECTORY")
    if cwd:
        data["working_directory"] = cwd
        data.pop("workingDirectory", None)

    config = Configuration.model_validate(data)
    logger.info(f"Loaded default directive configuration: {config.model_dump()}")
    return config


def merge_configuration(defaults: Configuration, overrides: Configuration) -> Configuration:
    """
    Fields explicitly set on overrides win; everything else comes from defaults.
    An empty working directory or vocabulary counts as not set.
    """
    merged = defaults.model_dump()
    for key, value in overrides.model_dump(exclude_unset=True).items():
        if value == "" or value == ():
            continue
        merged[key] = value
    return Configuration.model_validate(merged)
