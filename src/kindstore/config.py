"""
Store configuration.

A StoreConfig can be built directly, read from a YAML file, or taken from
the environment:

    KINDSTORE_NUMERIC_GRAMMAR   "integer" (default) or "float"
    KINDSTORE_LOGGER            logger name used when none is injected
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict

from .kernel.schema import NumericGrammar

DEFAULT_LOGGER_NAME = "kindstore"

ENV_NUMERIC_GRAMMAR = "KINDSTORE_NUMERIC_GRAMMAR"
ENV_LOGGER = "KINDSTORE_LOGGER"


class StoreConfig(BaseModel):
    numeric_grammar: NumericGrammar = NumericGrammar.INTEGER
    logger_name: str = DEFAULT_LOGGER_NAME

    # Misspelled keys must not fall back to defaults silently.
    model_config = ConfigDict(extra="forbid")


def load_config(path: Union[str, Path]) -> StoreConfig:
    """Load a StoreConfig from a YAML mapping.

    An empty document yields the defaults. Raises OSError if the file cannot
    be read, yaml.YAMLError if it is not valid YAML, and ValueError if the
    document is not a mapping or holds invalid values.
    """
    text = Path(path).read_text(encoding="utf-8")
    data = yaml.safe_load(text)
    if data is None:
        return StoreConfig()
    if not isinstance(data, dict):
        raise ValueError(f"Config {path} must be a mapping, got {type(data).__name__}")
    bad_keys = [key for key in data if not isinstance(key, str)]
    if bad_keys:
        raise ValueError(f"Config {path} has non-string keys: {bad_keys!r}")
    return StoreConfig.model_validate(data)


def config_from_env(environ: Optional[Mapping[str, str]] = None) -> StoreConfig:
    """Build a StoreConfig from environment variables; unset ones keep defaults."""
    env = os.environ if environ is None else environ
    values = {}
    grammar = env.get(ENV_NUMERIC_GRAMMAR)
    if grammar:
        values["numeric_grammar"] = grammar.strip().lower()
    logger_name = env.get(ENV_LOGGER)
    if logger_name:
        values["logger_name"] = logger_name
    return StoreConfig.model_validate(values)
