from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Dict, Optional, Union

import yaml

from ..config import DEFAULT_LOGGER_NAME, StoreConfig, config_from_env, load_config
from .classify import classify
from .schema import Entry, Kind, NumericGrammar

# Type alias for write hooks
# Signature: (key, entry) -> None
WriteHook = Callable[[str, Entry], None]


class InitializationError(Exception):
    """A store could not be constructed; the store must not be used."""

    pass


class KindStore:
    """
    In-memory map of string keys to string values, tagged with each value's kind.

    Not synchronized: use from one thread or guard access externally.
    """

    def __init__(
        self,
        numeric_grammar: NumericGrammar = NumericGrammar.INTEGER,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._grammar = NumericGrammar(numeric_grammar)
        self._entries: Dict[str, Entry] = {}
        self._on_write: list[WriteHook] = []
        self._log = logger or logging.getLogger(DEFAULT_LOGGER_NAME)
        self._log.info("store initialized (numeric_grammar=%s)", self._grammar.value)

    @property
    def numeric_grammar(self) -> NumericGrammar:
        return self._grammar

    def add_write_hook(self, callback: WriteHook) -> None:
        """
        Register a callback to be invoked after every set.

        The callback receives (key, entry) once the new entry is stored.
        Hooks run in registration order; an exception from a hook
        propagates out of set.
        """
        self._on_write.append(callback)

    def remove_write_hook(self, callback: WriteHook) -> None:
        """Remove a previously registered write hook."""
        self._on_write.remove(callback)

    def _fire_write_hooks(self, key: str, entry: Entry) -> None:
        for hook in self._on_write:
            hook(key, entry)

    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous entry."""
        kind, number = classify(value, self._grammar)
        entry = Entry(raw=value, kind=kind, number=number)
        self._entries[key] = entry
        self._log.debug("set %r (%s)", key, kind.value)
        self._fire_write_hooks(key, entry)

    def get(self, key: str) -> Optional[str]:
        """Return the raw value for key, or None if it was never set."""
        self._log.debug("get %r", key)
        entry = self._entries.get(key)
        if entry is None:
            return None
        return entry.raw

    def get_kind(self, key: str) -> Kind:
        """Return the kind of the value under key, or Kind.UNKNOWN if absent."""
        self._log.debug("get_kind %r", key)
        entry = self._entries.get(key)
        if entry is None:
            return Kind.UNKNOWN
        return entry.kind

    def entry(self, key: str) -> Optional[Entry]:
        """Return the full stored record for key, including its parsed number."""
        return self._entries.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)


def init_store(
    config: Union[StoreConfig, str, Path, None] = None,
    *,
    logger: Optional[logging.Logger] = None,
) -> KindStore:
    """Create an empty store.

    `config` may be a StoreConfig, a path to a YAML config file, or None to
    read the environment. An injected `logger` takes precedence over
    `config.logger_name`.

    Raises InitializationError if the configuration cannot be loaded or
    does not validate.
    """
    try:
        if config is None:
            config = config_from_env()
        elif isinstance(config, (str, Path)):
            config = load_config(config)
    except (OSError, yaml.YAMLError, ValueError) as e:
        raise InitializationError(f"Failed to load store config: {e}") from e

    if logger is None:
        logger = logging.getLogger(config.logger_name)
    return KindStore(numeric_grammar=config.numeric_grammar, logger=logger)
