"""
kindstore: an in-process key-value store that tags each value as numeric or textual.

Public API re-exports from kernel/ and config.
"""
import logging

from .kernel.schema import Entry, Kind, NumericGrammar
from .kernel.store import InitializationError, KindStore, init_store
from .config import StoreConfig, config_from_env, load_config

# Silent unless the host application configures logging.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Schema
    "Entry",
    "Kind",
    "NumericGrammar",
    # Store
    "InitializationError",
    "KindStore",
    "init_store",
    # Config
    "StoreConfig",
    "config_from_env",
    "load_config",
]
