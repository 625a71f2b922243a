"""
Kernel: the store and the data it holds.

- schema: Kind, NumericGrammar and Entry types
- classify: numeric literal grammars
- store: KindStore and its initializer
"""
from .schema import Entry, Kind, NumericGrammar
from .classify import classify, parse_float, parse_integer
from .store import InitializationError, KindStore, WriteHook, init_store

__all__ = [
    # Schema
    "Entry",
    "Kind",
    "NumericGrammar",
    # Classify
    "classify",
    "parse_float",
    "parse_integer",
    # Store
    "InitializationError",
    "KindStore",
    "WriteHook",
    "init_store",
]
