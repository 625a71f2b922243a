from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict


class Kind(str, Enum):
    NUMERIC = "numeric"
    TEXTUAL = "textual"
    # Returned for absent keys only, never stored.
    UNKNOWN = "unknown"


class NumericGrammar(str, Enum):
    """Which literals count as numbers when a value is written.

    INTEGER accepts signed base-10 integers that fit in 64 bits, so "3.5"
    is textual. FLOAT also accepts decimal and hex floating-point literals
    plus inf/nan, so "3.5" is numeric.
    """

    INTEGER = "integer"
    FLOAT = "float"


class Entry(BaseModel):
    """
    The stored record for one key.

    `raw` is the caller's text exactly as written. `number` holds the parsed
    value and is set only for NUMERIC entries.
    """

    raw: str
    kind: Kind
    number: Optional[Union[int, float]] = None

    model_config = ConfigDict(frozen=True)

    @property
    def is_numeric(self) -> bool:
        return self.kind is Kind.NUMERIC
