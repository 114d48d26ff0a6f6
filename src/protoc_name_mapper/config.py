from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet

# Words rendered fully upper-case by the camel-case transform.
DEFAULT_ABBREVIATIONS: FrozenSet[str] = frozenset({"url", "http", "https", "id"})


@dataclass(frozen=True)
class NamingConfig:
    """Settings that influence generated identifiers."""

    abbreviations: FrozenSet[str] = DEFAULT_ABBREVIATIONS


DEFAULT_CONFIG = NamingConfig()
