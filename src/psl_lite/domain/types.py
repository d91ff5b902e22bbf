"""Shared type aliases used across the domain."""
from __future__ import annotations

from typing import TypeAlias

Label: TypeAlias = str
LabelSequence: TypeAlias = tuple[str, ...]  # most-significant label last
Hostname: TypeAlias = str  # already normalized
