"""Literal kinds.

A Literal holds exactly one of these representations, fixed at
construction.
"""

from __future__ import annotations

from enum import StrEnum


class Kind(StrEnum):
    """Stored representation of a Literal."""

    INT = "int"
    FLOAT = "float"
    STRING = "string"
    BOOL = "bool"
    ERROR = "error"
