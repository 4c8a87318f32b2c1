"""Exception types raised or carried by dlit.

Construction failures are reported through :func:`dlit.new`'s return
value and stored inside an Error-kind literal; only :func:`dlit.must_new`
raises them.
"""

from __future__ import annotations


class DlitError(Exception):
    """Base class for all dlit errors."""


class InvalidKindError(DlitError):
    """Input whose category cannot be held by a Literal.

    Attributes:
        kind_name: Name of the rejected input category (e.g. ``"complex"``).
    """

    def __init__(self, kind_name: str) -> None:
        super().__init__(f"invalid kind: {kind_name}")
        self.kind_name = kind_name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InvalidKindError):
            return NotImplemented
        return self.kind_name == other.kind_name

    def __hash__(self) -> int:
        return hash((InvalidKindError, self.kind_name))

    def __reduce__(self) -> tuple[type[InvalidKindError], tuple[str]]:
        return (InvalidKindError, (self.kind_name,))
