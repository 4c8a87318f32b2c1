"""Literal — an immutable value with lazy, memoized coercions.

A Literal stores exactly one representation (int64, float64, text, bool
or an error) chosen at construction.  The ``as_int`` / ``as_float`` /
``as_bool`` accessors convert on demand and report failure through the
``ok`` flag of the returned :class:`Coerced` pair, never by raising.

INVARIANT: ``kind`` and ``value`` never change after construction.
Each coercion is computed at most once per instance; the result is a
pure function of the stored value.
"""

from __future__ import annotations

import logging
import numbers
import threading
from collections.abc import Callable
from typing import Any, Generic, NamedTuple, TypeVar

from dlit.domain.parsing import (
    fits_int64,
    float_to_int,
    format_float,
    parse_bool,
    parse_float,
    parse_int,
)
from dlit.domain.types import Kind
from dlit.errors import InvalidKindError

logger = logging.getLogger(__name__)

T = TypeVar("T")

_UNSET: Any = object()


class Coerced(NamedTuple, Generic[T]):
    """Result of a coercion: the converted value and whether it is valid."""

    value: T
    ok: bool


_NO_INT: Coerced[int] = Coerced(0, False)
_NO_FLOAT: Coerced[float] = Coerced(0.0, False)
_NO_BOOL: Coerced[bool] = Coerced(False, False)


class Literal:
    """Immutable multi-representation value.

    Build instances with :func:`new`, :func:`new_string` or
    :func:`must_new` rather than calling the class directly.
    """

    __slots__ = ("_kind", "_value", "_lock", "_int", "_float", "_bool")

    def __init__(self, kind: Kind, value: Any) -> None:
        self._kind = kind
        self._value = value
        self._lock = threading.Lock()
        self._int: Coerced[int] = _UNSET
        self._float: Coerced[float] = _UNSET
        self._bool: Coerced[bool] = _UNSET

    @property
    def kind(self) -> Kind:
        """The stored representation."""
        return self._kind

    @property
    def value(self) -> Any:
        """The stored value, typed according to :attr:`kind`."""
        return self._value

    # ── Coercions ─────────────────────────────────────────────────────

    def as_int(self) -> Coerced[int]:
        """Exact int64 form of the value, if one exists."""
        if self._int is _UNSET:
            self._fill("_int", self._compute_int)
        return self._int

    def as_float(self) -> Coerced[float]:
        """Float64 form of the value, if one exists."""
        if self._float is _UNSET:
            self._fill("_float", self._compute_float)
        return self._float

    def as_bool(self) -> Coerced[bool]:
        """Boolean form of the value; only 0/1 and the bool tokens qualify."""
        if self._bool is _UNSET:
            self._fill("_bool", self._compute_bool)
        return self._bool

    def as_str(self) -> str:
        """Canonical text rendering. Never fails."""
        match self._kind:
            case Kind.INT:
                return str(self._value)
            case Kind.FLOAT:
                return format_float(self._value)
            case Kind.STRING:
                return self._value
            case Kind.BOOL:
                return "true" if self._value else "false"
            case _:
                return str(self._value)

    def err(self) -> Exception | None:
        """The stored error for Error-kind literals, otherwise None."""
        if self._kind is Kind.ERROR:
            return self._value
        return None

    def __str__(self) -> str:
        return self.as_str()

    def __repr__(self) -> str:
        return f"Literal(kind={self._kind.value}, value={self._value!r})"

    # ── Internals ─────────────────────────────────────────────────────

    def _fill(self, slot: str, compute: Callable[[], Coerced[Any]]) -> None:
        with self._lock:
            if getattr(self, slot) is _UNSET:
                setattr(self, slot, compute())

    def _compute_int(self) -> Coerced[int]:
        match self._kind:
            case Kind.INT:
                return Coerced(self._value, True)
            case Kind.FLOAT:
                result = float_to_int(self._value)
            case Kind.STRING:
                result = parse_int(self._value)
            case _:
                return _NO_INT
        if result is None:
            return _NO_INT
        return Coerced(result, True)

    def _compute_float(self) -> Coerced[float]:
        match self._kind:
            case Kind.INT:
                return Coerced(float(self._value), True)
            case Kind.FLOAT:
                return Coerced(self._value, True)
            case Kind.STRING:
                result = parse_float(self._value)
                if result is None:
                    return _NO_FLOAT
                return Coerced(result, True)
            case _:
                return _NO_FLOAT

    def _compute_bool(self) -> Coerced[bool]:
        match self._kind:
            case Kind.BOOL:
                return Coerced(self._value, True)
            case Kind.INT | Kind.FLOAT:
                if self._value == 0:
                    return Coerced(False, True)
                if self._value == 1:
                    return Coerced(True, True)
                return _NO_BOOL
            case Kind.STRING:
                result = parse_bool(self._value)
                if result is None:
                    return _NO_BOOL
                return Coerced(result, True)
            case _:
                return _NO_BOOL


# ── Construction ──────────────────────────────────────────────────────


def _classify(value: Any) -> tuple[Kind, Any]:
    """Map a Python input onto a kind and its stored value.

    Raises:
        InvalidKindError: If the input's category cannot be held.
    """
    if isinstance(value, bool):
        return Kind.BOOL, value
    if isinstance(value, numbers.Integral):
        as_int = int(value)
        if not fits_int64(as_int):
            raise InvalidKindError(type(value).__name__)
        return Kind.INT, as_int
    if isinstance(value, float):
        return Kind.FLOAT, float(value)
    if isinstance(value, numbers.Real) and not isinstance(value, numbers.Rational):
        # Narrower binary floats (e.g. 32-bit array scalars) widen exactly.
        return Kind.FLOAT, float(value)
    if isinstance(value, str):
        return Kind.STRING, str(value)
    if isinstance(value, Exception):
        return Kind.ERROR, value
    raise InvalidKindError(type(value).__name__)


def new(value: Any) -> tuple[Literal, InvalidKindError | None]:
    """Create a Literal from *value*.

    Returns ``(literal, None)`` on success.  For unsupported inputs the
    literal is Error-kind holding an :class:`InvalidKindError`, and the
    same error is returned as the second element.
    """
    try:
        kind, stored = _classify(value)
    except InvalidKindError as exc:
        logger.debug("Rejected literal input of kind %s", exc.kind_name)
        return Literal(Kind.ERROR, exc), exc
    return Literal(kind, stored), None


def new_string(text: str) -> Literal:
    """Create a String-kind Literal holding *text* verbatim."""
    return Literal(Kind.STRING, text)


def must_new(value: Any) -> Literal:
    """Create a Literal, raising if *value* is unsupported.

    Use only where an unsupported input is a programming error.

    Raises:
        InvalidKindError: If *value*'s category cannot be held.
    """
    literal, err = new(value)
    if err is not None:
        raise err
    return literal
