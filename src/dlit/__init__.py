"""dlit — dynamic literal values with strict, memoized coercion."""

from __future__ import annotations

from dlit.domain.literal import Coerced, Literal, must_new, new, new_string
from dlit.domain.types import Kind
from dlit.errors import DlitError, InvalidKindError
from dlit.log import disable_logging, enable_logging

__version__ = "0.1.0"

__all__ = [
    "Coerced",
    "DlitError",
    "InvalidKindError",
    "Kind",
    "Literal",
    "__version__",
    "disable_logging",
    "enable_logging",
    "must_new",
    "new",
    "new_string",
]
