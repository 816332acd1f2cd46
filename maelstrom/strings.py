"""String interning and conversion of loose values to element types."""

from __future__ import annotations

import numpy as np

from maelstrom.types import dtype_of


class StringIndex:
    """Assigns each distinct string a stable integer code, starting at zero."""

    def __init__(self, invalid_str, invalid_code):
        self.invalid_str = invalid_str
        self.invalid_code = invalid_code
        self._strings: list[str] = []
        self._codes: dict[str, int] = {}

    def encode(self, text):
        """Return the code of a string, assigning a new one if unseen."""
        if not isinstance(text, str):
            raise TypeError(f"expected a string, got {type(text).__name__}")
        code = self._codes.get(text)
        if code is None:
            code = len(self._strings)
            self._codes[text] = code
            self._strings.append(text)
        return code

    def decode(self, code):
        """Return the string for a code."""
        if code < 0 or code >= len(self._strings):
            raise ValueError(f"No string exists with given representation: {code}")
        return self._strings[code]

    def __len__(self):
        return len(self._strings)

    def __contains__(self, text):
        return text in self._codes


def safe_cast(value, dtype):
    """Convert a scalar to the given element type, or encode it with a StringIndex."""
    if isinstance(dtype, StringIndex):
        return dtype.encode(value)
    dt = dtype_of(dtype)
    try:
        return np.asarray(value).astype(dt)[()]
    except (ValueError, TypeError, OverflowError) as err:
        raise ValueError(f"cannot convert {value!r} to {dt}") from err


def _matches(value, dt):
    if isinstance(value, (bool, np.bool_)):
        return False
    if dt.kind == "f":
        return isinstance(value, (float, np.floating))
    if not isinstance(value, (int, np.integer)):
        return False
    limits = np.iinfo(dt)
    return int(limits.min) <= int(value) <= int(limits.max)


def values_as(values, dtype):
    """Collect values into an array of the given type, requiring each to be of that kind."""
    dt = dtype_of(dtype)
    items = list(values)
    if not all(_matches(item, dt) for item in items):
        raise TypeError(
            "1 or more elements of the given vector of anys can't be converted "
            "to the specified data type"
        )
    return np.array(items, dtype=dt)