"""HTTP status codes and status code ranges used as response keys."""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import total_ordering

_INTEGER = re.compile(r"[+-]?[0-9]+")
_EXPECTING = "number between 100 and 999 (as string or integer) or a string that matches `\\dXX`"


@total_ordering
@dataclass(frozen=True)
class StatusCode:
    """A single status code such as ``404`` or a range such as ``4XX``.

    For a range, ``value`` holds the leading digit. Single codes sort
    before ranges; within each kind, ordering follows ``value``.
    """

    value: int
    is_range: bool = False

    @classmethod
    def parse(cls, value: int | str | StatusCode) -> StatusCode:
        """Parse an integer or a string such as ``"200"`` or ``"2XX"``."""
        if isinstance(value, StatusCode):
            return value
        if isinstance(value, bool) or not isinstance(value, (int, str)):
            raise TypeError(f"invalid status code {value!r}, expected {_EXPECTING}")
        if isinstance(value, int):
            return cls._code(value)

        if len(value) != 3:
            raise ValueError(f"invalid status code {value!r}, expected length 3")
        if _INTEGER.fullmatch(value):
            return cls._code(int(value))
        if not value.isascii():
            raise ValueError(
                f"invalid status code {value!r}, expected ascii, format `\\dXX`"
            )
        upper = value.upper()
        if upper[0].isdigit() and upper[1:] == "XX":
            return cls(int(upper[0]), is_range=True)
        raise ValueError(f"invalid status code {value!r}, expected format `\\dXX`")

    @classmethod
    def _code(cls, number: int) -> StatusCode:
        if 100 <= number < 1000:
            return cls(number)
        raise ValueError(f"invalid status code {number!r}, expected {_EXPECTING}")

    def __str__(self) -> str:
        return f"{self.value}XX" if self.is_range else str(self.value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, StatusCode):
            return NotImplemented
        return (self.is_range, self.value) < (other.is_range, other.value)