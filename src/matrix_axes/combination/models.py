"""Axis definitions consumed by :class:`Combination`.

Combinations only need ``name``, ``values``, ``size()`` and ``index_of()``
from an axis, so any object exposing those works. The dataclasses below are
the reference implementations used by this package and its tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from math import prod
from typing import Any, Iterable, Iterator, Mapping, Sequence

from .errors import CombinationError, CombinationErrorCode

_RESERVED_NAME_CHARS = (",", "=")


@dataclass(frozen=True)
class Axis:
    """Named dimension with an ordered set of distinct string values."""

    name: str
    values: Sequence[str]

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise CombinationError(
                CombinationErrorCode.INVALID_ARGUMENT,
                ctx={"error": "axis name must be non-empty string", "name": self.name},
            )
        for ch in _RESERVED_NAME_CHARS:
            if ch in self.name:
                raise CombinationError(
                    CombinationErrorCode.INVALID_ARGUMENT,
                    ctx={"error": f"axis name must not contain {ch!r}", "name": self.name},
                )

        values = tuple(str(v) for v in self.values)
        seen: set[str] = set()
        for value in values:
            if value in seen:
                raise CombinationError(
                    CombinationErrorCode.INVALID_ARGUMENT,
                    ctx={"error": "duplicate axis value", "axis": self.name, "value": value},
                )
            seen.add(value)
        object.__setattr__(self, "values", values)

    def size(self) -> int:
        return len(self.values)

    def index_of(self, value: Any) -> int:
        """Position of ``value`` in this axis, or ``-1`` when absent."""
        try:
            return self.values.index(value)
        except ValueError:
            return -1

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    def __contains__(self, value: object) -> bool:
        return value in self.values


@dataclass(frozen=True)
class AxisList:
    """Ordered axes with unique names; iteration order defines index digits."""

    axes: Sequence[Axis] = ()

    def __post_init__(self) -> None:
        axes = tuple(self.axes)
        names: set[str] = set()
        for axis in axes:
            if axis.name in names:
                raise CombinationError(
                    CombinationErrorCode.INVALID_ARGUMENT,
                    ctx={"error": "duplicate axis name", "axis": axis.name},
                )
            names.add(axis.name)
        object.__setattr__(self, "axes", axes)

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Iterable[Any]]) -> "AxisList":
        """Build from ``{name: values}``, keeping the mapping's order."""
        if not isinstance(payload, Mapping):
            raise CombinationError(
                CombinationErrorCode.INVALID_ARGUMENT,
                ctx={"error": "axes must be mapping"},
            )
        axes = []
        for name, values in payload.items():
            if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
                raise CombinationError(
                    CombinationErrorCode.INVALID_ARGUMENT,
                    ctx={"error": "axis values must be list", "axis": name},
                )
            axes.append(Axis(name, tuple(values)))
        return cls(tuple(axes))

    def find(self, name: str) -> Axis | None:
        for axis in self.axes:
            if axis.name == name:
                return axis
        return None

    def names(self) -> list[str]:
        return [axis.name for axis in self.axes]

    def cardinality(self) -> int:
        """Number of points in the full cartesian product."""
        return prod(axis.size() for axis in self.axes)

    def size(self) -> int:
        return len(self.axes)

    def __len__(self) -> int:
        return len(self.axes)

    def __iter__(self) -> Iterator[Axis]:
        return iter(self.axes)

    def __getitem__(self, index: int) -> Axis:
        return self.axes[index]
