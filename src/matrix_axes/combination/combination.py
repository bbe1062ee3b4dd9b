"""A particular combination of axis values.

With axes ``x={1,2}`` and ``y={3,4}``, ``{x: 1, y: 3}`` is one of the four
possible combinations. A :class:`Combination` keeps its entries ordered by
axis name and can be rendered as a canonical id (``x=1,y=3``), a compact
display string, a dense index within an axis list, or a short digest.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, ValuesView
from math import prod
from typing import Any, Callable, Iterable, Iterator, Sequence

from .errors import CombinationError, CombinationErrorCode
from .digest import make_digest

logger = logging.getLogger(__name__)

# Id of the combination with no entries; avoids a zero-length name.
DEFAULT_ID = "default"

# Bound once; the default digest does not depend on the environment.
_default_digest = make_digest()


def _axis_name(key: Any) -> Any:
    if isinstance(key, str):
        return key
    name = getattr(key, "name", None)
    return name if isinstance(name, str) else key


def _order_key(text: str) -> bytes:
    # UTF-16 code unit order, so characters above U+FFFF sort below U+E000..U+FFFF.
    return text.encode("utf-16-be", "surrogatepass")


def _cmp(a: str, b: str) -> int:
    ka, kb = _order_key(a), _order_key(b)
    return (ka > kb) - (ka < kb)


def _unsupported(operation: str) -> CombinationError:
    return CombinationError(
        CombinationErrorCode.UNSUPPORTED_OPERATION,
        ctx={"error": "combination is read-only", "operation": operation},
    )


class Combination(Mapping):
    """Immutable mapping of axis name to axis value, ordered by axis name.

    Names are ordered by UTF-16 code unit, which only differs from Python's
    code point order when characters above U+FFFF meet U+E000..U+FFFF.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, str] | Iterable[tuple[str, str]] | None = None) -> None:
        pairs = dict(entries) if entries is not None else {}
        ordered = sorted(pairs.items(), key=lambda item: _order_key(item[0]))
        object.__setattr__(self, "_entries", dict(ordered))

    # --- construction ---
    @classmethod
    def from_axes(cls, axis_list: Iterable[Any], values: Sequence[str]) -> "Combination":
        """Bind ``values[i]`` to the i-th axis of ``axis_list``."""
        if isinstance(values, (str, bytes)):
            raise CombinationError(
                CombinationErrorCode.INVALID_ARGUMENT,
                ctx={"error": "values must be a sequence of strings, not a string"},
            )
        axes = list(axis_list)
        values = list(values)
        if len(axes) != len(values):
            raise CombinationError(
                CombinationErrorCode.INVALID_ARGUMENT,
                ctx={
                    "error": "value count does not match axis count",
                    "expected": len(axes),
                    "actual": len(values),
                },
            )
        return cls((axis.name, value) for axis, value in zip(axes, values))

    @classmethod
    def of(cls, axis_list: Iterable[Any], *values: str) -> "Combination":
        return cls.from_axes(axis_list, values)

    @classmethod
    def from_string(cls, text: str) -> "Combination":
        """Reverse of :meth:`to_string`.

        Only the first ``=`` of a token separates name from value. Empty
        tokens are skipped; a repeated name keeps its last value. Values
        that contained ``,`` when rendered cannot be recovered.
        """
        if text == DEFAULT_ID:
            return cls()

        entries: dict[str, str] = {}
        for token in text.split(","):
            if not token:
                continue
            key, sep, value = token.partition("=")
            if not sep:
                raise CombinationError(
                    CombinationErrorCode.PARSE_ERROR,
                    ctx={"error": f"cannot parse {text}", "text": text, "token": token},
                )
            if key in entries:
                logger.warning(
                    "duplicate axis %r in combination id %r; keeping last value %r",
                    key,
                    text,
                    value,
                )
            entries[key] = value
        return cls(entries)

    @classmethod
    def from_index(cls, axis_list: Iterable[Any], index: int) -> "Combination":
        """Inverse of :meth:`to_index` over the full cartesian product."""
        axes = list(axis_list)
        cardinality = prod(axis.size() for axis in axes)
        if not 0 <= index < cardinality:
            raise CombinationError(
                CombinationErrorCode.INVALID_ARGUMENT,
                ctx={"error": "index out of range", "index": index, "cardinality": cardinality},
            )
        entries: dict[str, str] = {}
        remaining = index
        for axis in reversed(axes):
            remaining, digit = divmod(remaining, axis.size())
            entries[axis.name] = axis.values[digit]
        return cls(entries)

    # --- read-only mapping ---
    def __getitem__(self, key: Any) -> str:
        return self._entries[_axis_name(key)]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return _axis_name(key) in self._entries

    def get(self, key: Any, default: str | None = None) -> str | None:
        """Value bound to an axis name, or to ``axis.name`` for an axis."""
        return self._entries.get(_axis_name(key), default)

    def values(self, axes: Iterable[Any] | None = None) -> ValuesView | list[str | None]:
        """Values for ``axes`` in their order; ``None`` where an axis is unbound.

        Without ``axes`` this is the usual mapping values view.
        """
        if axes is None:
            return super().values()
        return [self.get(axis) for axis in axes]

    def __hash__(self) -> int:
        return hash(frozenset(self._entries.items()))

    def __repr__(self) -> str:
        return f"Combination({self.to_string()!r})"

    def __str__(self) -> str:
        return self.to_string()

    def __reduce__(self):
        return (type(self), (dict(self._entries),))

    # --- index ---
    def to_index(self, axis_list: Iterable[Any]) -> int:
        """Continuous unique index of this combination within ``axis_list``.

        The first axis is the most significant digit, each axis' size its
        radix.
        """
        r = 0
        for axis in axis_list:
            value = self.get(axis.name)
            if value is None:
                raise CombinationError(
                    CombinationErrorCode.KEY_NOT_FOUND,
                    ctx={"error": "axis not in combination", "axis": axis.name},
                )
            position = axis.index_of(value)
            if position is None or position < 0:
                raise CombinationError(
                    CombinationErrorCode.INVALID_ARGUMENT,
                    ctx={"error": "value not on axis", "axis": axis.name, "value": value},
                )
            r = r * axis.size() + position
        return r

    # --- ordering ---
    def compare(self, other: "Combination") -> int:
        """Fewer entries sort first; then (key, value) pairs in key order.

        Strings compare by UTF-16 code unit, the same order used for keys.
        """
        d = len(self) - len(other)
        if d:
            return d
        for (k1, v1), (k2, v2) in zip(self.items(), other.items()):
            d = _cmp(k1, k2)
            if d:
                return d
            d = _cmp(v1, v2)
            if d:
                return d
        return 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Combination):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Combination):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Combination):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Combination):
            return NotImplemented
        return self.compare(other) >= 0

    # --- string forms ---
    def to_string(self, sep1: str = ",", sep2: str = "=") -> str:
        """Id form ``name=value,name=value``; ``default`` when empty.

        ``sep1`` joins entries, ``sep2`` joins a name with its value.
        """
        if not self._entries:
            return DEFAULT_ID
        return sep1.join(f"{key}{sep2}{value}" for key, value in self._entries.items())

    def to_subset_string(self, axes: Iterable[Any]) -> str:
        """Like :meth:`to_string` but only for ``axes``, in their order.

        A single-entry combination rendered for a single axis is just its
        value.
        """
        axes = list(axes)
        if len(self) == 1 and len(axes) == 1:
            return next(iter(self._entries.values()))

        parts = []
        for axis in axes:
            value = self.get(axis)
            if value is None:
                raise CombinationError(
                    CombinationErrorCode.KEY_NOT_FOUND,
                    ctx={"error": "axis not in combination", "axis": _axis_name(axis)},
                )
            parts.append(f"{_axis_name(axis)}={value}")
        return ",".join(parts) if parts else DEFAULT_ID

    def to_compact_string(self, axis_list: Iterable[Any]) -> str:
        """Display form that drops the axis name where the value is unambiguous.

        The ``name=`` prefix is decided per entry value: a value offered by
        more than one axis keeps it, any other value is bare. Axes are not
        marked wholesale, so with ``x={A,B}``, ``y={B,C}`` the entries
        ``{x: A, y: B}`` render as ``A,y=B`` rather than ``x=A,y=B``.
        There is no parser for this form.
        """
        owners: dict[str, list[str]] = {}
        for axis in axis_list:
            for value in axis.values:
                owners.setdefault(value, []).append(axis.name)
        shared = {value for value, names in owners.items() if len(names) > 1}
        if shared:
            logger.debug(
                "colliding axis values: %s",
                {value: owners[value] for value in sorted(shared)},
            )

        parts = []
        for key, value in self._entries.items():
            parts.append(f"{key}={value}" if value in shared else value)
        return ",".join(parts) if parts else DEFAULT_ID

    def digest(self, digest_fn: Callable[[str], str] | None = None) -> str:
        """Short fingerprint of :meth:`to_string`; 8 hex chars by default."""
        fn = digest_fn or _default_digest
        return fn(self.to_string())

    # --- read-only guards ---
    def __setattr__(self, name: str, value: Any) -> None:
        raise _unsupported("setattr")

    def __delattr__(self, name: str) -> None:
        raise _unsupported("delattr")

    def __setitem__(self, key: Any, value: Any) -> None:
        raise _unsupported("setitem")

    def __delitem__(self, key: Any) -> None:
        raise _unsupported("delitem")

    def put(self, key: Any, value: Any) -> None:
        raise _unsupported("put")

    def put_all(self, other: Any) -> None:
        raise _unsupported("put_all")

    def update(self, *args: Any, **kwargs: Any) -> None:
        raise _unsupported("update")

    def remove(self, key: Any) -> None:
        raise _unsupported("remove")

    def pop(self, key: Any, *default: Any) -> None:
        raise _unsupported("pop")

    def popitem(self) -> None:
        raise _unsupported("popitem")

    def setdefault(self, key: Any, default: Any = None) -> None:
        raise _unsupported("setdefault")

    def clear(self) -> None:
        raise _unsupported("clear")
