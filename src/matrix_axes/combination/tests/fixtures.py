from __future__ import annotations

from typing import Iterable, Mapping

from matrix_axes.combination.models import AxisList


def make_axes(payload: Mapping[str, Iterable[str]] | None = None, **axes: Iterable[str]) -> AxisList:
    """Build an :class:`AxisList` from ``{name: values}`` or keyword axes."""

    merged = dict(payload or {})
    merged.update(axes)
    return AxisList.from_mapping(merged)
