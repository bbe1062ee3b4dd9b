"""Named axis combinations: canonical ids, dense indices and digests."""

from .combination import (
    Axis,
    AxisList,
    Combination,
    CombinationError,
    CombinationErrorCode,
)

__all__ = [
    "Axis",
    "AxisList",
    "Combination",
    "CombinationError",
    "CombinationErrorCode",
]
