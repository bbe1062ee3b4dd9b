"""Immutable axis combinations and their string/index/digest codecs."""

from .combination import DEFAULT_ID, Combination
from .digest import DIGEST_LENGTH, get_digest_of, make_digest
from .errors import CombinationError, CombinationErrorCode
from .models import Axis, AxisList
from .settings import DigestSettings

__all__ = [
    "Axis",
    "AxisList",
    "Combination",
    "CombinationError",
    "CombinationErrorCode",
    "DEFAULT_ID",
    "DIGEST_LENGTH",
    "DigestSettings",
    "get_digest_of",
    "make_digest",
]
