"""Short hexadecimal fingerprints of canonical combination ids."""

from __future__ import annotations

import hashlib
from typing import Any, Callable

from .errors import CombinationError, CombinationErrorCode

DIGEST_LENGTH = 8
DEFAULT_ALGORITHM = "sha256"

_ALGORITHMS: dict[str, Callable[..., Any]] = {
    "sha256": hashlib.sha256,
    "sha1": hashlib.sha1,
    "md5": hashlib.md5,
    "blake2b": hashlib.blake2b,
}


def supported_algorithms() -> tuple[str, ...]:
    return tuple(sorted(_ALGORITHMS))


def _hasher(algorithm: str):
    try:
        return _ALGORITHMS[algorithm]
    except KeyError as exc:
        raise CombinationError(
            CombinationErrorCode.INVALID_ARGUMENT,
            ctx={"error": "unsupported digest algorithm", "algorithm": algorithm},
        ) from exc


def _check_length(algorithm: str, length: int) -> None:
    max_length = _hasher(algorithm)().digest_size * 2
    if not isinstance(length, int) or length <= 0 or length > max_length:
        raise CombinationError(
            CombinationErrorCode.INVALID_ARGUMENT,
            ctx={
                "error": "digest length out of range",
                "algorithm": algorithm,
                "length": length,
                "max": max_length,
            },
        )


def get_digest_of(
    text: str,
    algorithm: str | None = None,
    length: int = DIGEST_LENGTH,
) -> str:
    """Hex digest of ``text`` (UTF-8) truncated to ``length`` characters."""
    return make_digest(algorithm, length)(text)


def make_digest(
    algorithm: str | None = None,
    length: int = DIGEST_LENGTH,
) -> Callable[[str], str]:
    """Return a ``str -> str`` digest function bound to an algorithm/width.

    Validation happens here so a bad configuration fails before any
    combination is hashed.
    """
    algorithm = algorithm or DEFAULT_ALGORITHM
    _check_length(algorithm, length)
    hasher = _hasher(algorithm)

    def _digest(text: str) -> str:
        return hasher(text.encode("utf-8")).hexdigest()[:length]

    return _digest
