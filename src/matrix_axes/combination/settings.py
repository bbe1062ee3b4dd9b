"""Environment-driven settings for combination digests.

``Combination.digest()`` never reads these; callers that want an
environment-selected algorithm pass ``DigestSettings.from_env().digest_fn()``
explicitly. The width is always ``DIGEST_LENGTH``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Callable, Mapping

from .digest import DEFAULT_ALGORITHM, DIGEST_LENGTH, make_digest
from .errors import CombinationError

ALGORITHM_ENV = "MATRIX_AXES_DIGEST_ALGORITHM"


@dataclass(frozen=True)
class DigestSettings:
    """Digest algorithm for fingerprints of combination ids."""

    algorithm: str = DEFAULT_ALGORITHM

    def __post_init__(self) -> None:
        # Fails fast on unknown algorithms.
        make_digest(self.algorithm, DIGEST_LENGTH)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "DigestSettings":
        env = os.environ if environ is None else environ
        algorithm = (env.get(ALGORITHM_ENV) or DEFAULT_ALGORITHM).strip().lower()
        try:
            return cls(algorithm=algorithm)
        except CombinationError as err:
            ctx = dict(err.ctx or {})
            ctx["env"] = ALGORITHM_ENV
            raise CombinationError(err.code, ctx=ctx) from err

    def digest_fn(self) -> Callable[[str], str]:
        return make_digest(self.algorithm, DIGEST_LENGTH)
