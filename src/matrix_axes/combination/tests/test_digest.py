import hashlib

import pytest

from matrix_axes.combination.digest import (
    DIGEST_LENGTH,
    get_digest_of,
    make_digest,
    supported_algorithms,
)
from matrix_axes.combination.errors import CombinationError, CombinationErrorCode


def test_get_digest_of_is_truncated_sha256() -> None:
    expected = hashlib.sha256(b"x=1").hexdigest()[:8]
    assert DIGEST_LENGTH == 8
    assert get_digest_of("x=1") == expected


@pytest.mark.parametrize("algorithm", ["md5", "sha1", "sha256", "blake2b"])
def test_make_digest_per_algorithm(algorithm) -> None:
    fn = make_digest(algorithm)
    out = fn("x=1,y=2")

    assert len(out) == 8
    assert out == fn("x=1,y=2")
    assert out == hashlib.new(algorithm, b"x=1,y=2").hexdigest()[:8]


def test_make_digest_custom_length() -> None:
    assert len(make_digest("md5", 32)("default")) == 32


def test_supported_algorithms_sorted() -> None:
    assert supported_algorithms() == ("blake2b", "md5", "sha1", "sha256")


def test_unknown_algorithm_rejected() -> None:
    with pytest.raises(CombinationError) as exc:
        make_digest("crc32")

    assert exc.value.code is CombinationErrorCode.INVALID_ARGUMENT
    assert exc.value.ctx["algorithm"] == "crc32"


@pytest.mark.parametrize("length", [0, -1, 33])
def test_length_out_of_range_rejected(length) -> None:
    with pytest.raises(CombinationError) as exc:
        get_digest_of("x=1", "md5", length)

    assert exc.value.code is CombinationErrorCode.INVALID_ARGUMENT
    assert exc.value.ctx["max"] == 32


@pytest.mark.parametrize("algorithm,length", [(None, 8), ("md5", 32), ("blake2b", 16)])
def test_get_digest_of_matches_bound_digest(algorithm, length) -> None:
    assert get_digest_of("x=1", algorithm, length) == make_digest(algorithm, length)("x=1")
