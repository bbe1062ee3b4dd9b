import pytest

from matrix_axes.combination.errors import CombinationError, CombinationErrorCode
from matrix_axes.combination.settings import ALGORITHM_ENV, DigestSettings


def test_defaults_without_environment() -> None:
    settings = DigestSettings.from_env({})
    assert settings == DigestSettings("sha256")


def test_environment_selects_algorithm(monkeypatch) -> None:
    monkeypatch.setenv(ALGORITHM_ENV, " MD5 ")

    settings = DigestSettings.from_env()

    assert settings.algorithm == "md5"
    assert len(settings.digest_fn()("x=1")) == 8


def test_digest_width_ignores_length_variable(monkeypatch) -> None:
    monkeypatch.setenv("MATRIX_AXES_DIGEST_LENGTH", "12")

    assert len(DigestSettings.from_env().digest_fn()("x=1")) == 8


def test_unknown_algorithm_in_environment_rejected() -> None:
    with pytest.raises(CombinationError) as exc:
        DigestSettings.from_env({ALGORITHM_ENV: "crc32"})

    assert exc.value.code is CombinationErrorCode.INVALID_ARGUMENT
    assert exc.value.ctx["env"] == ALGORITHM_ENV


def test_direct_construction_validates() -> None:
    with pytest.raises(CombinationError):
        DigestSettings(algorithm="nope")
