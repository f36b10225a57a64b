import math

import pytest

from myrpg.audio import calculate_decibel, play_music


def test_no_samples_is_zero():
    assert calculate_decibel([]) == 0.0


def test_full_scale_is_offset():
    assert calculate_decibel([32767] * 4) == pytest.approx(90.3)


def test_silence_is_minus_infinity():
    assert calculate_decibel([0, 0, 0]) == -math.inf


def test_sign_does_not_matter():
    assert calculate_decibel([-1200, 300]) == pytest.approx(
        calculate_decibel([1200, -300])
    )


def test_order_does_not_matter():
    assert calculate_decibel([5, 100, 2000]) == pytest.approx(
        calculate_decibel([2000, 5, 100])
    )


def test_louder_is_higher():
    assert calculate_decibel([2000] * 10) > calculate_decibel([200] * 10)


def test_play_music_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        play_music(tmp_path / "missing.ogg")