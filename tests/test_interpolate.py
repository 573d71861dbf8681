import numpy as np
import pytest

from bcff.decompressors.blocks import interpolate

SIX_STEP_PAIRS = [(255, 0), (200, 100), (1, 0), (128, 127), (90, 3)]
FOUR_STEP_PAIRS = [(0, 255), (100, 200), (0, 0), (128, 128), (255, 255), (3, 90)]


@pytest.mark.parametrize("ref0, ref1", SIX_STEP_PAIRS + FOUR_STEP_PAIRS)
def test_endpoints_are_exact(ref0, ref1):
    assert interpolate(ref0, ref1, 0) == np.float32(ref0) / np.float32(255.0)
    assert interpolate(ref0, ref1, 1) == np.float32(ref1) / np.float32(255.0)


@pytest.mark.parametrize("ref0, ref1", SIX_STEP_PAIRS)
def test_six_step_ladder_extremes(ref0, ref1):
    ref0f, ref1f = ref0 / 255.0, ref1 / 255.0
    assert interpolate(ref0, ref1, 2) == pytest.approx((6 * ref0f + ref1f) / 7)
    assert interpolate(ref0, ref1, 7) == pytest.approx((ref0f + 6 * ref1f) / 7)


@pytest.mark.parametrize("ref0, ref1", SIX_STEP_PAIRS)
def test_six_step_ladder_is_monotonic(ref0, ref1):
    ladder = [interpolate(ref0, ref1, i) for i in (0, 2, 3, 4, 5, 6, 7, 1)]
    assert all(a > b for a, b in zip(ladder, ladder[1:]))


@pytest.mark.parametrize("ref0, ref1", FOUR_STEP_PAIRS)
def test_four_step_anchors(ref0, ref1):
    assert interpolate(ref0, ref1, 6) == 0.0
    assert interpolate(ref0, ref1, 7) == 1.0


@pytest.mark.parametrize("ref0, ref1", FOUR_STEP_PAIRS)
def test_four_step_ladder_is_monotonic(ref0, ref1):
    ladder = [interpolate(ref0, ref1, i) for i in (0, 2, 3, 4, 5, 1)]
    assert all(a <= b for a, b in zip(ladder, ladder[1:]))


def test_four_step_interior_values():
    assert interpolate(0, 255, 2) == pytest.approx(0.2)
    assert interpolate(0, 255, 5) == pytest.approx(0.8)


def test_values_stay_in_unit_range():
    for ref0 in range(0, 256, 5):
        for ref1 in range(0, 256, 5):
            for index in range(8):
                assert 0.0 <= interpolate(ref0, ref1, index) <= 1.0


@pytest.mark.parametrize("index", [-1, 8])
def test_rejects_out_of_range_index(index):
    with pytest.raises(ValueError):
        interpolate(10, 20, index)


@pytest.mark.parametrize("ref0, ref1, index, expected", [
    (0, 65, 4, 39),
    (0, 75, 4, 45),
    (0, 115, 4, 68),
    (0, 130, 4, 78),
    (200, 20, 2, 174),
    (200, 20, 7, 45),
])
def test_single_precision_quantization(ref0, ref1, index, expected):
    # Exact results such as 39.0 must not land just below the integer
    value = np.float32(interpolate(ref0, ref1, index))
    assert int(np.floor(value * np.float32(255.0))) == expected


def test_returns_single_precision_values():
    value = interpolate(0, 65, 4)
    assert float(np.float32(value)) == value
