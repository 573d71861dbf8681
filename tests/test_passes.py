import math

import numpy as np
import pytest

from bcff.errors import DecodeError, PassOutputError
from bcff.passes import PASSES, composite, normal_map_pass, texel_pass, void_pass


@pytest.mark.parametrize("r, g", [(0.0, 0.0), (0.3, 0.9), (1.0, 1.0)])
def test_void_pass_blue_is_zero(r, g):
    out = void_pass(r, g)
    assert out[0] == r
    assert out[1] == g
    assert out[2] == 0.0


def test_normal_map_pass_flat_normal():
    x, y, z = normal_map_pass(0.5, 0.5)
    assert (x, y) == (0.5, 0.5)
    assert z == 1.0


def test_normal_map_pass_clamps_outside_unit_disc():
    # nx = ny = 1 gives a negative radicand, so nz = 0 and z = 0.5
    _, _, z = normal_map_pass(1.0, 1.0)
    assert z == 0.5


def test_normal_map_pass_tilted_normal():
    _, _, z = normal_map_pass(1.0, 0.5)
    assert z == 0.5
    _, _, z = normal_map_pass(0.75, 0.5)
    assert z == pytest.approx((math.sqrt(1 - 0.25) + 1) / 2)


def test_normal_map_pass_on_planes_matches_scalars():
    xs = np.linspace(0.0, 1.0, 9)
    ys = xs[::-1].copy()
    _, _, planes = normal_map_pass(xs, ys)
    for x, y, z in zip(xs, ys, planes):
        assert normal_map_pass(float(x), float(y))[2] == z


def test_composite_floors_instead_of_rounding():
    channels = np.zeros((1, 2, 2))
    channels[0, 0] = (0.999, 254.9 / 255.0)
    channels[0, 1] = (1.0, 0.5)

    rgb = composite(channels)

    assert rgb.dtype == np.uint8
    assert rgb.shape == (1, 2, 3)
    assert rgb[0, 0].tolist() == [254, 254, 0]
    assert rgb[0, 1].tolist() == [255, 127, 0]


def test_composite_defaults_to_void_pass():
    channels = np.full((4, 4, 2), 0.5)
    assert (composite(channels)[:, :, 2] == 0).all()


def test_composite_with_scalar_texel_pass():
    def swap(r, g):
        if r > g:
            return g, r, 1.0
        return r, g, 0.0

    channels = np.zeros((1, 2, 2))
    channels[0, 0] = (1.0, 0.0)
    channels[0, 1] = (0.0, 1.0)

    rgb = composite(channels, texel_pass(swap))

    assert rgb[0, 0].tolist() == [0, 255, 255]
    assert rgb[0, 1].tolist() == [0, 255, 0]


def test_composite_rejects_out_of_range_pass():
    def too_bright(r, g):
        return r + 1.0, g, r

    with pytest.raises(PassOutputError, match="outside"):
        composite(np.full((4, 4, 2), 0.5), too_bright)


def test_registry_names():
    assert PASSES['void'] is void_pass
    assert PASSES['normal'] is normal_map_pass


def test_composite_calls_plain_functions_per_texel():
    calls = []

    def branching(r, g):
        calls.append((r, g))
        if r > g:
            return 1.0, 0.0, 0.0
        return 0.0, 1.0, max(r, g)

    channels = np.zeros((4, 4, 2), dtype=np.float32)
    channels[0, 0] = (1.0, 0.0)
    channels[3, 3] = (0.0, 1.0)

    rgb = composite(channels, branching)

    assert len(calls) >= 16
    assert rgb[0, 0].tolist() == [255, 0, 0]
    assert rgb[3, 3].tolist() == [0, 255, 255]
    assert rgb[1, 1].tolist() == [0, 255, 0]


def test_pass_output_error_is_a_decode_error():
    assert issubclass(PassOutputError, DecodeError)


def test_composite_quantizes_in_single_precision():
    # 39/255 computed as float32 (0 * 2 + (65/255) * 3) / 5 floors to 39, not 38
    ref1f = np.float32(65) / np.float32(255.0)
    value = (np.float32(0.0) * np.float32(2) + ref1f * np.float32(3)) / np.float32(5.0)
    channels = np.full((4, 4, 2), value, dtype=np.float32)

    rgb = composite(channels)

    assert (rgb[:, :, 0] == 39).all()
    assert (rgb[:, :, 1] == 39).all()


def test_builtin_passes_receive_planes():
    assert getattr(void_pass, 'vectorized', False)
    assert getattr(normal_map_pass, 'vectorized', False)
    assert getattr(texel_pass(lambda r, g: (r, g, 0.0)), 'vectorized', False)
