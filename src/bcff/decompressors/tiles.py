"""4x4 tile traversal"""
import numpy as np
from numba import jit


@jit(nopython=True, cache=True)
def _scan_tiles_jit(palettes, fields, output, tiles_x, tile_count):
    """JIT-compiled tile walk writing palette values into the channel planes"""
    channels = fields.shape[1]
    for tile_idx in range(tile_count):
        x_start = (tile_idx % tiles_x) * 4
        y_start = (tile_idx // tiles_x) * 4

        for channel in range(channels):
            idx_bits = fields[tile_idx, channel]

            for texel_idx in range(16):
                value_idx = (idx_bits >> (texel_idx * 3)) & 0x7
                out_y = y_start + texel_idx // 4
                out_x = x_start + texel_idx % 4
                output[out_y, out_x, channel] = palettes[tile_idx, channel, value_idx]


def scan_tiles(palettes: np.ndarray, fields: np.ndarray, width: int, height: int) -> np.ndarray:
    """
    Place the texels of every tile at their image coordinates

    Tiles are visited row-major across the image (x advances by 4 until the
    row of tiles is exhausted, then y advances by 4). Texels inside a tile are
    row-major too.

    Args:
        palettes: float32 array of shape (tiles, channels, 8)
        fields: int64 index fields of shape (tiles, channels)
        width: Image width, a multiple of 4
        height: Image height, a multiple of 4

    Returns:
        float32 array of shape (height, width, 2); channel 1 stays 0.0 when
        only one channel is present
    """
    tiles_x = width // 4
    tile_count = tiles_x * (height // 4)
    if fields.shape[0] != tile_count:
        raise ValueError(f"Expected {tile_count} tiles for {width}x{height}, got {fields.shape[0]}")

    output = np.zeros((height, width, 2), dtype=np.float32)
    _scan_tiles_jit(palettes, fields, output, tiles_x, tile_count)
    return output
