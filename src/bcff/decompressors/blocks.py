"""BC4 block reading and channel interpolation

A BC4 block encodes one channel of a 4x4 tile in 8 bytes:
- 1 byte: ref0 endpoint
- 1 byte: ref1 endpoint
- 6 bytes: 16 3-bit indices (48-bit little-endian field)

BC5 stores two such blocks per tile, red first, then green.
"""
from typing import BinaryIO, Tuple
import numpy as np

from ..errors import StreamUnderrunError

BLOCK_SIZE = 8
TEXELS_PER_BLOCK = 16
_F255 = np.float32(255.0)


def block_indices(field: int) -> Tuple[int, ...]:
    """Split a 48-bit index field into its 16 3-bit texel indices"""
    return tuple((field >> (3 * i)) & 0b111 for i in range(TEXELS_PER_BLOCK))


def read_block(stream: BinaryIO) -> Tuple[int, int, Tuple[int, ...]]:
    """
    Read one 8-byte BC4 block from a stream

    Returns:
        (ref0, ref1, indices) where indices holds 16 values in [0, 7],
        ordered row-major within the 4x4 tile

    Raises:
        StreamUnderrunError: If fewer than 8 bytes remain
    """
    data = stream.read(BLOCK_SIZE)
    if len(data) < BLOCK_SIZE:
        raise StreamUnderrunError(f"Expected {BLOCK_SIZE} bytes for a block, got {len(data)}")

    field = int.from_bytes(data[2:8], 'little')
    return data[0], data[1], block_indices(field)


def unpack_blocks(data: bytes, tile_count: int, channels: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Unpack the blocks of ``tile_count`` tiles at once

    Args:
        data: Compressed block data, starting at the first block
        tile_count: Number of 4x4 tiles in the image
        channels: Blocks per tile (1 for BC4, 2 for BC5)

    Returns:
        refs: int64 array of shape (tile_count, channels, 2)
        fields: int64 array of shape (tile_count, channels), the 48-bit index fields

    Raises:
        StreamUnderrunError: If data holds fewer bytes than the blocks need
    """
    block_count = tile_count * channels
    needed = block_count * BLOCK_SIZE
    if len(data) < needed:
        raise StreamUnderrunError(
            f"Block data ends inside block {len(data) // BLOCK_SIZE} of {block_count}: "
            f"expected {needed} bytes, got {len(data)}"
        )

    blocks = np.frombuffer(data, dtype=np.uint8, count=needed).reshape(tile_count, channels, BLOCK_SIZE)

    refs = blocks[:, :, :2].astype(np.int64)

    # Widen the 6 index bytes to 8 and read them as one little-endian integer
    index_bytes = np.zeros((tile_count, channels, 8), dtype=np.uint8)
    index_bytes[:, :, :6] = blocks[:, :, 2:8]
    fields = index_bytes.view('<i8').reshape(tile_count, channels).astype(np.int64)

    return refs, fields


def interpolate(ref0: int, ref1: int, index: int) -> float:
    """
    Reconstruct one texel value from a block's reference values

    Indices 0 and 1 return the references themselves. When ref0 > ref1 the
    remaining six indices walk a 7-division ladder between them; otherwise
    indices 2-5 walk a 5-division ladder and 6/7 are fixed at 0.0/1.0.

    Arithmetic is single precision throughout; the floor quantization in
    ``composite`` depends on the exact float32 results.

    Returns:
        Channel value in [0.0, 1.0] (a float32 value widened to float)
    """
    if not 0 <= index <= 7:
        raise ValueError(f"Block index must be in [0, 7], got {index}")

    ref0f = np.float32(ref0) / _F255
    ref1f = np.float32(ref1) / _F255
    if index == 0:
        return float(ref0f)
    if index == 1:
        return float(ref1f)

    step = index - 1
    if ref0 > ref1:
        value = (ref0f * np.float32(7 - step) + ref1f * np.float32(step)) / np.float32(7.0)
    else:
        if index == 6:
            return 0.0
        if index == 7:
            return 1.0
        value = (ref0f * np.float32(5 - step) + ref1f * np.float32(step)) / np.float32(5.0)
    return float(min(max(value, np.float32(0.0)), np.float32(1.0)))


def build_palettes(refs: np.ndarray) -> np.ndarray:
    """
    Build the 8-entry value palette of every block

    Evaluates the same expressions as ``interpolate`` in the same order,
    so palette entries are bit-identical to the scalar results.

    Args:
        refs: Integer array of shape (..., 2) holding (ref0, ref1) pairs

    Returns:
        float32 array of shape (..., 8), palette[..., i] == interpolate(ref0, ref1, i)
    """
    ref0 = refs[..., 0]
    ref1 = refs[..., 1]
    ref0f = ref0.astype(np.float32) / _F255
    ref1f = ref1.astype(np.float32) / _F255

    # Determine mode (6 interpolated values vs 4 plus black/white) for all blocks
    six_step_mode = ref0 > ref1

    palettes = np.empty(refs.shape[:-1] + (8,), dtype=np.float32)
    palettes[..., 0] = ref0f
    palettes[..., 1] = ref1f
    for index in range(2, 8):
        step = index - 1
        six_step = (ref0f * np.float32(7 - step) + ref1f * np.float32(step)) / np.float32(7.0)
        if index == 6:
            four_step = np.zeros_like(ref0f)
        elif index == 7:
            four_step = np.ones_like(ref0f)
        else:
            four_step = (ref0f * np.float32(5 - step) + ref1f * np.float32(step)) / np.float32(5.0)
        palettes[..., index] = np.where(six_step_mode, six_step, four_step)

    return np.clip(palettes, np.float32(0.0), np.float32(1.0))
