"""BC4 texture decompressor"""
from .base import BlockChannelDecompressor


class BC4Decompressor(BlockChannelDecompressor):
    """
    BC4 texture decompressor - NumPy vectorization + Numba JIT

    BC4 stores a single interpolated channel in one 8-byte block per tile.
    The reconstructed channel lands in plane 0; plane 1 stays 0.0.
    """
    CHANNELS = 1
