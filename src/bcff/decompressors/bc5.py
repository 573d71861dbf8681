"""BC5 texture decompressor"""
from .base import BlockChannelDecompressor


class BC5Decompressor(BlockChannelDecompressor):
    """
    BC5 texture decompressor - NumPy vectorization + Numba JIT

    BC5 stores two interpolated channels (typically used for normal maps).
    The format is essentially two BC4 blocks side by side: the red block
    followed by the green block for every tile.
    """
    CHANNELS = 2
