"""Base classes for BC4/BC5 decompression"""
from abc import ABC, abstractmethod
import numpy as np

from .blocks import unpack_blocks, build_palettes
from .tiles import scan_tiles


class TextureDecompressor(ABC):
    """Base class for texture decompression"""
    @abstractmethod
    def decompress(self, data: bytes, width: int, height: int) -> np.ndarray:
        """
        Decompress texture data to reconstructed channel planes

        Args:
            data: Compressed texture data, starting at the first block
            width: Texture width in pixels
            height: Texture height in pixels

        Returns:
            numpy array of shape (height, width, 2) with dtype float32,
            channel values in [0.0, 1.0]
        """
        pass


class BlockChannelDecompressor(TextureDecompressor):
    """Decompressor for formats built from 8-byte single-channel blocks"""
    CHANNELS = 1

    def block_count(self, width: int, height: int) -> int:
        """Number of 8-byte blocks a width x height image consumes"""
        return (width // 4) * (height // 4) * self.CHANNELS

    def decompress(self, data: bytes, width: int, height: int) -> np.ndarray:
        tile_count = (width // 4) * (height // 4)
        refs, fields = unpack_blocks(data, tile_count, self.CHANNELS)
        palettes = build_palettes(refs)
        return scan_tiles(palettes, fields, width, height)
