"""Texture decompressor implementations"""
from .base import TextureDecompressor, BlockChannelDecompressor
from .bc4 import BC4Decompressor
from .bc5 import BC5Decompressor
from .blocks import read_block, unpack_blocks, interpolate, build_palettes
from .tiles import scan_tiles

__all__ = [
    'TextureDecompressor',
    'BlockChannelDecompressor',
    'BC4Decompressor',
    'BC5Decompressor',
    'read_block',
    'unpack_blocks',
    'interpolate',
    'build_palettes',
    'scan_tiles',
]
