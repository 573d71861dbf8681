"""DDS header structures

Only the fields the decoder needs are interpreted; everything else is kept
as raw integers so the header can be printed. Each structure is read field by
field from little-endian bytes at fixed offsets.
"""
import struct
from typing import BinaryIO, List

from .enums import DDPF, DXGI_FORMAT, D3D10_RESOURCE_DIMENSION
from .errors import StreamUnderrunError


def read_exact(stream: BinaryIO, size: int, what: str) -> bytes:
    """Read exactly ``size`` bytes or raise StreamUnderrunError"""
    data = stream.read(size)
    if len(data) < size:
        raise StreamUnderrunError(f"Expected {size} bytes for {what}, got {len(data)}")
    return data


class DDS_PIXELFORMAT:
    """DDS Pixel Format structure (32 bytes)"""
    SIZE = 32

    def __init__(self) -> None:
        self.dwSize: int = 32  # Size of structure (always 32)
        self.dwFlags: DDPF = DDPF(0)  # Flags to indicate which members are valid
        self.dwFourCC: int = 0  # FourCC code (ATI1, ATI2, DX10, ...)
        self.dwRGBBitCount: int = 0  # Number of bits per pixel (unused for BC4/BC5)

    @classmethod
    def from_bytes(cls, data: bytes) -> 'DDS_PIXELFORMAT':
        """Read DDS_PIXELFORMAT from 32 bytes of data"""
        if len(data) < cls.SIZE:
            raise StreamUnderrunError(f"Expected {cls.SIZE} bytes for DDS_PIXELFORMAT, got {len(data)}")

        pixelformat = cls()
        pixelformat.dwSize, flags, pixelformat.dwFourCC, pixelformat.dwRGBBitCount = struct.unpack_from('<4I', data, 0)
        pixelformat.dwFlags = DDPF(flags)
        # Channel masks (offsets 16..31) are meaningless for block-compressed data
        return pixelformat


class DDS_HEADER:
    """DDS Header structure (124 bytes, following the 4-byte magic)"""
    SIZE = 124

    def __init__(self) -> None:
        self.dwSize: int = 124  # Size of structure (always 124)
        self.dwFlags: int = 0  # Flags to indicate which members are valid
        self.dwHeight: int = 0  # Height of surface in pixels
        self.dwWidth: int = 0  # Width of surface in pixels
        self.dwPitchOrLinearSize: int = 0  # Linear size of the top-level block data
        self.dwDepth: int = 0  # Depth of volume texture (not decoded)
        self.dwMipMapCount: int = 0  # Number of mipmap levels (only level 0 is decoded)
        self.ddspf: DDS_PIXELFORMAT = DDS_PIXELFORMAT()  # Pixel format
        self.dwCaps: List[int] = [0, 0, 0, 0]  # dwCaps, dwCaps2, dwCaps3, dwCaps4

    @classmethod
    def from_bytes(cls, data: bytes) -> 'DDS_HEADER':
        """Read DDS_HEADER from 124 bytes of data"""
        if len(data) < cls.SIZE:
            raise StreamUnderrunError(f"Expected {cls.SIZE} bytes for DDS_HEADER, got {len(data)}")

        header = cls()
        (header.dwSize, header.dwFlags, header.dwHeight, header.dwWidth,
         header.dwPitchOrLinearSize, header.dwDepth, header.dwMipMapCount) = struct.unpack_from('<7I', data, 0)
        # Skip 11 reserved DWORDs (offsets 28..71)
        # Read pixel format (32 bytes starting at offset 72)
        header.ddspf = DDS_PIXELFORMAT.from_bytes(data[72:104])
        # Read caps (4 DWORDs starting at offset 104, dwReserved2 follows)
        header.dwCaps = list(struct.unpack_from('<4I', data, 104))
        return header


class DDS_HEADER_DXT10:
    """DDS DX10 Extended Header structure (20 bytes)"""
    SIZE = 20

    def __init__(self) -> None:
        self.dxgiFormat: int = DXGI_FORMAT.UNKNOWN  # DXGI format
        self.resourceDimension: int = D3D10_RESOURCE_DIMENSION.UNKNOWN  # Resource dimension
        self.miscFlag: int = 0  # Miscellaneous flags
        self.arraySize: int = 0  # Array size (only slice 0 is decoded)
        self.miscFlags2: int = 0  # Additional miscellaneous flags

    @classmethod
    def from_bytes(cls, data: bytes) -> 'DDS_HEADER_DXT10':
        """Read DDS_HEADER_DXT10 from 20 bytes of data"""
        if len(data) < cls.SIZE:
            raise StreamUnderrunError(f"Expected {cls.SIZE} bytes for DDS_HEADER_DXT10, got {len(data)}")

        header10 = cls()
        # Unknown codes stay plain ints; format validation happens in the decoder
        (header10.dxgiFormat, header10.resourceDimension, header10.miscFlag,
         header10.arraySize, header10.miscFlags2) = struct.unpack_from('<5I', data, 0)
        return header10

    @property
    def format_name(self) -> str:
        try:
            return DXGI_FORMAT(self.dxgiFormat).name
        except ValueError:
            return f"UNKNOWN_{self.dxgiFormat}"
