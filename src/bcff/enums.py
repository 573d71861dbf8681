"""DDS enumerations and flags"""
from enum import IntEnum, IntFlag


def _fourcc(code: bytes) -> int:
    return int.from_bytes(code, 'little')


class DDPF(IntFlag):
    """DDS_PIXELFORMAT flags"""
    ALPHAPIXELS = 0x1
    ALPHA = 0x2
    FOURCC = 0x4
    RGB = 0x40
    YUV = 0x200
    LUMINANCE = 0x20000


class FourCC(IntEnum):
    """FourCC codes relevant to BC4/BC5 textures"""
    ATI1 = _fourcc(b'ATI1')
    ATI2 = _fourcc(b'ATI2')
    BC4U = _fourcc(b'BC4U')
    BC4S = _fourcc(b'BC4S')
    BC5U = _fourcc(b'BC5U')
    BC5S = _fourcc(b'BC5S')
    DX10 = _fourcc(b'DX10')


class DXGI_FORMAT(IntEnum):
    """DXGI format codes for BC4 and BC5 (DX10 extended header)"""
    UNKNOWN = 0
    BC4_TYPELESS = 79
    BC4_UNORM = 80
    BC4_SNORM = 81
    BC5_TYPELESS = 82
    BC5_UNORM = 83
    BC5_SNORM = 84


class D3D10_RESOURCE_DIMENSION(IntEnum):
    """Resource dimension stored in the DX10 extended header"""
    UNKNOWN = 0
    BUFFER = 1
    TEXTURE1D = 2
    TEXTURE2D = 3
    TEXTURE3D = 4


class PixelFormat(IntEnum):
    """Block-compressed formats the decoder understands"""
    BC4 = 4
    BC5 = 5


FOURCC_FORMATS = {
    FourCC.ATI1: PixelFormat.BC4,
    FourCC.BC4U: PixelFormat.BC4,
    FourCC.ATI2: PixelFormat.BC5,
    FourCC.BC5U: PixelFormat.BC5,
}

DXGI_FORMATS = {
    DXGI_FORMAT.BC4_TYPELESS: PixelFormat.BC4,
    DXGI_FORMAT.BC4_UNORM: PixelFormat.BC4,
    DXGI_FORMAT.BC4_SNORM: PixelFormat.BC4,
    DXGI_FORMAT.BC5_TYPELESS: PixelFormat.BC5,
    DXGI_FORMAT.BC5_UNORM: PixelFormat.BC5,
    DXGI_FORMAT.BC5_SNORM: PixelFormat.BC5,
}
