"""bcff - BC4/BC5 DDS texture decoder"""

__version__ = "0.1.0"

# Main decoder class
from .dds import BlockDecompressor

# Header structures
from .headers import (
    DDS_HEADER,
    DDS_HEADER_DXT10,
    DDS_PIXELFORMAT,
)

# Enumerations
from .enums import (
    DDPF,
    FourCC,
    DXGI_FORMAT,
    PixelFormat,
)

# Errors
from .errors import (
    DecodeError,
    UnsupportedFormatError,
    StreamUnderrunError,
    MalformedGeometryError,
    PassOutputError,
)

# Composite passes
from .passes import (
    void_pass,
    normal_map_pass,
    plane_pass,
    texel_pass,
    composite,
)

# CLI entry point
from .cli import main

__all__ = [
    '__version__',
    'BlockDecompressor',
    'DDS_HEADER',
    'DDS_HEADER_DXT10',
    'DDS_PIXELFORMAT',
    'DDPF',
    'FourCC',
    'DXGI_FORMAT',
    'PixelFormat',
    'DecodeError',
    'UnsupportedFormatError',
    'StreamUnderrunError',
    'MalformedGeometryError',
    'PassOutputError',
    'void_pass',
    'normal_map_pass',
    'plane_pass',
    'texel_pass',
    'composite',
    'main',
]
