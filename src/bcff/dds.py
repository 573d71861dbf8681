"""BC4/BC5 DDS decoder"""
import io
import logging
from typing import BinaryIO, Optional

import numpy as np

from .enums import DDPF, FourCC, DXGI_FORMAT, PixelFormat, FOURCC_FORMATS, DXGI_FORMATS
from .errors import UnsupportedFormatError, MalformedGeometryError
from .headers import DDS_HEADER, DDS_HEADER_DXT10, read_exact
from .decompressors import BlockChannelDecompressor, BC4Decompressor, BC5Decompressor
from .decompressors.blocks import BLOCK_SIZE
from .passes import CompositePass, composite, void_pass

log = logging.getLogger(__name__)

DDS_MAGIC = b'DDS '

DECOMPRESSORS = {
    PixelFormat.BC4: BC4Decompressor,
    PixelFormat.BC5: BC5Decompressor,
}


def _fourcc_str(fourcc: int) -> str:
    try:
        return FourCC(fourcc).name
    except ValueError:
        return fourcc.to_bytes(4, 'little').decode('ascii', errors='replace')


class BlockDecompressor:
    """
    Decoder for a single BC4 or BC5 DDS texture

    The header is read and validated on construction; the stream is left
    positioned at the first compressed block and that offset is remembered so
    ``decode`` can be called any number of times.

    Usage:
        with BlockDecompressor.open('normal.dds') as bcff:
            rgb = bcff.decode(normal_map_pass)
    """
    def __init__(self, stream: BinaryIO, owns_stream: bool = False) -> None:
        self._stream = stream
        self._owns_stream = owns_stream
        self._image: Optional[np.ndarray] = None

        magic = read_exact(stream, 4, 'DDS magic')
        if magic != DDS_MAGIC:
            raise UnsupportedFormatError(f"Invalid DDS magic number: {magic!r}")

        self.header: DDS_HEADER = DDS_HEADER.from_bytes(read_exact(stream, DDS_HEADER.SIZE, 'DDS_HEADER'))
        self.header10: Optional[DDS_HEADER_DXT10] = None
        if self.header.ddspf.dwFourCC == FourCC.DX10:
            self.header10 = DDS_HEADER_DXT10.from_bytes(read_exact(stream, DDS_HEADER_DXT10.SIZE, 'DDS_HEADER_DXT10'))

        self.pixel_format: PixelFormat = self._resolve_format()
        self._check_geometry()

        self._start = stream.tell()
        log.debug("Opened %s %dx%d, %d blocks from offset %d",
                  self.pixel_format.name, self.width, self.height, self.block_count, self._start)

    @classmethod
    def from_bytes(cls, data: bytes) -> 'BlockDecompressor':
        """Decode from an in-memory DDS file"""
        return cls(io.BytesIO(data), owns_stream=True)

    @classmethod
    def open(cls, path: str) -> 'BlockDecompressor':
        """Open a DDS file; the decoder closes it on ``close``"""
        stream = open(path, 'rb')
        try:
            return cls(stream, owns_stream=True)
        except BaseException:
            stream.close()
            raise

    def __enter__(self) -> 'BlockDecompressor':
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying stream if this decoder opened it"""
        if self._owns_stream:
            self._stream.close()

    def __str__(self) -> str:
        """Return debug string representation of the texture"""
        lines = ["DDS File Information:"]
        lines.append(f"  Dimensions: {self.width}x{self.height}")
        if self.header.dwMipMapCount > 0:
            lines.append(f"  Mipmap Levels: {self.header.dwMipMapCount} (only level 0 is decoded)")

        if self.header10:
            lines.append("  Format: DX10")
            lines.append(f"    DXGI Format: {self.header10.format_name} ({self.header10.dxgiFormat})")
        else:
            fourcc = self.header.ddspf.dwFourCC
            lines.append(f"  Format: FourCC '{_fourcc_str(fourcc)}' (0x{fourcc:08X})")

        lines.append(f"  Pixel Format: {self.pixel_format.name}")
        lines.append(f"  Blocks: {self.block_count} x {BLOCK_SIZE} bytes")
        return "\n".join(lines)

    def _resolve_format(self) -> PixelFormat:
        """Map the FourCC or DXGI format code to BC4/BC5"""
        if self.header10:
            try:
                return DXGI_FORMATS[DXGI_FORMAT(self.header10.dxgiFormat)]
            except (ValueError, KeyError):
                raise UnsupportedFormatError(
                    f"Is not BC4 or BC5: DXGI format {self.header10.format_name}"
                ) from None

        fourcc = self.header.ddspf.dwFourCC
        if not self.header.ddspf.dwFlags & DDPF.FOURCC:
            log.debug("DDPF_FOURCC not set, trying FourCC 0x%08X anyway", fourcc)
        try:
            return FOURCC_FORMATS[FourCC(fourcc)]
        except (ValueError, KeyError):
            raise UnsupportedFormatError(f"Is not BC4 or BC5: FourCC '{_fourcc_str(fourcc)}'") from None

    def _check_geometry(self) -> None:
        width, height = self.width, self.height
        if width <= 0 or height <= 0:
            raise MalformedGeometryError(f"Texture has no texels: {width}x{height}")
        if width % 4 or height % 4:
            raise MalformedGeometryError(f"Dimensions must be multiples of 4, got {width}x{height}")

    @property
    def width(self) -> int:
        return self.header.dwWidth

    @property
    def height(self) -> int:
        return self.header.dwHeight

    @property
    def is_bc4(self) -> bool:
        return self.pixel_format == PixelFormat.BC4

    @property
    def is_bc5(self) -> bool:
        return self.pixel_format == PixelFormat.BC5

    @property
    def block_count(self) -> int:
        """Total 8-byte blocks in the top-level image"""
        return self._decompressor().block_count(self.width, self.height)

    @property
    def image(self) -> Optional[np.ndarray]:
        """Buffer produced by the last successful ``decode``, or None"""
        return self._image

    def _decompressor(self) -> BlockChannelDecompressor:
        return DECOMPRESSORS[self.pixel_format]()

    def decode_channels(self) -> np.ndarray:
        """
        Decode the reconstructed channel planes without compositing

        Returns:
            numpy array of shape (height, width, 2) with dtype float32
        """
        # Header fields are mutable after construction
        if self._resolve_format() != self.pixel_format:
            raise UnsupportedFormatError("Pixel format changed since the header was validated")

        decompressor = self._decompressor()
        self._stream.seek(self._start)
        data = self._stream.read(self.block_count * BLOCK_SIZE)
        return decompressor.decompress(data, self.width, self.height)

    def decode(self, pass_fn: Optional[CompositePass] = None) -> np.ndarray:
        """
        Decode the full image

        Args:
            pass_fn: Composite pass mapping (channel0, channel1) to (r, g, b);
                     None selects ``void_pass``

        Returns:
            numpy array of shape (height, width, 3) with dtype uint8 (RGB).
            The same buffer is available as ``image`` until the next decode.

        Raises:
            UnsupportedFormatError: If the format is not BC4/BC5
            StreamUnderrunError: If the stream ends before the last block
            PassOutputError: If the pass produces values outside [0, 1]
        """
        channels = self.decode_channels()
        rgb = composite(channels, pass_fn or void_pass)
        self._image = rgb
        log.debug("Decoded %dx%d %s image", self.width, self.height, self.pixel_format.name)
        return rgb
