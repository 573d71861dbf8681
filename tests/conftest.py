import struct

import pytest

DDPF_FOURCC = 0x4


def encode_block(ref0, ref1, indices):
    """Pack two reference bytes and 16 3-bit indices into an 8-byte block"""
    if isinstance(indices, int):
        indices = [indices] * 16
    field = 0
    for i, index in enumerate(indices):
        field |= index << (3 * i)
    return bytes([ref0, ref1]) + field.to_bytes(6, 'little')


def build_dds(width, height, blocks=b'', fourcc=b'ATI1', dxgi_format=None, pf_flags=DDPF_FOURCC):
    """Assemble a DDS file: magic, header, optional DX10 header, block data"""
    data = bytearray(b'DDS ')
    data += struct.pack('<7I', 124, 0x1007, height, width, 0, 0, 0)
    data += struct.pack('<11I', *([0] * 11))
    data += struct.pack('<II4sI4I', 32, pf_flags, fourcc, 0, 0, 0, 0, 0)
    data += struct.pack('<5I', 0x1000, 0, 0, 0, 0)
    if fourcc == b'DX10':
        data += struct.pack('<5I', dxgi_format, 3, 0, 1, 0)
    data += blocks
    return bytes(data)


@pytest.fixture
def block():
    return encode_block


@pytest.fixture
def dds():
    return build_dds
