"""Exceptions raised while validating and decoding BC4/BC5 textures"""


class DecodeError(ValueError):
    """Base class for all bcff decoding failures"""


class UnsupportedFormatError(DecodeError):
    """The container is not a DDS file or does not hold BC4/BC5 data"""


class StreamUnderrunError(DecodeError):
    """The stream ended before a header or block could be read in full"""


class MalformedGeometryError(DecodeError):
    """Width or height cannot be tiled into whole 4x4 blocks"""


class PassOutputError(DecodeError):
    """A composite pass produced channel values outside [0, 1]"""
