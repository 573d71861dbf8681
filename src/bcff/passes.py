"""Composite passes: turning reconstructed channels into RGB

A pass maps the two reconstructed channel values of a texel to an
(r, g, b) triple in [0, 1]. Any ``(float, float) -> (r, g, b)`` callable
can be supplied and is called once per texel. Passes marked with
``plane_pass`` instead receive whole numpy channel planes in one call; the
built-in passes are written that way.
"""
from typing import Callable, Dict, Tuple
import numpy as np

from .errors import PassOutputError

CompositePass = Callable[..., Tuple]


def plane_pass(fn: CompositePass) -> CompositePass:
    """Mark a pass as working on numpy channel planes as well as scalars"""
    fn.vectorized = True
    return fn


@plane_pass
def void_pass(r, g):
    """Pass the channels through unchanged, blue is always 0"""
    return r, g, np.zeros_like(r)


@plane_pass
def normal_map_pass(x, y):
    """
    Reconstruct the Z component of a tangent-space normal map

    X and Y are decoded from [0, 1] to [-1, 1], Z is derived so the normal
    has unit length (0 when X and Y already exceed it) and is encoded back
    to [0, 1].
    """
    nx = 2 * x - 1
    ny = 2 * y - 1
    nz = np.sqrt(np.maximum(1 - nx * nx - ny * ny, 0.0))
    z = np.clip((nz + 1) / 2.0, 0.0, 1.0)
    return x, y, z


def texel_pass(fn: Callable[[float, float], Tuple[float, float, float]]) -> CompositePass:
    """Adapt a scalar (channel0, channel1) -> (r, g, b) function to channel planes"""
    return plane_pass(np.vectorize(fn, otypes=[np.float64, np.float64, np.float64]))


PASSES: Dict[str, CompositePass] = {
    'void': void_pass,
    'normal': normal_map_pass,
}


def composite(channels: np.ndarray, pass_fn: CompositePass = void_pass) -> np.ndarray:
    """
    Run a pass over decoded channel planes and quantize the result

    Args:
        channels: float32 array of shape (height, width, 2)
        pass_fn: Composite pass, defaults to ``void_pass``. Passes not marked
                 with ``plane_pass`` are called once per texel.

    Returns:
        numpy array of shape (height, width, 3) with dtype uint8 (RGB),
        each channel floor(value * 255) in single precision

    Raises:
        PassOutputError: If the pass produces values outside [0, 1]
    """
    if not getattr(pass_fn, 'vectorized', False):
        pass_fn = texel_pass(pass_fn)

    height, width = channels.shape[:2]
    r, g, b = pass_fn(channels[:, :, 0], channels[:, :, 1])

    rgb = np.empty((height, width, 3), dtype=np.float32)
    rgb[:, :, 0] = r
    rgb[:, :, 1] = g
    rgb[:, :, 2] = b

    if not np.all((rgb >= 0.0) & (rgb <= 1.0)):
        raise PassOutputError("Composite pass produced channel values outside [0, 1]")

    # Truncate rather than round, reconstructed colors lean slightly dark
    return np.floor(rgb * np.float32(255.0)).astype(np.uint8)
