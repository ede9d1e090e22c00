import numpy as np
import numpy.typing as npt
from PIL import Image

from glyph_rogue.types import Color

# Type aliases for clarity
FloatArray = npt.NDArray[np.float32]
UInt8Array = npt.NDArray[np.uint8]


def tint_image(base: Image.Image, color: Color) -> Image.Image:
    """
    Blend a white/greyscale image with ``color``: every channel (alpha included)
    is multiplied by the matching color channel. White becomes ``color``; fully
    transparent pixels stay transparent.
    """
    if base.mode != "RGBA":
        base = base.convert("RGBA")

    arr: FloatArray = np.asarray(base, dtype=np.float32)
    factors: FloatArray = np.array([color.r, color.g, color.b, color.a], dtype=np.float32)
    out: UInt8Array = np.clip(arr * factors, 0.0, 255.0).round().astype(np.uint8)
    return Image.fromarray(out)
