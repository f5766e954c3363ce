# src/mazecarve/render/image.py
# Pillow bridge: pixel buffer -> bilevel image / PNG file.

import os
from PIL import Image

from .raster import PixelBuffer

def to_image(buf: PixelBuffer) -> Image.Image:
    """Return a 1-bit ("1" mode) image with black walls on white."""
    img = Image.frombytes("L", (buf.width, buf.height), buf.tobytes())
    # Samples are already 0/255, so no dithering is needed
    return img.convert("1", dither=Image.Dither.NONE)

def save_png(buf: PixelBuffer, path: str) -> str:
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    to_image(buf).save(path, format="PNG", optimize=True)
    return path
