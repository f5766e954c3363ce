# src/mazecarve/render/surface.py
from __future__ import annotations
import pygame

from .image import to_image
from .raster import PixelBuffer

def to_surface(buf: PixelBuffer, scale: int = 1) -> pygame.Surface:
    """
    Return an RGB pygame.Surface of the buffer, optionally scaled up by an
    integer factor (nearest neighbour, walls stay crisp).
    """
    if scale < 1:
        raise ValueError(f"scale must be >= 1, got {scale}")
    img = to_image(buf).convert("RGB")
    surf = pygame.image.frombytes(img.tobytes(), img.size, "RGB")
    if scale == 1:
        return surf
    return pygame.transform.scale(surf, (buf.width * scale, buf.height * scale))
