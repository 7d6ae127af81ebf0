# renderer/export.py
"""
Image writers for finished frames.

All writers take an (height, width, 3) uint8 array whose row 0 is the top
scanline. Rows are written top to bottom, columns left to right.

    .ppm      -> plain-text P3 (one "R G B" line per pixel)
    anything  -> Pillow, format picked from the suffix (.png, .bmp, ...)
"""
from pathlib import Path
import numpy as np
from PIL import Image


def _check_pixels(pixels: np.ndarray):
    if pixels.ndim != 3 or pixels.shape[2] != 3:
        raise ValueError(f"Expected an (H, W, 3) image, got shape {pixels.shape}")


def format_ppm(pixels: np.ndarray) -> str:
    _check_pixels(pixels)
    height, width = pixels.shape[:2]
    lines = ["P3", f"{width} {height}", "255"]
    for r, g, b in pixels.reshape(-1, 3):
        lines.append(f"{int(r)} {int(g)} {int(b)}")
    return "\n".join(lines) + "\n"


def write_ppm(path, pixels: np.ndarray) -> Path:
    """
    Writes pixels as a P3 PPM file.
    """
    path = Path(path)
    with open(path, "w") as f:
        f.write(format_ppm(pixels))
    return path


def save_png(path, pixels: np.ndarray) -> Path:
    """
    Writes pixels through Pillow. Despite the name any format Pillow knows
    works; it is picked from the file suffix.
    """
    _check_pixels(pixels)
    path = Path(path)
    image = Image.fromarray(np.ascontiguousarray(pixels, dtype=np.uint8))
    image.save(path)
    return path


def save_image(path, pixels: np.ndarray) -> Path:
    """
    Creates the parent directory if needed and dispatches on the suffix.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.suffix.lower() == ".ppm":
        return write_ppm(path, pixels)
    return save_png(path, pixels)
