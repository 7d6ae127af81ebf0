# renderer/tone_mapping.py
from typing import Tuple
import numpy as np
from core.vector import Color
from core.utils import clamp

# Output is int(256 * clamp(x, 0, 0.999)), so 1.0 maps to 255 and every
# 8-bit bucket is the same width.
QUANTIZE_SCALE = 256.0
CLAMP_MAX = 0.999


def quantize_color(pixel_color: Color, samples_per_pixel: int = 1) -> Tuple[int, int, int]:
    """
    Average a summed sample color, gamma correct it with gamma 2 (sqrt) and
    quantize to 8 bits per channel.
    """
    scale = 1.0 / samples_per_pixel
    channels = []
    for c in (pixel_color.x, pixel_color.y, pixel_color.z):
        c = max(c * scale, 0.0) ** 0.5
        channels.append(int(QUANTIZE_SCALE * clamp(c, 0.0, CLAMP_MAX)))
    return channels[0], channels[1], channels[2]


def gamma_correct(linear: np.ndarray) -> np.ndarray:
    """
    sqrt gamma law on an averaged linear image. Negative values map to 0.
    """
    return np.sqrt(np.maximum(linear, 0.0))


def to_uint8(accumulated: np.ndarray, samples_per_pixel: int = 1) -> np.ndarray:
    """
    Vectorized quantize_color over an (H, W, 3) buffer of summed samples.
    """
    averaged = accumulated * (1.0 / samples_per_pixel)
    corrected = gamma_correct(averaged)
    output = (QUANTIZE_SCALE * np.clip(corrected, 0.0, CLAMP_MAX)).astype(np.uint8)
    return output
