# renderer/tone_mapping.py
import numpy as np

def gamma_correct(linear_image: np.ndarray, gamma: float = 2.0) -> np.ndarray:
    """
    Gamma-encode a linear radiance image. Negative values are clipped first.
    """
    return np.clip(linear_image, 0.0, None) ** (1.0 / gamma)

def to_rgb8(image: np.ndarray) -> np.ndarray:
    """
    Quantize [0, 1] floats to 8-bit channels, clamping out-of-range values.
    """
    return np.clip(image * 255.999, 0, 255).astype(np.uint8)

def reinhard_tone_mapping(accumulated: np.ndarray, exposure: float = 1.0,
                          white_point: float = 1.0, gamma: float = 2.2) -> np.ndarray:
    """
    Apply Reinhard tone mapping to a linear radiance image.
    """
    scaled = accumulated * exposure
    mapped = scaled / (1.0 + scaled / white_point)
    return to_rgb8(gamma_correct(mapped, gamma))
