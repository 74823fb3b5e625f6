"""
Normal mapping utilities for pbrforge

Tangent-space encoding and decoding of normal vectors, conversion of a
height field into an RGBA normal map, and validation of generated maps.
"""

from typing import Any, Dict

import numpy as np

from .colors import round_half_up


def encode_normal_vector(normal: np.ndarray) -> np.ndarray:
    """Encode normal vector(s) from [-1,1] range to [0,255] texture format.

    Each component maps through ``round((c * 0.5 + 0.5) * 255)`` with ties
    rounded up, then clamped to the byte range.

    Parameters
    ----------
    normal : np.ndarray
        Normal vector(s), shape (3,), (N, 3) or (H, W, 3)

    Returns
    -------
    np.ndarray
        Encoded normal(s) as uint8, same shape as input

    Examples
    --------
    >>> encode_normal_vector(np.array([0.0, 0.0, 1.0]))
    array([128, 128, 255], dtype=uint8)
    """
    normal = np.asarray(normal, dtype=np.float64)
    encoded = round_half_up((normal * 0.5 + 0.5) * 255)
    return np.clip(encoded, 0, 255).astype(np.uint8)


def decode_normal_vector(encoded: np.ndarray) -> np.ndarray:
    """Decode normal vector(s) from [0,255] texture format to [-1,1] range.

    Parameters
    ----------
    encoded : np.ndarray
        Encoded normal vector(s) in [0,255] uint8 range

    Returns
    -------
    np.ndarray
        Decoded normal(s) as float64, same shape as input
    """
    encoded = np.asarray(encoded, dtype=np.uint8)
    return encoded.astype(np.float64) / 255.0 * 2.0 - 1.0


def height_to_normal_map(heights: np.ndarray, strength: float) -> np.ndarray:
    """Convert a square height field to an RGBA tangent-space normal map.

    Gradients are central differences with replicated edges: at the border
    the pixel itself stands in for the missing neighbor.

    Parameters
    ----------
    heights : np.ndarray
        (H, W) height field
    strength : float
        Multiplier applied to both height differences

    Returns
    -------
    np.ndarray
        (H, W, 4) uint8 normal map, alpha 255
    """
    h = np.asarray(heights).astype(np.float64)
    if h.ndim != 2:
        raise ValueError(f"height field must be 2D, got shape {h.shape}")

    padded = np.pad(h, 1, mode="edge")
    dx = (padded[1:-1, 2:] - padded[1:-1, :-2]) * strength
    dy = (padded[2:, 1:-1] - padded[:-2, 1:-1]) * strength
    dz = np.ones_like(dx)

    length = np.sqrt(dx * dx + dy * dy + dz * dz)
    normals = np.stack([dx / length, dy / length, dz / length], axis=-1)

    out = np.empty(h.shape + (4,), dtype=np.uint8)
    out[..., :3] = encode_normal_vector(normals)
    out[..., 3] = 255
    return out


def validate_normal_map(normal_map: np.ndarray, tolerance: float = 0.02) -> Dict[str, Any]:
    """Validate a normal map texture for correctness.

    Parameters
    ----------
    normal_map : np.ndarray
        Normal map texture as (H, W, 3) or (H, W, 4) array
    tolerance : float, default 0.02
        Allowed deviation of decoded vector length from 1

    Returns
    -------
    Dict[str, Any]
        - 'valid': bool - True if all checks pass
        - 'errors': List[str] - validation error messages
        - 'unit_length_ok': bool - decoded normals are unit length
        - 'alpha_ok': bool - alpha channel (if any) is fully opaque
        - 'z_positive_ok': bool - Z components point away from the surface
    """
    normal_map = np.asarray(normal_map)
    errors = []
    unit_length_ok = True
    alpha_ok = True
    z_positive_ok = True

    if normal_map.ndim != 3 or normal_map.shape[2] not in (3, 4):
        errors.append(f"Normal map must be (H, W, 3|4), got shape {normal_map.shape}")
        return {
            'valid': False,
            'errors': errors,
            'unit_length_ok': False,
            'alpha_ok': False,
            'z_positive_ok': False,
        }

    if normal_map.dtype != np.uint8:
        errors.append(f"Normal map must be uint8, got {normal_map.dtype}")

    decoded = decode_normal_vector(normal_map[:, :, :3])
    lengths = np.linalg.norm(decoded, axis=2)
    bad_length = np.abs(lengths - 1.0) > tolerance
    if np.any(bad_length):
        errors.append(f"{int(np.sum(bad_length))}/{lengths.size} pixels have non-unit length normals")
        unit_length_ok = False

    if normal_map.shape[2] == 4 and np.any(normal_map[:, :, 3] != 255):
        errors.append("Alpha channel must be 255 everywhere")
        alpha_ok = False

    # Heights are bounded, so every generated normal leans toward +Z.
    if np.any(decoded[:, :, 2] <= 0.0):
        errors.append(f"{int(np.sum(decoded[:, :, 2] <= 0.0))} pixels have non-positive Z")
        z_positive_ok = False

    return {
        'valid': len(errors) == 0,
        'errors': errors,
        'unit_length_ok': unit_length_ok,
        'alpha_ok': alpha_ok,
        'z_positive_ok': z_positive_ok,
    }
