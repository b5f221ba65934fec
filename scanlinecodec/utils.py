"""Utility helpers for turning image arrays into packed pixel grids."""
from __future__ import annotations

import imageio.v2 as imageio
import numpy as np


def _ensure_rgba(image: np.ndarray) -> np.ndarray:
    arr = np.asarray(image)
    if arr.dtype != np.uint8:
        raise ValueError(f"Expected uint8 channel data, got {arr.dtype}")
    if arr.ndim == 2:
        # Grayscale -> replicate to RGB, opaque
        arr = np.stack([arr, arr, arr], axis=-1)
    if arr.ndim == 3:
        if arr.shape[2] == 2:
            gray, alpha = arr[..., 0], arr[..., 1]
            return np.stack([gray, gray, gray, alpha], axis=-1)
        if arr.shape[2] == 3:
            alpha = np.full(arr.shape[:2] + (1,), 255, dtype=np.uint8)
            return np.concatenate([arr, alpha], axis=-1)
        if arr.shape[2] == 4:
            return arr
    raise ValueError(f"Unsupported image shape for RGBA conversion: {arr.shape}")


def pack_rgba(channels: np.ndarray) -> np.ndarray:
    """Pack ``(H, W, 4)`` uint8 channels into ``(H, W)`` ``0xRRGGBBAA`` pixels."""
    rgba = np.ascontiguousarray(_ensure_rgba(channels))
    return rgba.view(">u4")[..., 0].astype(np.uint32)


def load_image_rgba(path: str) -> np.ndarray:
    """
    Load an image file as uint8 RGBA channels with shape (H, W, 4).
    """
    frame = imageio.imread(path)
    return _ensure_rgba(np.asarray(frame))
