# utils.py
import re

import numpy as np
from typing import Optional

from constants import GEOMETRY_TOLERANCE


def normalize(vector: np.ndarray) -> np.ndarray:
    """Normalizes a numpy vector."""
    norm = np.linalg.norm(vector)
    if norm < GEOMETRY_TOLERANCE:
        # Degenerate input maps to the zero vector
        return np.zeros_like(vector, dtype=float)
    return vector / norm


def parse_dimension(value: Optional[str], default: int) -> int:
    """
    Parses a grid dimension given on the command line from its leading integer
    ("3.5" -> 3, "12x" -> 12). Anything missing, non-numeric or not strictly
    positive falls back to `default`.
    """
    if value is None:
        return default
    match = re.match(r"\s*([+-]?\d+)", str(value))
    if match is None:
        return default
    parsed = int(match.group(1))
    return parsed if parsed > 0 else default


def parse_seed(value: Optional[str]) -> Optional[int]:
    """Parses an optional RNG seed; returns None when absent or not an integer."""
    if value is None:
        return None
    try:
        return int(str(value).strip())
    except ValueError:
        return None
