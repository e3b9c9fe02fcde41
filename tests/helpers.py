import numpy as np


def make_buffer(*rows):
    """Build an (H, W, 3) uint8 buffer from nested RGB tuples."""
    return np.array(rows, dtype=np.uint8)
