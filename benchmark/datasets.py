"""
Functionality to create the item batches used in the benchmark.
"""
import numpy as np

from typing import Tuple


def get_dataset(size: int, inserts: int, seed: int = 0) -> Tuple[np.ndarray, int]:
    """
    Builds the batch of items inserted per trial and the probe item used for
    the single put/take runs.

    Args:
        size (int): Total number of items in the heap after all trials.
        inserts (int): Number of trials the total is split into.
        seed (int): Seed for the shuffle.

    Returns:
        Tuple[np.ndarray, int]: The shuffled batch ``0..size // inserts`` and
            the probe item, which sits in the middle of the batch range.
    """
    if inserts <= 0:
        raise ValueError(f"inserts must be positive, got {inserts}")
    batch = size // inserts
    rng = np.random.default_rng(seed)
    items = rng.permutation(batch + 1)
    return items, batch // 2
