from abc import ABC, abstractmethod

import numpy as np


class BaseQueue(ABC):
    """Priority queue under benchmark. Keys are plain integers, smallest first."""

    @abstractmethod
    def put_many(self, items: np.ndarray) -> int:
        """Adds every item and returns the queue size afterwards."""

    @abstractmethod
    def put_take_one(self, item: int) -> int:
        """Adds one item, then removes and returns the top item."""

    @abstractmethod
    def __len__(self) -> int:
        pass

    def __repr__(self):
        return "run"
