from benchmark.algorithms.base.module import BaseQueue
from skewheap import SkewHeap, ascending

import numpy as np

class SkewHeapQueue(BaseQueue):
    def __init__(self):
        self.heap = SkewHeap(ascending)

    def put_many(self, items: np.ndarray):
        return self.heap.put(*items.tolist())

    def put_take_one(self, item: int):
        self.heap.put(item)
        return self.heap.take()

    def __len__(self):
        return len(self.heap)

    def __str__(self):
        return f"SkewHeap()"
