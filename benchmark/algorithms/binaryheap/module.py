from benchmark.algorithms.base.module import BaseQueue
import heapq

import numpy as np

class BinaryHeapQueue(BaseQueue):
    def __init__(self):
        self.data = []

    def put_many(self, items: np.ndarray):
        for item in items.tolist():
            heapq.heappush(self.data, item)
        return len(self.data)

    def put_take_one(self, item: int):
        return heapq.heappushpop(self.data, item)

    def __len__(self):
        return len(self.data)

    def __str__(self):
        return f"heapq()"
