import unittest

import numpy as np

from benchmark.algorithms.binaryheap.module import BinaryHeapQueue
from benchmark.algorithms.skewheap.module import SkewHeapQueue
from benchmark.datasets import get_dataset
from benchmark.definitions import get_definitions, instantiate_algorithm
from benchmark.main import run_experiment


class TestDatasets(unittest.TestCase):
    def test_batch_is_a_shuffled_range(self):
        items, item = get_dataset(1000, 10, seed=1)
        self.assertEqual(len(items), 101)
        self.assertTrue(np.all(np.sort(items) == np.arange(101)))
        self.assertEqual(item, 50)

    def test_inserts_must_be_positive(self):
        with self.assertRaises(ValueError):
            get_dataset(1000, 0)


class TestQueues(unittest.TestCase):
    def test_queues_agree(self):
        items, item = get_dataset(200, 4, seed=2)
        results = []
        for queue in (SkewHeapQueue(), BinaryHeapQueue()):
            self.assertEqual(queue.put_many(items), len(items))
            results.append([queue.put_take_one(item) for _ in range(5)])
        self.assertEqual(results[0], results[1])
        self.assertEqual(results[0], [0, 1, 2, 3, 4])

    def test_run_experiment(self):
        for definition in get_definitions():
            queue = instantiate_algorithm(definition)
            times = run_experiment(queue, size=1000, inserts=10, repeat=20)
            self.assertEqual(set(times), {"put", "put_take"})
            self.assertGreaterEqual(times["put"], 0)
            self.assertEqual(len(queue), 10 * 101)


if __name__ == "__main__":
    unittest.main()
