import argparse
import logging
import time

from typing import Dict, List

from tqdm.auto import tqdm

from benchmark.algorithms.base.module import BaseQueue
from benchmark.datasets import get_dataset
from benchmark.definitions import Definition, get_definitions, instantiate_algorithm, list_algorithms

logger = logging.getLogger(__name__)


def run_experiment(queue: BaseQueue, size: int, inserts: int, repeat: int, seed: int = 0) -> Dict[str, float]:
    """
    Times one queue implementation at one heap size.

    Args:
        queue (BaseQueue): An empty queue to fill.
        size (int): Number of items the queue holds after the batch inserts.
        inserts (int): Number of batch inserts used to reach ``size``.
        repeat (int): Number of single put/take rounds.
        seed (int): Seed for the item shuffle.

    Returns:
        Dict[str, float]: Wall time in seconds of the batch inserts (``put``)
            and of the put/take rounds (``put_take``).
    """
    items, item = get_dataset(size, inserts, seed)

    start = time.time()
    for _ in tqdm(range(inserts), desc=f"{queue} put {len(items)}", leave=False):
        queue.put_many(items)
    put_time = time.time() - start

    start = time.time()
    for _ in tqdm(range(repeat), desc=f"{queue} put+take 1", leave=False):
        queue.put_take_one(item)
    put_take_time = time.time() - start

    logger.debug("%s holds %d items after the run", queue, len(queue))
    return dict(put=put_time, put_take=put_take_time)


def run_all(definitions: List[Definition], sizes: List[int], inserts: int, repeat: int, seed: int) -> List[dict]:
    results = []
    for size in sizes:
        batch = size // inserts
        print()
        print("-" * 78)
        print(f"- put() {batch} items ({batch} items * {inserts} trials = {size} items)")
        print(f"- put() and take() 1 item with heap containing {size} nodes ({repeat} times)")
        print("-" * 78)
        for definition in definitions:
            runner = instantiate_algorithm(definition)
            times = run_experiment(runner, size, inserts, repeat, seed)
            print("%-10s put: %8.3f s   put+take: %8.3f s" % (definition.algorithm, times["put"], times["put_take"]))
            results.append(dict(size=size, algo=definition.algorithm, **times))
    return results


def main():
    parser = argparse.ArgumentParser(
        formatter_class=argparse.ArgumentDefaultsHelpFormatter)

    parser.add_argument(
        '--sizes',
        metavar='N',
        type=int,
        nargs='+',
        help='heap sizes to benchmark',
        default=[50_000, 100_000, 500_000]
    )

    parser.add_argument(
        '--inserts',
        type=int,
        help='number of batch inserts used to reach each size',
        default=100
    )

    parser.add_argument(
        '--repeat',
        type=int,
        help='number of single put+take rounds per size',
        default=10_000
    )

    parser.add_argument(
        '--seed',
        type=int,
        help='seed for the item shuffle',
        default=0
    )

    parser.add_argument(
        '--algorithm',
    )

    parser.add_argument(
        '--list-algorithms',
        action='store_true',
        help="list available algorithms"
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='enable debug logging'
    )

    args = parser.parse_args()

    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.DEBUG if args.verbose else logging.INFO
    )

    if args.list_algorithms:
        list_algorithms()
        exit(0)

    definitions = list(get_definitions())

    if args.algorithm:
        definitions = [d for d in definitions if d.algorithm == args.algorithm]
        if not definitions:
            parser.error(f"unknown algorithm {args.algorithm!r}")

    if args.inserts <= 0:
        parser.error("--inserts must be positive")

    logger.info("benchmarking %s", ", ".join(d.algorithm for d in definitions))
    run_all(definitions, args.sizes, args.inserts, args.repeat, args.seed)


if __name__ == "__main__":
    main()
