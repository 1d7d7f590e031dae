from dataclasses import dataclass
from typing import Dict, Iterator, Type

from benchmark.algorithms.base.module import BaseQueue
from benchmark.algorithms.binaryheap.module import BinaryHeapQueue
from benchmark.algorithms.skewheap.module import SkewHeapQueue


@dataclass
class Definition:
    algorithm: str
    constructor: Type[BaseQueue]


ALGORITHMS: Dict[str, Type[BaseQueue]] = {
    "skewheap": SkewHeapQueue,
    "heapq": BinaryHeapQueue,
}


def get_definitions() -> Iterator[Definition]:
    for name, constructor in ALGORITHMS.items():
        yield Definition(name, constructor)


def instantiate_algorithm(definition: Definition) -> BaseQueue:
    return definition.constructor()


def list_algorithms() -> None:
    print("The following algorithms are supported:")
    for name in ALGORITHMS:
        print("\t... %s" % name)
