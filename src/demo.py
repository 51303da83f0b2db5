"""
Binary Heap Demo: shuffled integers and strings drained through min and max heaps.
"""

from itertools import product

import numpy as np

from binary_heap import MaxHeap, MinHeap

SEED = 42
NUMBER_RANGE = (-20, 20)
ALPHABET = "abc"


def shuffled(values, rng):
    return [values[i] for i in rng.permutation(len(values))]


def drain(heap):
    out = []
    while not heap.is_empty():
        out.append(heap.extract())
    return out


def example_1_numbers(rng):
    print("=" * 60)
    print(f"Example 1: Integers {NUMBER_RANGE[0]}..{NUMBER_RANGE[1]}")
    print("=" * 60)

    low, high = NUMBER_RANGE
    numbers = shuffled(list(range(low, high + 1)), rng)
    print(f"Input:    {numbers}")
    print(f"Min-heap: {' '.join(str(n) for n in drain(MinHeap(numbers)))}")
    print(f"Max-heap: {' '.join(str(n) for n in drain(MaxHeap(numbers)))}")
    print()


def example_2_strings(rng):
    print("=" * 60)
    print(f"Example 2: Three-letter strings over '{ALPHABET}'")
    print("=" * 60)

    strings = shuffled(["".join(p) for p in product(ALPHABET, repeat=3)], rng)
    print(f"Input:    {strings}")
    print(f"Min-heap: {' '.join(drain(MinHeap(strings)))}")
    print(f"Max-heap: {' '.join(drain(MaxHeap(strings)))}")
    print()


def example_3_layout(rng):
    print("=" * 60)
    print("Example 3: Backing array after bulk build")
    print("=" * 60)

    values = [int(v) for v in rng.integers(0, 100, size=10)]
    heap = MinHeap(values)
    print(f"Input:        {values}")
    print(f"Heap layout:  {heap}")
    print(f"Root (peek):  {heap.peek()}")
    print()


if __name__ == "__main__":
    rng = np.random.default_rng(SEED)
    example_1_numbers(rng)
    example_2_strings(rng)
    example_3_layout(rng)
