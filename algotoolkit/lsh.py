"""Locality-sensitive hashing for approximate nearest neighbours on the sphere.

Keys are unit vectors compared by cosine distance. Each LSH function maps
a vector to an integer code made of the signs of its dot products with
random directions. The codes are then filed in hash tables.
"""

from __future__ import annotations

import argparse
import math
import random
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Any, Optional

from algotoolkit.hashing import HashTable
from algotoolkit.sequences import format_value

DATA_DIM = 3
DATASET_SIZE = 10_000
QUERYSET_SIZE = 1_000
RANDOM_SEED = 0
CODE_BITS = 32

Vector = tuple[float, ...]
LshFunction = Callable[[Sequence[float]], int]
DistanceFunction = Callable[[Sequence[float], Sequence[float]], float]


def sample_unit_vector(rng: random.Random, dim: int = DATA_DIM) -> Vector:
    """Draw a vector uniformly from the unit hypersphere in ``dim`` dimensions."""
    components = [rng.gauss(0.0, 1.0) for _ in range(dim)]
    norm = math.sqrt(sum(x * x for x in components))
    return tuple(x / norm for x in components)


def sample_dataset(rng: random.Random, count: int, dim: int = DATA_DIM) -> list[Vector]:
    """Draw ``count`` unit vectors."""
    return [sample_unit_vector(rng, dim) for _ in range(count)]


def cosine_distance(vec1: Sequence[float], vec2: Sequence[float]) -> float:
    """Return ``1 - cos`` of the angle between two non-zero vectors."""
    xnorm2 = ynorm2 = dot = 0.0
    for x, y in zip(vec1, vec2):
        xnorm2 += x * x
        ynorm2 += y * y
        dot += x * y
    return 1 - dot / math.sqrt(xnorm2 * ynorm2)


def sample_lsh_function(rng: random.Random, dim: int = DATA_DIM) -> LshFunction:
    """Sample a binary hash ``f(x) = 1 if <w, x> >= 0 else 0`` for a random ``w``."""
    weights = sample_unit_vector(rng, dim)

    def lsh_function(vec: Sequence[float]) -> int:
        dot = sum(w * x for w, x in zip(weights, vec))
        return 1 if dot >= 0 else 0

    return lsh_function


def sample_amplified_lsh_function(
    rng: random.Random, r: int, dim: int = DATA_DIM
) -> LshFunction:
    """Sample ``F(x) = [f1(x), ..., fr(x)]`` packed as an ``r``-bit integer.

    The first function gives the most significant bit. ``r`` must lie in
    ``1..32``; otherwise ``ValueError`` is raised.
    """
    if not 1 <= r <= CODE_BITS:
        raise ValueError(f"amplification {r} outside 1..{CODE_BITS}")
    functions = [sample_lsh_function(rng, dim) for _ in range(r)]

    def amplified(vec: Sequence[float]) -> int:
        code = 0
        for function in functions:
            code = (code << 1) | function(vec)
        return code

    return amplified


@dataclass
class LshFamily:
    """A family of amplified LSH functions sharing one random generator."""

    amplification: int
    rng: random.Random
    dim: int = DATA_DIM

    def sample(self) -> LshFunction:
        """Return a function drawn from the family."""
        return sample_amplified_lsh_function(self.rng, self.amplification, self.dim)

    def __call__(self) -> LshFunction:
        return self.sample()


@dataclass
class SearchResult:
    """The closest key found, its distance and how many keys were compared."""

    distance: float
    key: Optional[Any]
    num_comparisons: int


class LSHTable:
    """An LSH index made of ``num_tables`` hash tables of ``num_chains`` chains.

    ``lsh_family`` is called once per table and must return a function
    mapping a key to an integer code.
    """

    def __init__(
        self,
        num_chains: int,
        num_tables: int,
        lsh_family: Callable[[], LshFunction],
        distance: DistanceFunction = cosine_distance,
    ) -> None:
        self._distance = distance
        self._tables: list[HashTable] = []
        self._functions: list[LshFunction] = []
        for _ in range(num_tables):
            self._tables.append(HashTable(num_chains, int))
            self._functions.append(lsh_family())

    def insert(self, key: Sequence[float]) -> None:
        """Add ``key`` to the bucket of its code in every table."""
        for table, function in zip(self._tables, self._functions):
            code = function(key)
            bucket = table.get(code)
            if bucket is None:
                table.insert(code, [key])
            else:
                bucket.append(key)

    def get(self, query: Sequence[float], m: int = 1, tau: float = 0) -> SearchResult:
        """Look for a key within distance ``tau`` of ``query``.

        At most ``m`` comparisons are made; the closest key seen is
        returned even if it is farther than ``tau``. When the query's
        buckets are all empty the distance is infinite and the key ``None``.
        Scanning a bucket stops once a key within ``tau`` has been found.
        """
        result = SearchResult(math.inf, None, 0)
        for table, function in zip(self._tables, self._functions):
            bucket = table.get(function(query))
            if bucket is None:
                continue
            for key in bucket:
                distance = self._distance(key, query)
                if distance < result.distance:
                    result.distance = distance
                    result.key = key
                result.num_comparisons += 1
                if result.num_comparisons >= m:
                    return result
                if result.distance <= tau:
                    break
        return result


def naive_retrieve(
    dataset: Iterable[Sequence[float]],
    query: Sequence[float],
) -> SearchResult:
    """Find the closest key by cosine distance, scanning the whole dataset.

    The comparison count starts at one, so it ends at ``len(dataset) + 1``.
    """
    result = SearchResult(math.inf, None, 1)
    for key in dataset:
        d = cosine_distance(key, query)
        result.num_comparisons += 1
        if d < result.distance:
            result.distance = d
            result.key = key
    return result


def benchmark(
    queries: Iterable[Sequence[float]], get: Callable[[Sequence[float]], float]
) -> tuple[float, float, float]:
    """Return mean and variance of the finite distances, and their share.

    The share is the fraction of queries for which ``get`` returned a
    finite distance. Undefined statistics come out as NaN.
    """
    total = total_sq = 0.0
    n = ok = 0
    for query in queries:
        distance = get(query)
        if math.isfinite(distance):
            total += distance
            total_sq += distance * distance
            ok += 1
        n += 1
    if ok == 0:
        return math.nan, math.nan, 0.0 if n else math.nan
    mean = total / ok
    variance = total_sq / ok - mean * mean
    return mean, variance, ok / n


# (argument index, width, alignment, float format) in printed order
_COLUMNS = (
    (0, 7, "<", None),
    (1, 7, "<", None),
    (2, 7, "<", None),
    (4, 10, "<", ".3g"),
    (5, 10, "<", ".3g"),
    (3, 7, "<", ".1g"),
    (6, 6, ">", ".1f"),
    (7, 6, ">", ".1f"),
)
_SEPARATORS = ("| ", " | ", " | ", " | ", " ", " | ", " | ", " | ")


def _cell(value: Any, float_format: Optional[str]) -> str:
    if isinstance(value, float):
        return format(value, float_format) if float_format else format_value(value)
    return str(value)


def format_row(*args: Any) -> str:
    """Format one row of the results table.

    Takes the number of tables, comparisons, amplification, speed-up,
    mean distance, its spread, success rate and relative distance, in
    that order; the distance columns are printed before the speed-up.
    """
    if len(args) != len(_COLUMNS):
        raise TypeError(f"format_row takes {len(_COLUMNS)} arguments, got {len(args)}")
    parts = []
    for separator, (index, width, align, float_format) in zip(_SEPARATORS, _COLUMNS):
        text = _cell(args[index], float_format)
        parts.append(f"{separator}{text:{align}{width}}")
    return "".join(parts) + "|"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Compare LSH retrieval against a linear scan and print a results table."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--dataset-size", type=int, default=DATASET_SIZE)
    parser.add_argument("--queryset-size", type=int, default=QUERYSET_SIZE)
    parser.add_argument("--seed", type=int, default=RANDOM_SEED)
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    dataset = sample_dataset(rng, args.dataset_size)
    queries = sample_dataset(rng, args.queryset_size)
    spread_scale = math.sqrt(args.queryset_size)

    print(format_row("#tables", "#comp.", "amplif.", "speedup",
                     "distance", "(stddev)", "succ.", "rel d."))
    print(format_row("-", "-", "-", "-", "-", "", "-", "-"))

    mean, variance, rate = benchmark(
        queries, lambda query: naive_retrieve(dataset, query).distance
    )
    print(format_row("-", args.dataset_size, "-", 1, mean,
                     variance / spread_scale, rate, 1))
    best = mean

    for num_comparisons in (1, 10, 100, 1000):
        for num_tables in (1, 2, 3):
            for amplification in (1, 4, 8, 16, 32):
                num_chains = min(1 << amplification, 256)
                table = LSHTable(num_chains, num_tables, LshFamily(amplification, rng))
                for key in dataset:
                    table.insert(key)

                mean, variance, rate = benchmark(
                    queries,
                    lambda query: table.get(query, num_comparisons, 0).distance,
                )
                print(format_row(
                    num_tables, num_comparisons, amplification,
                    args.dataset_size / num_comparisons, mean,
                    variance / spread_scale, rate * 100, mean / best,
                ))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())