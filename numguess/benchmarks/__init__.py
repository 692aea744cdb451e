from .binary_search import BinarySearchEvaluator
from .build import BENCHMARKS, build_benchmark
