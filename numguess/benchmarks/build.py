from copy import deepcopy

import os
import os.path as osp

from numguess.utils import Registry

BENCHMARKS = Registry("benchmarks")


def build_benchmark(config):
    config = deepcopy(config.BENCHMARK)
    benchmark_cls = BENCHMARKS[config.pop("NAME")]
    dataset_file = config.pop("DATASET_FILE", None)

    config = dict({k.lower(): v for k, v in config.items()})
    benchmark = benchmark_cls(**config)

    if dataset_file:
        dataset_root = os.environ.get("NUMGUESS_DATASET_ROOT", default="datasets")
        benchmark.load_testcases_from_file(osp.join(dataset_root, dataset_file))

    return benchmark
