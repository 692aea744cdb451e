def eval(config):
    # to avoid circular imports
    from numguess.benchmarks import build_benchmark

    benchmark = build_benchmark(config)
    times = config.EVAL.TIMES

    if benchmark.test_cases:
        return benchmark.test_on_testcases(min(times, len(benchmark.test_cases)))

    return benchmark.test_multi_time(times)
