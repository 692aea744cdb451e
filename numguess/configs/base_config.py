from copy import deepcopy

from .config import Config

BINARY_SEARCH_CONFIG = Config(
    NAME="BinarySearch",
    MIN=0,
    MAX=100,
    MAX_STEP=None,
    VERBOSE=True,
    OUTPUT_DIR=None,
)

BASE_CONFIG = Config(
    BENCHMARK=deepcopy(BINARY_SEARCH_CONFIG),
    EVAL=Config(
        TIMES=100,
    ),
)
