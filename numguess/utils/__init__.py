from .dict_boardcast import dict_mean
from .errors import GuessingGameError, InvalidRangeError, NotInitializedError
from .eval import eval
from .file import ensure_dir
from .logger import setup_logger
from .registry import Registry
