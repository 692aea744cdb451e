import os.path as osp
from loguru import logger

from .file import ensure_dir


def setup_logger(filename=None, filter=None):
    # returns the loguru handler id, pass it to `logger.remove` when done
    if filename is None:
        return None

    ensure_dir(osp.dirname(filename))
    return logger.add(filename, filter=filter)
