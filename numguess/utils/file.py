import os


def ensure_dir(path):
    if path:
        os.makedirs(path, exist_ok=True)
