from .base_config import BASE_CONFIG, BINARY_SEARCH_CONFIG
from .config import Config
