from .settings import HelperConfig, DEFAULT_INDENTATION
from .loader import load_helper_config, load_config_data, find_config_file

__all__ = [
    "HelperConfig",
    "DEFAULT_INDENTATION",
    "load_helper_config",
    "load_config_data",
    "find_config_file",
]
