# hbhelpers/config/loader.py
"""
Loads helper options from TOML files so templates of one project share
the same indentation and other settings.
"""
import toml
from pathlib import Path
from typing import Dict, Any, Optional

from hbhelpers.exceptions import ConfigError
from hbhelpers.logging_setup import get_logger

from .settings import HelperConfig

log = get_logger(__name__)

PROJECT_CONFIG_FILENAMES = [".hbhelpers.toml", "hbhelpers.toml", "pyproject.toml"]

def _load_toml_file_data(file_path: Path) -> Dict[str, Any]:
    if not file_path.is_file(): return {}
    log.debug("loading_toml_config_file", path=str(file_path))
    try:
        data = toml.load(file_path)
    except (toml.TomlDecodeError, OSError) as e:
        raise ConfigError(f"Could not read configuration file {file_path}: {e}") from e
    if file_path.name == "pyproject.toml":
        return data.get("tool", {}).get("hbhelpers", {})
    return data

def find_config_file(directory: Optional[Path] = None) -> Optional[Path]:
    search_dir = directory or Path.cwd()
    for filename in PROJECT_CONFIG_FILENAMES:
        candidate = search_dir / filename
        if not candidate.is_file(): continue
        if candidate.name == "pyproject.toml" and not _load_toml_file_data(candidate):
            # a pyproject without a [tool.hbhelpers] table does not count
            continue
        return candidate
    return None

def load_config_data(directory: Optional[Path] = None) -> Dict[str, Any]:
    config_file = find_config_file(directory)
    if config_file is None:
        log.debug("no_configuration_file_found", directory=str(directory or Path.cwd()))
        return {}
    log.info("loading_helper_config", path=str(config_file))
    return _load_toml_file_data(config_file)

def load_helper_config(directory: Optional[Path] = None) -> HelperConfig:
    return HelperConfig.from_mapping(load_config_data(directory))
