"""lexdoc configuration package."""

from lexdoc.config.loader import (
    OUTPUT_DIR_ENV,
    clear_cache,
    default_output_dir,
    get_config,
    load_config,
    load_settings,
    resolve_output_dir,
)
from lexdoc.config.models import LexdocConfig

__all__ = [
    "OUTPUT_DIR_ENV",
    "LexdocConfig",
    "clear_cache",
    "default_output_dir",
    "get_config",
    "load_config",
    "load_settings",
    "resolve_output_dir",
]
