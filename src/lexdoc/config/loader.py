"""Configuration loader for lexdoc.

Reads the JSON configuration, validates it into a :class:`LexdocConfig` and
decides where generated documents are written. Parsed files are cached per
resolved path, so a config is only read once per process.

Output directory precedence, highest first:

1. an explicit argument (CLI ``--output-dir`` or ``Container(output_dir=...)``)
2. the ``LEXDOC_OUTPUT_DIR`` environment variable
3. ``output.directory`` in the config file
4. ``<user data dir>/lexdoc/generated-documents``
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Optional

from platformdirs import user_data_dir
from pydantic import ValidationError

from lexdoc.config.models import LexdocConfig
from lexdoc.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)

OUTPUT_DIR_ENV = "LEXDOC_OUTPUT_DIR"

_DEFAULT_CONFIG_PATH = Path(__file__).parent / "lexdoc_default.json"

_config_cache: dict[str, LexdocConfig] = {}


def load_config(path: Optional[Path | str] = None) -> LexdocConfig:
    """Load and validate a lexdoc config file.

    Keys missing from a custom file fall back to the model defaults, so a
    file holding only ``{"registry": {"ttl_seconds": 60}}`` is complete.

    Parameters
    ----------
    path : Path | str | None
        Custom JSON config file. ``None`` selects the bundled
        ``lexdoc_default.json``.

    Raises
    ------
    FileNotFoundError
        If *path* does not exist.
    json.JSONDecodeError
        If the file is not JSON.
    pydantic.ValidationError
        If a value is out of range, e.g. a negative TTL.
    """
    config_path = Path(path) if path else _DEFAULT_CONFIG_PATH
    key = str(config_path.resolve())
    cached = _config_cache.get(key)
    if cached is not None:
        return cached

    if not config_path.is_file():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    config = LexdocConfig.model_validate(json.loads(config_path.read_text(encoding="utf-8")))
    logger.debug(
        "Loaded configuration from %s (ttl=%ss, prose=%s)",
        config_path,
        config.registry.ttl_seconds,
        config.flow.prose_normalization.value,
    )
    _config_cache[key] = config
    return config


def load_settings(path: Optional[Path | str] = None) -> LexdocConfig:
    """Like :func:`load_config`, but every failure is a ``ConfigurationError``."""
    try:
        return load_config(path)
    except FileNotFoundError as exc:
        raise ConfigurationError(str(exc)) from exc
    except (json.JSONDecodeError, ValidationError) as exc:
        raise ConfigurationError(f"Invalid configuration in {path}: {exc}") from exc


def get_config() -> LexdocConfig:
    """Return the bundled default configuration."""
    return load_config()


def clear_cache() -> None:
    _config_cache.clear()


def default_output_dir() -> Path:
    """Per-user directory for generated documents."""
    return Path(user_data_dir("lexdoc")) / "generated-documents"


def resolve_output_dir(config: LexdocConfig, override: Optional[Path | str] = None) -> Path:
    """Pick the output directory: argument, environment, config file, default."""
    if override:
        return Path(override)
    from_env = os.environ.get(OUTPUT_DIR_ENV)
    if from_env:
        return Path(from_env)
    if config.output.directory:
        return Path(config.output.directory).expanduser()
    return default_output_dir()
