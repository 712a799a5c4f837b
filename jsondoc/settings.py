from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_REQUEST_TIMEOUT = 30.0
DEFAULT_INDENT = 4
DEFAULT_DIR_MODE = 0o777
MAX_DIR_MODE = 0o7777


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int, *, base: int = 10) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip(), base)
    except ValueError:
        logger.warning("SETTINGS: ignoring invalid %s=%r", name, raw)
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw.strip())
    except ValueError:
        logger.warning("SETTINGS: ignoring invalid %s=%r", name, raw)
        return default
    return value if value > 0 else default


@dataclass(frozen=True)
class StoreSettings:
    # Remote fetches
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT

    # Output formatting
    indent: int = DEFAULT_INDENT
    sort_keys: bool = False

    # Mode for directories created on first use (umask still applies)
    dir_mode: int = DEFAULT_DIR_MODE


def get_settings() -> StoreSettings:
    request_timeout = _env_float("JSONDOC_REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT)

    indent = _env_int("JSONDOC_INDENT", DEFAULT_INDENT)
    if indent < 0:
        indent = DEFAULT_INDENT
    sort_keys = _env_bool("JSONDOC_SORT_KEYS", False)

    # e.g. JSONDOC_DIR_MODE=755
    dir_mode = _env_int("JSONDOC_DIR_MODE", DEFAULT_DIR_MODE, base=8)
    if not 0 <= dir_mode <= MAX_DIR_MODE:
        logger.warning("SETTINGS: ignoring out-of-range JSONDOC_DIR_MODE=%o", dir_mode)
        dir_mode = DEFAULT_DIR_MODE

    return StoreSettings(
        request_timeout=request_timeout,
        indent=indent,
        sort_keys=sort_keys,
        dir_mode=dir_mode,
    )


def load_settings(env_file: str | os.PathLike[str] | None = None) -> StoreSettings:
    """
    Load a dotenv file (if given) into the environment, then build settings.

    Variables already present in the environment win over the file.
    """
    if env_file is not None:
        load_dotenv(env_file, override=False)
    return get_settings()
