from __future__ import annotations

import logging
import os
from pathlib import Path

from pydantic import AnyUrl, ValidationError

from .errors import DirectoryCreationError
from .settings import DEFAULT_DIR_MODE

logger = logging.getLogger(__name__)


def is_url(location: str | os.PathLike[str]) -> bool:
    """
    True if `location` is an absolute URL with a host (scheme + host at minimum).

    Path objects are always local.
    """
    if not isinstance(location, str):
        return False
    try:
        url = AnyUrl(location)
    except ValidationError:
        return False
    return bool(url.host)


def ensure_dir(path: Path, *, mode: int = DEFAULT_DIR_MODE) -> Path:
    if path.is_dir():
        return path
    try:
        path.mkdir(mode=mode, parents=True, exist_ok=True)
    except (OSError, OverflowError) as e:
        # OverflowError: mode does not fit the C-level mode_t.
        raise DirectoryCreationError(str(path)) from e
    logger.debug("PATHS: created directory %s (mode=%o)", path, mode)
    return path


def ensure_parent_dir(path: Path, *, mode: int = DEFAULT_DIR_MODE) -> Path:
    return ensure_dir(path.parent, mode=mode)
