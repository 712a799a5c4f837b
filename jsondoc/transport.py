from __future__ import annotations

import logging
from pathlib import Path

import requests

from .errors import FileReadError, FileWriteError
from .settings import DEFAULT_REQUEST_TIMEOUT

logger = logging.getLogger(__name__)


class FileTransport:
    """
    Reads from local files or remote URLs; writes to local files only.

    Writes go to a sibling temp file which then replaces the target, so a failed
    write never leaves a half-written document behind.
    """

    def __init__(
        self,
        *,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        session: requests.Session | None = None,
    ):
        self.timeout = timeout
        self._session = session

    def read(self, location: str, *, is_url: bool) -> bytes:
        if is_url:
            return self._fetch(location)
        try:
            return Path(location).read_bytes()
        except OSError as e:
            raise FileReadError(location) from e

    def write(self, path: str, data: bytes) -> None:
        tmp_path: Path | None = None
        try:
            # Follow symlinks so the real file is replaced, not the link.
            target = Path(path).resolve()
            if target.is_dir():
                raise IsADirectoryError(f"{target} is a directory")
            tmp_path = target.parent / (target.name + ".tmp")
            with tmp_path.open("wb") as f:
                f.write(data)
            tmp_path.replace(target)
        except (OSError, RuntimeError) as e:
            # RuntimeError: symlink loop during resolve() on older Pythons.
            if tmp_path is not None:
                self._discard(tmp_path)
            raise FileWriteError(path) from e
        logger.debug("TRANSPORT WRITE: %s (%d bytes)", path, len(data))

    def _fetch(self, url: str) -> bytes:
        get = self._session.get if self._session is not None else requests.get
        try:
            response = get(url, headers={"Accept": "application/json"}, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.debug("TRANSPORT FETCH: %s failed: %r", url, e)
            raise FileReadError(url) from e
        logger.debug("TRANSPORT FETCH: %s -> %s (%d bytes)", url, response.status_code, len(response.content))
        return response.content

    @staticmethod
    def _discard(tmp_path: Path) -> None:
        try:
            tmp_path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning("TRANSPORT WRITE: failed to remove temp file %s: %r", tmp_path, e)
