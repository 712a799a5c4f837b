from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Mapping, Sequence

from pydantic import BaseModel

from .errors import DocumentShapeError, UnsupportedOperationError
from .interfaces import DocumentCodec, DocumentTransport
from .json_store import JsonCodec
from .paths import ensure_parent_dir, is_url
from .settings import StoreSettings, get_settings
from .transport import FileTransport

logger = logging.getLogger(__name__)

# A JSON object or array. Pushed elements may be any JSON value.
Document = Mapping[str, Any] | Sequence[Any]


class DocumentStore:
    """
    A single JSON document bound to a local path or a remote URL.

    - Local paths are created eagerly on construction (parent dirs + `{}`).
    - URLs are read-only: set/merge/push raise UnsupportedOperationError.
    - Every call reads (and, for mutations, rewrites) the whole document;
      nothing is cached between calls and nothing is locked.
    """

    def __init__(
        self,
        filepath: str | os.PathLike[str],
        *,
        settings: StoreSettings | None = None,
        codec: DocumentCodec | None = None,
        transport: DocumentTransport | None = None,
    ):
        self._is_url = is_url(filepath)
        self._filepath = os.fspath(filepath)
        self._settings = settings if settings is not None else get_settings()
        self._codec = codec if codec is not None else JsonCodec(
            indent=self._settings.indent,
            sort_keys=self._settings.sort_keys,
        )
        self._transport = transport if transport is not None else FileTransport(
            timeout=self._settings.request_timeout,
        )

        if not self._is_url:
            self._create_file_if_not_exists()

    @property
    def filepath(self) -> str:
        return self._filepath

    @property
    def is_url(self) -> bool:
        return self._is_url

    def __repr__(self) -> str:
        kind = "url" if self._is_url else "path"
        return f"{type(self).__name__}({kind}={self._filepath!r})"

    def get(self) -> Document:
        """
        Load and return the current document (local or remote).

        A file holding a bare scalar decodes to that scalar.
        """
        raw = self._transport.read(self._filepath, is_url=self._is_url)
        return self._codec.decode(raw)

    def set(self, content: Document | BaseModel) -> None:
        """Replace the whole document with `content`."""
        if self._is_url:
            raise UnsupportedOperationError("set")
        self._save(self._as_document(content))

    def merge(self, content: Document | BaseModel) -> Document:
        """
        Shallow-merge `content` into the document and return the result.

        Keys in `content` overwrite existing keys; all other keys are kept.
        Two arrays are concatenated.
        """
        if self._is_url:
            raise UnsupportedOperationError("merge")
        content = self._as_document(content)
        merged = self._overlay(self.get(), content)
        self._save(merged)
        return merged

    def push(self, content: Any) -> list[Any]:
        """Append `content` as one new trailing element and return the array."""
        if self._is_url:
            raise UnsupportedOperationError("push")
        value = content.model_dump(mode="json") if isinstance(content, BaseModel) else content
        data = self.get()
        if isinstance(data, dict) and not data:
            # A freshly created store holds `{}`.
            data = []
        if not isinstance(data, list):
            raise DocumentShapeError(
                f"Cannot push onto a JSON {_kind(data)} in {self._filepath!r}; the document must be an array"
            )
        data.append(value)
        self._save(data)
        return data

    def _create_file_if_not_exists(self) -> None:
        path = Path(self._filepath)
        if path.exists():
            return
        ensure_parent_dir(path, mode=self._settings.dir_mode)
        self._save({})
        logger.debug("DOC STORE INIT: created %s", path)

    def _save(self, doc: Any) -> None:
        data = self._codec.encode(doc)
        self._transport.write(self._filepath, data)

    def _overlay(self, current: Any, content: dict[str, Any] | list[Any]) -> Document:
        if isinstance(current, (dict, list)) and not current:
            return content
        if isinstance(current, dict) and isinstance(content, dict):
            merged = dict(current)
            merged.update(content)
            return merged
        if isinstance(current, list) and isinstance(content, list):
            return current + content
        raise DocumentShapeError(
            f"Cannot merge a JSON {_kind(content)} into a JSON {_kind(current)} in {self._filepath!r}"
        )

    @staticmethod
    def _as_document(content: Any) -> dict[str, Any] | list[Any]:
        if isinstance(content, BaseModel):
            content = content.model_dump(mode="json")
        if isinstance(content, Mapping):
            return dict(content)
        if isinstance(content, Sequence) and not isinstance(content, (str, bytes, bytearray)):
            return list(content)
        raise DocumentShapeError(f"Expected a JSON object or array, got {type(content).__name__}")


def _kind(value: Any) -> str:
    if isinstance(value, dict):
        return "object"
    if isinstance(value, list):
        return "array"
    if value is None:
        return "null"
    return type(value).__name__
