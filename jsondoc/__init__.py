from __future__ import annotations

from .document_store import Document, DocumentStore
from .errors import (
    DirectoryCreationError,
    DocumentShapeError,
    FileReadError,
    FileWriteError,
    JsonDecodeError,
    JsonDocumentError,
    JsonEncodeError,
    UnsupportedOperationError,
)
from .interfaces import DocumentCodec, DocumentTransport
from .json_store import JsonCodec
from .paths import is_url
from .settings import StoreSettings, get_settings, load_settings
from .transport import FileTransport

__all__ = [
    "Document",
    "DocumentStore",
    "DocumentCodec",
    "DocumentTransport",
    "JsonCodec",
    "FileTransport",
    "StoreSettings",
    "get_settings",
    "load_settings",
    "is_url",
    "JsonDocumentError",
    "DirectoryCreationError",
    "FileWriteError",
    "FileReadError",
    "JsonDecodeError",
    "JsonEncodeError",
    "UnsupportedOperationError",
    "DocumentShapeError",
]
