from __future__ import annotations

from typing import Any, Protocol


class DocumentCodec(Protocol):
    """
    Converts between raw bytes and a decoded JSON value.
    """

    def decode(self, raw: bytes) -> Any:
        """Decode bytes; raises JsonDecodeError on any failure."""
        ...

    def encode(self, doc: Any) -> bytes:
        """Encode a value; raises JsonEncodeError on any failure."""
        ...


class DocumentTransport(Protocol):
    """
    Moves bytes to and from a location. Reads work for paths and URLs,
    writes for local paths only.
    """

    def read(self, location: str, *, is_url: bool) -> bytes:
        """Return the full contents; raises FileReadError."""
        ...

    def write(self, path: str, data: bytes) -> None:
        """Replace the whole file; raises FileWriteError."""
        ...
