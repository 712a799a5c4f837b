from __future__ import annotations

import json
from typing import Any

from .errors import JsonDecodeError, JsonEncodeError
from .settings import DEFAULT_INDENT


class JsonCodec:
    """
    UTF-8 JSON codec.

    - Output is pretty-printed with a trailing newline.
    - NaN/Infinity are refused so the file always holds valid JSON.
    """

    def __init__(self, *, indent: int = DEFAULT_INDENT, sort_keys: bool = False):
        self.indent = indent
        self.sort_keys = sort_keys

    def decode(self, raw: bytes) -> Any:
        try:
            return json.loads(raw.decode("utf-8"), parse_constant=_reject_constant)
        except (ValueError, RecursionError) as e:
            # ValueError covers both JSONDecodeError and UnicodeDecodeError.
            raise JsonDecodeError(f"Invalid JSON document: {e}") from e

    def encode(self, doc: Any) -> bytes:
        try:
            text = json.dumps(
                doc,
                indent=self.indent,
                sort_keys=self.sort_keys,
                ensure_ascii=False,
                allow_nan=False,
            )
        except (TypeError, ValueError, RecursionError) as e:
            raise JsonEncodeError(f"Could not encode document as JSON: {e}") from e
        return (text + "\n").encode("utf-8")


def _reject_constant(name: str) -> Any:
    # NaN / Infinity / -Infinity are Python extensions, not JSON.
    raise ValueError(f"{name} is not valid JSON")
