"""CredHub adapter – value codec.

CredHub stores values as JSON strings. Bytes that are valid UTF-8 travel as
plain text; anything else travels base64-encoded behind the ``Base64:``
marker. Text that itself starts with the marker is base64-encoded too, so a
stored value never has two readings.
"""
from __future__ import annotations

import base64
import binascii

from kv_keystore.kernel.errors import ProtocolViolationError

BASE64_PREFIX = "Base64:"


def encode_value(value: bytes, force_base64: bool = False) -> str:
    if not force_base64:
        try:
            text = value.decode("utf-8")
        except UnicodeDecodeError:
            pass
        else:
            if not text.startswith(BASE64_PREFIX):
                return text
    return BASE64_PREFIX + base64.b64encode(value).decode("ascii")


def decode_value(text: str) -> bytes:
    if not text.startswith(BASE64_PREFIX):
        try:
            return text.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise ProtocolViolationError(
                f"value is not valid text: {exc}", payload_type="value", cause=exc
            ) from exc
    try:
        return base64.b64decode(text[len(BASE64_PREFIX):], validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ProtocolViolationError(
            f"failed to decode base64 value: {exc}", payload_type="value", cause=exc
        ) from exc


__all__ = ["BASE64_PREFIX", "decode_value", "encode_value"]
