"""Binary serialization of scalars, length-prefixed sequences and strings."""

from __future__ import annotations

import struct
from typing import BinaryIO, Iterable

from .types import SIZE_T

_BYTE_ORDERS = "<>!=@"


class SerializationError(Exception):
    """Raised when a value cannot be written to or read from a stream."""


def _codec(fmt: str) -> struct.Struct:
    if not fmt or fmt[0] not in _BYTE_ORDERS:
        fmt = "<" + fmt
    try:
        return struct.Struct(fmt)
    except struct.error as exc:
        raise SerializationError(f"Invalid format {fmt!r}") from exc


def write_scalar(out: BinaryIO, value, fmt: str) -> None:
    """Write one value in the given struct format."""
    codec = _codec(fmt)
    try:
        data = codec.pack(value)
    except struct.error as exc:
        raise SerializationError("Bad output stream") from exc
    try:
        out.write(data)
    except (OSError, ValueError) as exc:
        raise SerializationError("Bad output stream") from exc


def read_scalar(stream: BinaryIO, fmt: str):
    """Read one value in the given struct format."""
    codec = _codec(fmt)
    try:
        data = stream.read(codec.size)
    except (OSError, ValueError) as exc:
        raise SerializationError("Bad input stream") from exc
    if data is None or len(data) != codec.size:
        raise SerializationError("Bad input stream")
    return codec.unpack(data)[0]


def write_values(out: BinaryIO, values: Iterable, fmt: str) -> None:
    """Write a length prefix followed by every value."""
    items = list(values)
    write_scalar(out, len(items), SIZE_T)
    for item in items:
        write_scalar(out, item, fmt)


def read_values(stream: BinaryIO, fmt: str, count: int | None = None) -> list:
    """Read ``count`` values, or a length prefix and that many values."""
    if count is None:
        count = read_scalar(stream, SIZE_T)
    return [read_scalar(stream, fmt) for _ in range(count)]


def write_string(out: BinaryIO, text: str) -> None:
    """Write a string as a length-prefixed run of UTF-8 bytes."""
    data = text.encode("utf-8")
    write_scalar(out, len(data), SIZE_T)
    try:
        out.write(data)
    except (OSError, ValueError) as exc:
        raise SerializationError("Bad output stream") from exc


def read_string(stream: BinaryIO) -> str:
    """Read a string written by :func:`write_string`."""
    size = read_scalar(stream, SIZE_T)
    try:
        data = stream.read(size)
    except (OSError, ValueError) as exc:
        raise SerializationError("Bad input stream") from exc
    if data is None or len(data) != size:
        raise SerializationError("Bad input stream")
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise SerializationError("Bad input stream") from exc