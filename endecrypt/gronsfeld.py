"""Gronsfeld cipher over raw bytes: each byte is shifted by a key digit."""

from __future__ import annotations

import os
from pathlib import Path

_DIGITS = "0123456789"


def _shifts(key: str) -> list[int]:
    if not key:
        raise ValueError("key must not be empty")
    if any(c not in _DIGITS for c in key):
        raise ValueError("key must consist of digits only")
    return [int(c) for c in key]


def process_data(data: bytes, key: str, encrypt: bool) -> bytes:
    """Shift every byte by the matching key digit, modulo 256."""
    shifts = _shifts(key)
    sign = 1 if encrypt else -1
    period = len(shifts)
    return bytes(
        (byte + sign * shifts[i % period]) % 256 for i, byte in enumerate(data)
    )


def _transform_file(
    input_path: str | os.PathLike, output_path: str | os.PathLike, key: str, encrypt: bool
) -> None:
    data = Path(input_path).read_bytes()
    Path(output_path).write_bytes(process_data(data, key, encrypt))


def encrypt_file(input_path: str | os.PathLike, output_path: str | os.PathLike, key: str) -> None:
    """Encrypt the file at input_path into output_path."""
    _transform_file(input_path, output_path, key, True)


def decrypt_file(input_path: str | os.PathLike, output_path: str | os.PathLike, key: str) -> None:
    """Decrypt the file at input_path into output_path."""
    _transform_file(input_path, output_path, key, False)