"""Hill cipher over raw bytes with a 5x5 key matrix modulo 256."""

from __future__ import annotations

import math
import os
import re
from pathlib import Path

N = 5
MOD = 256

_INTEGER_PATTERN = re.compile(r"\s*([+-]?\d+)")
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1

Matrix = list[list[int]]


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _cmod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    return a - b * _cdiv(a, b)


def parse_key(key: str) -> Matrix:
    """Read the first 25 whitespace-separated integers of key into a 5x5 matrix."""
    values = []
    pos = 0
    for _ in range(N * N):
        match = _INTEGER_PATTERN.match(key, pos)
        if match is None:
            raise ValueError(f"key must contain {N * N} integers")
        value = int(match.group(1))
        if not _INT_MIN <= value <= _INT_MAX:
            raise ValueError(f"key value out of range: {match.group(1)}")
        values.append(_cmod(value, MOD))
        pos = match.end()
    return [values[row * N:(row + 1) * N] for row in range(N)]


def mod_inv(a: int, m: int) -> int:
    """Return the inverse of a modulo m by the extended Euclidean algorithm."""
    if m == 1:
        return 0
    original_a, m0 = a, m
    x0, x1 = 0, 1
    while a > 1:
        if m == 0:
            raise ValueError(f"{original_a} has no inverse modulo {m0}")
        q = _cdiv(a, m)
        a, m = m, _cmod(a, m)
        x0, x1 = x1 - q * x0, x0
    return _cmod(x1 + m0, m0)


def determinant(matrix: Matrix) -> int:
    """Return the determinant of a square matrix modulo 256, by cofactor expansion."""
    n = len(matrix)
    if n == 1:
        return matrix[0][0]
    if n == 2:
        return _cmod(matrix[0][0] * matrix[1][1] - matrix[0][1] * matrix[1][0], MOD)

    det = 0
    for p, pivot in enumerate(matrix[0]):
        minor = [[value for j, value in enumerate(row) if j != p] for row in matrix[1:]]
        sign = 1 if p % 2 == 0 else -1
        cofactor = _cmod(sign * pivot * determinant(minor), MOD)
        det = (det + cofactor + MOD) % MOD
    return det


def inverse_matrix(matrix: Matrix) -> Matrix:
    """Invert a 5x5 matrix modulo 256 by Gauss-Jordan elimination without pivoting."""
    det = determinant(matrix)
    if math.gcd(det, MOD) != 1:
        raise ValueError(f"determinant is not coprime with {MOD}")

    a = [list(row) for row in matrix]
    inv = [[int(i == j) for j in range(N)] for i in range(N)]

    for i in range(N):
        val = a[i][i]
        try:
            inv_val = mod_inv(val, MOD)
        except ValueError as exc:
            raise ValueError("matrix is not invertible") from exc
        if val == 0 or inv_val == 0:
            raise ValueError("matrix is not invertible")
        a[i] = [_cmod(x * inv_val, MOD) for x in a[i]]
        inv[i] = [_cmod(x * inv_val, MOD) for x in inv[i]]
        for k in range(N):
            if k == i:
                continue
            factor = a[k][i]
            a[k] = [
                _cmod(x - _cmod(factor * y, MOD) + MOD, MOD) for x, y in zip(a[k], a[i])
            ]
            inv[k] = [
                _cmod(x - _cmod(factor * y, MOD) + MOD, MOD) for x, y in zip(inv[k], inv[i])
            ]
    return inv


def process_data(data: bytes, key: str, encrypt: bool) -> bytes:
    """Multiply each 5-byte block by the key matrix (or its inverse), zero-padding the tail."""
    matrix = parse_key(key)
    if not encrypt:
        matrix = inverse_matrix(matrix)

    padded = bytes(data) + b"\x00" * (-len(data) % N)
    out = bytearray()
    for start in range(0, len(padded), N):
        block = padded[start:start + N]
        out.extend(sum(m * b for m, b in zip(row, block)) % MOD for row in matrix)
    return bytes(out)


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