"""Hash algorithm identifiers, names and digest objects."""

from __future__ import annotations

import hashlib
import struct
from enum import IntEnum


class HashAlgorithm(IntEnum):
    """Hash algorithms, numbered as they are stored in the settings file."""

    MD4 = 0
    MD5 = 1
    SHA1 = 2
    SHA224 = 3
    SHA256 = 4
    SHA384 = 5
    SHA512 = 6
    SHA3_224 = 7
    SHA3_256 = 8
    SHA3_384 = 9
    SHA3_512 = 10


_NAMES = {
    HashAlgorithm.MD4: "md4",
    HashAlgorithm.MD5: "md5",
    HashAlgorithm.SHA1: "sha1",
    HashAlgorithm.SHA256: "sha256",
    HashAlgorithm.SHA512: "sha512",
}
_BY_NAME = {name: algorithm for algorithm, name in _NAMES.items()}

_HASHLIB_NAMES = {
    HashAlgorithm.MD5: "md5",
    HashAlgorithm.SHA1: "sha1",
    HashAlgorithm.SHA224: "sha224",
    HashAlgorithm.SHA256: "sha256",
    HashAlgorithm.SHA384: "sha384",
    HashAlgorithm.SHA512: "sha512",
    HashAlgorithm.SHA3_224: "sha3_224",
    HashAlgorithm.SHA3_256: "sha3_256",
    HashAlgorithm.SHA3_384: "sha3_384",
    HashAlgorithm.SHA3_512: "sha3_512",
}


def algorithm_from_value(value) -> HashAlgorithm:
    """Return the algorithm stored under an integer value."""
    try:
        return HashAlgorithm(int(value))
    except (TypeError, ValueError):
        raise ValueError(f"unknown hash algorithm: {value!r}") from None


def algorithm_from_name(name: str) -> HashAlgorithm:
    """Return the algorithm for a short name such as 'sha1'; MD5 if unknown."""
    return _BY_NAME.get(name.strip().lower(), HashAlgorithm.MD5)


def algorithm_name(algorithm, as_filter: bool = False) -> str:
    """Return the short name of an algorithm, or a file-dialog filter for it."""
    try:
        name = _NAMES.get(HashAlgorithm(int(algorithm)), "md5")
    except (TypeError, ValueError):
        name = "md5"
    if as_filter:
        return f"{name} files (*.{name})"
    return name


_MASK = 0xFFFFFFFF


def _rotl(value: int, shift: int) -> int:
    value &= _MASK
    return ((value << shift) | (value >> (32 - shift))) & _MASK


class _Md4:
    """Incremental MD4 digest with the hashlib object interface."""

    name = "md4"
    digest_size = 16
    block_size = 64

    def __init__(self, data: bytes = b"") -> None:
        self._state = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)
        self._pending = b""
        self._length = 0
        self.update(data)

    def update(self, data) -> None:
        data = bytes(data)
        self._length += len(data)
        buffer = self._pending + data
        whole = len(buffer) - len(buffer) % 64
        view = memoryview(buffer)
        state = self._state
        for offset in range(0, whole, 64):
            state = self._compress(state, view[offset:offset + 64])
        self._state = state
        self._pending = buffer[whole:]

    @staticmethod
    def _compress(state, block):
        x = struct.unpack("<16I", block)
        a, b, c, d = state

        def f(p, q, r):
            return (p & q) | (~p & r)

        def g(p, q, r):
            return (p & q) | (p & r) | (q & r)

        def h(p, q, r):
            return p ^ q ^ r

        for k in (0, 4, 8, 12):
            a = _rotl(a + f(b, c, d) + x[k], 3)
            d = _rotl(d + f(a, b, c) + x[k + 1], 7)
            c = _rotl(c + f(d, a, b) + x[k + 2], 11)
            b = _rotl(b + f(c, d, a) + x[k + 3], 19)
        for k in (0, 1, 2, 3):
            a = _rotl(a + g(b, c, d) + x[k] + 0x5A827999, 3)
            d = _rotl(d + g(a, b, c) + x[k + 4] + 0x5A827999, 5)
            c = _rotl(c + g(d, a, b) + x[k + 8] + 0x5A827999, 9)
            b = _rotl(b + g(c, d, a) + x[k + 12] + 0x5A827999, 13)
        for k in (0, 2, 1, 3):
            a = _rotl(a + h(b, c, d) + x[k] + 0x6ED9EBA1, 3)
            d = _rotl(d + h(a, b, c) + x[k + 8] + 0x6ED9EBA1, 9)
            c = _rotl(c + h(d, a, b) + x[k + 4] + 0x6ED9EBA1, 11)
            b = _rotl(b + h(c, d, a) + x[k + 12] + 0x6ED9EBA1, 15)

        return (
            (state[0] + a) & _MASK,
            (state[1] + b) & _MASK,
            (state[2] + c) & _MASK,
            (state[3] + d) & _MASK,
        )

    def copy(self) -> "_Md4":
        clone = _Md4()
        clone._state = self._state
        clone._pending = self._pending
        clone._length = self._length
        return clone

    def digest(self) -> bytes:
        tail = self._pending + b"\x80"
        tail += b"\x00" * ((56 - len(tail)) % 64)
        tail += struct.pack("<Q", (self._length * 8) & 0xFFFFFFFFFFFFFFFF)
        state = self._state
        for offset in range(0, len(tail), 64):
            state = self._compress(state, tail[offset:offset + 64])
        return struct.pack("<4I", *state)

    def hexdigest(self) -> str:
        return self.digest().hex()


def md4_digest(data: bytes) -> bytes:
    """Return the MD4 digest of data."""
    return _Md4(data).digest()


def new_hash(algorithm):
    """Return a fresh hash object for an algorithm."""
    algorithm = algorithm_from_value(algorithm)
    if algorithm is HashAlgorithm.MD4:
        return _Md4()
    return hashlib.new(_HASHLIB_NAMES[algorithm])


def hash_text(text: str, algorithm) -> str:
    """Return the lower-case hex digest of a string's UTF-8 bytes."""
    hasher = new_hash(algorithm)
    hasher.update(text.encode("utf-8"))
    return hasher.hexdigest()