"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

hasher.py
Implements content hashing with pluggable streaming hash algorithms.

The default algorithm keeps two independent 64-bit accumulators (FNV-1a and DJB
style) and renders them as one unpadded lowercase hex string. It is fast and
non-cryptographic; collisions are possible and accepted.
"""

from typing import BinaryIO, Callable

import xxhash

from dupfinder.core.interfaces import Hasher, HashAlgorithm
from dupfinder.core.models import HashAlgorithmName, DEFAULT_CHUNK_SIZE

MASK_64 = 0xFFFFFFFFFFFFFFFF

FNV_OFFSET_BASIS = 14695981039346656037
FNV_PRIME = 1099511628211
DJB_SEED = 1125899906842597


class DualHashAlgorithmImpl(HashAlgorithm):
    """
    Two 64-bit accumulators updated byte by byte:
        h1 = (h1 ^ b) * FNV_PRIME
        h2 = (h2 << 5) + h2 + b
    both wrapping modulo 2**64.
    """

    def __init__(self):
        self.h1 = FNV_OFFSET_BASIS
        self.h2 = DJB_SEED

    def update(self, data: bytes) -> None:
        h1, h2 = self.h1, self.h2
        for b in data:
            h1 = ((h1 ^ b) * FNV_PRIME) & MASK_64
            h2 = ((h2 << 5) + h2 + b) & MASK_64
        self.h1, self.h2 = h1, h2

    def hexdigest(self) -> str:
        # No zero padding: leading zero nibbles are dropped
        return f"{self.h1:x}{self.h2:x}"


# Use the same way to implement and use any other hashing algorithm
class XXHashAlgorithmImpl(HashAlgorithm):
    def __init__(self):
        self._state = xxhash.xxh3_128()

    def update(self, data: bytes) -> None:
        self._state.update(data)

    def hexdigest(self) -> str:
        return self._state.hexdigest()


ALGORITHMS = {
    HashAlgorithmName.DUAL: DualHashAlgorithmImpl,
    HashAlgorithmName.XXH128: XXHashAlgorithmImpl,
}


class HasherImpl(Hasher):
    """
    A hasher that supports any algorithm via the HashAlgorithm interface.
    A fresh algorithm state is created for every digest.
    """

    def __init__(self, algorithm_factory: Callable[[], HashAlgorithm] = DualHashAlgorithmImpl):
        self.algorithm_factory = algorithm_factory

    @classmethod
    def for_algorithm(cls, name: HashAlgorithmName) -> 'HasherImpl':
        return cls(ALGORITHMS[name])

    def hash_bytes(self, data: bytes) -> str:
        state = self.algorithm_factory()
        state.update(data)
        return state.hexdigest()

    def hash_stream(self, stream: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> str:
        """Reads the stream to EOF in chunks of `chunk_size` bytes."""
        state = self.algorithm_factory()
        while True:
            chunk = stream.read(chunk_size)
            if not chunk:
                break
            state.update(chunk)
        return state.hexdigest()

    def hash_file(self, path: str, chunk_size: int = DEFAULT_CHUNK_SIZE) -> str:
        """
        Streams a file through the algorithm.
        Raises OSError if the file cannot be opened or read.
        """
        with open(path, 'rb') as f:
            return self.hash_stream(f, chunk_size)


def compute_digest(data: bytes) -> str:
    """Digest of in-memory content with the default algorithm."""
    return HasherImpl().hash_bytes(data)
