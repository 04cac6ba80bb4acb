"""RC4 stream cipher applied to byte strings and files."""

from __future__ import annotations

import os
from collections.abc import Iterator
from itertools import islice
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]

_STATE_SIZE = 256


class Rc4Encoder:
    """RC4 encoder; encryption and decryption are the same operation."""

    def __init__(self, key: bytes) -> None:
        self.key = key

    @property
    def key(self) -> bytes:
        """The cipher key."""
        return self._key

    @key.setter
    def key(self, key: bytes) -> None:
        key = bytes(key)
        if not key:
            raise ValueError("key must not be empty")
        self._key = key

    def _schedule(self) -> list[int]:
        """Run the key-scheduling algorithm and return the initial state."""
        state = list(range(_STATE_SIZE))
        key = self._key
        j = 0
        for i in range(_STATE_SIZE):
            j = (j + state[i] + key[i % len(key)]) % _STATE_SIZE
            state[i], state[j] = state[j], state[i]
        return state

    def _stream(self) -> Iterator[int]:
        """Yield keystream bytes indefinitely, starting from a fresh state."""
        state = self._schedule()
        i = j = 0
        while True:
            i = (i + 1) % _STATE_SIZE
            j = (j + state[i]) % _STATE_SIZE
            state[i], state[j] = state[j], state[i]
            yield state[(state[i] + state[j]) % _STATE_SIZE]

    def keystream(self, length: int) -> bytes:
        """Return the first ``length`` bytes of the keystream."""
        if length < 0:
            raise ValueError("length must not be negative")
        return bytes(islice(self._stream(), length))

    def process(self, data: bytes) -> bytes:
        """XOR ``data`` with the keystream, encrypting or decrypting it."""
        return bytes(byte ^ k for byte, k in zip(bytes(data), self._stream()))

    def encode(self, input_path: PathLike, output_path: PathLike, encrypt: bool = True) -> None:
        """Encrypt or decrypt a whole file into another file.

        RC4 is symmetric, so ``encrypt`` does not change the result.
        """
        with open(input_path, "rb") as source:
            data = source.read()
        with open(output_path, "wb") as target:
            target.write(self.process(data))