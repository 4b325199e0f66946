"""
Secure sampler: unbiased indices, character picks and shuffles drawn from
an entropy source.
"""

from __future__ import annotations

from typing import MutableSequence, Sequence, TypeVar

from .entropy import EntropySource, SystemEntropy
from .errors import EmptySetError, EntropySourceError, InvalidRangeError

T = TypeVar("T")


class SecureSampler:
    """
    Uniform choices over [0, n) by rejection sampling.

    A draw reads just enough bytes to cover n, masks the value down to the
    smallest power of two >= n and retries while it lands outside the range.
    Every accepted value is equally likely; no modulo reduction is involved.
    """

    def __init__(self, source: EntropySource | None = None) -> None:
        self.source = source or SystemEntropy()

    def uniform_index(self, n: int) -> int:
        if n <= 0:
            raise InvalidRangeError(f"Cannot pick an index from a range of size {n}.")
        if n == 1:
            return 0

        bits = (n - 1).bit_length()
        nbytes = (bits + 7) // 8
        mask = (1 << bits) - 1

        # Each attempt succeeds with probability > 1/2.
        while True:
            data = self.source.read(nbytes)
            if len(data) != nbytes:
                raise EntropySourceError(
                    f"Entropy source returned {len(data)} of {nbytes} bytes."
                )
            value = int.from_bytes(data, "big") & mask
            if value < n:
                return value

    def pick_character(self, chars: Sequence[str]) -> str:
        if not chars:
            raise EmptySetError("Cannot pick a character from an empty set.")
        return chars[self.uniform_index(len(chars))]

    def shuffle(self, items: MutableSequence[T]) -> None:
        """
        Fisher-Yates, in place, from the last index down to 1.

        If a draw fails the sequence is left partly shuffled and the error
        propagates; callers must throw it away.
        """
        for i in range(len(items) - 1, 0, -1):
            j = self.uniform_index(i + 1)
            items[i], items[j] = items[j], items[i]
