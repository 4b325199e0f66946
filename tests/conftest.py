from __future__ import annotations

import pytest

from passforge.errors import EntropySourceError


class ScriptedEntropy:
    """Hands out a fixed byte string, then fails."""

    def __init__(self, data: bytes) -> None:
        self._data = bytearray(data)
        self.reads: list[int] = []

    def read(self, n: int) -> bytes:
        self.reads.append(n)
        if len(self._data) < n:
            raise EntropySourceError("scripted entropy exhausted")
        out = bytes(self._data[:n])
        del self._data[:n]
        return out


class FailingEntropy:
    def __init__(self) -> None:
        self.calls = 0

    def read(self, n: int) -> bytes:
        self.calls += 1
        raise EntropySourceError("entropy source unavailable")


@pytest.fixture
def scripted_entropy():
    return ScriptedEntropy


@pytest.fixture
def failing_entropy() -> FailingEntropy:
    return FailingEntropy()
