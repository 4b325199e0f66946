"""
Entropy sources for the sampler.

SystemEntropy reads the operating system CSPRNG. QuantumEntropy takes raw
bits from simulated qubit measurements, amplifies them with SHA-256 and
hashes them together with fresh system entropy, so its output is never
weaker than the system source alone.
"""

from __future__ import annotations

import hashlib
import logging
import os
import threading
from typing import Callable, List, Optional, Protocol

from .config import DEFAULT_CONFIG, PasswordConfig
from .errors import EntropySourceError

logger = logging.getLogger(__name__)


class EntropySource(Protocol):
    def read(self, n: int) -> bytes:
        """Return exactly `n` random bytes or raise EntropySourceError."""
        ...


def bits_to_bytes(bits: List[int]) -> bytes:
    """
    Pack bits (most significant first) into bytes, zero-padding the tail
    up to a whole byte.
    """
    if not bits:
        return b""

    pad_len = (8 - len(bits) % 8) % 8
    padded = list(bits) + [0] * pad_len

    out = bytearray()
    for i in range(0, len(padded), 8):
        value = 0
        for bit in padded[i : i + 8]:
            value = (value << 1) | (bit & 1)
        out.append(value)
    return bytes(out)


def bytes_to_bits(data: bytes) -> List[int]:
    return [(byte >> shift) & 1 for byte in data for shift in range(7, -1, -1)]


def amplify_entropy(bits: List[int], rounds: int = 1) -> List[int]:
    """
    Hash the packed bits with SHA-256 `rounds` times and unpack the final
    digest. Zero or negative rounds return the bits untouched.
    """
    if rounds <= 0:
        return bits

    data = bits_to_bytes(bits)
    for _ in range(rounds):
        data = hashlib.sha256(data).digest()
    return bytes_to_bits(data)


class SystemEntropy:
    """
    os.urandom, safe to share between threads.
    """

    def read(self, n: int) -> bytes:
        if n < 0:
            raise ValueError("Cannot read a negative number of bytes.")
        try:
            data = os.urandom(n)
        except OSError as exc:
            raise EntropySourceError(f"System entropy source failed: {exc}") from exc
        if len(data) != n:
            raise EntropySourceError(
                f"System entropy source returned {len(data)} of {n} bytes."
            )
        return data


EngineFactory = Callable[[PasswordConfig], object]


def _default_engine_factory(config: PasswordConfig):
    # Local import: qiskit is only needed once the quantum source is used.
    from .quantum_engine import QuantumEngine

    return QuantumEngine(config)


class QuantumEntropy:
    """
    Pool of bytes seeded from quantum measurements and system entropy.

    Each refill:
    - runs `quantum_streams` circuits and XOR-combines their bits,
    - amplifies the combined bits with `entropy_rounds` SHA-256 rounds,
    - expands SHA-256(system_seed || quantum_digest || counter) into
      POOL_SIZE bytes.

    Bytes leave the pool exactly once.
    """

    SEED_SIZE = 32
    POOL_SIZE = 256

    def __init__(
        self,
        config: PasswordConfig | None = None,
        engine_factory: Optional[EngineFactory] = None,
        system: EntropySource | None = None,
    ) -> None:
        self.config = config or DEFAULT_CONFIG
        self._engine_factory = engine_factory or _default_engine_factory
        self._system = system or SystemEntropy()
        self._engine = None
        self._pool = bytearray()
        self._lock = threading.Lock()

    def read(self, n: int) -> bytes:
        if n < 0:
            raise ValueError("Cannot read a negative number of bytes.")
        with self._lock:
            while len(self._pool) < n:
                self._refill()
            out = bytes(self._pool[:n])
            del self._pool[:n]
        return out

    def _quantum_bits(self) -> list[int]:
        streams = max(1, self.config.quantum_streams)
        try:
            if self._engine is None:
                self._engine = self._engine_factory(self.config)
            combined: list[int] | None = None
            for _ in range(streams):
                bits = list(self._engine.get_raw_bits())
                if combined is None:
                    combined = bits
                elif len(bits) != len(combined):
                    raise EntropySourceError(
                        "Quantum streams produced different bit-lengths."
                    )
                else:
                    combined = [b ^ c for b, c in zip(bits, combined)]
        except EntropySourceError:
            raise
        except Exception as exc:  # noqa: BLE001
            raise EntropySourceError(f"Quantum engine failed: {exc}") from exc

        if not combined:
            raise EntropySourceError("Quantum engine returned no bits.")
        return combined

    def _refill(self) -> None:
        bits = self._quantum_bits()
        digest = bits_to_bytes(amplify_entropy(bits, self.config.entropy_rounds))
        seed = self._system.read(self.SEED_SIZE)

        blocks = self.POOL_SIZE // hashlib.sha256().digest_size
        for counter in range(blocks):
            block = hashlib.sha256(seed + digest + counter.to_bytes(4, "big"))
            self._pool.extend(block.digest())

        logger.debug(
            "Quantum entropy pool refilled from %d qubits x %d streams.",
            len(bits),
            max(1, self.config.quantum_streams),
        )


def source_for(config: PasswordConfig | None = None) -> EntropySource:
    """Build the entropy source named by `config.entropy_source`."""
    cfg = config or DEFAULT_CONFIG
    if cfg.entropy_source == "quantum":
        return QuantumEntropy(cfg)
    return SystemEntropy()
