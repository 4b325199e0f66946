"""
Configuration for the passforge password generator.
"""

from __future__ import annotations

from dataclasses import dataclass

MIN_LENGTH = 4
MIN_COUNT = 1

ENTROPY_SOURCES = ("system", "quantum")


@dataclass(frozen=True)
class PasswordConfig:
    # Desired password length in characters (never below MIN_LENGTH).
    length: int = 16

    # Character classes to draw from.
    lower: bool = True
    upper: bool = True
    digits: bool = True
    symbols: bool = False

    # How many passwords one run produces (never below MIN_COUNT).
    count: int = 1

    # Characters removed from every class.
    exclude: str = ""

    # Drop characters that are easy to misread (0/O, 1/l/I, quotes, ...).
    exclude_ambiguous: bool = True

    copy_to_clipboard: bool = False

    # "system" reads os.urandom directly, "quantum" mixes simulated
    # qubit measurements into the system entropy.
    entropy_source: str = "system"

    # Quantum source only.
    # NOTE: Keep num_qubits <= backend limit (often 20-29 for local simulators).
    num_qubits: int = 20
    entropy_rounds: int = 2
    quantum_streams: int = 2

    def __post_init__(self) -> None:
        # Frozen dataclass: clamp through object.__setattr__.
        if self.length < MIN_LENGTH:
            object.__setattr__(self, "length", MIN_LENGTH)
        if self.count < MIN_COUNT:
            object.__setattr__(self, "count", MIN_COUNT)

        if self.entropy_source not in ENTROPY_SOURCES:
            raise ValueError(
                f"Unknown entropy source {self.entropy_source!r}; "
                f"expected one of {', '.join(ENTROPY_SOURCES)}."
            )
        if self.num_qubits < 1:
            raise ValueError("num_qubits must be at least 1.")


# Default configuration instance you can import elsewhere
DEFAULT_CONFIG = PasswordConfig()
