"""
passforge: random passwords with guaranteed per-class inclusion.
"""

from .config import PasswordConfig, DEFAULT_CONFIG
from .errors import (
    ClipboardError,
    EmptyAlphabetError,
    EmptySetError,
    EntropySourceError,
    InvalidRangeError,
    PasswordGenerationError,
)
from .generator import generate, generate_password, generate_passwords
from .sampler import SecureSampler

__all__ = [
    "PasswordConfig",
    "DEFAULT_CONFIG",
    "SecureSampler",
    "generate",
    "generate_password",
    "generate_passwords",
    "PasswordGenerationError",
    "EmptyAlphabetError",
    "EmptySetError",
    "InvalidRangeError",
    "EntropySourceError",
    "ClipboardError",
]
