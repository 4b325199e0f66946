"""
Character classes passwords are assembled from.

Everything here is read-only data. The builder accepts replacement
classes, so tests and callers can inject their own.
"""

from __future__ import annotations

import string
from typing import NamedTuple

from .config import PasswordConfig

LOWERCASE = string.ascii_lowercase
UPPERCASE = string.ascii_uppercase
DIGITS = string.digits
SYMBOLS = "!@#$%^&*()-_=+[]{};:,.?/|~<>"

# Characters commonly confused when read back: zero/O/o, one/l/I,
# pipe, backtick, quotes, a few punctuation marks and space.
AMBIGUOUS = "O0oIl1|`'\";:,. "


class CharacterClass(NamedTuple):
    name: str
    chars: str


# Canonical order: lower, upper, digits, symbols.
CHARACTER_CLASSES: tuple[CharacterClass, ...] = (
    CharacterClass("lower", LOWERCASE),
    CharacterClass("upper", UPPERCASE),
    CharacterClass("digits", DIGITS),
    CharacterClass("symbols", SYMBOLS),
)


def enabled_classes(
    config: PasswordConfig,
    classes: tuple[CharacterClass, ...] = CHARACTER_CLASSES,
) -> list[CharacterClass]:
    """Return the classes whose flag is switched on in `config`."""
    return [cls for cls in classes if getattr(config, cls.name, False)]
