"""
Charset builder: turn a configuration into the working alphabet and the
per-class subsets a password must draw from.
"""

from __future__ import annotations

from typing import List, NamedTuple

from .charsets import AMBIGUOUS, CHARACTER_CLASSES, CharacterClass, enabled_classes
from .config import PasswordConfig


class Charset(NamedTuple):
    alphabet: str
    mandatory: List[str]


def unique_chars(text: str) -> str:
    """
    Drop repeated characters, keeping the first occurrence of each.
    """
    seen: set[str] = set()
    out: list[str] = []
    for ch in text:
        if ch not in seen:
            seen.add(ch)
            out.append(ch)
    return "".join(out)


def remove_chars(text: str, remove: str) -> str:
    if not remove:
        return text
    drop = set(remove)
    return "".join(ch for ch in text if ch not in drop)


def _filter(text: str, config: PasswordConfig, ambiguous: str) -> str:
    if config.exclude_ambiguous:
        text = remove_chars(text, ambiguous)
    if config.exclude:
        text = remove_chars(text, config.exclude)
    return text


def build_alphabet(
    config: PasswordConfig,
    classes: tuple[CharacterClass, ...] = CHARACTER_CLASSES,
    ambiguous: str = AMBIGUOUS,
) -> str:
    """
    Concatenate the enabled classes, deduplicate across all of them, then
    strip ambiguous and excluded characters.

    May return an empty string; reporting that is up to the caller.
    """
    merged = "".join(cls.chars for cls in enabled_classes(config, classes))
    return _filter(unique_chars(merged), config, ambiguous)


def mandatory_subsets(
    config: PasswordConfig,
    classes: tuple[CharacterClass, ...] = CHARACTER_CLASSES,
    ambiguous: str = AMBIGUOUS,
) -> list[str]:
    """
    One filtered subset per enabled class.

    Each class is filtered on its own (not against the merged alphabet) and
    deduplicated on its own. A class filtered down to nothing is dropped and
    imposes no inclusion requirement.
    """
    subsets: list[str] = []
    for cls in enabled_classes(config, classes):
        subset = unique_chars(_filter(cls.chars, config, ambiguous))
        if subset:
            subsets.append(subset)
    return subsets


def build_charset(
    config: PasswordConfig,
    classes: tuple[CharacterClass, ...] = CHARACTER_CLASSES,
    ambiguous: str = AMBIGUOUS,
) -> Charset:
    return Charset(
        alphabet=build_alphabet(config, classes, ambiguous),
        mandatory=mandatory_subsets(config, classes, ambiguous),
    )
