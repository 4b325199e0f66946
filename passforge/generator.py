"""
Password generator: combines the charset builder and the secure sampler.
"""

from __future__ import annotations

from typing import Iterator, Sequence

from .builder import build_charset
from .config import DEFAULT_CONFIG, PasswordConfig
from .entropy import source_for
from .errors import EmptyAlphabetError
from .sampler import SecureSampler


def sampler_for(config: PasswordConfig | None = None) -> SecureSampler:
    return SecureSampler(source_for(config or DEFAULT_CONFIG))


def generate(
    length: int,
    alphabet: str,
    mandatory_subsets: Sequence[str],
    sampler: SecureSampler | None = None,
) -> str:
    """
    Build one password.

    - One character from each mandatory subset.
    - Fill from the whole alphabet up to max(length, len(mandatory_subsets)).
    - Shuffle, so the mandatory picks do not sit at the front.

    Any sampler error propagates and no partial password is returned.
    """
    if not alphabet:
        raise EmptyAlphabetError("No characters available to build a password.")

    sampler = sampler or SecureSampler()
    # Mandatory inclusion wins over a shorter requested length.
    target = max(length, len(mandatory_subsets))

    chars: list[str] = [sampler.pick_character(subset) for subset in mandatory_subsets]
    while len(chars) < target:
        chars.append(sampler.pick_character(alphabet))

    sampler.shuffle(chars)
    return "".join(chars)


def generate_passwords(
    config: PasswordConfig | None = None,
    sampler: SecureSampler | None = None,
) -> Iterator[str]:
    """
    Yield `config.count` independent passwords in request order.

    The charset is built once. EmptyAlphabetError is raised before the
    first password is yielded.
    """
    cfg = config or DEFAULT_CONFIG
    charset = build_charset(cfg)
    if not charset.alphabet:
        raise EmptyAlphabetError(
            "No character set selected, or every character was filtered out."
        )

    sampler = sampler or sampler_for(cfg)
    for _ in range(cfg.count):
        yield generate(cfg.length, charset.alphabet, charset.mandatory, sampler)


def generate_password(
    config: PasswordConfig | None = None,
    sampler: SecureSampler | None = None,
) -> str:
    """
    High-level function: one password for `config`, ignoring its count.
    """
    cfg = config or DEFAULT_CONFIG
    charset = build_charset(cfg)
    return generate(cfg.length, charset.alphabet, charset.mandatory, sampler or sampler_for(cfg))
