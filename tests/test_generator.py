import dataclasses

import pytest

from passforge.builder import build_charset
from passforge.charsets import AMBIGUOUS, DIGITS, LOWERCASE, SYMBOLS, UPPERCASE
from passforge.config import PasswordConfig
from passforge.entropy import QuantumEntropy, SystemEntropy
from passforge.errors import EmptyAlphabetError, EntropySourceError
from passforge.generator import generate, generate_password, generate_passwords, sampler_for
from passforge.sampler import SecureSampler


def test_empty_alphabet_is_rejected() -> None:
    with pytest.raises(EmptyAlphabetError):
        generate(8, "", [])


def test_mandatory_subsets_override_short_length() -> None:
    subsets = ["a", "b", "c", "d", "e", "f"]
    password = generate(4, "abcdef", subsets)
    assert len(password) == 6
    assert sorted(password) == subsets


def test_length_four_with_all_classes_has_one_of_each() -> None:
    cfg = PasswordConfig(length=4, symbols=True, exclude_ambiguous=False)
    charset = build_charset(cfg)
    for _ in range(50):
        password = generate(cfg.length, charset.alphabet, charset.mandatory)
        assert len(password) == 4
        for cls in (LOWERCASE, UPPERCASE, DIGITS, SYMBOLS):
            assert sum(ch in cls for ch in password) == 1


def test_lowercase_only_scenario() -> None:
    cfg = PasswordConfig(length=8, upper=False, digits=False, exclude_ambiguous=False)
    for password in generate_passwords(dataclasses.replace(cfg, count=50)):
        assert len(password) == 8
        assert set(password) <= set(LOWERCASE)


@pytest.mark.parametrize(
    "cfg",
    [
        PasswordConfig(),
        PasswordConfig(symbols=True, length=12),
        PasswordConfig(exclude="abcXYZ789", exclude_ambiguous=False, length=30),
        PasswordConfig(lower=False, symbols=True, length=5),
    ],
)
def test_generated_passwords_satisfy_invariants(cfg: PasswordConfig) -> None:
    charset = build_charset(cfg)
    sampler = SecureSampler()
    for _ in range(200):
        password = generate(cfg.length, charset.alphabet, charset.mandatory, sampler)
        assert len(password) == max(cfg.length, len(charset.mandatory))
        assert set(password) <= set(charset.alphabet)
        for subset in charset.mandatory:
            assert set(password) & set(subset)
        if cfg.exclude_ambiguous:
            assert not set(password) & set(AMBIGUOUS)
        assert not set(password) & set(cfg.exclude)


def test_passwords_differ_between_calls() -> None:
    cfg = PasswordConfig(length=16)
    assert generate_password(cfg) != generate_password(cfg)


def test_entropy_failure_aborts_generation(failing_entropy) -> None:
    with pytest.raises(EntropySourceError):
        generate(8, LOWERCASE, [LOWERCASE], SecureSampler(failing_entropy))


def test_failure_during_shuffle_returns_nothing(scripted_entropy) -> None:
    # Enough bytes to pick all four characters from a 2-letter alphabet
    # but not to finish the shuffle.
    sampler = SecureSampler(scripted_entropy(bytes([0, 1, 0, 1])))
    with pytest.raises(EntropySourceError):
        generate(4, "ab", ["ab"], sampler)


def test_generate_passwords_yields_count_passwords() -> None:
    passwords = list(generate_passwords(PasswordConfig(count=5, length=10)))
    assert len(passwords) == 5
    assert all(len(p) == 10 for p in passwords)


def test_generate_passwords_fails_before_yielding() -> None:
    cfg = PasswordConfig(lower=False, upper=False, digits=False, count=3)
    passwords = generate_passwords(cfg)
    with pytest.raises(EmptyAlphabetError):
        next(passwords)


def test_generate_password_uses_default_config() -> None:
    password = generate_password()
    assert len(password) == 16
    assert not set(password) & set(AMBIGUOUS)


def test_sampler_for_picks_the_configured_source() -> None:
    assert isinstance(sampler_for().source, SystemEntropy)
    quantum = sampler_for(PasswordConfig(entropy_source="quantum"))
    assert isinstance(quantum.source, QuantumEntropy)
