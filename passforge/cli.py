"""
Command-line interface.
"""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from .clipboard import copy_to_clipboard
from .config import DEFAULT_CONFIG, ENTROPY_SOURCES, MIN_COUNT, MIN_LENGTH, PasswordConfig
from .errors import ClipboardError, EmptyAlphabetError, PasswordGenerationError
from .generator import generate_passwords

logger = logging.getLogger(__name__)


def setup_logging(log_file: str | None = None, verbose: bool = False) -> None:
    """Configure logging for the application.

    Args:
        log_file: Optional file to write logs to
        verbose: Whether to enable verbose logging
    """
    log_level = logging.DEBUG if verbose else logging.INFO
    log_format = "%(asctime)s - %(levelname)s - %(message)s"

    # StreamHandler writes to stderr, leaving stdout for passwords.
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(level=log_level, format=log_format, handlers=handlers)


def build_parser() -> argparse.ArgumentParser:
    d = DEFAULT_CONFIG
    parser = argparse.ArgumentParser(
        prog="passforge",
        description="Generate random passwords with at least one character from each selected class.",
    )
    parser.add_argument(
        "-l",
        "--length",
        type=int,
        default=d.length,
        help=f"Password length (default: {d.length}, minimum {MIN_LENGTH}).",
    )
    parser.add_argument(
        "--lower",
        action=argparse.BooleanOptionalAction,
        default=d.lower,
        help="Include lowercase letters.",
    )
    parser.add_argument(
        "--upper",
        action=argparse.BooleanOptionalAction,
        default=d.upper,
        help="Include uppercase letters.",
    )
    parser.add_argument(
        "-n",
        "--digits",
        action=argparse.BooleanOptionalAction,
        default=d.digits,
        help="Include digits.",
    )
    parser.add_argument(
        "-s",
        "--symbols",
        action=argparse.BooleanOptionalAction,
        default=d.symbols,
        help="Include symbols.",
    )
    parser.add_argument(
        "-c",
        "--count",
        type=int,
        default=d.count,
        help=f"How many passwords to generate (default: {d.count}, minimum {MIN_COUNT}).",
    )
    parser.add_argument(
        "-x",
        "--exclude",
        default=d.exclude,
        metavar="CHARS",
        help='Characters to leave out, e.g. "@0OIl| ".',
    )
    parser.add_argument(
        "--exclude-ambiguous",
        action=argparse.BooleanOptionalAction,
        default=d.exclude_ambiguous,
        help="Drop easily confused characters such as O, 0, l, 1 and |.",
    )
    parser.add_argument(
        "--copy",
        action="store_true",
        default=d.copy_to_clipboard,
        help="Copy the last password to the clipboard.",
    )
    parser.add_argument(
        "--entropy",
        choices=ENTROPY_SOURCES,
        default=d.entropy_source,
        help="Randomness source (default: system). 'quantum' mixes simulated qubit measurements into system entropy.",
    )
    parser.add_argument(
        "--qubits",
        type=int,
        default=d.num_qubits,
        metavar="N",
        help=f"Qubits per circuit for --entropy quantum (default: {d.num_qubits}, minimum 1).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    parser.add_argument(
        "--log-file",
        metavar="PATH",
        help="Also write log messages to this file.",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> PasswordConfig:
    return PasswordConfig(
        length=args.length,
        lower=args.lower,
        upper=args.upper,
        digits=args.digits,
        symbols=args.symbols,
        count=args.count,
        exclude=args.exclude,
        exclude_ambiguous=args.exclude_ambiguous,
        copy_to_clipboard=args.copy,
        entropy_source=args.entropy,
        num_qubits=args.qubits,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Entry point for the `passforge` script and `run_passforge.py`.

    Returns the process exit status.
    """
    args = build_parser().parse_args(argv)
    setup_logging(args.log_file, args.verbose)

    try:
        config = config_from_args(args)
    except ValueError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2

    logger.debug(
        "Generating %d password(s) of length %d from %s entropy.",
        config.count,
        config.length,
        config.entropy_source,
    )

    last_password: str | None = None
    try:
        for password in generate_passwords(config):
            print(password, flush=True)
            last_password = password
    except EmptyAlphabetError as exc:
        logger.error("%s", exc)
        return 1
    except PasswordGenerationError as exc:
        logger.error("Password generation failed: %s", exc)
        return 1

    if config.copy_to_clipboard and last_password is not None:
        try:
            copy_to_clipboard(last_password)
        except ClipboardError as exc:
            logger.warning("Could not copy to clipboard: %s", exc)

    return 0
