"""
Lamport one-time signature CLI entry point.

Generate keys, sign and verify from the shell. Keys and signatures are read
from and written to files in the configured text encodings.

Usage::

    python -m lite_lamport seed
    python -m lite_lamport keygen --seed "$SEED" --index 3 --out-dir ./keys
    python -m lite_lamport pubkey --private-key ./keys/private.key
    python -m lite_lamport sign --private-key ./keys/private.key --message "hello"
    python -m lite_lamport verify --public-key pub.key --signature sig.txt --message "hello"

Options:
    --config            Path to a settings YAML file
    --key-format        Key packaging: json or a charset name (default: base64)
    --signature-format  Signature packaging: json or a charset name (default: base64)
    --hash-encoding     Charset of entries inside json packagings (default: base64)
    --seed-encoding     Charset of seeds (default: base64)

A private key must sign at most one message.
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Sequence

import yaml
from pydantic import ValidationError

from lite_lamport.client import LiteLamport
from lite_lamport.codec import EncodingVariant, TextEncodedBinary, is_text_format
from lite_lamport.codec.charsets import Charset
from lite_lamport.settings import LamportSettings
from lite_lamport.types import LamportError

PRIVATE_KEY_FILENAME = "private.key"
PUBLIC_KEY_FILENAME = "public.key"

# Every text form is written and read as latin-1 bytes so that the `latin1`
# charset round-trips byte for byte; the other charsets are pure ASCII.
FILE_ENCODING = "latin-1"

logger = logging.getLogger(__name__)


class ColoredFormatter(logging.Formatter):
    """Logging formatter with ANSI colors for better readability."""

    # ANSI color codes
    GREY = "\x1b[38;5;244m"
    BLUE = "\x1b[38;5;39m"
    GREEN = "\x1b[38;5;40m"
    YELLOW = "\x1b[38;5;220m"
    RED = "\x1b[38;5;196m"
    BOLD_RED = "\x1b[38;5;196;1m"
    CYAN = "\x1b[38;5;51m"
    RESET = "\x1b[0m"

    LEVEL_COLORS = {
        logging.DEBUG: GREY,
        logging.INFO: GREEN,
        logging.WARNING: YELLOW,
        logging.ERROR: RED,
        logging.CRITICAL: BOLD_RED,
    }

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors."""
        color = self.LEVEL_COLORS.get(record.levelno, self.RESET)
        timestamp = f"{self.CYAN}{self.formatTime(record, self.datefmt)}{self.RESET}"
        levelname = f"{color}{record.levelname:8}{self.RESET}"
        name = f"{self.BLUE}{record.name}{self.RESET}"
        return f"{timestamp} {levelname} {name}: {record.getMessage()}"


def setup_logging(verbose: bool = False, no_color: bool = False) -> None:
    """Configure logging for the CLI with optional colors."""
    level = logging.DEBUG if verbose else logging.INFO

    handler = logging.StreamHandler()
    handler.setLevel(level)

    if no_color:
        formatter = logging.Formatter(
            "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    else:
        formatter = ColoredFormatter(datefmt="%Y-%m-%d %H:%M:%S")

    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(handler)


def non_negative_int(value: str) -> int:
    """Argparse type for key indices."""
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one sub-command per operation."""
    parser = argparse.ArgumentParser(
        prog="lite-lamport",
        description="Lamport one-time signatures",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--config", type=Path, default=None, help="Path to a settings YAML file")
    parser.add_argument("--key-format", default=None, help="Key packaging")
    parser.add_argument("--signature-format", default=None, help="Signature packaging")
    parser.add_argument("--hash-encoding", default=None, help="Charset of structured entries")
    parser.add_argument("--seed-encoding", default=None, help="Charset of seeds")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--no-color", action="store_true", help="Disable colored logging output"
    )

    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("seed", help="Print a new random seed")

    keygen = commands.add_parser("keygen", help="Generate a key pair")
    keygen.add_argument("--seed", default=None, help="Derive the keys from this seed")
    keygen.add_argument(
        "--index",
        type=non_negative_int,
        default=0,
        help="Key index when deriving from a seed (default: 0)",
    )
    keygen.add_argument(
        "--out-dir",
        type=Path,
        default=None,
        help=f"Write {PRIVATE_KEY_FILENAME} and {PUBLIC_KEY_FILENAME} here instead of printing",
    )

    pubkey = commands.add_parser("pubkey", help="Print the public key of a private key")
    pubkey.add_argument("--private-key", type=Path, required=True, help="Private key file")

    sign = commands.add_parser("sign", help="Sign a message")
    sign.add_argument("--private-key", type=Path, required=True, help="Private key file")
    _add_message_arguments(sign)

    verify = commands.add_parser("verify", help="Verify a signature")
    verify.add_argument("--public-key", type=Path, required=True, help="Public key file")
    verify.add_argument("--signature", type=Path, required=True, help="Signature file")
    _add_message_arguments(verify)

    return parser


def _add_message_arguments(parser: argparse.ArgumentParser) -> None:
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--message", default=None, help="Message text (UTF-8)")
    group.add_argument("--message-file", type=Path, default=None, help="File holding the message")


def load_settings(args: argparse.Namespace) -> LamportSettings:
    """
    Combine the settings file (if any) with command-line overrides.

    Raises:
        pydantic.ValidationError: If a value is not recognized.
    """
    settings = (
        LamportSettings.from_yaml_file(args.config) if args.config else LamportSettings()
    )
    overrides = {
        field: value
        for field in ("key_format", "signature_format", "hash_encoding", "seed_encoding")
        if (value := getattr(args, field)) is not None
    }
    if not overrides:
        return settings
    return LamportSettings.model_validate(settings.model_dump() | overrides)


def read_encoded(path: Path, variant: EncodingVariant) -> str:
    """Read an encoded key or signature, ignoring surrounding whitespace where it is not data."""
    text = path.read_bytes().decode(FILE_ENCODING)
    if isinstance(variant, TextEncodedBinary) and variant.charset is Charset.LATIN1:
        return text
    return text.strip()


def write_encoded(path: Path, text: str, private: bool = False) -> None:
    """Write an encoded key or signature; private keys are readable by the owner only."""
    mode = 0o600 if private else 0o644
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
    with os.fdopen(fd, "wb") as f:
        f.write(text.encode(FILE_ENCODING))
    if private:
        path.chmod(0o600)


def read_message(args: argparse.Namespace) -> bytes | str:
    """The message from `--message` or the raw bytes of `--message-file`."""
    if args.message_file is not None:
        return args.message_file.read_bytes()
    return args.message


def run(args: argparse.Namespace, lamport: LiteLamport) -> int:
    """Execute the selected sub-command and return the exit status."""
    settings = lamport.settings
    match args.command:
        case "seed":
            print(lamport.generate_seed())
        case "keygen":
            if args.seed is not None:
                pair = lamport.generate_keys_from_seed(args.seed, args.index)
            else:
                pair = lamport.generate_keys()
            if args.out_dir is None:
                print(json.dumps(pair.model_dump(by_alias=True), indent=2))
            else:
                args.out_dir.mkdir(parents=True, exist_ok=True)
                write_encoded(args.out_dir / PRIVATE_KEY_FILENAME, pair.private_key, private=True)
                write_encoded(args.out_dir / PUBLIC_KEY_FILENAME, pair.public_key)
                logger.info("Wrote key pair to %s", args.out_dir)
        case "pubkey":
            private_key = read_encoded(args.private_key, settings.key_variant)
            print(lamport.get_public_key_from_private_key(private_key))
        case "sign":
            private_key = read_encoded(args.private_key, settings.key_variant)
            print(lamport.sign(read_message(args), private_key))
        case "verify":
            public_key = read_encoded(args.public_key, settings.key_variant)
            signature = read_encoded(args.signature, settings.signature_variant)
            valid = lamport.verify(read_message(args), signature, public_key)
            print("valid" if valid else "invalid")
            return 0 if valid else 1
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose, args.no_color)

    try:
        settings = load_settings(args)
    except (OSError, yaml.YAMLError, ValidationError) as e:
        parser.error(f"invalid settings: {e}")

    for label, variant in (
        ("key format", settings.key_variant),
        ("signature format", settings.signature_variant),
    ):
        if not is_text_format(variant):
            parser.error(f"{label} {variant} is not a text format; use json or a charset name")

    try:
        return run(args, LiteLamport(settings))
    except (LamportError, OSError) as e:
        logger.error("%s", e)
        return 2


if __name__ == "__main__":
    sys.exit(main())
