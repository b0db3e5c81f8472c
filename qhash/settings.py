"""Persistent user options."""

from __future__ import annotations

import configparser
from dataclasses import dataclass
from pathlib import Path

from qhash.algorithms import HashAlgorithm, algorithm_from_value

APP_NAME = "qhash"
SECTION = "hash"
KEY_HASH_ALG = "hashAlg"
KEY_HASH_UPPERCASE = "hashUppercase"


@dataclass
class Options:
    """Hash algorithm to use and whether checksums are shown upper case."""

    algorithm: HashAlgorithm = HashAlgorithm.MD5
    uppercase: bool = False


def default_config_path() -> Path:
    """Return the per-user configuration file path."""
    return Path.home() / ".local" / APP_NAME / f"{APP_NAME}.conf"


def _parser() -> configparser.ConfigParser:
    parser = configparser.ConfigParser(interpolation=None)
    parser.optionxform = str
    return parser


def _read(path) -> configparser.ConfigParser:
    parser = _parser()
    try:
        parser.read(path, encoding="utf-8")
    except configparser.Error:
        return _parser()
    return parser


def _to_bool(text: str) -> bool:
    return text.strip().lower() not in ("", "0", "false")


def load_options(path) -> Options:
    """Read options from a file, using defaults for anything missing or invalid."""
    options = Options()
    parser = _read(path)
    if not parser.has_section(SECTION):
        return options
    section = parser[SECTION]
    if KEY_HASH_ALG in section:
        try:
            options.algorithm = algorithm_from_value(section[KEY_HASH_ALG].strip())
        except ValueError:
            pass
    if KEY_HASH_UPPERCASE in section:
        options.uppercase = _to_bool(section[KEY_HASH_UPPERCASE])
    return options


def save_options(path, options: Options) -> None:
    """Write options to a file, keeping any other settings it holds."""
    path = Path(path)
    parser = _read(path)
    if not parser.has_section(SECTION):
        parser.add_section(SECTION)
    parser[SECTION][KEY_HASH_ALG] = str(int(options.algorithm))
    parser[SECTION][KEY_HASH_UPPERCASE] = "1" if options.uppercase else "0"
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        parser.write(handle)