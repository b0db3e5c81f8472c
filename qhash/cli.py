"""Command-line entry point: hash files or an md5 list and print the results."""

from __future__ import annotations

import argparse
import sys

from qhash.algorithms import algorithm_from_name
from qhash.checksums import ChecksumEntry, format_md5_line
from qhash.session import HashSession
from qhash.settings import default_config_path, load_options

_ALGORITHMS = ("md4", "md5", "sha1", "sha256", "sha512")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="qhash", description="Compute checksums of files."
    )
    parser.add_argument("files", nargs="*", help="files to hash, or one .md5 list")
    parser.add_argument("--config", help="configuration file to read options from")
    parser.add_argument("-a", "--algorithm", choices=_ALGORITHMS, help="hash algorithm")
    parser.add_argument(
        "-u", "--uppercase", action="store_true", help="print checksums in upper case"
    )
    parser.add_argument("-o", "--output", help="save the checksums to this .md5 file")
    return parser


def main(argv=None) -> int:
    """Run the command; return the exit status."""
    args = _build_parser().parse_args(argv)
    options = load_options(args.config if args.config else default_config_path())
    if args.algorithm:
        options.algorithm = algorithm_from_name(args.algorithm)
    if args.uppercase:
        options.uppercase = True

    session = HashSession(options)
    status = 0
    loaded = 0
    if len(args.files) == 1:
        try:
            loaded = session.load_checksum_file(args.files[0])
        except OSError:
            loaded = -1
    if loaded <= 0:
        for name in args.files:
            if session.add_file(name) is None:
                print(f"Unable to open file {name}", file=sys.stderr)
                status = 1

    session.start()
    session.wait()
    for entry in session.entries:
        if entry.error:
            print(f"{entry.name}: {entry.error}", file=sys.stderr)
            status = 1
            continue
        print(format_md5_line(ChecksumEntry(entry.checksum, entry.name)))

    if args.output:
        try:
            written = session.save(args.output)
        except (OSError, ValueError) as exc:
            print(f"cannot save {args.output}: {exc}", file=sys.stderr)
            return 1
        print(f"saved {written}", file=sys.stderr)
    return status


if __name__ == "__main__":
    sys.exit(main())