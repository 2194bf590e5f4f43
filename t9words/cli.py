"""
t9words.cli
===========
Command-line entry point.
Registered as the ``t9words`` console script in pyproject.toml.

Usage:
    t9words 4663 43556             # decode the given sequences
    t9words                        # read sequences from stdin, -1 ends input
    t9words --config /my/path.json # explicit config file
    t9words --lang en,sv           # override languages on the fly
    t9words --wordlist enable1.txt # use one word list file directly
    t9words --list-langs           # show available wordlists and exit
"""

from __future__ import annotations

import argparse
import re
import sys
from typing import Iterable, Iterator, Sequence, TextIO

from . import __version__

DIGITS_ONLY = re.compile(r"[0-9]+")
END_OF_INPUT = "-1"


def _list_languages(wordlist_dir: str) -> None:
    from .wordlist import available_languages

    langs = available_languages(wordlist_dir)
    if not langs:
        print(f"No wordlists found in {wordlist_dir}")
        return
    print(f"Available languages in {wordlist_dir}:\n")
    for code, count in langs:
        print(f"  {code:<10}  {count:>6,} words   ({code}.txt)")
    print()


def read_sequences(stream: TextIO, prompt: bool = False) -> Iterator[str]:
    """
    Yield whitespace-separated tokens from ``stream`` until EOF or ``-1``.
    """
    if prompt:
        print("Enter T9 sequence of digits:", file=sys.stderr)
        print("(For multiple sequences, separate with new line or space.)", file=sys.stderr)
        print(f"Enter {END_OF_INPUT} after last input.", file=sys.stderr)
    for line in stream:
        for token in line.split():
            if token == END_OF_INPUT:
                return
            yield token


def invalid_sequences(sequences: Iterable[str]) -> list[str]:
    return [s for s in sequences if not DIGITS_ONLY.fullmatch(s)]


def format_results(
    sequences: Sequence[str],
    results: Sequence[Sequence[str]],
    indent: str = "\t",
    no_result: str = "No result.",
) -> str:
    """Render one labelled block per sequence."""
    lines: list[str] = []
    for digits, words in zip(sequences, results):
        lines.append(f"Possible words formed from {digits}:")
        if not words:
            lines.append(f"{indent}{no_result}")
        for word in words:
            lines.append(f"{indent}{word}")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="t9words",
        description="List every dictionary word a T9 digit sequence could spell.",
    )
    parser.add_argument(
        "sequences",
        nargs="*",
        metavar="DIGITS",
        help="Digit sequences to decode. Read from stdin when omitted.",
    )
    parser.add_argument(
        "--config", "-c",
        metavar="PATH",
        help="Path to a custom config.json (overrides default resolution order).",
    )
    parser.add_argument(
        "--lang", "-l",
        metavar="CODES",
        help="Comma-separated language codes to load, e.g. en,sv  (overrides config).",
    )
    parser.add_argument(
        "--wordlist", "-w",
        metavar="PATH",
        help="Load this word list file instead of the configured languages.",
    )
    parser.add_argument(
        "--list-langs",
        action="store_true",
        help="List available wordlists and exit.",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Suppress [T9] status lines.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args = parser.parse_args(argv)

    from .config import load_config

    config = load_config(args.config)

    if args.list_langs:
        _list_languages(config["wordlist_dir"])
        return 0

    if args.lang:
        config["languages"] = [c.strip() for c in args.lang.split(",") if c.strip()]
    if args.wordlist:
        config["wordlist"] = args.wordlist
    if args.quiet:
        config["verbose"] = False

    if args.sequences:
        sequences = list(args.sequences)
    else:
        sequences = list(read_sequences(sys.stdin, prompt=sys.stdin.isatty()))

    if invalid_sequences(sequences):
        print("Error: Input can contain only digits 0-9!", file=sys.stderr)
        return 1

    from .engine import T9Engine

    try:
        engine = T9Engine(config)
    except (OSError, UnicodeDecodeError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    results = engine.decode_many(sequences)
    output = config.get("output", {})
    text = format_results(
        sequences,
        results,
        indent=output.get("indent", "\t"),
        no_result=output.get("no_result", "No result."),
    )
    if text:
        print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
