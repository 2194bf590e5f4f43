#!/usr/bin/env python3
"""
add_wordlist.py
===============
Helper utility: import an external word list into the t9words wordlists
directory, cleaning and deduplicating it in the process.

Usage:
    python add_wordlist.py <lang_code> <source_file> [--append] [--dir DIR]

Examples:
    # Import the ENABLE word list → creates wordlists/enable.txt
    python add_wordlist.py enable /path/to/enable1.txt

    # Append new words to an existing list without overwriting
    python add_wordlist.py en /path/to/extra_english.txt --append
"""

import argparse
import sys

from t9words.config import load_config
from t9words.wordlist import import_wordlist


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Import a plain-text word list into t9words."
    )
    parser.add_argument("lang", help="Language code, e.g. en, sv, de, fr")
    parser.add_argument("source", help="Path to source word list (.txt, one word per line)")
    parser.add_argument(
        "--append", action="store_true",
        help="Append to existing wordlist instead of replacing it.",
    )
    parser.add_argument(
        "--dir", metavar="DIR",
        help="Destination wordlists directory (default: the configured wordlist_dir).",
    )
    args = parser.parse_args(argv)

    wordlist_dir = args.dir or load_config()["wordlist_dir"]
    try:
        dest, total, added = import_wordlist(args.lang, args.source, wordlist_dir, append=args.append)
    except (OSError, UnicodeDecodeError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    print(f"Written : {dest}")
    print(f"Total   : {total:,} words  (+{added} new)")
    print(f"\nAdd '{args.lang}' to the languages list in config.json to activate it.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
