"""
t9words.config
==============
Loads config.json.
Falls back to sane defaults if the file is missing or partially specified.
"""

from __future__ import annotations

import copy
import json
import os
import sys
from pathlib import Path

# The package ships a default config.json alongside this file.
_PACKAGE_DIR = Path(__file__).parent
_DEFAULT_CONFIG_PATH = _PACKAGE_DIR / "config.json"

ENV_VAR = "T9WORDS_CONFIG"


DEFAULTS: dict = {
    "languages": ["en"],
    "wordlist_dir": str(_PACKAGE_DIR / "wordlists"),
    "wordlist": None,
    "verbose": True,
    "output": {
        "indent": "\t",
        "no_result": "No result.",
    },
}


def load_config(path: str | Path | None = None) -> dict:
    """
    Load configuration from a JSON file and merge with defaults.

    Resolution order (first found wins):
        1. Explicit ``path`` argument
        2. ``T9WORDS_CONFIG`` environment variable
        3. ``config.json`` in the current working directory
        4. Packaged default ``t9words/config.json``

    Returns a fully-populated config dict.
    """
    cfg = copy.deepcopy(DEFAULTS)

    candidates: list[Path] = []
    if path:
        candidates.append(Path(path))
    env_config = os.environ.get(ENV_VAR)
    if env_config:
        candidates.append(Path(env_config))
    candidates.append(Path.cwd() / "config.json")
    candidates.append(_DEFAULT_CONFIG_PATH)

    for candidate in candidates:
        if candidate.exists():
            try:
                with open(candidate, "r", encoding="utf-8") as f:
                    user = json.load(f)
                # Strip comment keys (keys starting with _)
                user = {k: v for k, v in user.items() if not k.startswith("_")}
                # Merge into a copy so a bad file leaves the defaults untouched
                merged = copy.deepcopy(DEFAULTS)
                if "output" in user:
                    merged["output"].update(user.pop("output"))
                merged.update(user)
                # Resolve relative paths against the config file's location
                for key in ("wordlist_dir", "wordlist"):
                    value = merged.get(key)
                    if value is None:
                        continue
                    if not isinstance(value, str):
                        raise TypeError(f"{key} must be a string, not {type(value).__name__}")
                    if value and not Path(value).is_absolute():
                        merged[key] = str(candidate.parent / value)
                cfg = merged
            except (OSError, ValueError, TypeError, AttributeError) as e:
                print(f"[T9] Warning: could not parse {candidate}: {e}", file=sys.stderr)
            break   # stop at first found

    return cfg
