#!/usr/bin/env python3
"""Resolve Tauri resource patterns (plain paths or globs) to file lists."""

import glob
import os
import re
from pathlib import Path

GLOB_CHARS = ("*", "?", "[", "{")
BRACE_PATTERN = re.compile(r"\{([^{}]*)\}")


def get_glob_base(pattern: str) -> str:
    """Directory part of a pattern before its first glob character.

    >>> get_glob_base("assets/icons/*.png")
    'assets/icons'
    >>> get_glob_base("*.json")
    ''
    """
    first = len(pattern)
    for char in GLOB_CHARS:
        idx = pattern.find(char)
        if idx != -1 and idx < first:
            first = idx

    static = pattern[:first]
    last_slash = static.rfind("/")
    return static[:last_slash] if last_slash > 0 else ""


def has_magic(pattern: str) -> bool:
    return any(char in pattern for char in GLOB_CHARS)


def expand_braces(pattern: str) -> list[str]:
    """Expand `{a,b}` alternatives, which the glob module does not handle."""
    match = BRACE_PATTERN.search(pattern)
    if not match:
        return [pattern]

    head, tail = pattern[:match.start()], pattern[match.end():]
    expanded = []
    for option in match.group(1).split(","):
        expanded.extend(expand_braces(head + option + tail))
    return expanded


def expand_glob(pattern: str, cwd) -> list[str]:
    """Expand a pattern to the files it matches, relative to `cwd`.

    A leading `./` is ignored, `**` recurses, and only regular files are
    returned (sorted, POSIX separators). Prints a warning when nothing matches.
    """
    normalized = pattern[2:] if pattern.startswith("./") else pattern
    root = Path(cwd)

    files = set()
    for candidate in expand_braces(normalized):
        for match in glob.glob(candidate, root_dir=root, recursive=True):
            if (root / match).is_file():
                files.add(Path(os.path.normpath(match)).as_posix())

    if not files:
        print(f'  ⚠️  Warning: Resource pattern "{pattern}" matched no files')

    return sorted(files)
