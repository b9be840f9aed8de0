"""Filesystem and pattern-matching primitives used by the traversal engine.

These helpers wrap the standard library so that the rest of the package sees
one consistent behavior on every platform: forward-slash separators, shell-style
glob matching with brace alternation, and the shell rule that a leading dot in a
name must be matched explicitly.
"""

import os
from fnmatch import fnmatchcase
from typing import Dict, List, Optional

from walkdirtree.types import PathType

MAGIC_CHARS = "?*[{"


def normalize_separators(path: PathType) -> str:
    """Return ``path`` as a string with backslashes converted to forward slashes.

    Example:
        >>> normalize_separators("C:\\\\data\\\\logs")
        'C:/data/logs'
    """
    return os.fspath(path).replace("\\", "/")


def canonicalize(path: PathType) -> Optional[str]:
    """Resolve ``path`` to an absolute, symlink-free, forward-slash path.

    Returns:
        The canonical path without a trailing separator, or None if nothing exists at ``path``.
    """
    if not os.path.exists(path):
        return None
    return normalize_separators(os.path.realpath(path))


def is_directory(path: PathType) -> bool:
    return os.path.isdir(path)


def has_magic(pattern: str) -> bool:
    """Check whether ``pattern`` contains any glob mask characters (``? * [ {``).

    Example:
        >>> has_magic("build/*")
        True
        >>> has_magic("build/cache")
        False
    """
    return any(char in pattern for char in MAGIC_CHARS)


def expand_braces(pattern: str) -> List[str]:
    """Expand brace alternation in ``pattern`` into the list of plain glob patterns.

    Nested groups are supported. An unbalanced ``{`` is kept literally. Duplicate
    expansions are dropped while keeping the first occurrence's position.

    Example:
        >>> expand_braces("{,.}*")
        ['*', '.*']
        >>> expand_braces("src/{a,b{1,2}}.py")
        ['src/a.py', 'src/b1.py', 'src/b2.py']
    """
    start = pattern.find("{")
    if start == -1:
        return [pattern]

    depth = 0
    end = -1
    commas: List[int] = []
    for index in range(start, len(pattern)):
        char = pattern[index]
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                end = index
                break
        elif char == "," and depth == 1:
            commas.append(index)
    if end == -1:
        return [pattern]

    prefix, suffix = pattern[:start], pattern[end + 1 :]
    bounds = [start] + commas + [end]
    alternatives = [pattern[bounds[i] + 1 : bounds[i + 1]] for i in range(len(bounds) - 1)]

    expanded: Dict[str, None] = {}
    for alternative in alternatives:
        for candidate in expand_braces(prefix + alternative + suffix):
            expanded.setdefault(candidate, None)
    return list(expanded)


def glob_match(pattern: str, name: str) -> bool:
    """Match a short name against a shell-style pattern.

    Supports ``*``, ``?``, ``[...]`` and brace alternation. A name starting with a dot
    only matches an alternative that starts with a dot, as in a shell glob.

    Example:
        >>> glob_match("*.txt", "notes.txt")
        True
        >>> glob_match("*", ".hidden")
        False
        >>> glob_match("{,.}*", ".hidden")
        True
    """
    for alternative in expand_braces(pattern):
        if name.startswith(".") and not alternative.startswith("."):
            continue
        if fnmatchcase(name, alternative):
            return True
    return False


def list_matching(dir_path: str, pattern: str, only_directories: bool) -> List[str]:
    """List the entries directly inside ``dir_path`` whose names match ``pattern``.

    The self/parent pseudo-entries are never returned. Directory symlinks count as
    directories. Results are sorted by name so repeated builds are reproducible.

    Args:
        dir_path: Absolute directory path, with or without a trailing separator.
        pattern: Short-name glob pattern, see :func:`glob_match`.
        only_directories: If True return only directories, otherwise only non-directories.

    Returns:
        Paths formed by joining ``dir_path`` and each matching name with ``/``.

    Raises:
        OSError: If the directory cannot be listed.
    """
    prefix = dir_path if dir_path.endswith("/") else dir_path + "/"
    with os.scandir(dir_path) as entries:
        names = sorted(
            entry.name
            for entry in entries
            if entry.name not in (".", "..")
            and entry.is_dir() == only_directories
            and glob_match(pattern, entry.name)
        )
    return [prefix + name for name in names]


def glob_directories(pattern: str) -> List[str]:
    """Expand an absolute, possibly multi-segment glob pattern to existing directories.

    Each path segment may hold mask characters; brace alternation may span segments.

    Example:
        >>> glob_directories("/nonexistent-root/*/build")
        []

    Returns:
        Matching directory paths with forward slashes and no trailing separator.
    """
    found: Dict[str, None] = {}
    for alternative in expand_braces(normalize_separators(pattern)):
        parts = alternative.split("/")
        candidates = [parts[0] + "/"]
        for part in parts[1:]:
            if not part:
                continue
            next_candidates: List[str] = []
            for candidate in candidates:
                if has_magic(part):
                    try:
                        matches = list_matching(candidate, part, only_directories=True)
                    except OSError:
                        continue
                    next_candidates.extend(match + "/" for match in matches)
                elif os.path.isdir(candidate + part):
                    next_candidates.append(candidate + part + "/")
            candidates = next_candidates
        for candidate in candidates:
            found.setdefault(candidate.rstrip("/") or "/", None)
    return list(found)
