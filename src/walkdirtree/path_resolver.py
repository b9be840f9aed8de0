"""Resolution of exclusion specifiers to absolute directory paths under a base path."""

from typing import Iterable, List, Set

from walkdirtree.exceptions import InvalidSpecifier
from walkdirtree.fs_primitives import glob_directories, has_magic, is_directory, normalize_separators
from walkdirtree.logging_setup import get_logger

log = get_logger(__name__)


def validate_specifiers(specifiers: Iterable[object]) -> List[str]:
    """Return ``specifiers`` as a list, failing on the first non-string entry.

    Raises:
        InvalidSpecifier: If any specifier is not a string.
    """
    checked = list(specifiers)
    for specifier in checked:
        if not isinstance(specifier, str):
            raise InvalidSpecifier(specifier)
    return checked  # type: ignore[return-value]


def resolve_exclusions(base_path: str, specifiers: Iterable[str]) -> Set[str]:
    """Resolve exclusion specifiers to existing directories rooted under ``base_path``.

    Each specifier is either a literal path, absolute or relative to ``base_path``, or a
    glob mask (it contains one of ``? * [ {``). Literal specifiers are first tried as
    absolute paths and then as paths relative to the base. Masks are expanded as
    directory-only globs, either as given when they already start with the base path or
    appended to the base path otherwise. Specifiers that resolve to nothing are ignored.

    Args:
        base_path: Absolute directory path with forward slashes and a trailing separator.
        specifiers: Sequence of exclusion specifiers. Empty strings are skipped.

    Returns:
        Absolute directory paths, forward slashes, no trailing separator.

    Raises:
        InvalidSpecifier: If any specifier is not a string. All specifiers are checked
            before the filesystem is touched.

    Example:
        >>> import tempfile, os
        >>> with tempfile.TemporaryDirectory() as tmp:
        ...     base = os.path.realpath(tmp).replace("\\\\", "/") + "/"
        ...     os.makedirs(base + "build/cache")
        ...     sorted(p[len(base):] for p in resolve_exclusions(base, ["build/cache", "missing", ""]))
        ['build/cache']
    """
    specifiers = validate_specifiers(specifiers)

    resolved: Set[str] = set()
    for specifier in specifiers:
        if specifier == "":
            continue
        specifier = normalize_separators(specifier)

        if not has_magic(specifier):
            # Absolute path inside the base takes precedence over a relative reading
            if specifier.startswith(base_path) and is_directory(specifier):
                resolved.add(specifier.rstrip("/"))
                continue
            candidate = base_path + specifier.strip("/")
            if is_directory(candidate):
                resolved.add(candidate)
                continue
            log.debug("exclusion_specifier_unmatched", base_path=base_path, specifier=specifier)
            continue

        matches = []
        if specifier.startswith(base_path):
            matches = glob_directories(specifier)
        if not matches:
            matches = glob_directories(base_path + specifier)
        matched = [path for path in matches if path.startswith(base_path)]
        if not matched:
            log.debug("exclusion_mask_unmatched", base_path=base_path, specifier=specifier)
        resolved.update(matched)

    return resolved


# Alias under the name the operation is exposed as
path_abs_prepare_arr = resolve_exclusions
