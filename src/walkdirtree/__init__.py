"""Recursive directory traversal with exclusions and cached file enumeration.

This package builds the directory structure under one or more base paths once,
honoring exclusion paths and masks, and then enumerates files against that
structure as many times as needed, optionally caching per-directory file
listings for each mask.
"""

from importlib.metadata import PackageNotFoundError, version

from walkdirtree.directory_tree.directory_tree import DirectoryTree
from walkdirtree.path_resolver import path_abs_prepare_arr, resolve_exclusions

try:
    __version__ = version("walkdirtree")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = ["DirectoryTree", "path_abs_prepare_arr", "resolve_exclusions", "__version__"]
