"""Directory tree built once per base path and walked repeatedly with file masks.

This module provides the DirectoryTree class. It registers base paths, discovers the
directory structure under each of them (honoring exclusion paths, exclusion masks and
optional .gitignore-style rules) and then enumerates files against that structure,
optionally caching each directory's file listing per mask.
"""

import os
from typing import Dict, Iterable, Iterator, List, Optional, Set, Tuple

from anytree import RenderTree

from walkdirtree.exceptions import EmptyMask, IncompatibleHiddenMask, NotADirectory
from walkdirtree.exclusion_rules.base_rules import BaseExclusionRules
from walkdirtree.fs_primitives import canonicalize, is_directory, list_matching
from walkdirtree.logging_setup import get_logger
from walkdirtree.path_resolver import resolve_exclusions, validate_specifiers
from walkdirtree.types import DEFAULT_MASK, HIDDEN_MASK, PathType

from .base_registry import BaseConfig, BasePathRegistry
from .directory_entry import DirectoryEntry
from .directory_node import DirectoryNode
from .file_identifier import FileIdentifier
from .permission_action import PermissionAction

log = get_logger(__name__)

DEFAULT_MAX_DEPTH = 99


def _effective_mask(mask: str, include_hidden: bool) -> str:
    if not mask:
        raise EmptyMask()
    if include_hidden:
        if mask != DEFAULT_MASK:
            raise IncompatibleHiddenMask(mask)
        return HIDDEN_MASK
    return mask


class DirectoryTree:
    """Directory structure of one or more base paths with cached, mask-driven file walks.

    The structure is discovered once, when a base path is added, and stored as a flat
    registry keyed by absolute directory path (forward slashes, trailing separator).
    File enumeration then lists the files of each registered directory, so files added
    or removed between walks are seen, while new sub-directories only appear after
    :meth:`rebuild`. With caching enabled, the file list of a directory is stored per
    literal mask string and reused by later walks until :meth:`rebuild` or
    :meth:`clear_cache`.

    A directory reachable from several registered bases belongs to the base that
    registered it first, so every file is yielded once.

    Symbolic Link Behavior:
        Symlinked directories are descended by default. Directories already on the
        current descent branch (by device and inode) are skipped, so symlink loops
        terminate. With follow_symlinks=False, symlinked directories are left out.

    Error Handling:
        Filesystem errors during a build are handled according to permission_action:
        - RAISE (default): undo everything the failing call registered, then re-raise
        - IGNORE: keep the unreadable directory registered without its contents

    Attributes:
        permission_action (PermissionAction): How to handle errors while building.
        max_depth (int): Deepest level below a base path that is registered.
        follow_symlinks (bool): Whether symlinked directories are descended.

    Example:
        >>> tree = DirectoryTree(["src"], ["src/vendor"])  # doctest: +SKIP
        >>> for base, rel in tree.walk_files("*.py"):  # doctest: +SKIP
        ...     print(base + rel)
        /home/me/project/src/main.py
        /home/me/project/src/utils/helpers.py
    """

    path_abs_prepare_arr = staticmethod(resolve_exclusions)

    def __init__(
        self,
        source_paths: Iterable[PathType] = (),
        exclude_paths: Iterable[str] = (),
        include_hidden: bool = False,
        *,
        exclusion_rules: Optional[BaseExclusionRules] = None,
        permission_action: PermissionAction = PermissionAction.RAISE,
        max_depth: int = DEFAULT_MAX_DEPTH,
        follow_symlinks: bool = True,
    ) -> None:
        """Initialize the tree and build it for every path in ``source_paths``.

        Args:
            source_paths: Base paths to register, in order.
            exclude_paths: Exclusion specifiers applied to every base path.
            include_hidden: Whether dot-prefixed directories are descended.
            exclusion_rules: Optional .gitignore-style rules applied to every base path.
            permission_action: How to handle filesystem errors while building.
            max_depth: Deepest level below a base path to register. Defaults to 99.
            follow_symlinks: Whether symlinked directories are descended.

        Raises:
            NotADirectory: If a source path is not an existing directory.
            DuplicateBasePath: If two source paths resolve to the same directory.
            InvalidSpecifier: If an exclusion specifier is not a string.
        """
        self.permission_action = PermissionAction(permission_action)
        self.max_depth = max_depth
        self.follow_symlinks = follow_symlinks
        self._registry = BasePathRegistry()
        self._configs: Dict[int, BaseConfig] = {}
        self._roots: Dict[int, DirectoryNode] = {}
        self._directories: Dict[str, DirectoryEntry] = {}

        exclude_paths = tuple(exclude_paths)
        for source_path in source_paths:
            self.add_base(source_path, exclude_paths, include_hidden, exclusion_rules=exclusion_rules)

    def add_base(
        self,
        base_path: PathType,
        exclude_paths: Iterable[str] = (),
        include_hidden: bool = False,
        mask: str = DEFAULT_MASK,
        base_id: Optional[int] = None,
        *,
        exclusion_rules: Optional[BaseExclusionRules] = None,
    ) -> DirectoryNode:
        """Register a base path and build its directory tree.

        Args:
            base_path: Directory to register. Relative paths and symlinks are resolved.
            exclude_paths: Absolute paths, paths relative to the base, or glob masks
                naming directories to leave out together with their subtrees.
            include_hidden: Also descend dot-prefixed directories. Requires the default mask.
            mask: Glob mask that sub-directory names must match to be descended.
            base_id: Explicit identifier; defaults to the smallest unused one.
            exclusion_rules: Optional .gitignore-style rules for this base path.

        Returns:
            The root node of the built tree. The nodes are informational; enumeration
            works from the directory registry.

        Raises:
            InvalidSpecifier: If an exclusion specifier is not a string.
            EmptyMask: If ``mask`` is empty.
            IncompatibleHiddenMask: If include_hidden is combined with a mask other than '*'.
            NotADirectory: If ``base_path`` is not an existing directory.
            DuplicateBasePath: If the canonical base path is already registered.
            DuplicateIdentifier: If ``base_id`` is already bound.
            OSError: If a directory cannot be read and permission_action is RAISE.
        """
        exclude_paths = tuple(validate_specifiers(exclude_paths))
        dir_mask = _effective_mask(mask, include_hidden)

        real_path = canonicalize(base_path)
        if real_path is None or not is_directory(real_path):
            raise NotADirectory(base_path)
        canonical = real_path.rstrip("/") + "/"

        self._registry.check_available(canonical, base_id)
        config = BaseConfig(
            base_path=canonical,
            exclude_paths=exclude_paths,
            include_hidden=include_hidden,
            mask=dir_mask,
            exclusion_rules=exclusion_rules,
        )
        excluded = resolve_exclusions(canonical, exclude_paths)

        base_id = self._registry.bind(canonical, base_id)
        self._configs[base_id] = config
        try:
            root = self._build(base_id, config, excluded)
        except OSError:
            self._rollback(base_id)
            raise

        log.info(
            "base_registered",
            base_id=base_id,
            base_path=canonical,
            excluded=len(excluded),
            directories=len(root.descendants) + 1,
        )
        return root

    def rebuild(self) -> None:
        """Discard all directories and cached file lists and rebuild every base path.

        Each base path is rebuilt from its stored configuration, with its exclusion
        specifiers resolved again. If a build fails and permission_action is RAISE,
        the previous state is restored before the error propagates.
        """
        saved = (self._directories, self._roots)
        self._directories = {}
        self._roots = {}
        try:
            for base_id, base_path in self._registry:
                config = self._configs[base_id]
                self._build(base_id, config, resolve_exclusions(base_path, config.exclude_paths))
        except OSError:
            self._directories, self._roots = saved
            raise
        log.info("tree_rebuilt", bases=len(self._registry), directories=len(self._directories))

    def walk_files(
        self, mask: str = DEFAULT_MASK, use_cache: bool = True, include_hidden: bool = False
    ) -> Iterator[Tuple[str, str]]:
        """Iterate over the files of every registered directory matching ``mask``.

        Directories are visited in registration order. Each call starts a fresh walk
        over the registry; concurrent walks share the same cache.

        Args:
            mask: Non-empty glob mask for file names.
            use_cache: Reuse a cached listing for this exact mask when present, and
                store fresh listings. With False every directory is listed again and
                the cache is left untouched.
            include_hidden: Also yield dot-prefixed files. Requires the default mask.

        Returns:
            An iterator of ``(base_path, relative_path)`` pairs where ``base_path +
            relative_path`` is the file's absolute path with forward slashes.

        Raises:
            EmptyMask: If ``mask`` is empty.
            IncompatibleHiddenMask: If include_hidden is combined with a mask other than '*'.

        Example:
            >>> tree = DirectoryTree(["/srv/site"])  # doctest: +SKIP
            >>> list(tree.walk_files("*.html"))  # doctest: +SKIP
            [('/srv/site/', 'index.html'), ('/srv/site/', 'blog/post.html')]
        """
        return self._walk_files(_effective_mask(mask, include_hidden), use_cache)

    def walk_full_paths(
        self, mask: str = DEFAULT_MASK, use_cache: bool = True, include_hidden: bool = False
    ) -> Iterator[str]:
        """Like :meth:`walk_files`, yielding absolute file paths instead of pairs."""
        return (base + rel for base, rel in self.walk_files(mask, use_cache, include_hidden))

    def _walk_files(self, mask: str, use_cache: bool) -> Iterator[Tuple[str, str]]:
        log.debug("walk_files_started", mask=mask, use_cache=use_cache, directories=len(self._directories))
        for dir_path in list(self._directories):
            entry = self._directories.get(dir_path)
            if entry is None:
                # Dropped by a rebuild that happened while this walk was suspended
                continue
            file_names = entry.cached_files(mask) if use_cache else None
            if file_names is None:
                file_names = [path[len(dir_path) :] for path in list_matching(dir_path, mask, only_directories=False)]
                if use_cache:
                    entry.store(mask, file_names)

            base_path = self._registry.path_of(entry.base_id)
            relative_dir = dir_path[len(base_path) :]
            for file_name in file_names:
                yield base_path, relative_dir + file_name

    def _build(self, base_id: int, config: BaseConfig, excluded: Set[str]) -> DirectoryNode:
        root = DirectoryNode(config.base_path, dir_path=config.base_path, base_id=base_id)
        self._roots[base_id] = root
        self._descend(root, config, excluded, set(), 0)
        return root

    def _descend(
        self,
        node: DirectoryNode,
        config: BaseConfig,
        excluded: Set[str],
        visited: Set[FileIdentifier],
        depth: int,
    ) -> None:
        dir_path = node.dir_path
        # The first base to reach a directory owns it
        self._directories.setdefault(dir_path, DirectoryEntry(node.base_id))

        if depth >= self.max_depth:
            log.debug("max_depth_reached", path=dir_path, max_depth=self.max_depth)
            return

        try:
            sub_dirs = list_matching(dir_path, config.mask, only_directories=True)
        except OSError as e:
            if self.permission_action == PermissionAction.RAISE:
                raise
            log.warning("directory_unreadable", path=dir_path, error=str(e))
            return

        identifier = FileIdentifier.from_path(dir_path)
        if identifier is not None:
            visited.add(identifier)

        for sub_dir in sub_dirs:
            name = sub_dir[len(dir_path) :]
            if name in (".", "..") or sub_dir in excluded:
                continue
            relative_path = sub_dir[len(config.base_path) :] + "/"
            if config.exclusion_rules is not None and config.exclusion_rules.exclude(relative_path):
                log.debug("directory_skipped_excluded", path=sub_dir, rule_path=relative_path)
                continue
            if os.path.islink(sub_dir) and not self.follow_symlinks:
                continue
            if FileIdentifier.from_path(sub_dir) in visited:
                log.debug("symlink_loop_skipped", path=sub_dir)
                continue

            child = DirectoryNode(name, parent=node, dir_path=sub_dir + "/", base_id=node.base_id)
            self._descend(child, config, excluded, visited, depth + 1)

        if identifier is not None:
            visited.discard(identifier)

    def _rollback(self, base_id: int) -> None:
        for dir_path in [path for path, entry in self._directories.items() if entry.base_id == base_id]:
            del self._directories[dir_path]
        self._roots.pop(base_id, None)
        self._configs.pop(base_id, None)
        self._registry.release(base_id)
        log.warning("base_registration_rolled_back", base_id=base_id)

    @property
    def base_paths(self) -> Dict[int, str]:
        """Mapping of base identifiers to canonical base paths."""
        return self._registry.as_dict()

    def get_base_id(self, base_path: PathType) -> Optional[int]:
        """Identifier of a registered base path, given in any form that resolves to it."""
        real_path = canonicalize(base_path)
        if real_path is None:
            return None
        return self._registry.id_of(real_path.rstrip("/") + "/")

    def get_config(self, base_id: int) -> BaseConfig:
        return self._configs[base_id]

    def get_tree(self, base_id: int) -> DirectoryNode:
        """Root node of the tree built for ``base_id`` by the latest build or rebuild."""
        return self._roots[base_id]

    def directories(self) -> List[str]:
        """Registered directory paths in registration order."""
        return list(self._directories)

    def get_directory_count(self) -> int:
        return len(self._directories)

    def get_entry(self, dir_path: str) -> Optional[DirectoryEntry]:
        return self._directories.get(dir_path)

    def clear_cache(self) -> None:
        """Drop every cached file listing while keeping the directory structure."""
        for entry in self._directories.values():
            entry.cache.clear()

    def stream_tree_representation(self) -> Iterator[str]:
        """Generate the directory tree of every base path one line at a time.

        Example:
            >>> tree = DirectoryTree(["/srv/site"])  # doctest: +SKIP
            >>> for line in tree.stream_tree_representation():  # doctest: +SKIP
            ...     print(line)
            /srv/site/
            ├── assets/
            └── blog/
        """
        for base_id, _ in self._registry:
            root = self._roots.get(base_id)
            if root is None:
                continue
            for prefix, _, node in RenderTree(root):
                yield f"{prefix}{node.name}" if node is root else f"{prefix}{node.name}/"

    def get_tree_representation(self) -> str:
        return "\n".join(self.stream_tree_representation())
